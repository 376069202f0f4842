"""Tests for composition reconciliation and blending."""

import pytest

from astrogas.core.composition import Composition, aggregate, reconcile
from astrogas.core.molecules import Molecule


class TestReconcile:
    def test_key_union(self):
        origin, target = reconcile([("x", 1.0), ("y", 2.0)], [("y", 3.0), ("z", 4.0)])
        assert set(origin) == set(target) == {"x", "y", "z"}
        assert origin["z"] == 0.0
        assert target["x"] == 0.0

    def test_duplicates_summed(self):
        assert aggregate([("H2", 30.0), ("H2", 20.0)]) == {"H2": 50.0}

    def test_origin_first_order(self):
        origin, target = reconcile([("b", 1.0), ("a", 1.0)], [("c", 1.0), ("a", 2.0)])
        assert list(origin) == ["b", "a", "c"]
        assert list(target) == ["c", "a", "b"]

    def test_empty_side(self):
        origin, target = reconcile([], [("He", 10.0)])
        assert origin == {"He": 0.0}
        assert target == {"He": 10.0}


class TestCompositionInterpolate:
    def test_swap_ratios_midpoint(self):
        a = Composition([("H2", 80.0), ("He", 20.0)])
        b = Composition([("H2", 20.0), ("He", 80.0)])
        mid = a.interpolate(b, 0.5)
        assert mid.ratio_of("H2") == pytest.approx(50.0)
        assert mid.ratio_of("He") == pytest.approx(50.0)
        assert len(mid) == 2

    def test_new_material_phases_in(self):
        a = Composition([("H2", 100.0)])
        b = Composition([("H2", 50.0), ("He", 50.0)])
        assert a.interpolate(b, 0.0).to_list() == [("H2", 100.0), ("He", 0.0)]
        assert a.interpolate(b, 0.5).to_list() == [("H2", 75.0), ("He", 25.0)]
        assert a.interpolate(b, 1.0).to_list() == [("H2", 50.0), ("He", 50.0)]

    def test_duplicates_merge(self):
        a = Composition([("H2", 30.0), ("H2", 20.0)])
        b = Composition([("H2", 50.0)])
        assert a.interpolate(b, 0.5).to_list() == [("H2", 50.0)]

    def test_zero_ratio_entries_kept(self):
        a = Composition([("H2", 50.0), ("He", 50.0)])
        b = Composition([("H2", 100.0)])
        end = a.interpolate(b, 1.0)
        assert end.ratio_of("He") == 0.0
        assert len(end) == 2

    def test_self_interpolation(self):
        c = Composition([("H2", 84.0), ("CO", 10.0), ("He", 5.0), ("Si", 1.0)])
        assert c.interpolate(c, 0.37) == c

    def test_not_renormalised(self):
        a = Composition([("H2", 10.0)])
        b = Composition([("H2", 10.0), ("He", 10.0)])
        assert a.interpolate(b, 0.5).total() == pytest.approx(15.0)

    def test_inputs_not_mutated(self):
        a = Composition([("H2", 100.0)])
        b = Composition([("He", 100.0)])
        a.interpolate(b, 0.5)
        assert a.to_list() == [("H2", 100.0)]
        assert b.to_list() == [("He", 100.0)]

    def test_async_options_rejected(self):
        c = Composition([("H2", 100.0)])
        with pytest.raises(ValueError):
            c.interpolate(c, 0.5, async_options={"H2": 0.5})

    def test_molecule_keys(self):
        a = Composition([(Molecule.molecular_hydrogen(), 100.0)])
        b = Composition([(Molecule.parse("H2"), 40.0), (Molecule.atomic_helium(), 60.0)])
        mid = a.interpolate(b, 0.5)
        assert mid.ratio_of(Molecule.molecular_hydrogen()) == pytest.approx(70.0)
        assert mid.ratio_of(Molecule.atomic_helium()) == pytest.approx(30.0)


class TestCompositionHelpers:
    def test_normalized(self):
        c = Composition([("a", 1.0), ("b", 3.0)]).normalized()
        assert c.ratio_of("a") == pytest.approx(25.0)
        assert c.ratio_of("b") == pytest.approx(75.0)

    def test_normalized_zero_total(self):
        with pytest.raises(ValueError):
            Composition([("a", 0.0)]).normalized()

    def test_ratios_aggregate(self):
        c = Composition([("a", 1.0), ("b", 2.0), ("a", 3.0)])
        assert c.ratios() == {"a": 4.0, "b": 2.0}
        assert c.total() == pytest.approx(6.0)

    def test_ratio_of_absent(self):
        assert Composition([("a", 1.0)]).ratio_of("z") == 0.0

    def test_equality(self):
        assert Composition([("a", 1)]) == Composition([("a", 1.0)])
        assert Composition([("a", 1.0)]) != Composition([("b", 1.0)])

    def test_equality_aggregates_duplicates(self):
        assert Composition([("H2", 30.0), ("H2", 20.0)]) == Composition([("H2", 50.0)])
        assert Composition([("H2", 30.0), ("H2", 20.0)]) != Composition([("H2", 30.0)])

    def test_self_interpolation_with_duplicates(self):
        c = Composition([("H2", 30.0), ("He", 5.0), ("H2", 70.0)])
        assert c.interpolate(c, 0.4) == c

    def test_membership_by_material(self):
        c = Composition([("H2", 1.0), ("He", 0.0)])
        assert "H2" in c
        assert "He" in c
        assert "CO" not in c
