"""Tests for grid coordinates, hashing and molecular cloud generation."""

import pytest

from astrogas.core import formulae
from astrogas.core.cloud import CloudOptions, MolecularCloud
from astrogas.core.composition import Composition
from astrogas.core.coordinates import Coordinates
from astrogas.core.molecules import Molecule
from astrogas.utils.hashing import hash_coordinates, hash_int
from astrogas.utils.units import length_to_si


@pytest.fixture
def contents():
    return Composition(
        [
            (Molecule.water(), 1.5),
            (Molecule.carbon_dioxide(), 1.5),
            (Molecule.molecular_hydrogen(), 80.0),
            (Molecule.atomic_helium(), 17.0),
        ]
    )


class TestHashing:
    def test_deterministic(self):
        assert hash_int(42) == hash_int(42)
        assert hash_coordinates(1, 2, 3) == hash_coordinates(1, 2, 3)

    def test_distinct_inputs(self):
        assert hash_int(1) != hash_int(2)

    def test_negative_values(self):
        assert hash_int(-1) != hash_int(1)
        assert 0 <= hash_int(-1) < 2**64

    def test_large_values_do_not_collide(self):
        assert hash_int(1) != hash_int(1 + 2**128)
        assert hash_int(-1) != hash_int(2**128 - 1)
        assert hash_int(0) != hash_int(2**200)

    def test_permutations_differ(self):
        assert hash_coordinates(1, 2, 3) != hash_coordinates(2, 1, 3)


class TestCoordinates:
    def test_hash_set(self):
        c = Coordinates(4, -2, 9)
        assert c.hash == hash_coordinates(4, -2, 9)
        assert 0 <= c.hash < 2**64

    def test_equality(self):
        assert Coordinates(1, 1, 1) == Coordinates(1, 1, 1)
        assert Coordinates(1, 1, 1) != Coordinates(1, 1, 2)

    def test_distance(self):
        a, b = Coordinates(1, 2, 3), Coordinates(9, 2, 8)
        assert a.distance(b) == pytest.approx(9.433981)
        assert a - b == pytest.approx(a.distance(b))

    def test_rng_deterministic(self):
        assert Coordinates(1, 1, 1).rng().random() == Coordinates(1, 1, 1).rng().random()


class TestMolecularCloud:
    def test_without_randomness(self, contents):
        radius = length_to_si(30.0, "light_year")
        cloud = MolecularCloud.create(
            Coordinates(0, 0, 0), radius, 1e-18, contents, CloudOptions(use_randomness=False)
        )
        assert cloud.radius == radius
        assert cloud.volume == pytest.approx(formulae.sphere_volume_from_radius(radius))
        assert cloud.mass == pytest.approx(cloud.volume * 1e-18)

    def test_randomised_radius_bounds(self, contents):
        radius = length_to_si(30.0, "light_year")
        cloud = MolecularCloud.create(Coordinates(5, 6, 7), radius, 1e-18, contents)
        assert 0.5 * radius <= cloud.radius <= 1.5 * radius

    def test_same_position_same_cloud(self, contents):
        radius = length_to_si(10.0, "light_year")
        a = MolecularCloud.create(Coordinates(3, 1, 4), radius, 1e-18, contents)
        b = MolecularCloud.create(Coordinates(3, 1, 4), radius, 1e-18, contents)
        assert a.radius == b.radius
        assert a.cores == b.cores

    def test_no_core_chance(self, contents):
        radius = length_to_si(30.0, "light_year")
        options = CloudOptions(use_randomness=False, core_formation_chance=0.0)
        cloud = MolecularCloud.create(Coordinates(0, 0, 0), radius, 1e-18, contents, options)
        assert cloud.cores == 0

    def test_certain_cores(self, contents):
        radius = length_to_si(30.0, "light_year")
        options = CloudOptions(
            use_randomness=False, core_formation_chance=100.0, core_formation_dropoff=1.0
        )
        cloud = MolecularCloud.create(Coordinates(0, 0, 0), radius, 1e-18, contents, options)
        assert cloud.cores > 200

    def test_pressure(self):
        assert MolecularCloud.pressure() == pytest.approx(1.322e-11)
