"""Tests for the transition engine."""

import math
from dataclasses import dataclass

import numpy as np
import pytest

from astrogas.core.composition import Composition
from astrogas.core.transition import (
    EASING_FUNCTIONS,
    AsyncOptions,
    effective_progress,
    ease_in_quad,
    get_easing,
    interpolate_state,
    lerp,
    offset_transition,
    progress_from_percent,
    scalar_field_names,
    solve_progress,
    transition_series,
)


@dataclass
class Point:
    x: float
    y: float


@dataclass
class Labelled:
    value: float
    label: str


@dataclass
class Mixture:
    temperature: float
    contents: Composition


class TestLerp:
    def test_origin_at_zero(self):
        assert lerp(1.0, 100.0, 0.0) == 1.0

    def test_target_at_one(self):
        assert lerp(1.0, 100.0, 1.0) == pytest.approx(100.0)

    def test_midpoint(self):
        assert lerp(0.0, 10.0, 0.5) == pytest.approx(5.0)

    def test_extrapolation_is_not_clamped(self):
        assert lerp(0.0, 10.0, 1.5) == pytest.approx(15.0)

    def test_ease_applied_to_progress(self):
        assert lerp(0.0, 10.0, 0.5, ease_in_quad) == pytest.approx(2.5)

    def test_decreasing_values(self):
        assert lerp(10.0, 0.0, 0.25) == pytest.approx(7.5)

    def test_monotonic_without_easing(self):
        values = [lerp(2.0, 9.0, t) for t in np.linspace(0, 1, 25)]
        assert values == sorted(values)

    def test_non_callable_ease_rejected(self):
        with pytest.raises(TypeError):
            lerp(0.0, 1.0, 0.5, "linear")

    def test_non_finite_ease_propagates(self):
        assert math.isinf(lerp(0.0, 1.0, 0.5, lambda t: float("inf")))


class TestEasing:
    @pytest.mark.parametrize("name", sorted(EASING_FUNCTIONS))
    def test_endpoints(self, name):
        fn = EASING_FUNCTIONS[name]
        assert fn(0.0) == pytest.approx(0.0)
        assert fn(1.0) == pytest.approx(1.0)

    def test_lookup(self):
        assert get_easing("ease_in_quad") is ease_in_quad

    def test_unknown_easing(self):
        with pytest.raises(KeyError):
            get_easing("wobble")

    def test_percent_conversion(self):
        assert progress_from_percent(50.0) == pytest.approx(0.5)


class TestAsyncOffset:
    def test_zero_before_offset(self):
        assert offset_transition(0.3, 0.5) == 0.0

    def test_cubic_after_offset(self):
        assert offset_transition(0.5, 0.5) == pytest.approx(0.125)
        assert offset_transition(0.8, 0.5) == pytest.approx(0.512)

    def test_complete_at_one(self):
        assert offset_transition(1.0, 0.5) == pytest.approx(1.0)

    def test_no_options_is_raw_progress(self):
        assert effective_progress(0.3) == 0.3

    def test_field_holds_origin_until_offset(self):
        t = effective_progress(0.3, AsyncOptions(0.5))
        assert lerp(1.0, 100.0, t) == 1.0

    def test_field_reaches_target(self):
        t = effective_progress(1.0, AsyncOptions(0.5))
        assert lerp(1.0, 100.0, t) == pytest.approx(100.0)

    def test_float_shorthand(self):
        assert effective_progress(0.8, 0.5) == effective_progress(0.8, AsyncOptions(0.5))


class TestSolveProgress:
    def test_linear(self):
        assert solve_progress(0.0, 10.0, 5.0) == pytest.approx(0.5)

    def test_eased(self):
        assert solve_progress(0.0, 10.0, 5.0, ease_in_quad) == pytest.approx(math.sqrt(0.5))

    def test_async_offset(self):
        value = lerp(1.0, 100.0, 0.512)
        assert solve_progress(1.0, 100.0, value, options=0.5) == pytest.approx(0.8, rel=1e-6)

    def test_endpoints(self):
        assert solve_progress(1.0, 100.0, 1.0, options=0.5) == 0.0
        assert solve_progress(1.0, 100.0, 100.0) == 1.0

    def test_unreachable_value(self):
        with pytest.raises(ValueError):
            solve_progress(0.0, 10.0, 20.0)


class TestInterpolateState:
    def test_fields_blend_independently(self):
        result = interpolate_state(Point(0.0, 10.0), Point(10.0, 20.0), 0.5)
        assert result == Point(5.0, 15.0)

    def test_endpoints(self):
        a, b = Point(1.0, 2.0), Point(3.0, 7.0)
        assert interpolate_state(a, b, 0.0) == a
        end = interpolate_state(a, b, 1.0)
        assert end.x == pytest.approx(b.x)
        assert end.y == pytest.approx(b.y)

    def test_self_interpolation(self):
        a = Point(1.25, -3.5)
        for t in (0.0, 0.3, 0.77, 1.0):
            assert interpolate_state(a, a, t) == a

    def test_inputs_not_mutated(self):
        a, b = Point(0.0, 0.0), Point(1.0, 1.0)
        result = interpolate_state(a, b, 0.5)
        assert result is not a
        assert a == Point(0.0, 0.0)
        assert b == Point(1.0, 1.0)

    def test_per_field_async(self):
        result = interpolate_state(
            Point(1.0, 1.0), Point(100.0, 100.0), 0.3, async_options={"x": AsyncOptions(0.5)}
        )
        assert result.x == 1.0
        assert result.y == pytest.approx(1.0 + 99.0 * 0.3)

    def test_nested_composition_delegated(self):
        a = Mixture(10.0, Composition([("H2", 80.0), ("He", 20.0)]))
        b = Mixture(20.0, Composition([("H2", 20.0), ("He", 80.0)]))
        result = interpolate_state(a, b, 0.5)
        assert result.temperature == pytest.approx(15.0)
        assert result.contents.ratio_of("H2") == pytest.approx(50.0)
        assert result.contents.ratio_of("He") == pytest.approx(50.0)

    def test_async_on_composition_rejected(self):
        a = Mixture(10.0, Composition([("H2", 100.0)]))
        with pytest.raises(ValueError):
            interpolate_state(a, a, 0.5, async_options={"contents": 0.5})

    def test_unknown_async_field_rejected(self):
        with pytest.raises(ValueError):
            interpolate_state(Point(0, 0), Point(1, 1), 0.5, async_options={"z": 0.5})

    def test_type_mismatch(self):
        with pytest.raises(TypeError):
            interpolate_state(Point(0, 0), Mixture(0.0, Composition()), 0.5)

    def test_non_dataclass(self):
        with pytest.raises(TypeError):
            interpolate_state({"x": 1.0}, {"x": 2.0}, 0.5)

    def test_non_interpolatable_field(self):
        with pytest.raises(TypeError):
            interpolate_state(Labelled(0.0, "a"), Labelled(1.0, "b"), 0.5)

    def test_scalar_field_names(self):
        state = Mixture(1.0, Composition())
        assert scalar_field_names(state) == ["temperature"]


class TestTransitionSeries:
    def test_scalar_series(self):
        series = transition_series(0.0, 10.0, 3)
        assert [t for t, _ in series] == pytest.approx([0.0, 0.5, 1.0])
        assert [v for _, v in series] == pytest.approx([0.0, 5.0, 10.0])

    def test_dataclass_series(self):
        series = transition_series(Point(0, 0), Point(4, 8), 5)
        assert len(series) == 5
        assert series[2][1] == Point(2.0, 4.0)

    def test_too_few_steps(self):
        with pytest.raises(ValueError):
            transition_series(0.0, 1.0, 1)
