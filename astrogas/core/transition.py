"""State interpolation engine.

Blends scalar values and composite simulation states from an origin to a
target along a progress parameter.

Progress is always a fraction: 0.0 is the origin, 1.0 is the target.
Values outside [0, 1] are accepted and extrapolate linearly (before any
easing). Percentages exist only at the CLI boundary and are converted with
:func:`progress_from_percent`.

Composite states are dataclasses. Every real-valued field is blended
independently, optionally delayed by a per-field :class:`AsyncOptions`,
and every :class:`Interpolatable` field (such as a gas composition) is
delegated to its own ``interpolate`` method. No physical consistency
between fields is enforced.
"""

from __future__ import annotations

import dataclasses
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

import numpy as np
from scipy.optimize import brentq

EasingFunction = Callable[[float], float]


# --- Easing functions ---


def linear(t: float) -> float:
    """Identity easing."""
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_in_cubic(t: float) -> float:
    """Slow start, steep finish."""
    return t * t * t


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_cubic(t: float) -> float:
    """Fast start, slow finish."""
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    """Smooth acceleration and deceleration."""
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def smoothstep(t: float) -> float:
    """Hermite interpolation with zero slope at both ends."""
    return t * t * (3.0 - 2.0 * t)


EASING_FUNCTIONS: dict[str, EasingFunction] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_in_quart": ease_in_quart,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "smoothstep": smoothstep,
}


def get_easing(name: str) -> EasingFunction:
    """Look up a named easing function.

    Raises:
        KeyError: If *name* is not registered.
    """
    try:
        return EASING_FUNCTIONS[name]
    except KeyError:
        raise KeyError(
            f"Unknown easing '{name}'. Available: {sorted(EASING_FUNCTIONS)}"
        ) from None


def progress_from_percent(percent: float) -> float:
    """Convert a 0–100 percentage into fractional progress."""
    return percent / 100.0


# --- Scalar blending ---


def lerp(a: float, b: float, t: float, ease: EasingFunction | None = None) -> float:
    """Blend *a* towards *b* at progress *t*.

    Args:
        a: Origin value.
        b: Target value.
        t: Fractional progress.
        ease: Optional easing applied to *t* before blending. ``None``
            blends linearly.

    Returns:
        ``a + (b - a) * ease(t)``.

    Raises:
        TypeError: If *ease* is given but not callable.
    """
    if ease is None:
        return a + (b - a) * t
    if not callable(ease):
        raise TypeError(f"Easing must be callable, got {type(ease).__name__}")
    return a + (b - a) * ease(t)


@dataclass(frozen=True)
class AsyncOptions:
    """Delayed onset for a single field.

    The field holds its origin value until raw progress reaches *offset*,
    then follows a cubic ease-in of the raw progress.
    """

    offset: float


AsyncOption = Union[AsyncOptions, float]


def offset_transition(t: float, offset: float) -> float:
    """Effective progress for a field delayed until *offset*.

    Returns 0 while ``t < offset`` and ``t ** 3`` afterwards.
    """
    if t < offset:
        return 0.0
    return t**3


def effective_progress(t: float, options: AsyncOption | None = None) -> float:
    """Progress a field actually blends with, given its async options."""
    if options is None:
        return t
    offset = options.offset if isinstance(options, AsyncOptions) else float(options)
    return offset_transition(t, offset)


def solve_progress(
    a: float,
    b: float,
    value: float,
    ease: EasingFunction | None = None,
    options: AsyncOption | None = None,
) -> float:
    """Find the raw progress in [0, 1] at which a field reaches *value*.

    The inverse of :func:`lerp` combined with :func:`effective_progress`.
    When the field is delayed by an async offset and *value* is the origin
    value, 0.0 is returned.

    Raises:
        ValueError: If *value* is not bracketed by the field's values at
            progress 0 and 1.
    """

    def residual(t: float) -> float:
        return lerp(a, b, effective_progress(t, options), ease) - value

    r0 = residual(0.0)
    r1 = residual(1.0)
    if r0 == 0.0:
        return 0.0
    if r1 == 0.0:
        return 1.0
    if r0 * r1 > 0:
        raise ValueError(
            f"Value {value} is not reached between {a} and {b} for progress in [0, 1]"
        )
    return brentq(residual, 0.0, 1.0, xtol=1e-12)


# --- Composite states ---


class Interpolatable(ABC):
    """A value that can be blended towards another value of the same type."""

    @abstractmethod
    def interpolate(
        self,
        target: Any,
        progress: float,
        ease: EasingFunction | None = None,
        async_options: Mapping[str, AsyncOption] | None = None,
    ) -> Any:
        """Return a new value *progress* of the way from self to *target*."""
        ...


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def scalar_field_names(state: Any) -> list[str]:
    """Names of the independently blended real-valued fields of *state*."""
    return [
        f.name
        for f in dataclasses.fields(state)
        if f.init and _is_scalar(getattr(state, f.name))
    ]


def interpolate_state(
    origin: Any,
    target: Any,
    progress: float,
    ease: EasingFunction | None = None,
    async_options: Mapping[str, AsyncOption] | None = None,
) -> Any:
    """Blend two dataclass states field by field.

    Real-valued fields are blended with :func:`lerp` at their effective
    progress; :class:`Interpolatable` fields are delegated with the same
    progress and easing (async offsets never apply to them).

    Args:
        origin: State at progress 0.
        target: State at progress 1, of the same type as *origin*.
        progress: Fractional progress.
        ease: Optional easing shared by all fields.
        async_options: Per-field async offsets keyed by field name.

    Returns:
        A new state instance; neither input is modified.

    Raises:
        TypeError: If the states differ in type, are not dataclasses, or
            hold a field that cannot be blended.
        ValueError: If *async_options* names a field that is not a
            real-valued field of the state.
    """
    if type(origin) is not type(target):
        raise TypeError(
            f"Cannot interpolate {type(origin).__name__} towards {type(target).__name__}"
        )
    if not dataclasses.is_dataclass(origin) or isinstance(origin, type):
        raise TypeError(f"{type(origin).__name__} is not a dataclass state")

    options = dict(async_options or {})
    scalars = scalar_field_names(origin)
    unknown = sorted(set(options) - set(scalars))
    if unknown:
        raise ValueError(
            f"Async options {unknown} do not name scalar fields of "
            f"{type(origin).__name__}. Scalar fields: {scalars}"
        )

    values: dict[str, Any] = {}
    for f in dataclasses.fields(origin):
        if not f.init:
            continue
        a = getattr(origin, f.name)
        b = getattr(target, f.name)
        if isinstance(a, Interpolatable):
            values[f.name] = a.interpolate(b, progress, ease)
        elif _is_scalar(a):
            t = effective_progress(progress, options.get(f.name))
            values[f.name] = lerp(float(a), float(b), t, ease)
        else:
            raise TypeError(
                f"Field '{f.name}' of {type(origin).__name__} has non-interpolatable "
                f"type {type(a).__name__}"
            )

    return dataclasses.replace(origin, **values)


def transition_series(
    origin: Any,
    target: Any,
    steps: int,
    ease: EasingFunction | None = None,
    async_options: Mapping[str, AsyncOption] | None = None,
) -> list[tuple[float, Any]]:
    """Sample a transition at *steps* evenly spaced progress points.

    Returns:
        List of ``(progress, state)`` pairs from 0.0 to 1.0 inclusive.
    """
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")

    series = []
    for t in np.linspace(0.0, 1.0, steps):
        t = float(t)
        if isinstance(origin, Interpolatable):
            state = origin.interpolate(target, t, ease, async_options)
        elif _is_scalar(origin):
            state = lerp(float(origin), float(target), t, ease)
        else:
            state = interpolate_state(origin, target, t, ease, async_options)
        series.append((t, state))
    return series
