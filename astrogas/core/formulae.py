"""Physical formulae for gas clouds and radiating bodies.

Ideal-gas relations, sphere geometry, gravitational stability (Jeans
criterion) and black-body radiation. All inputs and outputs are plain
floats in SI units.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from astrogas.utils.constants import (
    BOLTZMANN,
    G_UNIVERSAL,
    PI,
    R_UNIVERSAL,
    STEFAN_BOLTZMANN,
    WIEN_DISPLACEMENT,
    WIEN_FREQUENCY,
    ZERO_POINT_LUMINOSITY,
)


# --- Ideal gas law: PV = nRT ---


def moles_from_pressure_volume_temperature(
    pressure: float, volume: float, temperature: float
) -> float:
    """Amount of substance [mol] from P [Pa], V [m³], T [K]."""
    return pressure * volume / (R_UNIVERSAL * temperature)


def pressure_from_moles_temperature_volume(
    moles: float, temperature: float, volume: float
) -> float:
    """Pressure [Pa] from n [mol], T [K], V [m³]."""
    return moles * R_UNIVERSAL * temperature / volume


def volume_from_pressure_moles_temperature(
    pressure: float, moles: float, temperature: float
) -> float:
    """Volume [m³] from P [Pa], n [mol], T [K]."""
    return moles * R_UNIVERSAL * temperature / pressure


def temperature_from_pressure_volume_moles(
    pressure: float, volume: float, moles: float
) -> float:
    """Temperature [K] from P [Pa], V [m³], n [mol]."""
    return pressure * volume / (moles * R_UNIVERSAL)


# --- Sphere geometry ---


def sphere_surface_from_radius(radius: float) -> float:
    """Surface area [m²] of a sphere."""
    return 4.0 * PI * radius**2


def sphere_volume_from_radius(radius: float) -> float:
    """Volume [m³] of a sphere."""
    return 4.0 / 3.0 * PI * radius**3


def sphere_radius_from_volume(volume: float) -> float:
    """Radius [m] of a sphere of the given volume."""
    return (3.0 * volume / (4.0 * PI)) ** (1.0 / 3.0)


# --- Mass and density ---


def mass_from_volume_and_density(volume: float, density: float) -> float:
    """Mass [kg] from V [m³] and ρ [kg/m³]."""
    return volume * density


def density_from_mass_and_volume(mass: float, volume: float) -> float:
    """Density [kg/m³] from m [kg] and V [m³]."""
    return mass / volume


def density_from_molar_mass_pressure_temperature(
    molar_mass: float, pressure: float, temperature: float
) -> float:
    """Ideal-gas density [kg/m³] from M [kg/mol], P [Pa], T [K]."""
    return molar_mass * pressure / (R_UNIVERSAL * temperature)


# --- Gravitational collapse ---


def jeans_mass(temperature: float, mean_particle_mass: float, density: float) -> float:
    """Minimum mass [kg] for a uniform gas sphere to collapse under its own gravity.

    Args:
        temperature: Gas temperature [K].
        mean_particle_mass: Mean mass per particle [kg].
        density: Gas density [kg/m³].
    """
    thermal = (5.0 * BOLTZMANN * temperature / (G_UNIVERSAL * mean_particle_mass)) ** 1.5
    return thermal * math.sqrt(3.0 / (4.0 * PI * density))


def jeans_radius(temperature: float, mean_particle_mass: float, density: float) -> float:
    """Radius [m] above which a uniform gas sphere collapses."""
    return math.sqrt(
        15.0 * BOLTZMANN * temperature / (4.0 * PI * G_UNIVERSAL * mean_particle_mass * density)
    )


def free_fall_time(density: float) -> float:
    """Free-fall collapse time [s] of a pressureless uniform sphere."""
    return math.sqrt(3.0 * PI / (32.0 * G_UNIVERSAL * density))


# --- Radiation ---


@dataclass(frozen=True)
class PeakEmission:
    """Black-body emission peak."""

    wavelength: float  # m
    frequency: float  # Hz


def peak_emission(temperature: float) -> PeakEmission:
    """Peak wavelength and peak frequency (Wien's law) at temperature [K].

    The two peaks are computed independently; they are not related by
    ``c / λ`` because the Planck spectrum peaks at different points per
    unit wavelength and per unit frequency.
    """
    return PeakEmission(
        wavelength=WIEN_DISPLACEMENT / temperature,
        frequency=WIEN_FREQUENCY * temperature,
    )


def luminosity(emissivity: float, surface_area: float, temperature: float) -> float:
    """Radiated power [W] (Stefan–Boltzmann law)."""
    return STEFAN_BOLTZMANN * emissivity * surface_area * temperature**4


def temperature_from_luminosity(luminosity: float, emissivity: float, area: float) -> float:
    """Effective temperature [K] of a body radiating *luminosity* [W] from *area* [m²]."""
    return (luminosity / (STEFAN_BOLTZMANN * emissivity * area)) ** 0.25


def absolute_magnitude(luminosity: float) -> float:
    """Absolute bolometric magnitude of a body of *luminosity* [W]."""
    return -2.5 * math.log10(luminosity / ZERO_POINT_LUMINOSITY)


def bv_index(temperature: float) -> float:
    """Approximate B−V colour index at temperature [K]."""
    return (5601.0 / temperature) ** 1.5 - 0.4


def bv_to_rgb(bv: float) -> tuple[float, float, float]:
    """Convert a B−V colour index to an RGB triple in [0, 255].

    Index values are clamped to [-0.4, 2.0].
    """
    bv = min(max(bv, -0.4), 2.0)
    r = g = b = 0.0

    if -0.40 <= bv < 0.00:
        t = (bv + 0.40) / 0.40
        r = 0.61 + 0.11 * t + 0.1 * t * t
    elif 0.00 <= bv < 0.40:
        t = bv / 0.40
        r = 0.83 + 0.17 * t
    elif 0.40 <= bv < 2.10:
        r = 1.00

    if -0.40 <= bv < 0.00:
        t = (bv + 0.40) / 0.40
        g = 0.70 + 0.07 * t + 0.1 * t * t
    elif 0.00 <= bv < 0.40:
        t = bv / 0.40
        g = 0.87 + 0.11 * t
    elif 0.40 <= bv < 1.60:
        t = (bv - 0.40) / (1.60 - 0.40)
        g = 0.98 - 0.16 * t
    elif 1.60 <= bv < 2.00:
        t = (bv - 1.60) / (2.00 - 1.60)
        g = 0.82 - 0.5 * t * t

    if -0.40 <= bv < 0.40:
        b = 1.00
    elif 0.40 <= bv < 1.50:
        t = (bv - 0.40) / (1.50 - 0.40)
        b = 1.00 - 0.47 * t + 0.1 * t * t
    elif 1.50 <= bv < 1.94:
        t = (bv - 1.50) / (1.94 - 1.50)
        b = 0.63 - 0.6 * t * t

    return r * 255.0, g * 255.0, b * 255.0


def temperature_to_rgb(temperature: float) -> tuple[int, int, int]:
    """Approximate black-body colour at temperature [K].

    Curve fit valid from roughly 1000 K to 40000 K; channels are clamped
    to [0, 255].
    """

    def clamp(value: float) -> int:
        return int(round(min(max(value, 0.0), 255.0)))

    t = temperature / 100.0

    if t <= 66.0:
        red = 255.0
        green = 99.4708025861 * math.log(t) - 161.1195681661
    else:
        red = 329.698727446 * (t - 60.0) ** -0.1332047592
        green = 288.1221695283 * (t - 60.0) ** -0.0755148492

    if t >= 66.0:
        blue = 255.0
    elif t <= 19.0:
        blue = 0.0
    else:
        blue = 138.5177312231 * math.log(t - 10.0) - 305.0447927307

    return clamp(red), clamp(green), clamp(blue)
