"""Unit conversion utilities for AstroGas.

Provides a shared pint unit registry extended with the astronomical units
used by the gas and cloud models, plus convenience conversions to SI.
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry(on_redefinition="ignore")
_ureg.default_format = "~P"  # short pretty format

# Astronomical units missing from (or differing across) pint releases.
_ureg.define("solar_mass = 1.98847e30 * kilogram = M_sun")
_ureg.define("solar_radius = 6.957e8 * meter = R_sun")
_ureg.define("earth_radius = 6.371e6 * meter = R_earth")
_ureg.define("solar_luminosity = 3.828e26 * watt = L_sun")
_ureg.define("thousand_year = 1e3 * julian_year = kyr")
_ureg.define("million_year = 1e6 * julian_year = Myr")
_ureg.define("billion_year = 1e9 * julian_year = Gyr")
_ureg.define("cubic_lightyear = light_year ** 3 = ly3")


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


# --- Convenience conversion functions ---


def mass_to_si(value: float, unit: str) -> float:
    """Convert mass to kilograms.

    Args:
        value: Numeric mass value.
        unit: Source unit string (e.g. "solar_mass", "dalton", "g").

    Returns:
        Mass in kg.
    """
    return Q_(value, unit).to("kg").magnitude


def mass_from_si(value_kg: float, unit: str) -> float:
    """Convert mass from kilograms to target unit."""
    return Q_(value_kg, "kg").to(unit).magnitude


def length_to_si(value: float, unit: str) -> float:
    """Convert length to meters."""
    return Q_(value, unit).to("m").magnitude


def length_from_si(value_m: float, unit: str) -> float:
    """Convert length from meters to target unit."""
    return Q_(value_m, "m").to(unit).magnitude


def volume_to_si(value: float, unit: str) -> float:
    """Convert volume to cubic meters."""
    return Q_(value, unit).to("m**3").magnitude


def temperature_to_si(value: float, unit: str) -> float:
    """Convert temperature to Kelvin.

    Args:
        value: Numeric temperature value.
        unit: Source unit string (e.g. "degC", "degF", "K").

    Returns:
        Temperature in K.
    """
    return Q_(value, unit).to("K").magnitude


def pressure_to_si(value: float, unit: str) -> float:
    """Convert pressure to Pascals."""
    return Q_(value, unit).to("Pa").magnitude


def power_to_si(value: float, unit: str) -> float:
    """Convert power to Watts."""
    return Q_(value, unit).to("W").magnitude


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
