"""Utility modules for AstroGas."""

from astrogas.utils.constants import BOLTZMANN, G_UNIVERSAL, R_UNIVERSAL
from astrogas.utils.units import convert, get_unit_registry

__all__ = ["BOLTZMANN", "G_UNIVERSAL", "R_UNIVERSAL", "convert", "get_unit_registry"]
