"""Procedurally generated molecular clouds.

A cloud is placed at grid coordinates; every random draw it needs comes
from a generator seeded by those coordinates, so the same position always
yields the same cloud.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from astrogas.core import formulae
from astrogas.core.composition import Composition
from astrogas.core.coordinates import Coordinates
from astrogas.utils.constants import MOLECULAR_CLOUD_PRESSURE
from astrogas.utils.units import convert

logger = logging.getLogger(__name__)

_LIGHT_YEAR = convert(1.0, "light_year", "m")


@dataclass
class CloudOptions:
    """Generation knobs for :meth:`MolecularCloud.create`."""

    use_randomness: bool = True
    core_formation_chance: float = 80.0  # % chance for the first core
    core_formation_dropoff: float = 0.8  # chance multiplier after each formed core


@dataclass
class MolecularCloud:
    """A diffuse molecular cloud with a number of dense cores.

    All properties in SI units.
    """

    coordinates: Coordinates
    radius: float  # m
    volume: float  # m³
    average_density: float  # kg/m³
    mass: float  # kg, diffuse gas only
    contents: Composition
    cores: int = 0

    @staticmethod
    def pressure() -> float:
        """Typical molecular cloud pressure [Pa]."""
        return MOLECULAR_CLOUD_PRESSURE

    @classmethod
    def create(
        cls,
        coordinates: Coordinates,
        radius: float,
        average_density: float,
        contents: Composition,
        options: CloudOptions | None = None,
    ) -> MolecularCloud:
        """Generate a cloud at *coordinates*.

        Args:
            coordinates: Grid position; seeds all random draws.
            radius: Nominal radius [m]. With randomness enabled it is scaled
                by a factor drawn from [0.5, 1.5).
            average_density: Mean density of the diffuse gas [kg/m³].
            contents: Composition with percentage ratios.
            options: Generation options.

        Returns:
            A new :class:`MolecularCloud`.
        """
        options = options or CloudOptions()
        rng = coordinates.rng()

        if options.use_randomness:
            modifier = rng.uniform(0.5, 1.5)
            volume = formulae.sphere_volume_from_radius(radius * modifier)
            actual_radius = formulae.sphere_radius_from_volume(volume)
        else:
            volume = formulae.sphere_volume_from_radius(radius)
            actual_radius = radius

        # Each material fills its share of the volume at the average density.
        diffuse_mass = sum(
            formulae.mass_from_volume_and_density(volume * (ratio / 100.0), average_density)
            for _, ratio in contents
        )

        # Four possible cores per light year of diameter.
        possible_cores = int(actual_radius * 2.0 / _LIGHT_YEAR * 4.0)

        chance = options.core_formation_chance
        cores = 0
        for _ in range(possible_cores):
            if rng.uniform(0.0, 100.0) <= chance:
                chance *= options.core_formation_dropoff
                cores += 1

        logger.debug(
            "Cloud at (%d, %d, %d): radius %.3e m, diffuse mass %.3e kg, %d/%d cores",
            coordinates.x,
            coordinates.y,
            coordinates.z,
            actual_radius,
            diffuse_mass,
            cores,
            possible_cores,
        )

        return cls(
            coordinates=coordinates,
            radius=actual_radius,
            volume=volume,
            average_density=average_density,
            mass=diffuse_mass,
            contents=contents,
            cores=cores,
        )
