"""Uniform gas volumes.

A :class:`UniformGas` is a snapshot of a gas of uniform density: its bulk
thermodynamic quantities plus the composition of materials it is made of.
Constructors derive the remaining quantities from the ideal gas law; the
resulting state can be blended towards another state with
:meth:`UniformGas.interpolate`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from astrogas.core import formulae
from astrogas.core.composition import Composition
from astrogas.core.molecules import Molecule
from astrogas.core.transition import (
    AsyncOption,
    EasingFunction,
    Interpolatable,
    interpolate_state,
)
from astrogas.utils.units import Q_


@dataclass
class UniformGas(Interpolatable):
    """Bulk state of a uniform gas.

    All properties in SI units. Fields are independent once constructed:
    interpolated states are not re-solved against the ideal gas law.
    """

    volume: float  # m³
    pressure: float  # Pa
    moles: float  # mol
    temperature: float  # K
    materials: Composition
    mass: float  # kg
    density: float  # kg/m³

    # --- Construction ---

    @staticmethod
    def generate_massdensity(material: Molecule, particles_per_cubic_meter: float) -> float:
        """Density [kg/m³] of a single-material gas from its number density [1/m³]."""
        return material.molecular_weight() * particles_per_cubic_meter

    @staticmethod
    def generate_composite_massdensity(
        materials: Composition, particles_per_cubic_meter: float
    ) -> float:
        """Density [kg/m³] of a mixture from its number density [1/m³].

        Ratios are read as percentages of the particle count.
        """
        return sum(
            material.molecular_weight() * particles_per_cubic_meter * (ratio / 100.0)
            for material, ratio in materials
        )

    @classmethod
    def composite_from_vacuum_properties(
        cls,
        volume: float,
        particles_per_cubic_meter: float,
        temperature: float,
        materials: Composition,
    ) -> UniformGas:
        """A gravitationally bound mixture of gases in a vacuum.

        Args:
            volume: Volume the gas occupies [m³].
            particles_per_cubic_meter: Uniform number density [1/m³].
            temperature: Gas temperature [K].
            materials: Composition of :class:`Molecule` keys with percentage
                ratios.
        """
        density = cls.generate_composite_massdensity(materials, particles_per_cubic_meter)
        mass = formulae.mass_from_volume_and_density(volume, density)
        moles = sum(
            (mass / material.molar_mass()) * (ratio / 100.0) for material, ratio in materials
        )
        return cls(
            volume=volume,
            pressure=formulae.pressure_from_moles_temperature_volume(moles, temperature, volume),
            moles=moles,
            temperature=temperature,
            materials=materials,
            mass=mass,
            density=density,
        )

    @classmethod
    def from_vacuum_properties(
        cls,
        volume: float,
        particles_per_cubic_meter: float,
        temperature: float,
        material: Molecule,
    ) -> UniformGas:
        """A single-material gas in a vacuum."""
        density = cls.generate_massdensity(material, particles_per_cubic_meter)
        mass = formulae.mass_from_volume_and_density(volume, density)
        moles = material.amount(mass)
        return cls(
            volume=volume,
            pressure=formulae.pressure_from_moles_temperature_volume(moles, temperature, volume),
            moles=moles,
            temperature=temperature,
            materials=Composition([(material, 100.0)]),
            mass=mass,
            density=density,
        )

    @classmethod
    def _from_ideal_properties(
        cls,
        volume: float,
        moles: float,
        pressure: float,
        temperature: float,
        material: Molecule,
    ) -> UniformGas:
        return cls(
            volume=volume,
            pressure=pressure,
            moles=moles,
            temperature=temperature,
            materials=Composition([(material, 100.0)]),
            mass=material.mass_in_amount(moles),
            density=formulae.density_from_molar_mass_pressure_temperature(
                material.molar_mass(), pressure, temperature
            ),
        )

    @classmethod
    def from_volume_moles_temperature(
        cls, volume: float, moles: float, temperature: float, material: Molecule
    ) -> UniformGas:
        """Ideal gas from V [m³], n [mol], T [K]."""
        pressure = formulae.pressure_from_moles_temperature_volume(moles, temperature, volume)
        return cls._from_ideal_properties(volume, moles, pressure, temperature, material)

    @classmethod
    def from_pressure_volume_temperature(
        cls, pressure: float, volume: float, temperature: float, material: Molecule
    ) -> UniformGas:
        """Ideal gas from P [Pa], V [m³], T [K]."""
        moles = formulae.moles_from_pressure_volume_temperature(pressure, volume, temperature)
        return cls._from_ideal_properties(volume, moles, pressure, temperature, material)

    @classmethod
    def from_pressure_moles_temperature(
        cls, pressure: float, moles: float, temperature: float, material: Molecule
    ) -> UniformGas:
        """Ideal gas from P [Pa], n [mol], T [K]."""
        volume = formulae.volume_from_pressure_moles_temperature(pressure, moles, temperature)
        return cls._from_ideal_properties(volume, moles, pressure, temperature, material)

    @classmethod
    def from_pressure_volume_moles(
        cls, pressure: float, volume: float, moles: float, material: Molecule
    ) -> UniformGas:
        """Ideal gas from P [Pa], V [m³], n [mol]."""
        temperature = formulae.temperature_from_pressure_volume_moles(pressure, volume, moles)
        return cls._from_ideal_properties(volume, moles, pressure, temperature, material)

    # --- Derived properties ---

    def mean_particle_mass(self) -> float:
        """Ratio-weighted mean mass of one particle [kg]."""
        total = self.materials.total()
        if total == 0.0:
            raise ValueError("Gas composition is empty or has zero total ratio")
        return (
            sum(material.molecular_weight() * ratio for material, ratio in self.materials)
            / total
        )

    def jeans_mass(self) -> float:
        """Jeans mass [kg] of this gas."""
        return formulae.jeans_mass(self.temperature, self.mean_particle_mass(), self.density)

    def jeans_radius(self) -> float:
        """Jeans radius [m] of this gas."""
        return formulae.jeans_radius(self.temperature, self.mean_particle_mass(), self.density)

    def free_fall_time(self) -> float:
        """Free-fall collapse time [s]."""
        return formulae.free_fall_time(self.density)

    def is_stable(self) -> bool:
        """True while the gas is below the mass threshold for gravitational collapse."""
        return self.mass < self.jeans_mass()

    def peak_emission(self) -> formulae.PeakEmission:
        return formulae.peak_emission(self.temperature)

    def as_quantities(self) -> dict:
        """Scalar fields as pint quantities, for display and unit conversion."""
        return {
            "volume": Q_(self.volume, "m**3"),
            "pressure": Q_(self.pressure, "Pa"),
            "moles": Q_(self.moles, "mol"),
            "temperature": Q_(self.temperature, "K"),
            "mass": Q_(self.mass, "kg"),
            "density": Q_(self.density, "kg/m**3"),
        }

    # --- Transition ---

    def interpolate(
        self,
        target: UniformGas,
        progress: float,
        ease: EasingFunction | None = None,
        async_options: Mapping[str, AsyncOption] | None = None,
    ) -> UniformGas:
        """Blend this gas towards *target*.

        Args:
            target: Gas state at progress 1.
            progress: Fractional progress.
            ease: Optional easing applied to every field.
            async_options: Per-field delayed onset, keyed by scalar field
                name (e.g. ``{"temperature": AsyncOptions(0.5)}``). The
                composition always blends with uniform progress.

        Returns:
            A new :class:`UniformGas`.
        """
        return interpolate_state(self, target, progress, ease, async_options)
