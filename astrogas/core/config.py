"""Transition scenario configuration for AstroGas.

A scenario describes an origin gas, a target gas and how to move between
them (sample count, easing, per-field async offsets). Scenarios are saved
and loaded as JSON; they are inputs, not persisted simulation results.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from astrogas.core.composition import Composition
from astrogas.core.formulae import sphere_volume_from_radius
from astrogas.core.gas import UniformGas
from astrogas.core.molecules import resolve_molecule
from astrogas.core.transition import AsyncOptions, get_easing, transition_series
from astrogas.utils.units import length_to_si
from astrogas.utils.validation import ValidationResult, validate_gas_parameters

logger = logging.getLogger(__name__)


# --- Scenario metadata ---


@dataclass
class ScenarioMeta:
    """Top-level scenario metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = "0.1.0"
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()


@dataclass
class GasSpec:
    """Parameters for a uniform gas sphere in a vacuum."""

    radius: float = 100.0
    radius_unit: str = "light_year"
    particle_density: float = 3.0e8  # 1/m³
    temperature: float = 10.0  # K
    # (material, ratio %) pairs; material is a preset name or a formula
    composition: list[list[Any]] = field(default_factory=lambda: [["H2", 100.0]])

    def radius_si(self) -> float:
        return length_to_si(self.radius, self.radius_unit)

    def to_params(self) -> dict[str, Any]:
        return {
            "radius": self.radius_si(),
            "particle_density": self.particle_density,
            "temperature": self.temperature,
            "composition": [(m, float(r)) for m, r in self.composition],
        }

    def validate(self) -> ValidationResult:
        return validate_gas_parameters(self.to_params())

    def build(self) -> UniformGas:
        """Construct the gas described by this spec."""
        materials = Composition((resolve_molecule(m), float(r)) for m, r in self.composition)
        return UniformGas.composite_from_vacuum_properties(
            volume=sphere_volume_from_radius(self.radius_si()),
            particles_per_cubic_meter=self.particle_density,
            temperature=self.temperature,
            materials=materials,
        )


@dataclass
class TransitionScenario:
    """A complete transition between two gas specs."""

    meta: ScenarioMeta = field(default_factory=ScenarioMeta)
    origin: GasSpec = field(default_factory=GasSpec)
    target: GasSpec = field(default_factory=GasSpec)
    steps: int = 11
    ease: str = "linear"
    # field name -> onset offset (fractional progress)
    async_offsets: dict[str, float] = field(default_factory=dict)

    def async_options(self) -> dict[str, AsyncOptions]:
        return {name: AsyncOptions(offset) for name, offset in self.async_offsets.items()}

    def validate(self) -> ValidationResult:
        result = ValidationResult()
        result.merge(self.origin.validate())
        result.merge(self.target.validate())
        if self.steps < 2:
            result.error("steps", f"steps must be >= 2, got {self.steps}")
        for name, offset in self.async_offsets.items():
            if not 0.0 <= offset <= 1.0:
                result.warning(name, f"Async offset {offset} for {name} lies outside [0, 1]")
        return result

    def run(self) -> list[tuple[float, UniformGas]]:
        """Build both gases and sample the transition between them."""
        return transition_series(
            self.origin.build(),
            self.target.build(),
            self.steps,
            ease=get_easing(self.ease),
            async_options=self.async_options(),
        )


# --- JSON serialization ---


def save_scenario_json(scenario: TransitionScenario, path: str | Path) -> None:
    """Save a scenario to a JSON file."""
    path = Path(path)
    scenario.meta.touch()
    if not scenario.meta.created:
        scenario.meta.created = scenario.meta.modified

    with open(path, "w") as f:
        json.dump(asdict(scenario), f, indent=2)

    logger.info("Saved scenario to %s", path)


def load_scenario_json(path: str | Path) -> TransitionScenario:
    """Load a scenario from a JSON file.

    Missing sections fall back to their defaults.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    scenario = TransitionScenario(
        meta=ScenarioMeta(**data.pop("meta", {})),
        origin=GasSpec(**data.pop("origin", {})),
        target=GasSpec(**data.pop("target", {})),
        **data,
    )
    logger.info("Loaded scenario '%s' from %s", scenario.meta.name, path)
    return scenario
