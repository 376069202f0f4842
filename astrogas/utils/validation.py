"""Input validation for gas and transition parameters.

Used by state producers (CLI, scenario loading) before constructing gases.
The interpolation engine itself never validates states.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}")


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]")


def validate_gas_parameters(params: dict) -> ValidationResult:
    """Run validation checks on user-supplied gas construction parameters.

    Recognised keys: ``radius`` [m], ``particle_density`` [1/m³],
    ``temperature`` [K] and ``composition`` (list of ``(material, ratio)``).
    """
    result = ValidationResult()

    radius = params.get("radius")
    if radius is not None:
        validate_positive("radius", radius, result)

    n = params.get("particle_density")
    if n is not None:
        validate_positive("particle_density", n, result)

    temperature = params.get("temperature")
    if temperature is not None:
        validate_positive("temperature", temperature, result)
        if 0 < temperature < 2.7:
            result.warning(
                "temperature",
                f"Temperature {temperature} K is below the cosmic background",
            )
        if temperature > 1.0e4:
            result.warning(
                "temperature",
                f"Temperature {temperature:.0f} K is hot enough to ionise hydrogen",
            )

    composition = params.get("composition")
    if composition is not None:
        if not composition:
            result.error("composition", "Composition must contain at least one material")
        total = 0.0
        for material, ratio in composition:
            if ratio < 0:
                result.error("composition", f"Ratio of {material} must be >= 0, got {ratio}")
            total += ratio
        if composition:
            validate_range("composition_total", total, 99.0, 101.0, result, Severity.WARNING)

    return result


def validate_progress(progress: float, result: ValidationResult | None = None) -> ValidationResult:
    """Warn when progress lies outside [0, 1] (extrapolation)."""
    result = result or ValidationResult()
    validate_range("progress", progress, 0.0, 1.0, result, Severity.WARNING)
    return result
