"""CLI command for building and describing a uniform gas."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from astrogas.core.config import GasSpec
from astrogas.core.gas import UniformGas
from astrogas.utils.units import convert
from astrogas.utils.validation import ValidationResult


def parse_material(value: str) -> list:
    """Parse ``"H2:84"`` into ``["H2", 84.0]``."""
    name, sep, ratio = value.rpartition(":")
    if not sep or not name:
        raise click.BadParameter(f"Expected MATERIAL:RATIO, got '{value}'")
    try:
        return [name, float(ratio)]
    except ValueError:
        raise click.BadParameter(f"Ratio in '{value}' is not a number") from None


def print_validation(console: Console, result: ValidationResult) -> None:
    for msg in result.errors:
        console.print(f"[red]Error:[/red] {msg.message}")
    for msg in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")


def gas_table(gas: UniformGas, title: str) -> Table:
    """Render a gas state as a parameter/value/unit table."""
    q = gas.as_quantities()
    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    table.add_row("Temperature", f"{q['temperature'].magnitude:.4g}", "K")
    table.add_row("Volume", f"{q['volume'].to('cubic_lightyear').magnitude:.4g}", "ly³")
    table.add_row("Pressure", f"{q['pressure'].magnitude:.4g}", "Pa")
    table.add_row("Amount", f"{q['moles'].magnitude:.4g}", "mol")
    table.add_row("Mass", f"{q['mass'].to('solar_mass').magnitude:.4g}", "M☉")
    table.add_row("Density", f"{q['density'].magnitude:.4g}", "kg/m³")
    for material, ratio in gas.materials:
        table.add_row(f"  {material}", f"{ratio:.2f}", "%")
    return table


@click.command("gas")
@click.option("--radius", type=float, default=100.0, show_default=True, help="Sphere radius.")
@click.option(
    "--radius-unit", type=str, default="light_year", show_default=True, help="Radius unit."
)
@click.option(
    "--density",
    "particle_density",
    type=float,
    default=3.0e8,
    show_default=True,
    help="Number density [particles/m³].",
)
@click.option(
    "--temperature", "-t", type=float, default=10.0, show_default=True, help="Temperature [K]."
)
@click.option(
    "--material",
    "-m",
    "materials",
    multiple=True,
    default=("H2:100",),
    show_default=True,
    help="MATERIAL:RATIO pair; repeat for mixtures. Preset name or formula.",
)
@click.pass_context
def gas(
    ctx: click.Context,
    radius: float,
    radius_unit: str,
    particle_density: float,
    temperature: float,
    materials: tuple[str, ...],
) -> None:
    """Build a uniform gas sphere and report its properties."""
    console: Console = ctx.obj.get("console", Console())

    spec = GasSpec(
        radius=radius,
        radius_unit=radius_unit,
        particle_density=particle_density,
        temperature=temperature,
        composition=[parse_material(m) for m in materials],
    )
    result = spec.validate()
    print_validation(console, result)
    if not result.is_valid:
        raise SystemExit(1)

    try:
        state = spec.build()
    except (KeyError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    console.print("\n[bold]AstroGas — Uniform Gas[/bold]\n")
    table = gas_table(state, "Gas Properties")

    table.add_row("", "", "")
    table.add_row("[bold]Stability[/bold]", "", "")
    table.add_row("Jeans Mass", f"{convert(state.jeans_mass(), 'kg', 'solar_mass'):.4g}", "M☉")
    table.add_row("Jeans Radius", f"{convert(state.jeans_radius(), 'm', 'light_year'):.4g}", "ly")
    table.add_row("Free-fall Time", f"{convert(state.free_fall_time(), 's', 'million_year'):.4g}", "Myr")
    table.add_row("Stable", "yes" if state.is_stable() else "no", "—")
    peak = state.peak_emission()
    table.add_row("Peak Wavelength", f"{peak.wavelength * 1e6:.4g}", "µm")

    console.print(table)
