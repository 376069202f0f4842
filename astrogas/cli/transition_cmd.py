"""CLI command for tabulating a transition between two gas states."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from astrogas.cli.gas_cmd import parse_material, print_validation
from astrogas.core.config import (
    GasSpec,
    ScenarioMeta,
    TransitionScenario,
    load_scenario_json,
    save_scenario_json,
)
from astrogas.core.transition import EASING_FUNCTIONS, progress_from_percent
from astrogas.utils.units import convert


def _parse_offset(value: str) -> tuple[str, float]:
    """Parse ``"temperature=50"`` (percent) into ``("temperature", 0.5)``."""
    name, sep, offset = value.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"Expected FIELD=PERCENT, got '{value}'")
    try:
        return name, progress_from_percent(float(offset))
    except ValueError:
        raise click.BadParameter(f"Offset in '{value}' is not a number") from None


@click.command("transition")
@click.option(
    "--scenario",
    type=click.Path(exists=True),
    default=None,
    help="Scenario JSON; overrides all gas options.",
)
@click.option("--from-radius", type=float, default=100.0, show_default=True, help="Origin radius [ly].")
@click.option("--to-radius", type=float, default=30.0, show_default=True, help="Target radius [ly].")
@click.option(
    "--from-temperature", type=float, default=7.0, show_default=True, help="Origin temperature [K]."
)
@click.option(
    "--to-temperature", type=float, default=700.0, show_default=True, help="Target temperature [K]."
)
@click.option(
    "--density",
    "particle_density",
    type=float,
    default=3.0e8,
    show_default=True,
    help="Number density of both gases [particles/m³].",
)
@click.option(
    "--from-material", multiple=True, default=("H2:100",), show_default=True, help="MATERIAL:RATIO."
)
@click.option(
    "--to-material",
    multiple=True,
    default=("H2:80", "He:20"),
    show_default=True,
    help="MATERIAL:RATIO.",
)
@click.option("--steps", type=int, default=11, show_default=True, help="Number of samples.")
@click.option(
    "--ease",
    type=click.Choice(sorted(EASING_FUNCTIONS)),
    default="linear",
    show_default=True,
    help="Easing applied to every field.",
)
@click.option(
    "--async",
    "async_offsets",
    multiple=True,
    help="Delay a field: FIELD=PERCENT (e.g. temperature=50).",
)
@click.option("--output", "-o", type=click.Path(), default=None, help="Save scenario (JSON).")
@click.pass_context
def transition(
    ctx: click.Context,
    scenario: str | None,
    from_radius: float,
    to_radius: float,
    from_temperature: float,
    to_temperature: float,
    particle_density: float,
    from_material: tuple[str, ...],
    to_material: tuple[str, ...],
    steps: int,
    ease: str,
    async_offsets: tuple[str, ...],
    output: str | None,
) -> None:
    """Interpolate between two gas states and tabulate the result."""
    console: Console = ctx.obj.get("console", Console())

    if scenario:
        plan = load_scenario_json(scenario)
    else:
        plan = TransitionScenario(
            meta=ScenarioMeta(name="CLI transition"),
            origin=GasSpec(
                radius=from_radius,
                particle_density=particle_density,
                temperature=from_temperature,
                composition=[parse_material(m) for m in from_material],
            ),
            target=GasSpec(
                radius=to_radius,
                particle_density=particle_density,
                temperature=to_temperature,
                composition=[parse_material(m) for m in to_material],
            ),
            steps=steps,
            ease=ease,
            async_offsets=dict(_parse_offset(v) for v in async_offsets),
        )

    result = plan.validate()
    print_validation(console, result)
    if not result.is_valid:
        raise SystemExit(1)

    try:
        series = plan.run()
    except (KeyError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1)

    console.print(f"\n[bold]AstroGas — Transition ({plan.ease})[/bold]\n")

    table = Table(title=plan.meta.name)
    table.add_column("Progress", style="cyan", justify="right")
    table.add_column("T [K]", justify="right")
    table.add_column("V [ly³]", justify="right")
    table.add_column("P [Pa]", justify="right")
    table.add_column("M [M☉]", justify="right")
    table.add_column("ρ [kg/m³]", justify="right")
    table.add_column("Composition [%]", style="green")

    for t, state in series:
        composition = ", ".join(f"{m} {r:.1f}" for m, r in state.materials)
        table.add_row(
            f"{t * 100:.0f}%",
            f"{state.temperature:.4g}",
            f"{convert(state.volume, 'm**3', 'cubic_lightyear'):.4g}",
            f"{state.pressure:.4g}",
            f"{convert(state.mass, 'kg', 'solar_mass'):.4g}",
            f"{state.density:.4g}",
            composition,
        )

    console.print(table)

    if output:
        save_scenario_json(plan, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
