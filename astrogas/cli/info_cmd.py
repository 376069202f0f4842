"""CLI command for listing nuclides, molecules and easing functions."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from astrogas.core.elements import Element, decay_children, get_nuclide, list_nuclides
from astrogas.core.molecules import PRESET_MOLECULES
from astrogas.core.transition import EASING_FUNCTIONS


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """Inspect nuclides, molecules, and easing functions."""
    pass


@info.command("nuclides")
@click.option(
    "--element",
    type=click.Choice([e.symbol for e in Element]),
    default=None,
    help="Only list isotopes of this element.",
)
@click.pass_context
def info_nuclides(ctx: click.Context, element: str | None) -> None:
    """List tabulated nuclides."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Nuclides")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Mass [Da]", justify="right")
    table.add_column("Stability", style="yellow")
    table.add_column("Half-life [s]", justify="right")

    selected = Element.from_symbol(element) if element else None
    for nid in list_nuclides(selected):
        nuc = get_nuclide(nid)
        table.add_row(
            nid,
            nuc.name or "—",
            f"{nuc.atomic_mass:.4f}",
            nuc.stability.value,
            f"{nuc.half_life:.3e}" if nuc.half_life is not None else "—",
        )
    console.print(table)


@info.command("decay")
@click.argument("nuclide")
@click.pass_context
def info_decay(ctx: click.Context, nuclide: str) -> None:
    """Show the decay branches of NUCLIDE (e.g. H-3)."""
    console: Console = ctx.obj.get("console", Console())
    try:
        nuc = get_nuclide(nuclide)
    except KeyError:
        console.print(f"[red]Error:[/red] Unknown nuclide '{nuclide}'")
        raise SystemExit(1)

    tree = Tree(f"[bold]{nuc.nuclide_id}[/bold] ({nuc.stability.value})")
    for child, branch in decay_children(nuclide):
        tree.add(
            f"{branch.chance:g}% {branch.mode.value} → {branch.count} × {child.nuclide_id}"
        )
    console.print(tree)


@info.command("molecules")
@click.pass_context
def info_molecules(ctx: click.Context) -> None:
    """List preset molecules."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Preset Molecules")
    table.add_column("Name", style="cyan")
    table.add_column("Formula", style="green")
    table.add_column("Molar Mass [g/mol]", justify="right")

    for name, factory in PRESET_MOLECULES.items():
        molecule = factory()
        table.add_row(name, molecule.formula, f"{molecule.relative_formula_mass():.4f}")
    console.print(table)


@info.command("easings")
@click.pass_context
def info_easings(ctx: click.Context) -> None:
    """List available easing functions."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Easing Functions")
    table.add_column("Name", style="cyan")
    table.add_column("f(0.25)", justify="right")
    table.add_column("f(0.5)", justify="right")
    table.add_column("f(0.75)", justify="right")

    for name, fn in EASING_FUNCTIONS.items():
        table.add_row(name, f"{fn(0.25):.3f}", f"{fn(0.5):.3f}", f"{fn(0.75):.3f}")
    console.print(table)
