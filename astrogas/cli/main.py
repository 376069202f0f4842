"""AstroGas command-line interface.

Entry point for the ``astrogas`` CLI tool.
"""

from __future__ import annotations

import click
from rich.console import Console

from astrogas import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """AstroGas: astrophysical gas clouds and state transitions.

    Build uniform gas clouds from their composition and interpolate
    between gas states.
    """
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-command groups
from astrogas.cli.gas_cmd import gas  # noqa: E402
from astrogas.cli.transition_cmd import transition  # noqa: E402
from astrogas.cli.info_cmd import info  # noqa: E402

cli.add_command(gas)
cli.add_command(transition)
cli.add_command(info)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
