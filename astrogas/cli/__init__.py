"""AstroGas command-line interface package.

Supports ``python -m astrogas.cli`` as an alternative to the ``astrogas`` entry point.
"""

from astrogas.cli.main import cli, main

__all__ = ["cli", "main"]
