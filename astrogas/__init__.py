"""AstroGas: astrophysical gas clouds and state transitions.

Models uniform gas volumes, their molecular composition and the nuclide
data behind it, and interpolates between gas states along a progress
parameter.
"""

__app_name__ = "astrogas"
__version__ = "0.1.0"
