"""Physical constants used throughout AstroGas.

All values in SI units unless otherwise noted.
"""

import math

from scipy import constants as _sc

# Universal constants
R_UNIVERSAL = _sc.gas_constant  # J/(mol·K)
AVOGADRO = _sc.Avogadro  # 1/mol
BOLTZMANN = _sc.Boltzmann  # J/K
STEFAN_BOLTZMANN = _sc.Stefan_Boltzmann  # W/(m²·K⁴)
PLANCK = _sc.Planck  # J·s
VACUUM_PERMEABILITY = _sc.mu_0  # H/m

# Gravitational
G_UNIVERSAL = _sc.gravitational_constant  # m³/(kg·s²)

# Radiation
WIEN_DISPLACEMENT = _sc.Wien  # m·K
# Peak of Planck's law in frequency space: x = h·ν/(k·T) solves 3(1 - e^-x) = x
_WIEN_FREQUENCY_X = 2.821439372122079
WIEN_FREQUENCY = _WIEN_FREQUENCY_X * BOLTZMANN / PLANCK  # Hz/K
ZERO_POINT_LUMINOSITY = 3.0128e28  # W, zero point of absolute bolometric magnitude

# Interstellar medium
MOLECULAR_CLOUD_PRESSURE = 1.322e-11  # Pa

# Mass
DALTON = _sc.physical_constants["atomic mass constant"][0]  # kg

# Mathematical
PI = math.pi
