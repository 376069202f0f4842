"""Core modules for AstroGas.

This package contains the gas model and its transition engine:
- transition: scalar blending, async offsets, composite state interpolation
- composition: material mixtures and key reconciliation
- gas: uniform gas states and their ideal-gas constructors
- elements: nuclide mass and decay table
- molecules: molecular formulae and masses
- formulae: ideal gas, Jeans criterion, black-body radiation
- coordinates / cloud: procedurally seeded molecular clouds
- config: transition scenario files (JSON)
"""
