"""Molecules built from tabulated nuclides.

A :class:`Molecule` is an immutable, hashable formula, so it can key a gas
composition directly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from astrogas.core.elements import Element, default_nuclide, get_nuclide
from astrogas.utils.constants import DALTON

_FORMULA_TOKEN = re.compile(r"([A-Z][a-z]?)(\d*)")


@dataclass(frozen=True)
class Molecule:
    """A molecular formula: nuclide identifiers and their counts.

    Args:
        components: Tuple of ``(nuclide_id, count)`` pairs in formula order.
    """

    components: tuple[tuple[str, int], ...]

    def __post_init__(self) -> None:
        for nid, count in self.components:
            get_nuclide(nid)  # raises KeyError for unknown nuclides
            if count < 1:
                raise ValueError(f"Atom count for {nid} must be >= 1, got {count}")

    @classmethod
    def of(cls, *components: tuple[str, int]) -> Molecule:
        return cls(tuple(components))

    @classmethod
    def parse(cls, formula: str) -> Molecule:
        """Build a molecule from a formula such as ``"H2"``, ``"CO"`` or ``"SiO2"``.

        Each element uses its most abundant stable isotope.

        Raises:
            ValueError: If the formula is empty or contains unknown symbols.
        """
        if not formula or _FORMULA_TOKEN.sub("", formula):
            raise ValueError(f"Cannot parse molecular formula '{formula}'")
        components = []
        for symbol, count in _FORMULA_TOKEN.findall(formula):
            element = Element.from_symbol(symbol)
            components.append((default_nuclide(element).nuclide_id, int(count or 1)))
        return cls(tuple(components))

    # --- Presets ---

    @classmethod
    def molecular_hydrogen(cls) -> Molecule:
        return cls.of(("H-1", 2))

    @classmethod
    def atomic_hydrogen(cls) -> Molecule:
        return cls.of(("H-1", 1))

    @classmethod
    def water(cls) -> Molecule:
        return cls.of(("H-1", 2), ("O-16", 1))

    @classmethod
    def carbon_monoxide(cls) -> Molecule:
        return cls.of(("C-12", 1), ("O-16", 1))

    @classmethod
    def carbon_dioxide(cls) -> Molecule:
        return cls.of(("C-12", 1), ("O-16", 2))

    @classmethod
    def molecular_oxygen(cls) -> Molecule:
        return cls.of(("O-16", 2))

    @classmethod
    def atomic_helium(cls) -> Molecule:
        return cls.of(("He-4", 1))

    @classmethod
    def atomic_carbon(cls) -> Molecule:
        return cls.of(("C-12", 1))

    @classmethod
    def atomic_silicon(cls) -> Molecule:
        return cls.of(("Si-28", 1))

    # --- Masses ---

    def relative_formula_mass(self) -> float:
        """Sum of atomic masses [Da]."""
        return sum(get_nuclide(nid).atomic_mass * count for nid, count in self.components)

    def molecular_weight(self) -> float:
        """Mass of one molecule [kg]."""
        return self.relative_formula_mass() * DALTON

    def molar_mass(self) -> float:
        """Molar mass [kg/mol]."""
        return self.relative_formula_mass() * 1e-3

    def amount(self, mass: float) -> float:
        """Amount of substance [mol] in *mass* [kg]."""
        return mass / self.molar_mass()

    def mass_in_amount(self, moles: float) -> float:
        """Mass [kg] of *moles* [mol] of this molecule."""
        return moles * self.molar_mass()

    @property
    def formula(self) -> str:
        parts = []
        for nid, count in self.components:
            symbol = get_nuclide(nid).symbol
            parts.append(f"{symbol}{count if count > 1 else ''}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.formula


PRESET_MOLECULES = {
    "molecular_hydrogen": Molecule.molecular_hydrogen,
    "atomic_hydrogen": Molecule.atomic_hydrogen,
    "water": Molecule.water,
    "carbon_monoxide": Molecule.carbon_monoxide,
    "carbon_dioxide": Molecule.carbon_dioxide,
    "molecular_oxygen": Molecule.molecular_oxygen,
    "atomic_helium": Molecule.atomic_helium,
    "atomic_carbon": Molecule.atomic_carbon,
    "atomic_silicon": Molecule.atomic_silicon,
}


def resolve_molecule(name: str) -> Molecule:
    """Look up a preset by name (``"carbon_monoxide"``) or parse a formula (``"CO"``).

    Raises:
        ValueError: If *name* is neither a preset nor a parsable formula.
    """
    if name in PRESET_MOLECULES:
        return PRESET_MOLECULES[name]()
    return Molecule.parse(name)
