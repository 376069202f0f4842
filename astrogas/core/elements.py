"""Element and nuclide database for AstroGas.

Loads isotope masses and decay data from the bundled JSON table. Nuclides
are identified by ``"<symbol>-<mass number>"`` strings (e.g. ``"H-3"``);
decay products refer to their child nuclide by identifier and are resolved
through :func:`get_nuclide`.

The table is static reference data: nothing here simulates decay.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

from astrogas.utils.constants import DALTON
from astrogas.utils.units import Q_

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_NUCLIDES_DB_PATH = _DATA_DIR / "nuclides.json"


class Element(Enum):
    """Chemical elements known to the nuclide table."""

    HYDROGEN = "H"
    HELIUM = "He"
    CARBON = "C"
    OXYGEN = "O"
    SILICON = "Si"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def default_mass_number(self) -> int:
        """Mass number of the most abundant stable isotope."""
        return _DEFAULT_MASS_NUMBERS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> Element:
        """Look up an element by its chemical symbol.

        Raises:
            ValueError: If the symbol is not a known element.
        """
        for element in cls:
            if element.value == symbol:
                return element
        raise ValueError(f"Unknown element symbol '{symbol}'. Known: {[e.value for e in cls]}")


_DEFAULT_MASS_NUMBERS = {
    Element.HYDROGEN: 1,
    Element.HELIUM: 4,
    Element.CARBON: 12,
    Element.OXYGEN: 16,
    Element.SILICON: 28,
}


class Stability(Enum):
    STABLE = "stable"
    UNSTABLE = "unstable"
    UNKNOWN = "unknown"  # no decay data tabulated


class DecayMode(Enum):
    """Decay modes, grouped by whether a nucleon or a beta process is involved."""

    ALPHA = "alpha"
    PROTON_EMISSION = "proton_emission"
    DOUBLE_PROTON_EMISSION = "double_proton_emission"
    NEUTRON_EMISSION = "neutron_emission"
    DOUBLE_NEUTRON_EMISSION = "double_neutron_emission"
    TRIPLE_NEUTRON_EMISSION = "triple_neutron_emission"
    SPONTANEOUS_FISSION = "spontaneous_fission"
    CLUSTER_DECAY = "cluster_decay"
    BETA_MINUS = "beta_minus"
    BETA_PLUS = "beta_plus"
    ELECTRON_CAPTURE = "electron_capture"
    BOUND_STATE_BETA = "bound_state_beta"
    DOUBLE_BETA = "double_beta"
    DOUBLE_ELECTRON_CAPTURE = "double_electron_capture"
    ELECTRON_CAPTURE_PROTON_EMISSION = "electron_capture_proton_emission"
    DOUBLE_POSITRON = "double_positron"

    @property
    def is_beta(self) -> bool:
        return self in _BETA_MODES


_BETA_MODES = {
    DecayMode.BETA_MINUS,
    DecayMode.BETA_PLUS,
    DecayMode.ELECTRON_CAPTURE,
    DecayMode.BOUND_STATE_BETA,
    DecayMode.DOUBLE_BETA,
    DecayMode.DOUBLE_ELECTRON_CAPTURE,
    DecayMode.ELECTRON_CAPTURE_PROTON_EMISSION,
    DecayMode.DOUBLE_POSITRON,
}


@dataclass(frozen=True)
class DecayProcess:
    """One branch of a nuclide's decay."""

    chance: float  # % of decays following this branch
    mode: DecayMode
    count: int  # number of child nuclei produced
    child: str  # child nuclide identifier


@dataclass(frozen=True)
class Nuclide:
    """A single isotope of an element."""

    nuclide_id: str
    element: Element
    mass_number: int
    atomic_mass: float  # Da
    stability: Stability
    half_life: float | None = None  # s
    decay: tuple[DecayProcess, ...] = field(default_factory=tuple)
    name: str = ""

    @property
    def symbol(self) -> str:
        return self.element.symbol

    @property
    def atomic_mass_kg(self) -> float:
        """Atomic mass [kg]."""
        return self.atomic_mass * DALTON

    @property
    def is_stable(self) -> bool:
        return self.stability is Stability.STABLE


@lru_cache(maxsize=1)
def _load_nuclides_db() -> dict[str, Any]:
    if not _NUCLIDES_DB_PATH.exists():
        logger.warning("Nuclide database not found at %s", _NUCLIDES_DB_PATH)
        return {}
    with open(_NUCLIDES_DB_PATH) as f:
        db = json.load(f)
    logger.debug("Loaded %d nuclides from %s", len(db), _NUCLIDES_DB_PATH)
    return db


def _build_nuclide(nuclide_id: str, info: dict[str, Any]) -> Nuclide:
    half_life = None
    if "half_life" in info:
        hl = info["half_life"]
        half_life = Q_(hl["value"], hl["unit"]).to("s").magnitude

    decay = tuple(
        DecayProcess(
            chance=d["chance"],
            mode=DecayMode(d["mode"]),
            count=d["count"],
            child=d["child"],
        )
        for d in info.get("decay", [])
    )

    return Nuclide(
        nuclide_id=nuclide_id,
        element=Element.from_symbol(info["element"]),
        mass_number=info["mass_number"],
        atomic_mass=info["atomic_mass"],
        stability=Stability(info["stability"]),
        half_life=half_life,
        decay=decay,
        name=info.get("name", ""),
    )


def nuclide_id(element: Element, mass_number: int) -> str:
    """Build the identifier for an isotope, e.g. ``nuclide_id(Element.HELIUM, 3)``."""
    return f"{element.symbol}-{mass_number}"


def list_nuclides(element: Element | None = None) -> list[str]:
    """Return nuclide identifiers, optionally restricted to one element."""
    db = _load_nuclides_db()
    if element is None:
        return list(db.keys())
    return [key for key, val in db.items() if val["element"] == element.symbol]


@lru_cache(maxsize=None)
def get_nuclide(nid: str) -> Nuclide:
    """Return the nuclide record for an identifier.

    Raises:
        KeyError: If the identifier is not in the table.
    """
    db = _load_nuclides_db()
    if nid not in db:
        raise KeyError(f"Nuclide '{nid}' not found. Available: {list(db.keys())}")
    return _build_nuclide(nid, db[nid])


def default_nuclide(element: Element) -> Nuclide:
    """The most abundant stable isotope of *element*."""
    return get_nuclide(nuclide_id(element, element.default_mass_number))


def decay_children(nid: str) -> list[tuple[Nuclide, DecayProcess]]:
    """Resolve the child nuclides of every decay branch of *nid*."""
    return [(get_nuclide(p.child), p) for p in get_nuclide(nid).decay]


def validate_nuclide_table() -> list[str]:
    """Check the table for dangling decay references.

    Returns:
        List of problems found; empty when the table is consistent.
    """
    db = _load_nuclides_db()
    problems = []
    for nid, info in db.items():
        if info["stability"] == "unstable" and not info.get("decay"):
            problems.append(f"{nid}: unstable but has no decay branches")
        for branch in info.get("decay", []):
            if branch["child"] not in db:
                problems.append(f"{nid}: decay child '{branch['child']}' is not tabulated")
    return problems
