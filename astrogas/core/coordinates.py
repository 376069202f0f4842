"""Integer grid coordinates with a deterministic seed."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from astrogas.utils.hashing import hash_coordinates


@dataclass(frozen=True)
class Coordinates:
    """A point on the integer simulation grid.

    ``hash`` is a stable 64-bit seed derived from the position; it seeds
    every random draw made for objects at this point.
    """

    x: int
    y: int
    z: int
    hash: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash", hash_coordinates(self.x, self.y, self.z))

    def distance(self, other: Coordinates) -> float:
        """Euclidean distance to *other* in grid units."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def __sub__(self, other: Coordinates) -> float:
        return self.distance(other)

    def rng(self) -> np.random.Generator:
        """A fresh random generator seeded from this position."""
        return np.random.default_rng(self.hash)
