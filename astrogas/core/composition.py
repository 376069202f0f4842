"""Material compositions and their reconciliation.

A composition is an ordered list of ``(material, ratio)`` pairs. Materials
only need to be hashable; ratios are conventionally percentages but are not
required to sum to 100.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator, Mapping

from astrogas.core.transition import AsyncOption, EasingFunction, Interpolatable, lerp


def aggregate(pairs: Iterable[tuple[Hashable, float]]) -> dict[Hashable, float]:
    """Sum the ratios of repeated materials, keeping first-seen order."""
    totals: dict[Hashable, float] = {}
    for material, ratio in pairs:
        totals[material] = totals.get(material, 0.0) + ratio
    return totals


def reconcile(
    origin: Iterable[tuple[Hashable, float]],
    target: Iterable[tuple[Hashable, float]],
) -> tuple[dict[Hashable, float], dict[Hashable, float]]:
    """Align two compositions onto the union of their materials.

    Repeated materials are summed first. A material present on only one
    side is added to the other side with ratio 0.

    Returns:
        ``(origin_map, target_map)`` with identical key sets. Keys are
        ordered origin-first, then target-only materials.
    """
    origin_map = aggregate(origin)
    target_map = aggregate(target)

    for material in target_map:
        origin_map.setdefault(material, 0.0)
    for material in origin_map:
        target_map.setdefault(material, 0.0)

    return origin_map, target_map


class Composition(Interpolatable):
    """Ordered mixture of materials and their ratios.

    Args:
        components: Iterable of ``(material, ratio)`` pairs. Duplicates are
            kept as given; they are summed when ratios are aggregated.
    """

    def __init__(self, components: Iterable[tuple[Hashable, float]] = ()):
        self.components: list[tuple[Hashable, float]] = [
            (material, float(ratio)) for material, ratio in components
        ]

    def __iter__(self) -> Iterator[tuple[Hashable, float]]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __contains__(self, material: object) -> bool:
        return any(material == m for m, _ in self.components)

    def __eq__(self, other: object) -> bool:
        """Compositions are equal when their aggregated ratios match."""
        if not isinstance(other, Composition):
            return NotImplemented
        return self.ratios() == other.ratios()

    def __repr__(self) -> str:
        inner = ", ".join(f"({m}, {r:g})" for m, r in self.components)
        return f"Composition([{inner}])"

    def ratios(self) -> dict[Hashable, float]:
        """Aggregated ratio per material."""
        return aggregate(self.components)

    def ratio_of(self, material: Hashable) -> float:
        """Aggregated ratio of *material*, 0.0 if absent."""
        return self.ratios().get(material, 0.0)

    def total(self) -> float:
        return sum(ratio for _, ratio in self.components)

    def normalized(self, total: float = 100.0) -> Composition:
        """Aggregate and rescale ratios so they sum to *total*.

        Raises:
            ValueError: If the current ratios sum to zero.
        """
        current = self.total()
        if current == 0.0:
            raise ValueError("Cannot normalise a composition whose ratios sum to zero")
        scale = total / current
        return Composition((m, r * scale) for m, r in self.ratios().items())

    def interpolate(
        self,
        target: Composition,
        progress: float,
        ease: EasingFunction | None = None,
        async_options: Mapping[str, AsyncOption] | None = None,
    ) -> Composition:
        """Blend every reconciled material towards *target*.

        Materials that start or end at zero are kept; the result is not
        renormalised.

        Raises:
            ValueError: If async options are given; compositions blend with
                uniform progress only.
        """
        if async_options:
            raise ValueError("Composition blending does not accept async options")

        origin_map, target_map = reconcile(self.components, target.components)

        blended: list[tuple[Hashable, float]] = []
        for material, ratio in origin_map.items():
            if material not in target_map:
                raise LookupError(f"Material {material!r} missing after reconciliation")
            blended.append((material, lerp(ratio, target_map[material], progress, ease)))
        return Composition(blended)

    def to_list(self) -> list[tuple[Any, float]]:
        return list(self.components)
