from __future__ import annotations

from typing import Callable

from .cells import Cell, planar_distance
from .config import HeuristicKind

Heuristic = Callable[[Cell, Cell], float]


def neighbor_spacing(cell: Cell) -> float:
    """Planar distance from ``cell`` to its nearest neighbour, or 1 when it has none."""

    distances = [planar_distance(cell, n) for n in cell.neighbors()]
    distances = [d for d in distances if d > 0]
    return min(distances) if distances else 1.0


def hex_distance(a: Cell, b: Cell) -> int:
    return a.key.distance_to(b.key)


def make_heuristic(
    kind: HeuristicKind,
    *,
    step_cost: float,
    spacing: float,
    floor: float = 1.0,
) -> Heuristic:
    """Build a heuristic measured in the same units as accumulated edge costs.

    ``floor`` is the cheapest multiplier a step can incur. Scaling by it keeps
    the estimate admissible when obstacles make some cells cheaper than a
    plain step.
    """

    unit = step_cost * floor

    if kind is HeuristicKind.EUCLIDEAN:

        def euclidean(a: Cell, b: Cell) -> float:
            return planar_distance(a, b) / spacing * unit

        return euclidean

    if kind is HeuristicKind.HEX:

        def hexagonal(a: Cell, b: Cell) -> float:
            return hex_distance(a, b) * unit

        return hexagonal

    if kind is HeuristicKind.SQUARED:

        def squared(a: Cell, b: Cell) -> float:
            # cheap relative ranking; overestimates beyond one step
            return (planar_distance(a, b) / spacing) ** 2 * step_cost

        return squared

    if kind is HeuristicKind.ZERO:
        return lambda a, b: 0.0

    raise ValueError(f"Unknown heuristic: {kind}")
