"""Contextual obstacles and the per-mover cost table.

An obstacle describes how much of a hindrance a cell is to the current mover.
A bird flies right over a tree, a snake is not slowed by a swamp, and a horse
runs fastest on level, clear ground. The cost multiplies the normal traversal
time: a cost of 2 makes the step take twice as long, and a cost of infinity
makes the cell impassable.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from .cells import Key

IMPASSABLE = sys.float_info.max
"""Edge cost standing in for infinity so that cost arithmetic stays finite."""

MAX_COST = IMPASSABLE / 2
"""Ceiling for passable edge and path costs; always below ``IMPASSABLE``."""


@dataclass(frozen=True, slots=True)
class Obstacle:
    q: int
    r: int
    cost: float

    def __post_init__(self) -> None:
        cost = float(self.cost)
        if math.isnan(cost) or cost <= 0:
            raise ValueError("obstacle cost must be positive")
        object.__setattr__(self, "cost", cost)

    @property
    def key(self) -> Key:
        return Key(self.q, self.r)

    @property
    def impassable(self) -> bool:
        return math.isinf(self.cost)


class ObstacleTable:
    """Keyed view over an ordered obstacle list where the first entry for a cell wins."""

    def __init__(self, entries: Iterable[Obstacle] = ()) -> None:
        self._entries: Tuple[Obstacle, ...] = tuple(entries)
        self._index: Dict[Key, float] = {}
        for entry in self._entries:
            self._index.setdefault(entry.key, entry.cost)

    @classmethod
    def from_entries(
        cls, entries: Iterable[Obstacle | Tuple[int, int, float]] | ObstacleTable
    ) -> ObstacleTable:
        if isinstance(entries, ObstacleTable):
            return entries
        return cls(
            entry if isinstance(entry, Obstacle) else Obstacle(*entry) for entry in entries
        )

    @property
    def entries(self) -> Tuple[Obstacle, ...]:
        return self._entries

    def multiplier(self, key: Key) -> float:
        return self._index.get(key, 1.0)

    def is_impassable(self, key: Key) -> bool:
        return math.isinf(self.multiplier(key))

    def edge_cost(self, key: Key, step_cost: float) -> float:
        """Cost of stepping into ``key``; ``IMPASSABLE`` when the cell cannot be entered."""

        if self.is_impassable(key):
            return IMPASSABLE
        return min(step_cost * self.multiplier(key), MAX_COST)

    @property
    def cheapest_multiplier(self) -> float:
        """Lowest multiplier any step can incur, never above 1."""

        return min([1.0, *self._index.values()])

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
