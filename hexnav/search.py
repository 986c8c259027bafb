from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Set, Tuple

from loguru import logger

from .cells import Cell, Key
from .config import DEFAULT_SETTINGS, NavigationSettings
from .errors import PathNotFound
from .heuristics import make_heuristic, neighbor_spacing
from .obstacles import MAX_COST, Obstacle, ObstacleTable

Obstacles = Iterable[Obstacle | Tuple[int, int, float]] | ObstacleTable


@dataclass(frozen=True)
class Route:
    """A found path together with its total cost."""

    cells: List[Cell]
    cost: float
    expanded: int = 0

    @property
    def keys(self) -> List[Key]:
        return [cell.key for cell in self.cells]

    @property
    def steps(self) -> int:
        return len(self.cells) - 1


def reconstruct_path(
    came_from: Mapping[Key, Key], cells: Mapping[Key, Cell], goal: Key
) -> List[Cell]:
    """Walk predecessor links back from ``goal`` and return the path start-first."""

    rev = [cells[goal]]
    current = goal
    while current in came_from:
        current = came_from[current]
        rev.append(cells[current])
    rev.reverse()
    return rev


def search(
    start: Cell,
    goal: Cell,
    obstacles: Obstacles = (),
    *,
    settings: NavigationSettings | None = None,
) -> Route:
    """A* from ``start`` to ``goal`` over any :class:`~hexnav.cells.Cell` model.

    Frontier entries are ordered by ``(priority, key)`` so equal-cost
    alternatives always resolve the same way. Raises :class:`PathNotFound`
    when the frontier runs dry.
    """

    settings = settings or DEFAULT_SETTINGS
    table = ObstacleTable.from_entries(obstacles)
    heuristic = make_heuristic(
        settings.heuristic,
        step_cost=settings.step_cost,
        spacing=neighbor_spacing(start),
        floor=table.cheapest_multiplier,
    )
    start_key, goal_key = start.key, goal.key
    logger.debug(
        f"searching {start_key} -> {goal_key} with {len(table)} obstacles, "
        f"heuristic={settings.heuristic.value}"
    )

    cells: Dict[Key, Cell] = {start_key: start}
    costs: Dict[Key, float] = {start_key: 0.0}
    priorities: Dict[Key, float] = {start_key: heuristic(start, goal)}
    came_from: Dict[Key, Key] = {}
    settled: Set[Key] = set()
    frontier: List[Tuple[float, Key]] = [(priorities[start_key], start_key)]

    while frontier:
        priority, key = heapq.heappop(frontier)
        if key in settled or priority != priorities[key]:
            continue
        if key == goal_key:
            path = reconstruct_path(came_from, cells, key)
            logger.debug(
                f"found {start_key} -> {goal_key}: steps={len(path) - 1}, "
                f"cost={costs[key]:.3f}, expanded={len(settled)}"
            )
            return Route(path, costs[key], len(settled))

        settled.add(key)
        current = cells[key]
        for neighbor in current.neighbors():
            nkey = neighbor.key
            if nkey in settled:
                continue
            if table.is_impassable(nkey):
                continue
            # path costs saturate at MAX_COST
            tentative = min(costs[key] + table.edge_cost(nkey, settings.step_cost), MAX_COST)
            if nkey in costs and tentative >= costs[nkey]:
                continue
            cells.setdefault(nkey, neighbor)
            costs[nkey] = tentative
            came_from[nkey] = key
            priorities[nkey] = tentative + heuristic(neighbor, goal)
            heapq.heappush(frontier, (priorities[nkey], nkey))

    logger.warning(f"no path from {start_key} to {goal_key} after {len(settled)} expansions")
    raise PathNotFound(start_key, goal_key)


def find_path(
    start: Cell,
    goal: Cell,
    obstacles: Obstacles = (),
    *,
    settings: NavigationSettings | None = None,
) -> List[Cell]:
    """Return the cheapest sequence of cells from ``start`` to ``goal`` inclusive."""

    return search(start, goal, obstacles, settings=settings).cells
