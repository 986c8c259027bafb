"""Weighted graph view of a hex grid, solved independently with networkx."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence, Tuple, TypeAlias

import networkx as nx

from .cells import HexGrid, Key
from .config import DEFAULT_SETTINGS, NavigationSettings
from .errors import PathNotFound
from .obstacles import Obstacle, ObstacleTable

if TYPE_CHECKING:  # pragma: no cover - typing only
    MovementGraph: TypeAlias = nx.DiGraph[Key]
else:  # pragma: no cover - runtime alias without subscripting
    MovementGraph: TypeAlias = nx.DiGraph


def build_movement_graph(
    grid: HexGrid,
    obstacles: Iterable[Obstacle | Tuple[int, int, float]] | ObstacleTable = (),
    *,
    settings: NavigationSettings | None = None,
) -> MovementGraph:
    """Return a directed graph whose edge weights are the cost of entering the target cell.

    Edges into impassable cells are left out.
    """

    settings = settings or DEFAULT_SETTINGS
    table = ObstacleTable.from_entries(obstacles)
    graph: MovementGraph = nx.DiGraph()
    for cell in grid.cells():
        graph.add_node(cell.key, pos=(cell.x, cell.y))
    for cell in grid.cells():
        for neighbor in cell.neighbors():
            if table.is_impassable(neighbor.key):
                continue
            graph.add_edge(
                cell.key, neighbor.key, weight=table.edge_cost(neighbor.key, settings.step_cost)
            )
    return graph


def reference_path(graph: MovementGraph, start: Key, goal: Key) -> List[Key]:
    """Return the lowest-cost path between ``start`` and ``goal`` using networkx's A*.

    No heuristic is supplied, so the search degrades to Dijkstra and stays
    exact whatever the obstacle multipliers are.
    """

    if start == goal:
        return [start]

    try:
        return nx.astar_path(graph, start, goal, heuristic=None, weight="weight")
    except (nx.NetworkXNoPath, nx.NodeNotFound) as exc:
        raise PathNotFound(start, goal) from exc


def path_cost(graph: MovementGraph, path: Sequence[Key]) -> float:
    """Sum the edge weights along ``path``; raises ``NetworkXNoPath`` for a broken path."""

    return float(nx.path_weight(graph, list(path), weight="weight"))
