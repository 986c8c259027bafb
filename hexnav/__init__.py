"""Least-cost navigation across hex grids for movers with differing terrain costs."""

from loguru import logger

from .cells import Cell, GridHex, HexGrid, Key, Orientation, planar_distance
from .config import HeuristicKind, NavigationSettings
from .errors import PathNotFound
from .heuristics import hex_distance, make_heuristic, neighbor_spacing
from .movers import MoverProfile, load_profiles
from .obstacles import IMPASSABLE, Obstacle, ObstacleTable
from .search import Route, find_path, reconstruct_path, search

__version__ = "0.1.0"

logger.disable(__name__)

__all__ = [
    "Cell",
    "find_path",
    "GridHex",
    "hex_distance",
    "HexGrid",
    "HeuristicKind",
    "IMPASSABLE",
    "Key",
    "load_profiles",
    "make_heuristic",
    "MoverProfile",
    "NavigationSettings",
    "neighbor_spacing",
    "Obstacle",
    "ObstacleTable",
    "Orientation",
    "PathNotFound",
    "planar_distance",
    "reconstruct_path",
    "Route",
    "search",
]
