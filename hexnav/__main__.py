"""Command line entry point for computing a path on a bounded hex grid."""

from __future__ import annotations

import argparse
import sys
import tomllib
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from loguru import logger
from pydantic import ValidationError

from .cells import HexGrid, Key, Orientation
from .config import HeuristicKind, NavigationSettings
from .errors import PathNotFound
from .movers import load_profiles
from .obstacles import Obstacle
from .search import search


def _coord(text: str) -> Tuple[int, int]:
    try:
        q, r = (int(part) for part in text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected q,r but got {text!r}") from exc
    return q, r


def _obstacle(text: str) -> Obstacle:
    coord, sep, cost = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected q,r=cost but got {text!r}")
    q, r = _coord(coord)
    try:
        return Obstacle(q, r, float(cost))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _terrain(text: str) -> Tuple[Key, str]:
    coord, sep, kind = text.partition("=")
    if not sep or not kind:
        raise argparse.ArgumentTypeError(f"expected q,r=terrain but got {text!r}")
    return Key(*_coord(coord)), kind


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hexnav", description=__doc__)
    ap.add_argument("--width", type=int, required=True, help="Grid width in cells")
    ap.add_argument("--height", type=int, required=True, help="Grid height in cells")
    ap.add_argument("--start", type=_coord, required=True, help="Start cell as q,r")
    ap.add_argument("--goal", type=_coord, required=True, help="Goal cell as q,r")
    ap.add_argument(
        "--obstacle",
        type=_obstacle,
        action="append",
        default=[],
        help=(
            "Cost multiplier as q,r=cost; 'inf' blocks the cell. "
            "Repeatable; the first entry for a cell wins, ahead of profile costs"
        ),
    )
    ap.add_argument("--profiles", type=Path, help="TOML file declaring mover profiles")
    ap.add_argument("--mover", help="Profile name to apply to --terrain cells")
    ap.add_argument(
        "--terrain",
        type=_terrain,
        action="append",
        default=[],
        help="Terrain type as q,r=type. Repeatable",
    )
    ap.add_argument(
        "--heuristic",
        choices=[kind.value for kind in HeuristicKind],
        default=HeuristicKind.EUCLIDEAN.value,
    )
    ap.add_argument("--step-cost", type=float, default=1.0)
    ap.add_argument(
        "--orientation",
        choices=[orientation.value for orientation in Orientation],
        default=Orientation.POINTY.value,
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search details")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")
    logger.enable("hexnav")

    try:
        grid = HexGrid(args.width, args.height, Orientation(args.orientation))
        start = grid.cell(*args.start)
        goal = grid.cell(*args.goal)
    except ValueError as exc:
        ap.error(str(exc))

    obstacles: List[Obstacle] = list(args.obstacle)
    if args.terrain or args.mover:
        if args.profiles is None or args.mover is None:
            ap.error("--terrain requires both --profiles and --mover")
        try:
            profiles = load_profiles(args.profiles)
        except (OSError, tomllib.TOMLDecodeError, TypeError) as exc:
            ap.error(f"cannot load profiles from {args.profiles}: {exc}")
        except ValidationError as exc:
            ap.error(f"invalid profile in {args.profiles}: {exc.errors()[0]['msg']}")
        if args.mover not in profiles:
            ap.error(f"unknown mover {args.mover!r}; known: {', '.join(sorted(profiles))}")
        terrain: Dict[Key, str] = dict(args.terrain)
        obstacles.extend(profiles[args.mover].obstacles(terrain))

    try:
        settings = NavigationSettings(step_cost=args.step_cost, heuristic=args.heuristic)
    except ValidationError as exc:
        ap.error(f"invalid settings: {exc.errors()[0]['msg']}")
    if not settings.admissible:
        logger.warning(
            f"{settings.heuristic.value} heuristic may return a costlier path than the optimum"
        )

    try:
        route = search(start, goal, obstacles, settings=settings)
    except PathNotFound as exc:
        print(f"hexnav: {exc}", file=sys.stderr)
        return 1

    print(" -> ".join(str(key) for key in route.keys))
    print(f"steps: {route.steps}  cost: {route.cost:g}")
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
