import itertools
import math

import pytest

from hexnav import HeuristicKind, HexGrid, hex_distance, make_heuristic, neighbor_spacing


def test_neighbor_spacing_matches_grid():
    grid = HexGrid(3, 3, size=2.0)
    assert neighbor_spacing(grid.cell(1, 1)) == pytest.approx(grid.spacing)


def test_neighbor_spacing_without_neighbors():
    assert neighbor_spacing(HexGrid(1, 1).cell(0, 0)) == 1.0


def test_euclidean_is_one_step_between_neighbors():
    grid = HexGrid(3, 3)
    h = make_heuristic(HeuristicKind.EUCLIDEAN, step_cost=1.0, spacing=grid.spacing)
    assert h(grid.cell(1, 1), grid.cell(2, 1)) == pytest.approx(1.0)
    assert h(grid.cell(1, 1), grid.cell(1, 1)) == 0.0


@pytest.mark.parametrize("kind", [HeuristicKind.EUCLIDEAN, HeuristicKind.HEX])
def test_heuristic_never_exceeds_step_distance(kind):
    grid = HexGrid(5, 5)
    h = make_heuristic(kind, step_cost=1.0, spacing=grid.spacing)
    for a, b in itertools.product(grid.cells(), repeat=2):
        assert h(a, b) <= hex_distance(a, b) + 1e-9


def test_floor_scales_estimate():
    grid = HexGrid(5, 5)
    h = make_heuristic(HeuristicKind.HEX, step_cost=2.0, spacing=grid.spacing, floor=0.5)
    assert h(grid.cell(0, 0), grid.cell(3, 0)) == pytest.approx(3.0)


def test_squared_heuristic_grows_quadratically():
    grid = HexGrid(5, 5)
    h = make_heuristic(HeuristicKind.SQUARED, step_cost=1.0, spacing=grid.spacing)
    assert h(grid.cell(0, 0), grid.cell(2, 0)) == pytest.approx(4.0)
    assert h(grid.cell(0, 0), grid.cell(4, 0)) == pytest.approx(16.0)


def test_zero_heuristic():
    grid = HexGrid(2, 2)
    h = make_heuristic(HeuristicKind.ZERO, step_cost=1.0, spacing=math.sqrt(3))
    assert h(grid.cell(0, 0), grid.cell(1, 1)) == 0.0
