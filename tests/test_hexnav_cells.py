import math

import pytest

from hexnav import GridHex, HexGrid, Key, Orientation, planar_distance


def test_key_distance_and_order():
    assert Key(0, 0).distance_to(Key(2, -1)) == 2
    assert Key(0, 1) < Key(1, 0) < Key(1, 1)
    assert str(Key(3, -2)) == "3,-2"


def test_grid_hex_identity_ignores_grid_instance():
    a = HexGrid(3, 3).cell(1, 1)
    b = GridHex(1, 1, HexGrid(3, 3, Orientation.FLAT))
    assert a == b
    assert hash(a) == hash(b)
    assert a.key == Key(1, 1)


def test_neighbors_are_bounded():
    grid = HexGrid(3, 3)
    assert {n.key for n in grid.cell(1, 1).neighbors()} == {
        Key(2, 1),
        Key(2, 0),
        Key(1, 0),
        Key(0, 1),
        Key(0, 2),
        Key(1, 2),
    }
    assert {n.key for n in grid.cell(0, 0).neighbors()} == {Key(1, 0), Key(0, 1)}


@pytest.mark.parametrize(("q", "r"), [(-1, 0), (3, 0), (0, 3), (5, 5)])
def test_cell_outside_grid_is_rejected(q, r):
    with pytest.raises(ValueError):
        HexGrid(3, 3).cell(q, r)


@pytest.mark.parametrize("width, height, size", [(0, 3, 1.0), (3, -1, 1.0), (3, 3, 0.0)])
def test_invalid_grid_dimensions(width, height, size):
    with pytest.raises(ValueError):
        HexGrid(width, height, size=size)


def test_pointy_and_flat_projection():
    pointy = HexGrid(3, 3).cell(1, 0)
    assert pointy.x == pytest.approx(math.sqrt(3))
    assert pointy.y == pytest.approx(0.0)

    flat = HexGrid(3, 3, Orientation.FLAT, size=2.0).cell(1, 0)
    assert flat.x == pytest.approx(3.0)
    assert flat.y == pytest.approx(math.sqrt(3))


@pytest.mark.parametrize("orientation", list(Orientation))
def test_neighbors_are_equidistant(orientation):
    grid = HexGrid(5, 5, orientation, size=1.5)
    centre = grid.cell(2, 2)
    for n in centre.neighbors():
        assert planar_distance(centre, n) == pytest.approx(grid.spacing)


def test_cells_enumerates_whole_grid():
    grid = HexGrid(4, 2)
    keys = [cell.key for cell in grid.cells()]
    assert len(keys) == 8
    assert len(set(keys)) == 8
