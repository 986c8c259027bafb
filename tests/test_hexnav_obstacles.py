import math

import pytest

from hexnav import IMPASSABLE, Key, Obstacle, ObstacleTable
from hexnav.obstacles import MAX_COST


@pytest.mark.parametrize("cost", [0, -1.0, float("nan")])
def test_obstacle_rejects_non_positive_cost(cost):
    with pytest.raises(ValueError):
        Obstacle(0, 0, cost)


def test_obstacle_accepts_infinity():
    blocked = Obstacle(1, 0, math.inf)
    assert blocked.impassable
    assert blocked.key == Key(1, 0)
    assert not Obstacle(1, 0, 2).impassable


def test_first_matching_entry_wins():
    table = ObstacleTable.from_entries([(1, 0, math.inf), (1, 0, 1.0), (2, 0, 3.0)])
    assert table.is_impassable(Key(1, 0))
    assert table.multiplier(Key(2, 0)) == 3.0
    assert table.multiplier(Key(5, 5)) == 1.0
    assert len(table) == 3


def test_edge_cost_scales_step_and_caps_infinity():
    table = ObstacleTable([Obstacle(0, 1, 2.5), Obstacle(1, 1, math.inf)])
    assert table.edge_cost(Key(0, 1), 2.0) == pytest.approx(5.0)
    assert table.edge_cost(Key(1, 1), 2.0) == IMPASSABLE
    assert math.isfinite(table.edge_cost(Key(1, 1), 2.0))
    assert table.edge_cost(Key(3, 3), 2.0) == 2.0


def test_cheapest_multiplier_never_exceeds_one():
    assert ObstacleTable().cheapest_multiplier == 1.0
    assert ObstacleTable([Obstacle(0, 0, 4.0)]).cheapest_multiplier == 1.0
    assert ObstacleTable([Obstacle(0, 0, 4.0), Obstacle(1, 0, 0.25)]).cheapest_multiplier == 0.25


def test_cheapest_multiplier_ignores_shadowed_duplicates():
    table = ObstacleTable([Obstacle(0, 0, 2.0), Obstacle(0, 0, 0.1)])
    assert table.cheapest_multiplier == 1.0


def test_from_entries_passes_tables_through():
    table = ObstacleTable([Obstacle(0, 0, 2.0)])
    assert ObstacleTable.from_entries(table) is table
    assert table.multiplier(Key(0, 0)) == 2.0


def test_edge_cost_saturates_below_impassable():
    table = ObstacleTable([Obstacle(0, 0, 1e308)])
    cost = table.edge_cost(Key(0, 0), 2.0)
    assert cost == MAX_COST
    assert cost < IMPASSABLE
    assert not table.is_impassable(Key(0, 0))
