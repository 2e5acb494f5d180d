import pytest

from delvegen.map import Map, TileType
from delvegen.pathfinding import UNREACHABLE, dijkstra_map


def _open_room(width=10, height=10):
    m = Map(1, width, height)
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            m.tiles[x][y] = TileType.FLOOR
    m.populate_blocked()
    return m


def test_start_has_zero_distance():
    m = _open_room()
    dist = dijkstra_map(m, [m.xy_idx(4, 4)], 1000.0)
    assert dist[m.xy_idx(4, 4)] == 0.0


def test_cardinal_step_costs_one():
    m = _open_room()
    dist = dijkstra_map(m, [m.xy_idx(4, 4)], 1000.0)
    assert dist[m.xy_idx(5, 4)] == pytest.approx(1.0)
    assert dist[m.xy_idx(4, 3)] == pytest.approx(1.0)


def test_diagonal_cheaper_than_two_steps():
    m = _open_room()
    dist = dijkstra_map(m, [m.xy_idx(4, 4)], 1000.0)
    assert dist[m.xy_idx(5, 5)] < dist[m.xy_idx(6, 4)]


def test_walls_are_unreachable():
    m = _open_room()
    dist = dijkstra_map(m, [m.xy_idx(4, 4)], 1000.0)
    assert dist[m.xy_idx(0, 0)] == UNREACHABLE
    assert dist[m.xy_idx(9, 5)] == UNREACHABLE


def test_max_depth_limits_reach():
    m = _open_room()
    dist = dijkstra_map(m, [m.xy_idx(1, 1)], 3.0)
    assert dist[m.xy_idx(8, 8)] == UNREACHABLE
    assert all(d < 3.0 or d == UNREACHABLE for d in dist)


def test_distance_grows_along_corridor():
    m = Map(1, 12, 5)
    for x in range(1, 11):
        m.tiles[x][2] = TileType.FLOOR
    m.populate_blocked()
    dist = dijkstra_map(m, [m.xy_idx(1, 2)], 1000.0)
    row = [dist[m.xy_idx(x, 2)] for x in range(1, 11)]
    assert row == sorted(row)
    assert row[-1] == pytest.approx(len(row) - 1)