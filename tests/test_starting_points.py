import pytest

from delvegen.builder import BuilderError, BuilderMap
from delvegen.map import Map, Position, TileType
from delvegen.rng import RandomNumberGenerator
from delvegen.starting_points import (
    AreaStartingPoint,
    XStart,
    YStart,
    random_start_position,
)


def _data_with_floors(floors, kind=TileType.FLOOR):
    m = Map(1, 20, 20)
    for x, y in floors:
        m.tiles[x][y] = kind
    return BuilderMap(map=m, width=20, height=20)


def test_left_top_picks_nearest_floor():
    data = _data_with_floors([(2, 3), (15, 15), (10, 10)])
    AreaStartingPoint(XStart.LEFT, YStart.TOP).build_map(RandomNumberGenerator(1), data)
    assert data.starting_position == Position(2, 3)


def test_right_bottom_picks_nearest_floor():
    data = _data_with_floors([(2, 3), (15, 15), (10, 10)])
    AreaStartingPoint(XStart.RIGHT, YStart.BOTTOM).build_map(RandomNumberGenerator(1), data)
    assert data.starting_position == Position(15, 15)


def test_grass_counts_as_start():
    data = _data_with_floors([(4, 4)], kind=TileType.GRASS)
    AreaStartingPoint(XStart.CENTER, YStart.CENTER).build_map(RandomNumberGenerator(1), data)
    assert data.starting_position == Position(4, 4)


def test_no_floor_raises():
    data = _data_with_floors([])
    with pytest.raises(BuilderError):
        AreaStartingPoint(XStart.CENTER, YStart.CENTER).build_map(RandomNumberGenerator(1), data)


def test_random_start_position_covers_options():
    rng = RandomNumberGenerator(11)
    picks = [random_start_position(rng) for _ in range(300)]
    assert {x for x, _ in picks} == set(XStart)
    assert {y for _, y in picks} == set(YStart)