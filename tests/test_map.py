import pytest

from delvegen.map import Map, Position, Rect, TileType


def test_new_map_is_all_walls():
    m = Map(2, 12, 7)
    assert len(m.tiles) == 12
    assert all(len(column) == 7 for column in m.tiles)
    assert sum(column.count(TileType.WALL) for column in m.tiles) == 12 * 7
    assert m.depth == 2


def test_xy_idx_round_trip():
    m = Map(1, 13, 9)
    for x in range(m.width):
        for y in range(m.height):
            idx = m.xy_idx(x, y)
            assert idx % m.width == x
            assert idx // m.width == y


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 0, True), (9, 4, True), (10, 0, False), (-1, 2, False), (3, 5, False)],
)
def test_is_tile_in_bounds(x, y, expected):
    assert Map(1, 10, 5).is_tile_in_bounds(x, y) is expected


def test_get_total_floor_tiles_counts_floors_only():
    m = Map(1, 8, 8)
    m.tiles[1][1] = TileType.FLOOR
    m.tiles[2][3] = TileType.FLOOR
    m.tiles[4][4] = TileType.FLOOR
    m.tiles[5][5] = TileType.GRASS
    assert m.get_total_floor_tiles() == 3


def test_populate_blocked():
    m = Map(1, 5, 5)
    m.tiles[2][2] = TileType.FLOOR
    m.tiles[3][3] = TileType.DEEP_WATER
    m.tiles[1][3] = TileType.ROAD
    m.populate_blocked()
    assert m.blocked[0][0] is True
    assert m.blocked[2][2] is False
    assert m.blocked[3][3] is True
    assert m.blocked[1][3] is False


def test_copy_is_independent():
    m = Map(1, 6, 6)
    clone = m.copy()
    clone.tiles[2][2] = TileType.FLOOR
    clone.revealed_tiles[1][1] = True
    assert m.tiles[2][2] == TileType.WALL
    assert m.revealed_tiles[1][1] is False
    assert clone.width == m.width and clone.depth == m.depth


def test_rect_center():
    assert Rect(0, 0, 4, 6).center() == (2, 3)


def test_rect_intersect():
    a = Rect(0, 0, 5, 5)
    assert a.intersect(Rect(3, 3, 8, 8))
    assert Rect(3, 3, 8, 8).intersect(a)
    assert not a.intersect(Rect(6, 6, 9, 9))


def test_position_equality():
    assert Position(3, 4) == Position(3, 4)
    assert Position(3, 4) != Position(4, 3)