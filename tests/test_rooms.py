import pytest

from delvegen.builder import BuilderError, BuilderMap
from delvegen.geometry import distance_pythagoras, distance_pythagoras_squared
from delvegen.map import Map, Rect, TileType
from delvegen.rng import RandomNumberGenerator
from delvegen.rooms import RoomDrawer, RoomSort, RoomSorter

WIDTH, HEIGHT = 40, 30


def make_data(rooms=None):
    data = BuilderMap(map=Map(1, WIDTH, HEIGHT), width=WIDTH, height=HEIGHT)
    data.rooms = rooms
    return data


def sample_rooms():
    return [
        Rect(20, 5, 26, 11),
        Rect(3, 15, 9, 21),
        Rect(30, 18, 36, 24),
        Rect(12, 2, 17, 8),
    ]


def test_drawer_requires_rooms():
    with pytest.raises(BuilderError):
        RoomDrawer().build_map(RandomNumberGenerator(1), make_data())


def test_sorter_requires_rooms():
    with pytest.raises(BuilderError):
        RoomSorter.central().build_map(RandomNumberGenerator(1), make_data())


def test_drawn_rooms_are_floor_in_either_shape():
    shapes = set()
    for seed in range(20):
        data = make_data(sample_rooms())
        RoomDrawer().build_map(RandomNumberGenerator(seed), data)
        m = data.map
        for room in data.rooms:
            if room.radius is None:
                shapes.add("rect")
                for x in range(room.x1 + 1, room.x2 + 1):
                    for y in range(room.y1 + 1, room.y2 + 1):
                        assert m.tiles[x][y] == TileType.FLOOR
            else:
                shapes.add("circle")
                assert room.radius == min(room.x2 - room.x1, room.y2 - room.y1) / 2.0
                center = room.center()
                for x in range(room.x1, room.x2 + 1):
                    for y in range(room.y1, room.y2 + 1):
                        if distance_pythagoras(center, (x, y)) <= room.radius:
                            assert m.tiles[x][y] == TileType.FLOOR
    assert shapes == {"rect", "circle"}


def test_drawer_does_not_touch_original_rects():
    originals = sample_rooms()
    data = make_data(originals)
    RoomDrawer().build_map(RandomNumberGenerator(3), data)
    assert all(room.radius is None for room in originals)
    assert len(data.rooms) == len(originals)


def test_constructors_choose_sort():
    assert RoomSorter.leftmost().sort_by is RoomSort.LEFTMOST
    assert RoomSorter.rightmost().sort_by is RoomSort.RIGHTMOST
    assert RoomSorter.topmost().sort_by is RoomSort.TOPMOST
    assert RoomSorter.bottommost().sort_by is RoomSort.BOTTOMMOST
    assert RoomSorter.central().sort_by is RoomSort.CENTRAL


@pytest.mark.parametrize(
    "sorter, key",
    [
        (RoomSorter.leftmost, lambda r: r.x1),
        (RoomSorter.rightmost, lambda r: r.x2),
        (RoomSorter.topmost, lambda r: r.y1),
        (RoomSorter.bottommost, lambda r: r.y2),
    ],
)
def test_edge_sorts_order_rooms(sorter, key):
    rooms = sample_rooms()
    data = make_data(list(rooms))
    sorter().build_map(RandomNumberGenerator(1), data)
    keys = [key(r) for r in data.rooms]
    assert keys == sorted(keys)
    assert sorted(data.rooms, key=key) == sorted(rooms, key=key)


def test_leftmost_puts_leftmost_room_first():
    rooms = sample_rooms()
    data = make_data(list(rooms))
    RoomSorter.leftmost().build_map(RandomNumberGenerator(1), data)
    assert data.rooms[0] == rooms[1]


def test_central_sort_orders_by_distance_to_centre():
    data = make_data(sample_rooms())
    RoomSorter.central().build_map(RandomNumberGenerator(1), data)
    centre = (WIDTH // 2, HEIGHT // 2)
    distances = [distance_pythagoras_squared(r.center(), centre) for r in data.rooms]
    assert distances == sorted(distances)


def test_sort_is_stable_for_equal_keys():
    a = Rect(5, 1, 8, 4)
    b = Rect(5, 10, 9, 14)
    c = Rect(1, 20, 3, 22)
    data = make_data([a, b, c])
    RoomSorter.leftmost().build_map(RandomNumberGenerator(1), data)
    assert data.rooms == [c, a, b]