from itertools import combinations

import pytest

from delvegen.builder import BuilderMap
from delvegen.map import Map
from delvegen.rng import RandomNumberGenerator
from delvegen.simple_map import SimpleMapBuilder


def _data(width=80, height=50):
    return BuilderMap(map=Map(1, width, height), width=width, height=height)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_rooms_never_overlap(seed):
    data = _data()
    SimpleMapBuilder().build_map(RandomNumberGenerator(seed), data)
    assert data.rooms
    for a, b in combinations(data.rooms, 2):
        assert not a.intersect(b)


def test_room_sizes_and_bounds():
    data = _data()
    SimpleMapBuilder().build_map(RandomNumberGenerator(12), data)
    assert len(data.rooms) <= 30
    for room in data.rooms:
        assert 3 <= room.x2 - room.x1 < 15
        assert 3 <= room.y2 - room.y1 < 15
        assert room.x1 >= 0 and room.y1 >= 0
        assert room.x2 <= 78 and room.y2 <= 48


def test_same_seed_same_rooms():
    first, second = _data(), _data()
    SimpleMapBuilder().build_map(RandomNumberGenerator(99), first)
    SimpleMapBuilder().build_map(RandomNumberGenerator(99), second)
    assert [(r.x1, r.y1, r.x2, r.y2) for r in first.rooms] == [
        (r.x1, r.y1, r.x2, r.y2) for r in second.rooms
    ]


def test_map_too_small_for_any_room_raises():
    with pytest.raises(ValueError):
        SimpleMapBuilder().build_map(RandomNumberGenerator(1), _data(3, 3))