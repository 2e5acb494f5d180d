import pytest

from delvegen.builder import (
    BuilderChain,
    BuilderError,
    BuilderMap,
    InitialMapBuilder,
    MetaMapBuilder,
)
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator


class _Starter(InitialMapBuilder):
    def __init__(self, log):
        self.log = log

    def build_map(self, rng, build_data):
        self.log.append("start")
        build_data.map.tiles[2][2] = TileType.FLOOR


class _Meta(MetaMapBuilder):
    def __init__(self, log, name):
        self.log = log
        self.name = name

    def build_map(self, rng, build_data):
        self.log.append(self.name)
        build_data.spawn_list.append(((2, 2), self.name))


def test_chain_runs_builders_in_order():
    log = []
    chain = BuilderChain(1, 10, 10)
    chain.start_with(_Starter(log))
    chain.with_builder(_Meta(log, "a"))
    chain.with_builder(_Meta(log, "b"))
    chain.build_map(RandomNumberGenerator(1))
    assert log == ["start", "a", "b"]
    assert chain.build_data.map.tiles[2][2] == TileType.FLOOR
    assert [name for _, name in chain.build_data.spawn_list] == ["a", "b"]


def test_second_starter_is_rejected():
    chain = BuilderChain(1, 10, 10)
    chain.start_with(_Starter([]))
    with pytest.raises(BuilderError):
        chain.start_with(_Starter([]))


def test_build_without_starter_fails():
    chain = BuilderChain(1, 10, 10)
    chain.with_builder(_Meta([], "a"))
    with pytest.raises(BuilderError):
        chain.build_map(RandomNumberGenerator(1))


def test_chain_creates_map_of_requested_size():
    chain = BuilderChain(3, 14, 9)
    data = chain.build_data
    assert (data.width, data.height) == (14, 9)
    assert (data.map.width, data.map.height, data.map.depth) == (14, 9, 3)
    assert data.rooms is None and data.starting_position is None


def test_snapshot_records_revealed_copy():
    data = BuilderMap(map=Map(1, 6, 6), width=6, height=6, record_history=True)
    data.take_snapshot()
    data.map.tiles[1][1] = TileType.FLOOR
    assert len(data.history) == 1
    assert all(all(column) for column in data.history[0].revealed_tiles)
    assert data.history[0].tiles[1][1] == TileType.WALL
    assert data.map.revealed_tiles[0][0] is False


def test_snapshot_skipped_without_history():
    data = BuilderMap(map=Map(1, 6, 6), width=6, height=6)
    data.take_snapshot()
    assert data.history == []


def test_abstract_builders_cannot_be_instantiated():
    with pytest.raises(TypeError):
        InitialMapBuilder()
    with pytest.raises(TypeError):
        MetaMapBuilder()