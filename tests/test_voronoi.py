import pytest

from delvegen.builder import BuilderMap
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator
from delvegen.voronoi import DistanceAlgorithm, VoronoiCellBuilder

WIDTH, HEIGHT = 40, 30


def make_data(width=WIDTH, height=HEIGHT):
    return BuilderMap(map=Map(1, width, height), width=width, height=height)


def test_named_constructors():
    p = VoronoiCellBuilder.pythagoras()
    m = VoronoiCellBuilder.manhattan()
    c = VoronoiCellBuilder.chebyshev()
    assert (p.n_seeds, p.distance_algorithm) == (128, DistanceAlgorithm.PYTHAGORAS)
    assert (m.n_seeds, m.distance_algorithm) == (128, DistanceAlgorithm.MANHATTAN)
    assert (c.n_seeds, c.distance_algorithm) == (64, DistanceAlgorithm.CHEBYSHEV)


def test_single_seed_opens_whole_interior():
    data = make_data(12, 10)
    VoronoiCellBuilder(1, DistanceAlgorithm.MANHATTAN).build_map(RandomNumberGenerator(3), data)
    assert data.map.get_total_floor_tiles() == (12 - 2) * (10 - 2)


@pytest.mark.parametrize(
    "factory",
    [VoronoiCellBuilder.pythagoras, VoronoiCellBuilder.manhattan, VoronoiCellBuilder.chebyshev],
)
def test_border_stays_wall_and_some_floor_opens(factory):
    data = make_data()
    factory().build_map(RandomNumberGenerator(11), data)
    m = data.map
    for x in range(WIDTH):
        assert m.tiles[x][0] == TileType.WALL
        assert m.tiles[x][HEIGHT - 1] == TileType.WALL
    for y in range(HEIGHT):
        assert m.tiles[0][y] == TileType.WALL
        assert m.tiles[WIDTH - 1][y] == TileType.WALL
    floors = m.get_total_floor_tiles()
    assert 0 < floors < (WIDTH - 2) * (HEIGHT - 2)


def test_same_seed_same_map():
    first = make_data()
    second = make_data()
    VoronoiCellBuilder.chebyshev().build_map(RandomNumberGenerator(8), first)
    VoronoiCellBuilder.chebyshev().build_map(RandomNumberGenerator(8), second)
    assert first.map.tiles == second.map.tiles


def test_too_many_seeds_rejected():
    data = make_data(5, 5)
    with pytest.raises(ValueError):
        VoronoiCellBuilder(17, DistanceAlgorithm.PYTHAGORAS).build_map(
            RandomNumberGenerator(1), data
        )


def test_history_records_each_row_when_enabled():
    data = make_data(12, 10)
    data.record_history = True
    VoronoiCellBuilder(4, DistanceAlgorithm.PYTHAGORAS).build_map(RandomNumberGenerator(2), data)
    assert len(data.history) == 10 - 2