from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator
from delvegen.wfc_constraints import MapChunk, patterns_to_constraints
from delvegen.wfc_solver import Solver

F = TileType.FLOOR
W = TileType.WALL


def _run(solver, m, rng, limit=1000):
    calls = 0
    while not solver.iteration(m, rng):
        calls += 1
        assert calls < limit
    return calls


def test_map_smaller_than_a_chunk_finishes_at_once():
    m = Map(0, 4, 4)
    solver = Solver(patterns_to_constraints([(F,) * 64], 8), 8, m)
    assert solver.iteration(m, RandomNumberGenerator(1)) is True
    assert solver.possible


def test_single_open_pattern_fills_every_chunk():
    m = Map(0, 16, 16)
    solver = Solver(patterns_to_constraints([(F,) * 64], 8), 8, m)
    calls = _run(solver, m, RandomNumberGenerator(3))
    assert calls == 4
    assert solver.possible
    assert all(t == F for column in m.tiles for t in column)
    assert solver.chunks == [0, 0, 0, 0]


def test_tiles_outside_whole_chunks_are_untouched():
    m = Map(0, 10, 8)
    solver = Solver(patterns_to_constraints([(F,) * 64], 8), 8, m)
    _run(solver, m, RandomNumberGenerator(5))
    assert m.tiles[9][0] == W
    assert m.tiles[7][7] == F


def test_incompatible_neighbours_make_map_impossible():
    m = Map(0, 16, 8)
    chunk = MapChunk(pattern=(F,) * 64, exits=[[True] * 8] * 4, has_exits=True)
    solver = Solver([chunk], 8, m)
    rng = RandomNumberGenerator(7)
    assert solver.iteration(m, rng) is False
    assert solver.iteration(m, rng) is True
    assert solver.possible is False


def test_same_seed_gives_same_map():
    constraints = patterns_to_constraints([(F,) * 64, (W,) * 64], 8)

    def solve(seed):
        m = Map(0, 24, 24)
        solver = Solver(constraints, 8, m)
        _run(solver, m, RandomNumberGenerator(seed))
        return m.tiles, solver.chunks

    assert solve(11) == solve(11)


def test_every_chunk_is_filled_when_possible():
    constraints = patterns_to_constraints([(F,) * 64, (W,) * 64], 8)
    m = Map(0, 24, 16)
    solver = Solver(constraints, 8, m)
    _run(solver, m, RandomNumberGenerator(2))
    assert solver.possible
    assert None not in solver.chunks
    assert solver.remaining == []