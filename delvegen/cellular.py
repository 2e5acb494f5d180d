"""Cave maps grown by a cellular automaton."""

from __future__ import annotations

from delvegen.builder import BuilderMap, InitialMapBuilder, MetaMapBuilder
from delvegen.map import TileType
from delvegen.rng import RandomNumberGenerator

_ITERATIONS = 15
_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0), (1, -1), (1, 1), (-1, -1), (-1, 1))


class CellularAutomataBuilder(InitialMapBuilder, MetaMapBuilder):
    """Random noise smoothed into caves.

    As a starting builder it seeds noise and smooths it fifteen times; with
    ``refine_only`` it applies a single smoothing pass to an existing map.
    """

    def __init__(self, refine_only: bool = False) -> None:
        self.refine_only = refine_only

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if self.refine_only:
            self.apply_iteration(build_data)
            return
        m = build_data.map
        for y in range(1, m.height - 1):
            for x in range(1, m.width - 1):
                m.tiles[x][y] = TileType.FLOOR if rng.roll_dice(1, 100) > 55 else TileType.WALL
        build_data.take_snapshot()
        for _ in range(_ITERATIONS):
            self.apply_iteration(build_data)

    def apply_iteration(self, build_data: BuilderMap) -> None:
        """One smoothing pass: crowded or isolated cells become wall."""
        m = build_data.map
        old = m.tiles
        new = [column[:] for column in old]
        for y in range(1, m.height - 1):
            for x in range(1, m.width - 1):
                walls = sum(old[x + dx][y + dy] == TileType.WALL for dx, dy in _NEIGHBOURS)
                new[x][y] = TileType.WALL if walls > 4 or walls == 0 else TileType.FLOOR
        m.tiles = new
        build_data.take_snapshot()