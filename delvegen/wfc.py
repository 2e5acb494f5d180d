"""Regenerating a map from the patterns found in it."""

from __future__ import annotations

from delvegen.builder import BuilderMap, MetaMapBuilder
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator
from delvegen.wfc_constraints import (
    MapChunk,
    build_patterns,
    patterns_to_constraints,
    render_pattern_to_map,
)
from delvegen.wfc_solver import Solver

CHUNK_SIZE = 8
_GALLERY_OVERFLOW_SIZE = 64


class WaveformCollapseBuilder(MetaMapBuilder):
    """Cuts the current map into chunks and lays out a new map from them.

    The new map is ringed with deep water one tile in from each edge.
    """

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        build_data.take_snapshot()
        source = build_data.map
        depth, width, height = source.depth, source.width, source.height

        patterns = build_patterns(source, CHUNK_SIZE, True, True)
        constraints = patterns_to_constraints(patterns, CHUNK_SIZE)
        if build_data.record_history:
            self._render_tile_gallery(constraints, build_data)

        build_data.map = Map(depth, width, height)
        while True:
            solver = Solver(constraints, CHUNK_SIZE, build_data.map)
            while not solver.iteration(build_data.map, rng):
                build_data.take_snapshot()
            build_data.take_snapshot()
            if solver.possible:
                break

        m = build_data.map
        for y in range(m.height):
            m.tiles[1][y] = TileType.DEEP_WATER
            m.tiles[m.width - 2][y] = TileType.DEEP_WATER
            build_data.take_snapshot()
        for x in range(m.width):
            m.tiles[x][1] = TileType.DEEP_WATER
            m.tiles[x][m.height - 2] = TileType.DEEP_WATER
            build_data.take_snapshot()

    @staticmethod
    def _render_tile_gallery(constraints: list[MapChunk], build_data: BuilderMap) -> None:
        """Lay every pattern out side by side for the build history."""
        width, height = build_data.map.width, build_data.map.height
        build_data.map = Map(0, width, height)
        x = y = 1
        for chunk in constraints:
            render_pattern_to_map(build_data.map, chunk, CHUNK_SIZE, x, y)
            build_data.take_snapshot()
            x += CHUNK_SIZE + 1
            if x + CHUNK_SIZE > build_data.map.width:
                x = 1
                y += CHUNK_SIZE + 1
                if y + CHUNK_SIZE > build_data.map.height:
                    build_data.map = Map(0, _GALLERY_OVERFLOW_SIZE, _GALLERY_OVERFLOW_SIZE)
                    x = y = 1
        build_data.take_snapshot()