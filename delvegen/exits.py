"""Reachability culling and stair placement by distance."""

from __future__ import annotations

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.map import Position, TileType
from delvegen.pathfinding import UNREACHABLE, dijkstra_map
from delvegen.rng import RandomNumberGenerator


def _require_start(build_data: BuilderMap) -> Position:
    if build_data.starting_position is None:
        raise BuilderError("A starting position is required")
    return build_data.starting_position


class CullUnreachable(MetaMapBuilder):
    """Walls off every floor tile the player cannot walk to."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        start = _require_start(build_data)
        m = build_data.map
        m.populate_blocked()
        distances = dijkstra_map(m, [m.xy_idx(start.x, start.y)], 1000.0)
        for x, column in enumerate(m.tiles):
            for y, tile in enumerate(column):
                if tile == TileType.FLOOR and distances[m.xy_idx(x, y)] == UNREACHABLE:
                    column[y] = TileType.WALL


class DistantExit(MetaMapBuilder):
    """Places the only down stairs on the floor tile farthest from the start."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        start = _require_start(build_data)
        m = build_data.map
        for column in m.tiles:
            for y, tile in enumerate(column):
                if tile == TileType.DOWN_STAIRS:
                    column[y] = TileType.FLOOR

        distances = dijkstra_map(m, [m.xy_idx(start.x, start.y)], 200.0)
        exit_x, exit_y, best = 0, 0, 0.0
        for x, column in enumerate(m.tiles):
            for y, tile in enumerate(column):
                if tile != TileType.FLOOR:
                    continue
                distance = distances[m.xy_idx(x, y)]
                if distance != UNREACHABLE and distance > best:
                    exit_x, exit_y, best = x, y, distance
        m.tiles[exit_x][exit_y] = TileType.DOWN_STAIRS
        build_data.take_snapshot()