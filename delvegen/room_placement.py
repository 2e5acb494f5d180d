"""Stairs and starting positions taken from the room list."""

from __future__ import annotations

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.map import Position, Rect, TileType
from delvegen.rng import RandomNumberGenerator


def _require_rooms(build_data: BuilderMap, what: str) -> list[Rect]:
    if not build_data.rooms:
        raise BuilderError(f"{what} requires list of rooms to be present")
    return build_data.rooms


class RoomBasedStairs(MetaMapBuilder):
    """Puts the down stairs in the centre of the last room."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data, "Room based stairs")
        x, y = rooms[-1].center()
        build_data.map.tiles[x][y] = TileType.DOWN_STAIRS
        build_data.take_snapshot()


class RoomBasedStartingPosition(MetaMapBuilder):
    """Starts the player in the centre of the first room."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data, "Room based starting position")
        x, y = rooms[0].center()
        build_data.starting_position = Position(x, y)