"""Builders that roughen or round off rooms already drawn."""

from __future__ import annotations

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.common import Symmetry, paint
from delvegen.drunkards import _clear_markers, _stagger
from delvegen.map import Map, Rect, TileType
from delvegen.rng import RandomNumberGenerator

_DIGGER_LIFETIME = 20


class RoomExploder(MetaMapBuilder):
    """Sends short-lived diggers out from each room centre."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if build_data.rooms is None:
            raise BuilderError("Rooms Explosions requires rooms to be present")
        m = build_data.map
        for room in list(build_data.rooms):
            start_x, start_y = room.center()
            n_diggers = rng.roll_dice(1, 20) - 5
            for _ in range(max(n_diggers, 0)):
                x, y = start_x, start_y
                did_something = False
                for _ in range(_DIGGER_LIFETIME):
                    if m.tiles[x][y] == TileType.WALL:
                        did_something = True
                    paint(m, Symmetry.NONE, 1, x, y)
                    m.tiles[x][y] = TileType.DOWN_STAIRS
                    x, y = _stagger(rng, x, y, m.width, m.height)
                if did_something:
                    build_data.take_snapshot()
                _clear_markers(m)


def _fill_if_corner(m: Map, x: int, y: int) -> None:
    walls = sum(
        (
            x > 0 and m.tiles[x - 1][y] == TileType.WALL,
            y > 0 and m.tiles[x][y - 1] == TileType.WALL,
            x < m.width - 2 and m.tiles[x + 1][y] == TileType.WALL,
            y < m.height - 2 and m.tiles[x][y + 1] == TileType.WALL,
        )
    )
    if walls == 2:
        m.tiles[x][y] = TileType.WALL


class RoomCornerRounding(MetaMapBuilder):
    """Walls in each room corner that has walls on exactly two sides."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if build_data.rooms is None:
            raise BuilderError("Room corner rounding requires a list of rooms to be present")
        rooms: list[Rect] = list(build_data.rooms)
        m = build_data.map
        for room in rooms:
            _fill_if_corner(m, room.x1 + 1, room.y1 + 1)
            _fill_if_corner(m, room.x2, room.y1 + 1)
            _fill_if_corner(m, room.x1 + 1, room.y2)
            _fill_if_corner(m, room.x2, room.y2)
            build_data.take_snapshot()