"""Binary space partition builders: scattered dungeon rooms and packed interiors."""

from __future__ import annotations

from dataclasses import replace

from delvegen.builder import BuilderMap, InitialMapBuilder
from delvegen.common import draw_corridor
from delvegen.map import Map, Rect, TileType
from delvegen.rng import RandomNumberGenerator

MIN_ROOM_SIZE = 10
_DUNGEON_ATTEMPTS = 240


def _rect(x: int, y: int, width: int, height: int) -> Rect:
    return Rect(x, y, x + width, y + height)


class BspDungeonBuilder(InitialMapBuilder):
    """Splits the map into quarters repeatedly and picks rooms from the pieces.

    Only the room list is produced; drawing the rooms is left to later builders.
    """

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        self._rects = [_rect(2, 2, m.width - 5, m.height - 5)]
        self._add_subrects(self._rects[0])

        rooms: list[Rect] = []
        for _ in range(_DUNGEON_ATTEMPTS):
            rect = self._random_rect(rng)
            candidate = self._random_sub_rect(rect, rng)
            if self._is_possible(candidate, m):
                rooms.append(candidate)
                self._add_subrects(rect)
        build_data.rooms = rooms

    def _add_subrects(self, rect: Rect) -> None:
        half_width = max(abs(rect.x1 - rect.x2) // 2, 1)
        half_height = max(abs(rect.y1 - rect.y2) // 2, 1)
        self._rects.extend(
            [
                _rect(rect.x1, rect.y1, half_width, half_height),
                _rect(rect.x1, rect.y1 + half_height, half_width, half_height),
                _rect(rect.x1 + half_width, rect.y1, half_width, half_height),
                _rect(rect.x1 + half_width, rect.y1 + half_height, half_width, half_height),
            ]
        )

    def _random_rect(self, rng: RandomNumberGenerator) -> Rect:
        if len(self._rects) == 1:
            return self._rects[0]
        return self._rects[rng.roll_dice(1, len(self._rects)) - 1]

    @staticmethod
    def _random_sub_rect(rect: Rect, rng: RandomNumberGenerator) -> Rect:
        rect_width = abs(rect.x1 - rect.x2)
        rect_height = abs(rect.y1 - rect.y2)
        w = max(3, rng.roll_dice(1, min(rect_width, 20)) - 1) + 1
        h = max(3, rng.roll_dice(1, min(rect_height, 20)) - 1) + 1
        x1 = rect.x1 + rng.roll_dice(1, 6) - 1
        y1 = rect.y1 + rng.roll_dice(1, 6) - 1
        return replace(rect, x1=x1, y1=y1, x2=x1 + w, y2=y1 + h)

    @staticmethod
    def _is_possible(rect: Rect, m: Map) -> bool:
        xs = range(rect.x1 - 2, rect.x2 + 3)
        ys = range(rect.y1 - 2, rect.y2 + 3)
        if xs.start < 1 or ys.start < 1 or xs[-1] > m.width - 2 or ys[-1] > m.height - 2:
            return False
        return all(m.tiles[x][y] == TileType.WALL for x in xs for y in ys)


class BspInteriorBuilder(InitialMapBuilder):
    """Divides the whole map into adjoining rooms and joins them in order."""

    def __init__(self) -> None:
        self._rects: list[Rect] = []

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        self._rects = [_rect(1, 1, m.width - 2, m.height - 2)]
        self._add_subrects(self._rects[0], rng)

        rooms = [replace(r) for r in self._rects]
        for room in rooms:
            for y in range(room.y1 + 1, room.y2 + 1):
                for x in range(room.x1 + 1, room.x2 + 1):
                    if 0 < x < m.width - 1 and 0 < y < m.height - 1:
                        m.tiles[x][y] = TileType.FLOOR
            build_data.take_snapshot()

        for room, next_room in zip(rooms, rooms[1:]):
            start_x = room.x1 + rng.roll_dice(1, abs(room.x1 - room.x2)) - 1
            start_y = room.y1 + rng.roll_dice(1, abs(room.y1 - room.y2)) - 1
            end_x = next_room.x1 + rng.roll_dice(1, abs(next_room.x1 - next_room.x2)) - 1
            end_y = next_room.y1 + rng.roll_dice(1, abs(next_room.y1 - next_room.y2)) - 1
            draw_corridor(m, start_x, start_y, end_x, end_y)
            build_data.take_snapshot()
        build_data.rooms = rooms

    def _add_subrects(self, rect: Rect, rng: RandomNumberGenerator) -> None:
        if self._rects:
            self._rects.pop()

        width = abs(rect.x1 - rect.x2)
        height = abs(rect.y1 - rect.y2)
        half_width = max(width // 2, 1)
        half_height = max(height // 2, 1)

        if rng.roll_dice(1, 4) <= 2:
            halves = (
                _rect(rect.x1, rect.y1, half_width - 1, height),
                _rect(rect.x1 + half_width, rect.y1, half_width, height),
            )
            split_further = half_width > MIN_ROOM_SIZE
        else:
            halves = (
                _rect(rect.x1, rect.y1, width, half_height - 1),
                _rect(rect.x1, rect.y1 + half_height, width, half_height),
            )
            split_further = half_height > MIN_ROOM_SIZE

        for half in halves:
            self._rects.append(half)
            if split_further:
                self._add_subrects(half, rng)