"""Drawing rooms onto the map and ordering the room list."""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.geometry import distance_pythagoras, distance_pythagoras_squared
from delvegen.map import Map, Rect, TileType
from delvegen.rng import RandomNumberGenerator

log = logging.getLogger(__name__)


class RoomDrawer(MetaMapBuilder):
    """Carves each room as a rectangle or, one time in four, as a circle."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if build_data.rooms is None:
            raise BuilderError("Rooms must be present")
        rooms = [replace(room) for room in build_data.rooms]
        for room in rooms:
            log.debug("drawing room %s, %s, %s, %s", room.x1, room.x2, room.y1, room.y2)
            if rng.roll_dice(1, 4) == 1:
                self._circle(build_data.map, room)
            else:
                self._rectangle(build_data.map, room)
            build_data.take_snapshot()
        build_data.rooms = rooms

    @staticmethod
    def _rectangle(m: Map, room: Rect) -> None:
        for y in range(room.y1 + 1, room.y2 + 1):
            for x in range(room.x1 + 1, room.x2 + 1):
                m.tiles[x][y] = TileType.FLOOR

    @staticmethod
    def _circle(m: Map, room: Rect) -> None:
        radius = min(room.x2 - room.x1, room.y2 - room.y1) / 2.0
        room.radius = radius
        center = room.center()
        for y in range(room.y1, room.y2 + 1):
            for x in range(room.x1, room.x2 + 1):
                if distance_pythagoras(center, (x, y)) <= radius:
                    m.tiles[x][y] = TileType.FLOOR


class RoomSort(Enum):
    LEFTMOST = "leftmost"
    RIGHTMOST = "rightmost"
    TOPMOST = "topmost"
    BOTTOMMOST = "bottommost"
    CENTRAL = "central"


class RoomSorter(MetaMapBuilder):
    """Reorders the room list; the order is stable for equal keys."""

    def __init__(self, sort_by: RoomSort) -> None:
        self.sort_by = sort_by

    @classmethod
    def leftmost(cls) -> "RoomSorter":
        return cls(RoomSort.LEFTMOST)

    @classmethod
    def rightmost(cls) -> "RoomSorter":
        return cls(RoomSort.RIGHTMOST)

    @classmethod
    def topmost(cls) -> "RoomSorter":
        return cls(RoomSort.TOPMOST)

    @classmethod
    def bottommost(cls) -> "RoomSorter":
        return cls(RoomSort.BOTTOMMOST)

    @classmethod
    def central(cls) -> "RoomSorter":
        return cls(RoomSort.CENTRAL)

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if build_data.rooms is None:
            raise BuilderError("Room sorting requires list of rooms to be present")
        log.debug("sorting rooms: %s", build_data.rooms)
        if self.sort_by is RoomSort.LEFTMOST:
            build_data.rooms.sort(key=lambda r: r.x1)
        elif self.sort_by is RoomSort.RIGHTMOST:
            build_data.rooms.sort(key=lambda r: r.x2)
        elif self.sort_by is RoomSort.TOPMOST:
            build_data.rooms.sort(key=lambda r: r.y1)
        elif self.sort_by is RoomSort.BOTTOMMOST:
            build_data.rooms.sort(key=lambda r: r.y2)
        else:
            map_center = (build_data.map.width // 2, build_data.map.height // 2)
            build_data.rooms.sort(
                key=lambda r: distance_pythagoras_squared(r.center(), map_center)
            )