"""Randomly placed rectangular rooms that never overlap."""

from __future__ import annotations

from delvegen.builder import BuilderMap, InitialMapBuilder
from delvegen.map import Rect
from delvegen.rng import RandomNumberGenerator

MAX_ROOMS = 30
MIN_SIZE = 3
MAX_SIZE = 15


class SimpleMapBuilder(InitialMapBuilder):
    """Tries a fixed number of random rooms, keeping those that fit.

    Only the room list is produced; drawing is left to later builders.
    """

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        rooms: list[Rect] = []
        for _ in range(MAX_ROOMS):
            w = rng.range(MIN_SIZE, MAX_SIZE)
            h = rng.range(MIN_SIZE, MAX_SIZE)
            x = rng.roll_dice(1, m.width - w - 1) - 1
            y = rng.roll_dice(1, m.height - h - 1) - 1
            new_room = Rect(x, y, x + w, y + h)
            if not any(new_room.intersect(other) for other in rooms):
                rooms.append(new_room)
        build_data.rooms = rooms