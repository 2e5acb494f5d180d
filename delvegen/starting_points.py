"""Choosing where the player starts."""

from __future__ import annotations

from enum import Enum

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.geometry import distance_pythagoras_squared
from delvegen.map import Position, TileType
from delvegen.rng import RandomNumberGenerator


class XStart(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class YStart(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


_STANDABLE = (TileType.FLOOR, TileType.GRASS)


class AreaStartingPoint(MetaMapBuilder):
    """Starts the player on the open tile nearest a chosen area of the map."""

    def __init__(self, x: XStart, y: YStart) -> None:
        self.x = x
        self.y = y

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        seed_x = {XStart.LEFT: 1, XStart.CENTER: m.width // 2, XStart.RIGHT: m.width - 2}[self.x]
        seed_y = {YStart.TOP: 1, YStart.CENTER: m.height // 2, YStart.BOTTOM: m.height - 2}[self.y]
        candidates = [
            (x, y)
            for x, column in enumerate(m.tiles)
            for y, tile in enumerate(column)
            if tile in _STANDABLE
        ]
        if not candidates:
            raise BuilderError("No valid floors to start on")
        start_x, start_y = min(
            candidates, key=lambda p: distance_pythagoras_squared(p, (seed_x, seed_y))
        )
        build_data.starting_position = Position(start_x, start_y)


def random_start_position(rng: RandomNumberGenerator) -> tuple[XStart, YStart]:
    """Pick a random area of the map to start in."""
    x = {1: XStart.LEFT, 2: XStart.RIGHT}.get(rng.roll_dice(1, 3), XStart.CENTER)
    y = {1: YStart.TOP, 2: YStart.BOTTOM}.get(rng.roll_dice(1, 3), YStart.CENTER)
    return x, y