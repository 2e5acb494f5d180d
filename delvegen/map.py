"""Tile map, positions and rectangles shared by every map builder."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TileType(Enum):
    """The kinds of tile a map cell can hold."""

    WALL = "wall"
    FLOOR = "floor"
    DOWN_STAIRS = "down_stairs"
    GRASS = "grass"
    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    BRIDGE = "bridge"
    ROAD = "road"
    WOOD_FLOOR = "wood_floor"
    GRAVEL = "gravel"


_IMPASSABLE = frozenset({TileType.WALL, TileType.DEEP_WATER})


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return int(value / 2)


@dataclass
class Position:
    """A location on the map."""

    x: int
    y: int


@dataclass
class Rect:
    """An axis-aligned rectangle given by its corners; circular rooms carry a radius."""

    x1: int
    y1: int
    x2: int
    y2: int
    radius: Optional[float] = None

    def center(self) -> tuple[int, int]:
        """The middle cell of the rectangle."""
        return _half(self.x1 + self.x2), _half(self.y1 + self.y2)

    def intersect(self, other: "Rect") -> bool:
        """True if the two rectangles overlap or touch."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )


class Map:
    """A grid of tiles indexed as ``tiles[x][y]``."""

    def __init__(self, depth: int, width: int, height: int) -> None:
        self.depth = depth
        self.width = width
        self.height = height
        self.tiles = [[TileType.WALL] * height for _ in range(width)]
        self.revealed_tiles = [[False] * height for _ in range(width)]
        self.visible_tiles = [[False] * height for _ in range(width)]
        self.blocked = [[False] * height for _ in range(width)]

    def xy_idx(self, x: int, y: int) -> int:
        """Flat index of a cell, row by row."""
        return y * self.width + x

    def is_tile_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_total_floor_tiles(self) -> int:
        return sum(column.count(TileType.FLOOR) for column in self.tiles)

    def populate_blocked(self) -> None:
        """Mark every impassable tile as blocked and every other tile as open."""
        self.blocked = [
            [tile in _IMPASSABLE for tile in column] for column in self.tiles
        ]

    def copy(self) -> "Map":
        """An independent deep copy of the map."""
        return copy.deepcopy(self)