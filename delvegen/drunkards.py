"""Maps carved by randomly staggering diggers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from delvegen.builder import BuilderMap, InitialMapBuilder, MetaMapBuilder
from delvegen.common import Symmetry, paint
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator


def _stagger(
    rng: RandomNumberGenerator, x: int, y: int, width: int, height: int
) -> tuple[int, int]:
    """Take one random step in a cardinal direction, staying off the outer rim."""
    direction = rng.roll_dice(1, 4)
    if direction == 1:
        if x > 2:
            x -= 1
    elif direction == 2:
        if x < width - 2:
            x += 1
    elif direction == 3:
        if y > 2:
            y -= 1
    elif y < height - 2:
        y += 1
    return x, y


def _clear_markers(m: Map) -> None:
    for column in m.tiles:
        for y, tile in enumerate(column):
            if tile == TileType.DOWN_STAIRS:
                column[y] = TileType.FLOOR


class DrunkSpawnMode(Enum):
    STARTING_POINT = "starting_point"
    RANDOM = "random"


@dataclass(frozen=True)
class DrunkardSettings:
    spawn_mode: DrunkSpawnMode
    dr_lifetime: int
    floor_percentage: float
    brush_size: int
    symmetry: Symmetry


class DrunkardsWalkBuilder(InitialMapBuilder, MetaMapBuilder):
    """Sends diggers wandering until enough of the map is floor."""

    def __init__(self, settings: DrunkardSettings) -> None:
        self.settings = settings

    @classmethod
    def open_area(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.STARTING_POINT, 400, 0.5, 1, Symmetry.NONE))

    @classmethod
    def open_halls(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.RANDOM, 400, 0.5, 1, Symmetry.NONE))

    @classmethod
    def fat_passages(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.RANDOM, 100, 0.4, 2, Symmetry.NONE))

    @classmethod
    def winding_passages(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.RANDOM, 100, 0.4, 1, Symmetry.NONE))

    @classmethod
    def symmetrical_passages(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.RANDOM, 50, 0.4, 1, Symmetry.HORIZONTAL))

    @classmethod
    def crazy_beer_goggles(cls) -> "DrunkardsWalkBuilder":
        return cls(DrunkardSettings(DrunkSpawnMode.RANDOM, 50, 0.4, 2, Symmetry.BOTH))

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        s = self.settings
        m = build_data.map
        start = (m.width // 2, m.height // 2)
        m.tiles[start[0]][start[1]] = TileType.FLOOR

        desired = int(s.floor_percentage * m.width * m.height)
        digger_count = 0
        while m.get_total_floor_tiles() < desired:
            if s.spawn_mode is DrunkSpawnMode.STARTING_POINT or digger_count == 0:
                x, y = start
            else:
                x = rng.roll_dice(1, m.width - 3) + 1
                y = rng.roll_dice(1, m.height - 3) + 1

            did_something = False
            for _ in range(s.dr_lifetime):
                if m.tiles[x][y] == TileType.WALL:
                    did_something = True
                paint(m, s.symmetry, s.brush_size, x, y)
                m.tiles[x][y] = TileType.DOWN_STAIRS
                x, y = _stagger(rng, x, y, m.width, m.height)
            if did_something:
                build_data.take_snapshot()

            digger_count += 1
            _clear_markers(m)