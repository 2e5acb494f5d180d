"""Stamping hand-drawn levels, sections and vaults onto a map."""

from __future__ import annotations

import itertools
import logging
from enum import Enum
from typing import Callable, Optional

from delvegen.builder import BuilderMap, InitialMapBuilder, MetaMapBuilder
from delvegen.map import Map, Position, TileType
from delvegen.prefab_data import (
    CHECKERBOARD,
    CHICKFILA,
    TRAP,
    WELL,
    HorizontalPlacement,
    PrefabLevel,
    PrefabRoom,
    PrefabSection,
    VerticalPlacement,
)
from delvegen.rng import RandomNumberGenerator

log = logging.getLogger(__name__)

_SPAWN_GLYPHS = {
    "b": "Bisat",
    "o": "Ogur",
    "^": "Bear Trap",
    "=": "Sandwich",
    "%": "Sandwich",
    "q": "Chicken Leg",
    "u": "Goblet Of Wine",
    "!": "Health Potion",
}

_MASTER_VAULTS = (TRAP, CHICKFILA, CHECKERBOARD, WELL)


def read_ascii_to_vec(ascii: str) -> list[str]:
    """Characters of a template without line breaks; non-breaking spaces become spaces."""
    # A character whose low byte is 0xA0 counts as a non-breaking space.
    return [" " if ord(c) & 0xFF == 0xA0 else c for c in ascii if c not in "\r\n"]


class PrefabMode(Enum):
    CONSTANT = "constant"
    SECTIONAL = "sectional"
    ROOM_VAULTS = "room_vaults"


class PrefabBuilder(InitialMapBuilder, MetaMapBuilder):
    """Loads a whole level, overlays a section, or scatters vaults on open floor."""

    def __init__(
        self,
        mode: PrefabMode = PrefabMode.ROOM_VAULTS,
        *,
        level: Optional[PrefabLevel] = None,
        section: Optional[PrefabSection] = None,
    ) -> None:
        if mode is PrefabMode.CONSTANT and level is None:
            raise ValueError("constant mode needs a level")
        if mode is PrefabMode.SECTIONAL and section is None:
            raise ValueError("sectional mode needs a section")
        self.mode = mode
        self.level = level
        self.section = section

    @classmethod
    def constant(cls, level: PrefabLevel) -> "PrefabBuilder":
        return cls(PrefabMode.CONSTANT, level=level)

    @classmethod
    def sectional(cls, section: PrefabSection) -> "PrefabBuilder":
        return cls(PrefabMode.SECTIONAL, section=section)

    @classmethod
    def vaults(cls) -> "PrefabBuilder":
        return cls(PrefabMode.ROOM_VAULTS)

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if self.mode is PrefabMode.CONSTANT:
            self._load_ascii_map(self.level, build_data)
        elif self.mode is PrefabMode.SECTIONAL:
            self.apply_sectional(self.section, rng, build_data)
        else:
            self._apply_room_vaults(rng, build_data)
        build_data.take_snapshot()

    @staticmethod
    def _char_to_map(ch: str, x: int, y: int, build_data: BuilderMap) -> None:
        spawn: Optional[str] = None
        if ch in (" ", "."):
            tile = TileType.FLOOR
        elif ch == "#":
            tile = TileType.WALL
        elif ch == "@":
            tile = TileType.FLOOR
        elif ch == ">":
            tile = TileType.DOWN_STAIRS
        elif ch in _SPAWN_GLYPHS:
            tile = TileType.FLOOR
            spawn = _SPAWN_GLYPHS[ch]
        else:
            log.debug("unknown glyph loading map %s", ch)
            return
        if x < 0 or y < 0:
            raise IndexError(f"prefab tile outside the map at ({x}, {y})")
        build_data.map.tiles[x][y] = tile
        if ch == "@":
            build_data.starting_position = Position(x, y)
        if spawn is not None:
            build_data.spawn_list.append(((x, y), spawn))

    def _stamp(
        self,
        chars: list[str],
        width: int,
        height: int,
        origin: tuple[int, int],
        build_data: BuilderMap,
        clip: bool,
    ) -> None:
        m = build_data.map
        ox, oy = origin
        for ty in range(height):
            for tx in range(width):
                i = ty * width + tx
                if i >= len(chars):
                    continue
                if clip and not (tx < m.width and ty < m.height):
                    continue
                self._char_to_map(chars[i], tx + ox, ty + oy, build_data)

    def _load_ascii_map(self, level: PrefabLevel, build_data: BuilderMap) -> None:
        log.debug("loading map of %sx%s", level.width, level.height)
        chars = read_ascii_to_vec(level.template)
        self._stamp(chars, level.width, level.height, (0, 0), build_data, clip=True)

    def apply_sectional(
        self, section: PrefabSection, rng: RandomNumberGenerator, build_data: BuilderMap
    ) -> None:
        """Overlay a section at its placement, dropping spawns it covers."""
        m = build_data.map
        chars = read_ascii_to_vec(section.template)
        horizontal, vertical = section.placement

        if horizontal is HorizontalPlacement.LEFT:
            chunk_x = 0
        elif horizontal is HorizontalPlacement.CENTER:
            chunk_x = m.width // 2 - section.width // 2
        else:
            chunk_x = (m.width - 1) - section.width

        if vertical is VerticalPlacement.TOP:
            chunk_y = 0
        elif vertical is VerticalPlacement.CENTER:
            chunk_y = m.height // 2 - section.height // 2
        else:
            chunk_y = (m.height - 1) - section.height

        log.debug("selected position of prefab: %s, %s", chunk_x, chunk_y)

        self._keep_spawns(
            lambda x, y: (
                x < chunk_x
                or x > chunk_x + section.width
                or y < chunk_y
                or y > chunk_y + section.height
            ),
            build_data,
        )
        self._stamp(
            chars, section.width, section.height, (chunk_x, chunk_y), build_data, clip=True
        )
        build_data.take_snapshot()

    @staticmethod
    def _keep_spawns(keep: Callable[[int, int], bool], build_data: BuilderMap) -> None:
        build_data.spawn_list[:] = [
            entry for entry in build_data.spawn_list if keep(entry[0][0], entry[0][1])
        ]
        build_data.take_snapshot()

    def _apply_room_vaults(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        self._keep_spawns(lambda _x, _y: True, build_data)
        m = build_data.map

        if rng.roll_dice(1, 6) + m.depth < 4:
            return

        possible = [v for v in _MASTER_VAULTS if v.first_depth <= m.depth <= v.last_depth]
        if not possible:
            return

        n_vaults = min(rng.roll_dice(1, 3), len(possible))
        for _ in range(n_vaults):
            vault_idx = 0 if len(possible) == 1 else rng.roll_dice(1, len(possible) - 1)
            vault = possible[vault_idx]

            positions = _vault_positions(m, vault)
            if not positions:
                continue
            if len(positions) == 1:
                chunk_x, chunk_y = positions[0]
            else:
                chunk_x, chunk_y = positions[rng.roll_dice(1, len(positions)) - 1]
            log.debug("picked a vault at %s, %s", chunk_x, chunk_y)

            build_data.spawn_list[:] = [
                entry
                for entry in build_data.spawn_list
                if entry[0][0] < chunk_x
                or entry[0][0] > chunk_x + vault.width
                or entry[0][1] < chunk_y
                or entry[0][1] > chunk_y + vault.height
            ]

            chars = read_ascii_to_vec(vault.template)
            self._stamp(
                chars, vault.width, vault.height, (chunk_x, chunk_y), build_data, clip=False
            )
            build_data.take_snapshot()
            del possible[vault_idx]


def _vault_positions(m: Map, vault: PrefabRoom) -> list[tuple[int, int]]:
    """Top-left corners, row by row, where the vault would lie wholly on floor."""
    positions = []
    for y, x in itertools.product(range(m.height), range(m.width)):
        if x + vault.width >= m.width - 2 or y + vault.height >= m.height - 2:
            continue
        if all(
            m.tiles[x + tx][y + ty] == TileType.FLOOR
            for ty in range(vault.height)
            for tx in range(vault.width)
        ):
            positions.append((x, y))
    return positions