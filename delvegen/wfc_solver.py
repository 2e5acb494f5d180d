"""Filling a map chunk by chunk from a set of compatible patterns."""

from __future__ import annotations

import logging
from typing import Optional

from delvegen.map import Map
from delvegen.rng import RandomNumberGenerator
from delvegen.wfc_constraints import EAST, NORTH, SOUTH, WEST, MapChunk

log = logging.getLogger(__name__)


class Solver:
    """Places one chunk per iteration, preferring slots with the most placed neighbours."""

    def __init__(self, constraints: list[MapChunk], chunk_size: int, map: Map) -> None:
        self.constraints = constraints
        self.chunk_size = chunk_size
        self.chunks_x = map.width // chunk_size
        self.chunks_y = map.height // chunk_size
        self.chunks: list[Optional[int]] = [None] * (self.chunks_x * self.chunks_y)
        self.remaining: list[tuple[int, int]] = [
            (i, 0) for i in range(self.chunks_x * self.chunks_y)
        ]
        self.possible = True

    def _chunk_idx(self, x: int, y: int) -> int:
        return y * self.chunks_x + x

    def _placed_neighbours(self, chunk_x: int, chunk_y: int) -> list[tuple[int, int]]:
        """(placed chunk, side of it facing us) for each filled neighbour."""
        candidates = []
        if chunk_x > 0:
            candidates.append((self._chunk_idx(chunk_x - 1, chunk_y), EAST))
        if chunk_x < self.chunks_x - 1:
            candidates.append((self._chunk_idx(chunk_x + 1, chunk_y), WEST))
        if chunk_y > 0:
            candidates.append((self._chunk_idx(chunk_x, chunk_y - 1), SOUTH))
        if chunk_y < self.chunks_y - 1:
            candidates.append((self._chunk_idx(chunk_x, chunk_y + 1), NORTH))
        return [
            (placed, side)
            for idx, side in candidates
            if (placed := self.chunks[idx]) is not None
        ]

    def _draw(self, map: Map, chunk_index: int, constraint_idx: int) -> None:
        self.chunks[chunk_index] = constraint_idx
        chunk_x = chunk_index % self.chunks_x
        chunk_y = chunk_index // self.chunks_x
        tiles = iter(self.constraints[constraint_idx].pattern)
        for y in range(chunk_y * self.chunk_size, (chunk_y + 1) * self.chunk_size):
            for x in range(chunk_x * self.chunk_size, (chunk_x + 1) * self.chunk_size):
                map.tiles[x][y] = next(tiles)

    def iteration(self, map: Map, rng: RandomNumberGenerator) -> bool:
        """Place one chunk; True once the map is finished or found impossible."""
        if not self.remaining:
            return True

        counted = [
            (idx, len(self._placed_neighbours(idx % self.chunks_x, idx // self.chunks_x)))
            for idx, _ in self.remaining
        ]
        neighbours_exist = any(count > 0 for _, count in counted)
        counted.sort(key=lambda r: -r[1])
        self.remaining = counted

        pick = 0 if neighbours_exist else rng.roll_dice(1, len(self.remaining)) - 1
        chunk_index, _ = self.remaining.pop(pick)

        neighbours = self._placed_neighbours(
            chunk_index % self.chunks_x, chunk_index // self.chunks_x
        )
        if not neighbours:
            self._draw(map, chunk_index, rng.roll_dice(1, len(self.constraints)) - 1)
            return False

        options = [set(self.constraints[placed].compatible_with[side]) for placed, side in neighbours]
        possible_options = set.intersection(*options)
        if not possible_options:
            log.debug("Map is not possible. Stopping")
            self.possible = False
            return True

        # The chosen position among the options is used as the constraint index.
        choice = 0 if len(possible_options) == 1 else rng.roll_dice(1, len(possible_options)) - 1
        self._draw(map, chunk_index, choice)
        return False