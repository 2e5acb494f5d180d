"""Mazes carved by a randomised depth-first walk."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from delvegen.builder import BuilderMap, InitialMapBuilder
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator

log = logging.getLogger(__name__)

_TOP, _RIGHT, _BOTTOM, _LEFT = range(4)
_SNAPSHOT_EVERY = 50


@dataclass
class _Cell:
    row: int
    col: int
    walls: list[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False

    def remove_walls(self, other: "_Cell") -> None:
        dx = self.col - other.col
        dy = self.row - other.row
        if dx == 1:
            self.walls[_LEFT] = other.walls[_RIGHT] = False
        elif dx == -1:
            self.walls[_RIGHT] = other.walls[_LEFT] = False
        elif dy == 1:
            self.walls[_TOP] = other.walls[_BOTTOM] = False
        elif dy == -1:
            self.walls[_BOTTOM] = other.walls[_TOP] = False


class _Grid:
    def __init__(self, width: int, height: int, rng: RandomNumberGenerator) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"map too small for a maze grid of {width}x{height}")
        self.width = width
        self.height = height
        self.rng = rng
        self.cells = [_Cell(row, col) for row in range(height) for col in range(width)]
        self.backtrace: deque[int] = deque()
        self.current = 0

    def _index(self, row: int, col: int) -> Optional[int]:
        if 0 <= row < self.height and 0 <= col < self.width:
            return col + row * self.width
        return None

    def _available_neighbours(self) -> list[int]:
        cell = self.cells[self.current]
        candidates = (
            self._index(cell.row - 1, cell.col),
            self._index(cell.row, cell.col + 1),
            self._index(cell.row + 1, cell.col),
            self._index(cell.row, cell.col - 1),
        )
        return [i for i in candidates if i is not None and not self.cells[i].visited]

    def _find_next_cell(self) -> Optional[int]:
        neighbours = self._available_neighbours()
        if not neighbours:
            return None
        if len(neighbours) == 1:
            return neighbours[0]
        return neighbours[self.rng.roll_dice(1, len(neighbours)) - 1]

    def generate(self, build_data: BuilderMap) -> None:
        step = 0
        while True:
            current = self.cells[self.current]
            current.visited = True
            next_idx = self._find_next_cell()
            log.debug("retrieved next cell: %s", next_idx)

            done = False
            if next_idx is not None:
                nxt = self.cells[next_idx]
                nxt.visited = True
                self.backtrace.append(self.current)
                current.remove_walls(nxt)
                self.current = next_idx
            elif self.backtrace:
                self.current = self.backtrace.popleft()
            else:
                done = True

            if build_data.record_history and step % _SNAPSHOT_EVERY == 0:
                self.copy_to_map(build_data.map)
                build_data.take_snapshot()
            if done:
                break
            step += 1
        self.copy_to_map(build_data.map)

    def copy_to_map(self, m: Map) -> None:
        for column in m.tiles:
            column[:] = [TileType.WALL] * len(column)
        for cell in self.cells:
            x = (cell.col + 1) * 2
            y = (cell.row + 1) * 2
            m.tiles[x][y] = TileType.FLOOR
            if not cell.walls[_TOP]:
                m.tiles[x][y - 1] = TileType.FLOOR
            if not cell.walls[_RIGHT]:
                m.tiles[x + 1][y] = TileType.FLOOR
            if not cell.walls[_BOTTOM]:
                m.tiles[x][y + 1] = TileType.FLOOR
            if not cell.walls[_LEFT]:
                m.tiles[x - 1][y] = TileType.FLOOR


class MazeBuilder(InitialMapBuilder):
    """Fills the map with a maze whose cells sit on even coordinates."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        grid = _Grid(m.width // 2 - 2, m.height // 2 - 2, rng)
        grid.generate(build_data)