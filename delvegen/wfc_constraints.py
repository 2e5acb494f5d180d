"""Cutting a map into chunks and working out which chunks may sit side by side."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from delvegen.map import Map, TileType

log = logging.getLogger(__name__)

NORTH, SOUTH, WEST, EAST = range(4)
_OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, WEST: EAST, EAST: WEST}

Pattern = tuple[TileType, ...]


@dataclass
class MapChunk:
    """A square pattern of tiles with its edge exits and compatible neighbours.

    ``exits`` and ``compatible_with`` are indexed north, south, west, east.
    """

    pattern: Pattern
    exits: list[list[bool]] = field(default_factory=lambda: [[], [], [], []])
    has_exits: bool = True
    compatible_with: list[list[int]] = field(default_factory=lambda: [[], [], [], []])


def tile_idx_in_chunk(chunk_size: int, x: int, y: int) -> int:
    """Row-major index of a tile within a chunk."""
    return y * chunk_size + x


def build_patterns(
    map: Map, chunk_size: int, include_flipping: bool, dedupe: bool
) -> list[Pattern]:
    """Every whole chunk of the map, in row-major tile order.

    With ``include_flipping`` each chunk is followed by its horizontal mirror
    and by its mirror on both axes.  With ``dedupe`` repeats are dropped,
    keeping first occurrences.
    """
    chunks_x = map.width // chunk_size
    chunks_y = map.height // chunk_size
    patterns: list[Pattern] = []

    for cy in range(chunks_y):
        for cx in range(chunks_x):
            start_x, end_x = cx * chunk_size, (cx + 1) * chunk_size
            start_y, end_y = cy * chunk_size, (cy + 1) * chunk_size
            xs = range(start_x, end_x)
            ys = range(start_y, end_y)

            patterns.append(tuple(map.tiles[x][y] for y in ys for x in xs))
            if include_flipping:
                patterns.append(tuple(map.tiles[end_x - (x + 1)][y] for y in ys for x in xs))
                patterns.append(
                    tuple(
                        map.tiles[end_x - (x + 1)][end_y - (y + 1)] for y in ys for x in xs
                    )
                )

    if dedupe:
        log.debug("Before deduping; %s patterns", len(patterns))
        patterns = list(dict.fromkeys(patterns))
        log.debug("After deduping; %s patterns", len(patterns))
    return patterns


def render_pattern_to_map(
    map: Map, chunk: MapChunk, chunk_size: int, start_x: int, start_y: int
) -> None:
    """Draw a chunk at the given corner, marking its exits with down stairs."""
    tiles = iter(chunk.pattern)
    for tile_y in range(chunk_size):
        for tile_x in range(chunk_size):
            x, y = tile_x + start_x, tile_y + start_y
            map.tiles[x][y] = next(tiles)
            map.visible_tiles[x][y] = True

    last = chunk_size - 1
    edges = (
        lambda i: (start_x + i, start_y),
        lambda i: (start_x + i, start_y + last),
        lambda i: (start_x, start_y + i),
        lambda i: (start_x + last, start_y + i),
    )
    for direction, place in enumerate(edges):
        for i, is_exit in enumerate(chunk.exits[direction]):
            if is_exit:
                x, y = place(i)
                map.tiles[x][y] = TileType.DOWN_STAIRS


def _chunk_from_pattern(pattern: Sequence[TileType], chunk_size: int) -> MapChunk:
    last = chunk_size - 1

    def edge(coords) -> list[bool]:
        return [
            pattern[tile_idx_in_chunk(chunk_size, x, y)] == TileType.FLOOR
            for x, y in coords
        ]

    exits = [
        edge((i, 0) for i in range(chunk_size)),
        edge((i, last) for i in range(chunk_size)),
        edge((0, i) for i in range(chunk_size)),
        edge((last, i) for i in range(chunk_size)),
    ]
    return MapChunk(
        pattern=tuple(pattern),
        exits=exits,
        has_exits=any(any(side) for side in exits),
    )


def patterns_to_constraints(
    patterns: Sequence[Sequence[TileType]], chunk_size: int
) -> list[MapChunk]:
    """Build chunks from patterns and record, per side, which chunks may adjoin."""
    constraints = [_chunk_from_pattern(p, chunk_size) for p in patterns]

    for chunk in constraints:
        for j, potential in enumerate(constraints):
            if not chunk.has_exits or not potential.has_exits:
                for compatible in chunk.compatible_with:
                    compatible.append(j)
                continue
            for direction, exit_list in enumerate(chunk.exits):
                their_side = potential.exits[_OPPOSITE[direction]]
                if not any(exit_list):
                    # A closed side only meets another fully open one.
                    if all(their_side):
                        chunk.compatible_with[direction].append(j)
                elif any(ours and theirs for ours, theirs in zip(exit_list, their_side)):
                    chunk.compatible_with[direction].append(j)
    return constraints