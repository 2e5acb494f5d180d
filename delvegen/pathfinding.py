"""Distance fields over the walkable tiles of a map."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator

from delvegen.map import Map

UNREACHABLE = math.inf

_DIAGONAL_COST = 1.45
_STEPS = (
    (-1, 0, 1.0),
    (1, 0, 1.0),
    (0, -1, 1.0),
    (0, 1, 1.0),
    (-1, -1, _DIAGONAL_COST),
    (1, -1, _DIAGONAL_COST),
    (-1, 1, _DIAGONAL_COST),
    (1, 1, _DIAGONAL_COST),
)


def _exits(map: Map, x: int, y: int) -> Iterator[tuple[int, int, float]]:
    for dx, dy, cost in _STEPS:
        nx, ny = x + dx, y + dy
        if map.is_tile_in_bounds(nx, ny) and not map.blocked[nx][ny]:
            yield nx, ny, cost


def dijkstra_map(map: Map, starts: Iterable[int], max_depth: float) -> list[float]:
    """Travel cost from the nearest start to every cell, by flat index.

    Cells not reached within ``max_depth`` hold ``UNREACHABLE``.
    """
    distances = [UNREACHABLE] * (map.width * map.height)
    queue: list[tuple[float, int]] = []
    for idx in starts:
        distances[idx] = 0.0
        heapq.heappush(queue, (0.0, idx))
    while queue:
        depth, idx = heapq.heappop(queue)
        if depth > distances[idx]:
            continue
        x, y = idx % map.width, idx // map.width
        for nx, ny, cost in _exits(map, x, y):
            new_depth = depth + cost
            if new_depth >= max_depth:
                continue
            n_idx = map.xy_idx(nx, ny)
            if new_depth < distances[n_idx]:
                distances[n_idx] = new_depth
                heapq.heappush(queue, (new_depth, n_idx))
    return distances