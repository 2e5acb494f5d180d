"""Tunnels, corridors and brush painting shared by the builders."""

from __future__ import annotations

import logging
from enum import Enum

from delvegen.map import Map, TileType

log = logging.getLogger(__name__)

Corridor = list[tuple[int, int]]


class Symmetry(Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    BOTH = "both"


def _dig_if_in_bounds(map: Map, x: int, y: int, corridor: Corridor) -> None:
    if map.is_tile_in_bounds(x, y) and map.tiles[x][y] != TileType.FLOOR:
        map.tiles[x][y] = TileType.FLOOR
        corridor.append((x, y))


def apply_horizontal_tunnel(map: Map, x1: int, x2: int, y: int) -> Corridor:
    """Dig floor along row ``y``; returns the cells that changed."""
    corridor: Corridor = []
    for x in range(min(x1, x2), max(x1, x2) + 1):
        _dig_if_in_bounds(map, x, y, corridor)
    return corridor


def apply_vertical_tunnel(map: Map, y1: int, y2: int, x: int) -> Corridor:
    """Dig floor along column ``x``; returns the cells that changed."""
    corridor: Corridor = []
    for y in range(min(y1, y2), max(y1, y2) + 1):
        _dig_if_in_bounds(map, x, y, corridor)
    return corridor


def draw_corridor(map: Map, x1: int, y1: int, x2: int, y2: int) -> Corridor:
    """Walk from the first point to the second, x first; returns the dug cells."""
    log.debug("drawing corridor with coords %s,%s,%s.%s", x1, y1, x2, y2)
    corridor: Corridor = []
    x, y = x1, y1
    while x != x2 or y != y2:
        if x < x2:
            x += 1
        elif x > x2:
            x -= 1
        elif y < y2:
            y += 1
        else:
            y -= 1
        if x < 0 or y < 0:
            raise IndexError(f"corridor leaves the map at ({x}, {y})")
        if map.tiles[x][y] != TileType.FLOOR:
            map.tiles[x][y] = TileType.FLOOR
            corridor.append((x, y))
    return corridor


def paint(map: Map, mode: Symmetry, brush_size: int, x: int, y: int) -> None:
    """Paint floor at a point, mirrored about the map centre as ``mode`` asks."""
    if mode is Symmetry.NONE:
        apply_paint(map, brush_size, x, y)
        return
    center_x = map.width // 2
    center_y = map.height // 2
    if mode is Symmetry.HORIZONTAL:
        if x == center_x:
            apply_paint(map, brush_size, x, y)
        else:
            dist_x = abs(center_x - x)
            apply_paint(map, brush_size, center_x + dist_x, y)
            apply_paint(map, brush_size, center_x - dist_x, y)
    elif mode is Symmetry.VERTICAL:
        if y == center_y:
            apply_paint(map, brush_size, x, y)
        else:
            dist_y = abs(center_y - y)
            apply_paint(map, brush_size, x, center_y + dist_y)
            apply_paint(map, brush_size, x, center_y - dist_y)
    else:
        if x == center_x and y == center_y:
            apply_paint(map, brush_size, x, y)
        else:
            dist_x = abs(center_x - x)
            apply_paint(map, brush_size, center_x + dist_x, y)
            apply_paint(map, brush_size, center_x - dist_x, y)
            dist_y = abs(center_y - y)
            apply_paint(map, brush_size, x, center_y + dist_y)
            apply_paint(map, brush_size, x, center_y - dist_y)


def apply_paint(map: Map, brush_size: int, x: int, y: int) -> None:
    """Turn the cells under a square brush into floor."""
    if brush_size == 1:
        if x < 0 or y < 0:
            raise IndexError(f"paint outside the map at ({x}, {y})")
        map.tiles[x][y] = TileType.FLOOR
        return
    half = int(brush_size / 2)
    for brush_y in range(y - half, y + half):
        for brush_x in range(x - half, x + half):
            if 1 < brush_x < map.width - 1 and 1 < brush_y < map.height - 1:
                map.tiles[brush_x][brush_y] = TileType.FLOOR