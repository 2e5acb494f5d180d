"""Builders that join the rooms of a map with corridors."""

from __future__ import annotations

from collections.abc import Iterator

from delvegen.builder import BuilderError, BuilderMap, MetaMapBuilder
from delvegen.common import (
    Corridor,
    apply_horizontal_tunnel,
    apply_vertical_tunnel,
    draw_corridor,
)
from delvegen.geometry import distance_pythagoras, line2d
from delvegen.map import Rect, TileType
from delvegen.rng import RandomNumberGenerator


def _require_rooms(build_data: BuilderMap) -> list[Rect]:
    if build_data.rooms is None:
        raise BuilderError("Corridors require list of rooms to be present")
    return list(build_data.rooms)


def _random_point_in(room: Rect, rng: RandomNumberGenerator) -> tuple[int, int]:
    """A random point near a circular room's centre or inside a rectangular one."""
    if room.radius is not None:
        spread = max(int(room.radius) - 1, 1)
        cx, cy = room.center()
        return cx + rng.roll_dice(1, spread), cy + rng.roll_dice(1, spread)
    return (
        room.x1 + rng.roll_dice(1, abs(room.x1 - room.x2)) - 1,
        room.y1 + rng.roll_dice(1, abs(room.y1 - room.y2)) - 1,
    )


def _nearest_links(rooms: list[Rect]) -> Iterator[tuple[tuple[int, int], tuple[int, int]]]:
    """Pair each room's centre with the nearest centre not yet linked from."""
    connected: set[int] = set()
    for i, room in enumerate(rooms):
        center = room.center()
        candidates = [
            (distance_pythagoras(center, other.center()), j)
            for j, other in enumerate(rooms)
            if j != i and j not in connected
        ]
        if not candidates:
            continue
        _, nearest = min(candidates, key=lambda c: c[0])
        connected.add(i)
        yield center, rooms[nearest].center()


class BSPCorridors(MetaMapBuilder):
    """Joins each room to the next in list order between random points."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data)
        corridors: list[Corridor] = []
        for room, next_room in zip(rooms, rooms[1:]):
            start_x, start_y = _random_point_in(room, rng)
            end_x, end_y = _random_point_in(next_room, rng)
            corridors.append(draw_corridor(build_data.map, start_x, start_y, end_x, end_y))
            build_data.take_snapshot()
        build_data.corridors = corridors


class DoglegCorridors(MetaMapBuilder):
    """Joins consecutive room centres with an L-shaped pair of tunnels."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data)
        m = build_data.map
        corridors: list[Corridor] = []
        for previous, room in zip(rooms, rooms[1:]):
            nx, ny = room.center()
            px, py = previous.center()
            if rng.range(0, 2) == 1:
                corridor = apply_horizontal_tunnel(m, px, nx, py)
                corridor += apply_vertical_tunnel(m, py, ny, nx)
            else:
                corridor = apply_vertical_tunnel(m, py, ny, px)
                corridor += apply_horizontal_tunnel(m, px, nx, ny)
            corridors.append(corridor)
            build_data.take_snapshot()
        build_data.corridors = corridors


class StraightLineCorridors(MetaMapBuilder):
    """Joins each room to its nearest unlinked neighbour with a straight line."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data)
        m = build_data.map
        corridors: list[Corridor] = []
        for start, end in _nearest_links(rooms):
            corridor: Corridor = []
            for x, y in line2d(start, end):
                if m.tiles[x][y] != TileType.FLOOR:
                    m.tiles[x][y] = TileType.FLOOR
                    corridor.append((x, y))
            corridors.append(corridor)
            build_data.take_snapshot()
        build_data.corridors = corridors


class NearestCorridors(MetaMapBuilder):
    """Joins each room to its nearest unlinked neighbour with a stepped corridor."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        rooms = _require_rooms(build_data)
        corridors: list[Corridor] = []
        for (sx, sy), (ex, ey) in _nearest_links(rooms):
            corridors.append(draw_corridor(build_data.map, sx, sy, ex, ey))
            build_data.take_snapshot()
        build_data.corridors = corridors