"""Placing doors where a corridor passes between two walls."""

from __future__ import annotations

from delvegen.builder import BuilderMap, MetaMapBuilder
from delvegen.map import TileType
from delvegen.rng import RandomNumberGenerator

_DOOR = "Door"


def _door_possible(build_data: BuilderMap, x: int, y: int) -> bool:
    m = build_data.map
    t = m.tiles
    if t[x][y] != TileType.FLOOR:
        return False
    # The lower bound of the last check uses the map height, as the layout rules always have.
    east_west = (
        (x > 1 and t[x - 1][y] == TileType.FLOOR)
        and (x < m.width - 2 and t[x + 1][y] == TileType.FLOOR)
        and (y > 1 and t[x][y - 1] == TileType.WALL)
        and (x < m.height - 2 and t[x][y + 1] == TileType.WALL)
    )
    if east_west:
        return True
    north_south = (
        (x > 1 and t[x - 1][y] == TileType.WALL)
        and (x < m.width - 2 and t[x + 1][y] == TileType.WALL)
        and (y > 1 and t[x][y - 1] == TileType.FLOOR)
        and (x < m.height - 2 and t[x][y + 1] == TileType.FLOOR)
    )
    return bool(north_south)


class DoorPlacement(MetaMapBuilder):
    """Adds doors at corridor mouths, or at random narrow gaps if there are no corridors."""

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        if build_data.corridors is not None:
            for hall in list(build_data.corridors):
                if len(hall) > 2:
                    x, y = hall[0]
                    if _door_possible(build_data, x, y):
                        build_data.spawn_list.append(((x, y), _DOOR))
            return

        tiles = [column[:] for column in build_data.map.tiles]
        for x, column in enumerate(tiles):
            for y, tile in enumerate(column):
                if (
                    tile == TileType.FLOOR
                    and _door_possible(build_data, x, y)
                    and rng.roll_dice(1, 3) == 1
                ):
                    build_data.spawn_list.append(((x, y), _DOOR))