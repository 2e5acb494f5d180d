"""Maps grown by diffusion-limited aggregation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum

from delvegen.builder import BuilderMap, InitialMapBuilder, MetaMapBuilder
from delvegen.common import Symmetry, paint
from delvegen.drunkards import _stagger
from delvegen.geometry import line2d
from delvegen.map import Map, TileType
from delvegen.rng import RandomNumberGenerator

_SEED_CROSS = ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1))


class DLAAlgorithm(Enum):
    """How each digger travels before it paints."""

    WALK_INWARDS = "walk_inwards"
    WALK_OUTWARDS = "walk_outwards"
    CENTRAL_ATTRACTOR = "central_attractor"


@dataclass
class DLABuilder(InitialMapBuilder, MetaMapBuilder):
    """Grows floor outward from a seed in the map centre until enough is open."""

    algorithm: DLAAlgorithm = DLAAlgorithm.WALK_OUTWARDS
    brush_size: int = 2
    symmetry: Symmetry = Symmetry.NONE
    floor_percent: float = 0.25

    @classmethod
    def walk_inward(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.WALK_INWARDS, 1, Symmetry.NONE, 0.25)

    @classmethod
    def heavy_erosion(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.WALK_INWARDS, 2, Symmetry.NONE, 0.35)

    @classmethod
    def walk_outward(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.WALK_OUTWARDS, 2, Symmetry.NONE, 0.25)

    @classmethod
    def central_attractor(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.CENTRAL_ATTRACTOR, 2, Symmetry.NONE, 0.25)

    @classmethod
    def insectoid(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.CENTRAL_ATTRACTOR, 2, Symmetry.HORIZONTAL, 0.25)

    @classmethod
    def walk_inwards_symmetry(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.WALK_INWARDS, 2, Symmetry.BOTH, 0.25)

    @classmethod
    def walk_outward_symmetry(cls) -> "DLABuilder":
        return cls(DLAAlgorithm.WALK_OUTWARDS, 2, Symmetry.VERTICAL, 0.25)

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        start = (m.width // 2, m.height // 2)
        build_data.take_snapshot()
        for dx, dy in _SEED_CROSS:
            m.tiles[start[0] + dx][start[1] + dy] = TileType.FLOOR

        desired = int(self.floor_percent * m.width * m.height)
        while m.get_total_floor_tiles() < desired:
            x, y = self._dig_site(rng, m, start)
            paint(m, self.symmetry, self.brush_size, x, y)
            build_data.take_snapshot()

    def _dig_site(
        self, rng: RandomNumberGenerator, m: Map, start: tuple[int, int]
    ) -> tuple[int, int]:
        if self.algorithm is DLAAlgorithm.WALK_INWARDS:
            return _walk_inwards(rng, m)
        if self.algorithm is DLAAlgorithm.WALK_OUTWARDS:
            return _walk_outwards(rng, m, start)
        return _central_attractor(rng, m, start)


def _random_interior_point(rng: RandomNumberGenerator, m: Map) -> tuple[int, int]:
    return rng.roll_dice(1, m.width - 3) + 1, rng.roll_dice(1, m.height - 3) + 1


def _walk_inwards(rng: RandomNumberGenerator, m: Map) -> tuple[int, int]:
    x, y = _random_interior_point(rng, m)
    prev = (x, y)
    while m.tiles[x][y] == TileType.WALL:
        prev = (x, y)
        x, y = _stagger(rng, x, y, m.width, m.height)
    return prev


def _walk_outwards(
    rng: RandomNumberGenerator, m: Map, start: tuple[int, int]
) -> tuple[int, int]:
    x, y = start
    while m.tiles[x][y] == TileType.FLOOR:
        x, y = _stagger(rng, x, y, m.width, m.height)
    return x, y


def _central_attractor(
    rng: RandomNumberGenerator, m: Map, start: tuple[int, int]
) -> tuple[int, int]:
    x, y = _random_interior_point(rng, m)
    prev = (x, y)
    path = deque(line2d((x, y), start))
    while m.tiles[x][y] == TileType.WALL and path:
        prev = (x, y)
        x, y = path.popleft()
    return prev