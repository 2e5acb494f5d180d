"""Maps made of the boundaries between Voronoi cells."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from delvegen.builder import BuilderMap, InitialMapBuilder
from delvegen.geometry import (
    distance_chebyshev,
    distance_manhattan,
    distance_pythagoras_squared,
)
from delvegen.map import TileType
from delvegen.rng import RandomNumberGenerator


class DistanceAlgorithm(Enum):
    PYTHAGORAS = "pythagoras"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"


_DISTANCES = {
    DistanceAlgorithm.PYTHAGORAS: distance_pythagoras_squared,
    DistanceAlgorithm.MANHATTAN: distance_manhattan,
    DistanceAlgorithm.CHEBYSHEV: distance_chebyshev,
}


@dataclass
class VoronoiCellBuilder(InitialMapBuilder):
    """Scatters seeds, then opens every cell not lying on a cell boundary."""

    n_seeds: int = 128
    distance_algorithm: DistanceAlgorithm = DistanceAlgorithm.PYTHAGORAS

    @classmethod
    def pythagoras(cls) -> "VoronoiCellBuilder":
        return cls(128, DistanceAlgorithm.PYTHAGORAS)

    @classmethod
    def manhattan(cls) -> "VoronoiCellBuilder":
        return cls(128, DistanceAlgorithm.MANHATTAN)

    @classmethod
    def chebyshev(cls) -> "VoronoiCellBuilder":
        return cls(64, DistanceAlgorithm.CHEBYSHEV)

    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        m = build_data.map
        available = (m.width - 1) * (m.height - 1)
        if self.n_seeds > available:
            raise ValueError(
                f"cannot place {self.n_seeds} distinct seeds on a {m.width}x{m.height} map"
            )

        seeds: list[tuple[int, int]] = []
        taken: set[tuple[int, int]] = set()
        while len(seeds) < self.n_seeds:
            candidate = (rng.roll_dice(1, m.width - 1), rng.roll_dice(1, m.height - 1))
            if candidate not in taken:
                taken.add(candidate)
                seeds.append(candidate)

        distance = _DISTANCES[self.distance_algorithm]
        membership = [
            [
                min(range(len(seeds)), key=lambda s, p=(x, y): distance(p, seeds[s]))
                for y in range(m.height)
            ]
            for x in range(m.width)
        ]

        for y in range(1, m.height - 1):
            for x in range(1, m.width - 1):
                mine = membership[x][y]
                differing = sum(
                    membership[nx][ny] != mine
                    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
                )
                if differing < 2:
                    m.tiles[x][y] = TileType.FLOOR
            build_data.take_snapshot()