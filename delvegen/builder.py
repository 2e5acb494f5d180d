"""Builder state and the chain that runs map builders in order."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from delvegen.map import Map, Position, Rect
from delvegen.rng import RandomNumberGenerator

log = logging.getLogger(__name__)

SpawnEntry = tuple[tuple[int, int], str]


class BuilderError(RuntimeError):
    """A builder was run without the data it depends on."""


@dataclass
class BuilderMap:
    """Everything the builders of one chain share and change."""

    map: Map
    width: int
    height: int
    spawn_list: list[SpawnEntry] = field(default_factory=list)
    starting_position: Optional[Position] = None
    rooms: Optional[list[Rect]] = None
    corridors: Optional[list[list[tuple[int, int]]]] = None
    history: list[Map] = field(default_factory=list)
    record_history: bool = False

    def take_snapshot(self) -> None:
        """Record a fully revealed copy of the map, if history is kept."""
        if not self.record_history:
            return
        snapshot = self.map.copy()
        snapshot.revealed_tiles = [[True] * snapshot.height for _ in range(snapshot.width)]
        self.history.append(snapshot)


class InitialMapBuilder(ABC):
    """A builder that lays down the first version of a map."""

    @abstractmethod
    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        ...


class MetaMapBuilder(ABC):
    """A builder that refines a map already laid down."""

    @abstractmethod
    def build_map(self, rng: RandomNumberGenerator, build_data: BuilderMap) -> None:
        ...


class BuilderChain:
    """One initial builder followed by any number of meta builders."""

    def __init__(self, depth: int, width: int, height: int, record_history: bool = False) -> None:
        self._starter: Optional[InitialMapBuilder] = None
        self._builders: list[MetaMapBuilder] = []
        self.build_data = BuilderMap(
            map=Map(depth, width, height),
            width=width,
            height=height,
            record_history=record_history,
        )

    def start_with(self, starter: InitialMapBuilder) -> None:
        if self._starter is not None:
            raise BuilderError("Only one starting builder is allowed")
        self._starter = starter

    def with_builder(self, builder: MetaMapBuilder) -> None:
        self._builders.append(builder)

    def build_map(self, rng: RandomNumberGenerator) -> None:
        if self._starter is None:
            raise BuilderError("Missing starting map builder")
        self._starter.build_map(rng, self.build_data)
        log.debug("Starting with %s", type(self._starter).__name__)
        for builder in self._builders:
            builder.build_map(rng, self.build_data)
            log.debug("Adding metabuilder %s", type(builder).__name__)