# delvegen

Procedural map generation for roguelike dungeons. A map is built by a
`BuilderChain`. One initial builder lays down the shape of the level. Any
number of meta builders then refine it. They can draw rooms, cut corridors,
choose a starting position, place the exit, wall off unreachable areas and
add spawn points.

## Installation

```
pip install delvegen
```

The package has no runtime dependencies.

## Building a map

```python
from delvegen.builder import BuilderChain
from delvegen.rng import RandomNumberGenerator
from delvegen.bsp import BspDungeonBuilder
from delvegen.rooms import RoomSorter, RoomDrawer
from delvegen.corridors import DoglegCorridors
from delvegen.room_placement import RoomBasedStartingPosition, RoomBasedStairs

rng = RandomNumberGenerator(seed=42)
chain = BuilderChain(depth=1, width=80, height=50)
chain.start_with(BspDungeonBuilder())
chain.with_builder(RoomSorter.leftmost())
chain.with_builder(RoomDrawer())
chain.with_builder(DoglegCorridors())
chain.with_builder(RoomBasedStartingPosition())
chain.with_builder(RoomBasedStairs())
chain.build_map(rng)

data = chain.build_data
print(data.starting_position)
print(data.map.get_total_floor_tiles())
```

`chain.build_data` is a `BuilderMap`. It holds the following:

- `map`: the finished `delvegen.map.Map`. Tiles are indexed as `tiles[x][y]` and hold `TileType` values.
- `rooms`: a list of `Rect`, or `None`.
- `corridors`: a list of dug cells per corridor, or `None`.
- `starting_position`: a `Position`, or `None`.
- `spawn_list`: a list of `((x, y), name)` entries.
- `history`: intermediate maps.

The history is only recorded when the chain is created with `BuilderChain(..., record_history=True)`. Each snapshot is a copy of the map with every tile marked revealed.

`RandomNumberGenerator(seed)` provides `roll_dice(n, die_type)` and `range(min_value, max_value)`. The upper bound of `range` is exclusive. The same seed gives the same maps.

## Initial builders

Pass one of these to `BuilderChain.start_with`:

- `delvegen.bsp.BspDungeonBuilder` produces only a room list. Draw the rooms with `RoomDrawer`.
- `delvegen.bsp.BspInteriorBuilder` fills the map with adjoining rooms and joins them in order.
- `delvegen.simple_map.SimpleMapBuilder` places random non-overlapping rooms. It produces only a room list.
- `delvegen.cellular.CellularAutomataBuilder` grows cave-like maps. With `refine_only=True` it instead applies one smoothing pass to an existing map.
- `delvegen.drunkards.DrunkardsWalkBuilder` has these presets:
  - `open_area()`
  - `open_halls()`
  - `winding_passages()`
  - `fat_passages()`
  - `symmetrical_passages()`
  - `crazy_beer_goggles()`
- `delvegen.dla.DLABuilder` uses diffusion-limited aggregation. Its presets are:
  - `walk_inward()`
  - `walk_outward()`
  - `central_attractor()`
  - `insectoid()`
  - `heavy_erosion()`
  - `walk_inwards_symmetry()`
  - `walk_outward_symmetry()`
- `delvegen.maze.MazeBuilder` carves a maze with its cells on even coordinates.
- `delvegen.voronoi.VoronoiCellBuilder` has the presets `pythagoras()`, `manhattan()` and `chebyshev()`.
- `delvegen.prefab.PrefabBuilder.constant(level)` loads a whole ASCII level, such as `delvegen.prefab_data.WFC_POPULATED`.

`DrunkardsWalkBuilder`, `DLABuilder`, `CellularAutomataBuilder` and `PrefabBuilder` can also be added as meta builders.

## Meta builders

Add these with `BuilderChain.with_builder`.

Rooms:

- `delvegen.rooms.RoomSorter` reorders the room list. Its orderings are:
  - `leftmost()`
  - `rightmost()`
  - `topmost()`
  - `bottommost()`
  - `central()`
- `delvegen.rooms.RoomDrawer` carves each room. One room in four becomes a circle and gets a `radius`; the others stay rectangles.
- `delvegen.room_shaping.RoomExploder` sends short diggers out from each room centre.
- `delvegen.room_shaping.RoomCornerRounding` walls in each room corner that has walls on exactly two sides.

Corridors. Each of these sets `build_data.corridors`:

- `delvegen.corridors.DoglegCorridors` joins consecutive room centres with an L-shaped pair of tunnels.
- `delvegen.corridors.BSPCorridors` joins each room to the next between random points.
- `delvegen.corridors.NearestCorridors` joins each room to its nearest unlinked neighbour with a stepped corridor.
- `delvegen.corridors.StraightLineCorridors` joins each room to its nearest unlinked neighbour with a straight line.

Placement:

- `delvegen.starting_points.AreaStartingPoint(XStart, YStart)` starts the player on the floor or grass tile nearest a chosen area. `random_start_position(rng)` picks that area at random.
- `delvegen.room_placement.RoomBasedStartingPosition` starts the player in the centre of the first room.
- `delvegen.room_placement.RoomBasedStairs` puts the down stairs in the centre of the last room.
- `delvegen.exits.DistantExit` replaces all stairs with a single down stair on the reachable floor tile farthest from the start.
- `delvegen.doors.DoorPlacement` adds `"Door"` spawns:
  - When corridors exist, at the mouth of each corridor longer than two cells.
  - Otherwise, at one in three of the suitable narrow gaps.

Clean-up:

- `delvegen.exits.CullUnreachable` turns floor that cannot be reached from the start into wall.

Prefabs:

- `PrefabBuilder.sectional(section)` overlays a section such as `UNDERGROUND_FORT` or `NESTED_ROOMS` and drops any spawns the section covers.
- `PrefabBuilder.vaults()` stamps small vault rooms onto open floor.

Wave function collapse:

- `delvegen.wfc.WaveformCollapseBuilder` cuts the current map into 8×8 chunks and lays out a new map from them.
- The new map is ringed with deep water one tile in from each edge.
- The lower-level pieces are also available: `build_patterns` and `patterns_to_constraints` in `delvegen.wfc_constraints`, and `Solver` in `delvegen.wfc_solver`.

## Helpers

- `delvegen.common` offers these digging helpers:
  - `apply_horizontal_tunnel`
  - `apply_vertical_tunnel`
  - `draw_corridor`
  - `paint` and `apply_paint`, which take a `Symmetry` mode.
- `delvegen.geometry` offers distance functions and a Bresenham `line2d`.
- `delvegen.pathfinding.dijkstra_map` returns travel costs by flat index. Cells that are not reached hold `UNREACHABLE`.

## Errors

`delvegen.builder.BuilderError` is raised in these cases:

- `BuilderChain.start_with` is called twice.
- `build_map` runs without an initial builder.
- A room-based builder runs without rooms.
- `CullUnreachable` or `DistantExit` runs without a starting position.
- `AreaStartingPoint` finds no floor or grass to stand on.

Builders log progress through the standard `logging` module at debug level.

## What this package does not do

This package only generates maps. Specifically:

- It does not render anything.
- It does not run a game loop.
- It does not create monsters or items. The spawn list holds names and positions only.
- It does not choose a builder chain for a level. You assemble the chain yourself.
- It has no command-line program.

## Running the tests

```
pip install delvegen[test]
pytest
```