"""
Dungeon map generation pipeline.

Stages, in order, all drawing from one PRNG so a seed reproduces the map:

1. Partition the grid into sectors and choose the real ones
2. Place a room in every sector
3. Pick spawn and exit sectors among the real ones
4. Connect adjacent sectors at random
5. Repair connectivity until every real room is reachable from spawn
6. Carve rooms, merges and corridors
7. Pick spawn and exit tiles inside their rooms

Nothing is returned until the whole pipeline has succeeded; the grid handed
back is a read-only snapshot.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import structlog

from .alea_prng import AleaPRNG
from .carver import MERGE_CHANCE, Carver, Corridor
from .connections import DUMMY_SKIP_CHANCE, Connection, connect_adjacent
from .connectivity import pick_endpoints, repair_connectivity
from .errors import ConfigError
from .rooms import Room, place_rooms, rooms_by_id
from .sectors import SectorLattice, partition_sectors
from .tiles import Grid, Location
from ..utils.random import Seed, make_prng

logger = structlog.get_logger()


@dataclass
class MapConfig:
    """Configuration for one generated map."""

    width: int = 56
    height: int = 32
    rows: int = 2
    columns: int = 3
    rooms: int = 2
    dummy_skip_chance: float = DUMMY_SKIP_CHANCE
    merge_chance: float = MERGE_CHANCE


@dataclass
class MapRanges:
    """
    Host-side ranges re-rolled for every new map.

    Defaults describe a 56x32 map with 3-4 sector columns, 2-4 sector rows
    and between 2 and ``columns * rows`` real rooms.
    """

    width: int = 56
    height: int = 32
    min_columns: int = 3
    max_columns: int = 4
    min_rows: int = 2
    max_rows: int = 4
    min_rooms: int = 2
    dummy_skip_chance: float = DUMMY_SKIP_CHANCE
    merge_chance: float = MERGE_CHANCE


@dataclass
class DungeonMap:
    """Finished map together with the intermediate structures that built it."""

    grid: Grid
    spawn: Location
    exit: Location
    seed: str
    config: MapConfig
    lattice: SectorLattice
    rooms: List[Room]
    real_ids: List[int]
    connections: List[Connection]
    cluster: List[int]
    spawn_room_id: int
    exit_room_id: int
    merged: List[Connection] = field(default_factory=list)
    corridors: List[Corridor] = field(default_factory=list)
    repairs: int = 0

    def as_tuple(self) -> Tuple[Grid, Location, Location]:
        return self.grid, self.spawn, self.exit

    def room(self, sector_id: int) -> Room:
        return rooms_by_id(self.rooms)[sector_id]

    @property
    def real_rooms(self) -> List[Room]:
        real = set(self.real_ids)
        return [room for room in self.rooms if room.id in real]


def roll_config(ranges: MapRanges, prng: AleaPRNG) -> MapConfig:
    """Draw lattice size and room count from ``ranges``."""
    if ranges.min_columns > ranges.max_columns or ranges.min_rows > ranges.max_rows:
        raise ConfigError(
            f"Empty lattice range: columns {ranges.min_columns}..{ranges.max_columns}, "
            f"rows {ranges.min_rows}..{ranges.max_rows}"
        )
    columns = prng.randint(ranges.min_columns, ranges.max_columns)
    rows = prng.randint(ranges.min_rows, ranges.max_rows)
    sectors = columns * rows
    rooms = prng.randint(min(ranges.min_rooms, sectors), sectors)
    return MapConfig(
        width=ranges.width,
        height=ranges.height,
        rows=rows,
        columns=columns,
        rooms=rooms,
        dummy_skip_chance=ranges.dummy_skip_chance,
        merge_chance=ranges.merge_chance,
    )


class MapMaker:
    """
    Builds a connected dungeon map from a MapConfig.

    Args:
        config: Map configuration
        seed: Seed string or number; a random seed is drawn when omitted
    """

    def __init__(self, config: MapConfig, seed: Optional[Seed] = None):
        self.config = config
        self.prng = make_prng(seed)
        self.seed = self.prng.seed

    def make(self) -> DungeonMap:
        """
        Run the full pipeline.

        Raises:
            ConfigError: if the configuration cannot host a dungeon
            GenerationError: if connectivity cannot be repaired
        """
        config = self.config
        prng = self.prng
        logger.info(
            "Generating dungeon",
            seed=self.seed,
            width=config.width,
            height=config.height,
            rows=config.rows,
            columns=config.columns,
            rooms=config.rooms,
        )

        layout = partition_sectors(
            config.height, config.width, config.rows, config.columns, config.rooms, prng
        )
        lattice = layout.lattice
        rooms = place_rooms(layout, prng)
        spawn_room_id, exit_room_id = pick_endpoints(layout.real_ids, prng)

        connections = connect_adjacent(rooms, lattice, prng, config.dummy_skip_chance)
        repair = repair_connectivity(connections, lattice, layout.real_ids, spawn_room_id, prng)

        grid = Grid(config.height, config.width)
        carver = Carver(lattice, prng, config.merge_chance)
        carved = carver.carve(grid, rooms, connections, repair.cluster)

        spawn, exit_location = self._pick_locations(rooms, spawn_room_id, exit_room_id)

        logger.info(
            "Dungeon generated",
            seed=self.seed,
            cluster=len(repair.cluster),
            connections=len(connections),
            repairs=repair.rounds,
            merged=len(carved.merged),
        )
        return DungeonMap(
            grid=grid.snapshot(),
            spawn=spawn,
            exit=exit_location,
            seed=self.seed,
            config=config,
            lattice=lattice,
            rooms=rooms,
            real_ids=list(layout.real_ids),
            connections=list(connections),
            cluster=sorted(repair.cluster),
            spawn_room_id=spawn_room_id,
            exit_room_id=exit_room_id,
            merged=list(carved.merged),
            corridors=list(carved.corridors),
            repairs=repair.rounds,
        )

    def generate(self) -> Tuple[Grid, Location, Location]:
        return self.make().as_tuple()

    def _pick_locations(
        self, rooms: List[Room], spawn_room_id: int, exit_room_id: int
    ) -> Tuple[Location, Location]:
        by_id: Dict[int, Room] = rooms_by_id(rooms)
        spawn = by_id[spawn_room_id].random_location(self.prng)
        exit_room = by_id.get(exit_room_id)
        if exit_room is None:
            logger.warning("Exit room missing, reusing spawn location", exit_room=exit_room_id)
            return spawn, spawn
        return spawn, exit_room.random_location(self.prng)


def generate(config: MapConfig, seed: Optional[Seed] = None) -> Tuple[Grid, Location, Location]:
    """Generate a map and return ``(grid, spawn, exit)``."""
    return MapMaker(config, seed).generate()


def generate_dungeon(config: MapConfig, seed: Optional[Seed] = None) -> DungeonMap:
    """Generate a map and return the full DungeonMap."""
    return MapMaker(config, seed).make()


def generate_random_dungeon(ranges: Optional[MapRanges] = None, seed: Optional[Seed] = None) -> DungeonMap:
    """
    Roll a configuration from ``ranges`` and generate it with the same PRNG.

    The rolled configuration is part of the seeded stream, so the seed alone
    reproduces both the configuration and the map.
    """
    maker = MapMaker(MapConfig(), seed)
    maker.config = roll_config(ranges or MapRanges(), maker.prng)
    return maker.make()
