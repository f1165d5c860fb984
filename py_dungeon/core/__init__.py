"""
Core dungeon generation functionality.
"""

from .errors import DungeonError, ConfigError, GenerationError
from .tiles import Tile, TileCategory, Location, Grid
from .sectors import SectorLattice, SectorLayout, partition_sectors
from .rooms import Room, place_rooms
from .connections import Connection, ConnectionSet, connect_adjacent
from .connectivity import get_cluster, repair_connectivity
from .carver import Carver, Corridor
from .movement import DIRECTIONS, can_step, step, walkable_neighbors
from .map_maker import (
    MapConfig, MapRanges, DungeonMap, MapMaker,
    generate, generate_dungeon, generate_random_dungeon, roll_config,
)

__all__ = ['DungeonError', 'ConfigError', 'GenerationError',
           'Tile', 'TileCategory', 'Location', 'Grid',
           'SectorLattice', 'SectorLayout', 'partition_sectors',
           'Room', 'place_rooms',
           'Connection', 'ConnectionSet', 'connect_adjacent',
           'get_cluster', 'repair_connectivity',
           'Carver', 'Corridor',
           'DIRECTIONS', 'can_step', 'step', 'walkable_neighbors',
           'MapConfig', 'MapRanges', 'DungeonMap', 'MapMaker',
           'generate', 'generate_dungeon', 'generate_random_dungeon', 'roll_config']
