"""
Rasterization of rooms, merges and corridors into the tile grid.

Corridors are S/Z shaped: a horizontal corridor leaves the right wall of the
left room on a random row, runs to a random bridge column, steps vertically
to the row chosen on the right room and continues into it. Vertical
corridors are the same construction with x and y swapped. The smaller
sector id is always the first endpoint, so the left (or lower) room.

Bridge coordinates are drawn from the inclusive range ``[p1 + 1, p2 - 1]``.
Rooms never reach past their own sector and always start at least two tiles
into the next one, so ``p2 - p1 >= 3`` and the range is never empty.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Set

import structlog

from .alea_prng import AleaPRNG
from .connections import Connection, ConnectionSet
from .rooms import Room, rooms_by_id
from .sectors import SectorLattice
from .tiles import Grid, Location

logger = structlog.get_logger()

MERGE_CHANCE = 0.1

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass(frozen=True)
class Corridor:
    """A carved corridor between two rooms."""

    connection: Connection
    orientation: str
    start: Location
    end: Location
    bridge: int


@dataclass
class CarveResult:
    """What the carver drew."""

    corridors: List[Corridor] = field(default_factory=list)
    merged: List[Connection] = field(default_factory=list)
    merge_eligible: Dict[int, bool] = field(default_factory=dict)
    drawn_rooms: List[int] = field(default_factory=list)


def carve_room(grid: Grid, room: Room) -> None:
    grid.fill_rect(room.left, room.bottom, room.right, room.top)


def merge_rooms(grid: Grid, room1: Room, room2: Room) -> None:
    """Fill the bounding rectangle of both rooms."""
    grid.fill_rect(
        min(room1.left, room2.left),
        min(room1.bottom, room2.bottom),
        max(room1.right, room2.right),
        max(room1.top, room2.top),
    )


def carve_horizontal(grid: Grid, point1: Location, point2: Location, bridge_x: int) -> None:
    """Connect ``point1`` (left) to ``point2`` (right) through column ``bridge_x``."""
    grid.fill_row(point1.y, point1.x, bridge_x)
    grid.fill_row(point2.y, bridge_x, point2.x)
    grid.fill_column(bridge_x, point1.y, point2.y)


def carve_vertical(grid: Grid, point1: Location, point2: Location, bridge_y: int) -> None:
    """Connect ``point1`` (bottom) to ``point2`` (top) through row ``bridge_y``."""
    grid.fill_column(point1.x, point1.y, bridge_y)
    grid.fill_column(point2.x, bridge_y, point2.y)
    grid.fill_row(bridge_y, point1.x, point2.x)


class Carver:
    """
    Draws the connected part of the room graph.

    Args:
        lattice: Sector lattice geometry, used to tell horizontal from
            vertical connections
        prng: Random source for the whole generation call
        merge_chance: Probability that a connection between two
            merge-eligible rooms becomes a merged rectangle
    """

    def __init__(self, lattice: SectorLattice, prng: AleaPRNG, merge_chance: float = MERGE_CHANCE):
        self.lattice = lattice
        self.prng = prng
        self.merge_chance = merge_chance

    def carve(
        self,
        grid: Grid,
        rooms: List[Room],
        connections: ConnectionSet,
        cluster: Set[int],
    ) -> CarveResult:
        """
        Rasterize clustered rooms and connections into ``grid``.

        Rooms outside the cluster (unreached dummy anchors) stay wall.
        """
        by_id = rooms_by_id(rooms)
        result = CarveResult(merge_eligible={room.id: not room.dummy for room in rooms})

        for room in rooms:
            if room.id in cluster:
                carve_room(grid, room)
                result.drawn_rooms.append(room.id)

        for connection in connections:
            id1, id2 = connection
            if id1 not in cluster and id2 not in cluster:
                continue
            room1 = by_id[id1]
            room2 = by_id[id2]
            eligible = result.merge_eligible
            if eligible[id1] and eligible[id2] and self.prng.chance(self.merge_chance):
                merge_rooms(grid, room1, room2)
                eligible[id1] = False
                eligible[id2] = False
                result.merged.append(connection)
            elif self.lattice.same_row(id1, id2):
                result.corridors.append(self._horizontal(grid, connection, room1, room2))
            else:
                result.corridors.append(self._vertical(grid, connection, room1, room2))

        logger.debug(
            "Carved dungeon",
            rooms=len(result.drawn_rooms),
            corridors=len(result.corridors),
            merged=len(result.merged),
        )
        return result

    def _horizontal(self, grid: Grid, connection: Connection, room1: Room, room2: Room) -> Corridor:
        point1 = Location(room1.right - 1, room1.bottom + self.prng.randrange(0, room1.height))
        point2 = Location(room2.left, room2.bottom + self.prng.randrange(0, room2.height))
        bridge_x = self.prng.randint(point1.x + 1, point2.x - 1)
        carve_horizontal(grid, point1, point2, bridge_x)
        return Corridor(connection, HORIZONTAL, point1, point2, bridge_x)

    def _vertical(self, grid: Grid, connection: Connection, room1: Room, room2: Room) -> Corridor:
        point1 = Location(room1.left + self.prng.randrange(0, room1.width), room1.top - 1)
        point2 = Location(room2.left + self.prng.randrange(0, room2.width), room2.bottom)
        bridge_y = self.prng.randint(point1.y + 1, point2.y - 1)
        carve_vertical(grid, point1, point2, bridge_y)
        return Corridor(connection, VERTICAL, point1, point2, bridge_y)
