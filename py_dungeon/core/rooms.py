"""
Room placement inside sectors.

Real rooms are random rectangles at least 5 wide and 4 tall, kept at least
two tiles away from the sector's left and bottom edges. Dummy rooms are a
single anchor tile that corridors may route through.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List

import structlog

from .alea_prng import AleaPRNG
from .sectors import SectorLayout
from .tiles import Location

logger = structlog.get_logger()

MIN_ROOM_WIDTH = 5
MIN_ROOM_HEIGHT = 4
SECTOR_MARGIN = 2


@dataclass(frozen=True)
class Room:
    """A room in global tile coordinates; ``id`` is its sector id."""

    id: int
    dummy: bool
    left: int
    bottom: int
    width: int
    height: int

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.left + self.width

    @property
    def top(self) -> int:
        """Exclusive top edge."""
        return self.bottom + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def tiles(self) -> Iterator[Location]:
        for y in range(self.bottom, self.top):
            for x in range(self.left, self.right):
                yield Location(x, y)

    def contains(self, location: Location) -> bool:
        return self.left <= location.x < self.right and self.bottom <= location.y < self.top

    def random_location(self, prng: AleaPRNG) -> Location:
        """Uniform tile from the room footprint."""
        x = self.left + prng.randrange(0, self.width)
        y = self.bottom + prng.randrange(0, self.height)
        return Location(x, y)


def _draw(prng: AleaPRNG, low: int, high: int) -> int:
    """
    Draw from ``[low, high)``.

    A sector of exactly the minimum footprint leaves ``high == low``; the
    bound is raised to ``low + 1`` so the minimum size is used instead.
    """
    return prng.randrange(low, max(high, low + 1))


def place_rooms(layout: SectorLayout, prng: AleaPRNG) -> List[Room]:
    """
    Create one room per sector, in sector id order.

    Args:
        layout: Sector lattice with the real/dummy split
        prng: Random source for the whole generation call

    Returns:
        Rooms indexed by sector id
    """
    lattice = layout.lattice
    sector_width = lattice.sector_width
    sector_height = lattice.sector_height
    real_ids = set(layout.real_ids)
    rooms: List[Room] = []

    for row in range(lattice.rows):
        for column in range(lattice.columns):
            sector_id = lattice.sector_id(column, row)
            origin_x, origin_y = lattice.origin(sector_id)
            if sector_id in real_ids:
                width = _draw(prng, MIN_ROOM_WIDTH, sector_width - SECTOR_MARGIN)
                height = _draw(prng, MIN_ROOM_HEIGHT, sector_height - SECTOR_MARGIN)
                left = _draw(prng, SECTOR_MARGIN, sector_width - width)
                bottom = _draw(prng, SECTOR_MARGIN, sector_height - height)
                room = Room(sector_id, False, origin_x + left, origin_y + bottom, width, height)
            else:
                left = prng.randrange(SECTOR_MARGIN, sector_width - 1)
                bottom = prng.randrange(SECTOR_MARGIN, sector_height - 1)
                room = Room(sector_id, True, origin_x + left, origin_y + bottom, 1, 1)
            rooms.append(room)

    logger.debug("Placed rooms", rooms=len(rooms), real=len(real_ids))
    return rooms


def rooms_by_id(rooms: List[Room]) -> Dict[int, Room]:
    return {room.id: room for room in rooms}
