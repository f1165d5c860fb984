"""
Sector lattice partitioning.

The tile grid is divided into a ``rows x columns`` lattice of equally sized
sectors. Sector ids are row-major and 0-based: id = column + columns * row,
with row 0 at the bottom of the map. Every sector later hosts exactly one
room, either a real room or a 1x1 dummy anchor.

Remainder tiles (``width % columns``, ``height % rows``) are never assigned
to a sector; they only ever appear as wall beyond the last sector.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import structlog

from .alea_prng import AleaPRNG
from .errors import ConfigError

logger = structlog.get_logger()

# Minimum room footprint (5x4) plus the leading 2-tile margin
MIN_SECTOR_WIDTH = 7
MIN_SECTOR_HEIGHT = 6


@dataclass(frozen=True)
class SectorLattice:
    """Geometry of the sector lattice laid over the tile grid."""

    rows: int
    columns: int
    sector_width: int
    sector_height: int

    @property
    def count(self) -> int:
        return self.rows * self.columns

    def position(self, sector_id: int) -> Tuple[int, int]:
        """(column, row) of a sector."""
        return sector_id % self.columns, sector_id // self.columns

    def sector_id(self, column: int, row: int) -> int:
        return column + self.columns * row

    def origin(self, sector_id: int) -> Tuple[int, int]:
        """Global tile coordinate of the sector's bottom-left corner."""
        column, row = self.position(sector_id)
        return column * self.sector_width, row * self.sector_height

    def neighbors(self, sector_id: int) -> List[int]:
        """
        Grid-adjacent sector ids in left, right, down, up order.

        Sectors on the lattice edge simply have fewer neighbors; a 1x1
        lattice has none.
        """
        column, row = self.position(sector_id)
        adjacent = []
        if column > 0:
            adjacent.append(sector_id - 1)
        if column < self.columns - 1:
            adjacent.append(sector_id + 1)
        if row > 0:
            adjacent.append(sector_id - self.columns)
        if row < self.rows - 1:
            adjacent.append(sector_id + self.columns)
        return adjacent

    def are_adjacent(self, a: int, b: int) -> bool:
        return b in self.neighbors(a)

    def same_row(self, a: int, b: int) -> bool:
        return a // self.columns == b // self.columns


@dataclass
class SectorLayout:
    """Lattice plus the real/dummy split of its sector ids."""

    lattice: SectorLattice
    real_ids: List[int]
    dummy_ids: List[int] = field(default_factory=list)

    def is_real(self, sector_id: int) -> bool:
        return sector_id in self.real_ids


def build_lattice(height: int, width: int, rows: int, columns: int) -> SectorLattice:
    """
    Compute sector dimensions, rejecting lattices too fine to hold a room.

    Raises:
        ConfigError: if rows/columns are not positive or a sector is smaller
            than the minimum room footprint plus margin
    """
    if rows < 1 or columns < 1:
        raise ConfigError(f"Sector lattice must have at least one row and column, got {rows}x{columns}")
    if height < 1 or width < 1:
        raise ConfigError(f"Map dimensions must be positive, got {width}x{height}")

    sector_width = width // columns
    sector_height = height // rows
    if sector_width < MIN_SECTOR_WIDTH:
        raise ConfigError(
            f"Sector width {sector_width} is below the minimum of {MIN_SECTOR_WIDTH} "
            f"(map width {width}, {columns} columns)"
        )
    if sector_height < MIN_SECTOR_HEIGHT:
        raise ConfigError(
            f"Sector height {sector_height} is below the minimum of {MIN_SECTOR_HEIGHT} "
            f"(map height {height}, {rows} rows)"
        )
    return SectorLattice(rows, columns, sector_width, sector_height)


def partition_sectors(
    height: int, width: int, rows: int, columns: int, room_count: int, prng: AleaPRNG
) -> SectorLayout:
    """
    Split the map into sectors and choose which of them hold real rooms.

    Args:
        height: Map height in tiles
        width: Map width in tiles
        rows: Sector rows
        columns: Sector columns
        room_count: Target number of real rooms; values at or above the
            sector count make every sector real
        prng: Random source for the whole generation call

    Returns:
        SectorLayout with sorted real and dummy id lists
    """
    lattice = build_lattice(height, width, rows, columns)
    if room_count < 1:
        raise ConfigError(f"At least one real room is required, got {room_count}")

    sector_ids = list(range(lattice.count))
    if room_count >= lattice.count:
        real_ids = sector_ids
    else:
        real_ids = [prng.swap_remove(sector_ids) for _ in range(room_count)]
    real_ids = sorted(real_ids)
    real_set = set(real_ids)
    dummy_ids = [i for i in range(lattice.count) if i not in real_set]

    logger.debug(
        "Partitioned sectors",
        rows=rows,
        columns=columns,
        sector_width=lattice.sector_width,
        sector_height=lattice.sector_height,
        real=len(real_ids),
        dummy=len(dummy_ids),
    )
    return SectorLayout(lattice, real_ids, dummy_ids)
