"""
Tile grid for generated dungeons.

The grid is a NumPy ``uint8`` array indexed row-major by ``(y, x)`` with
``y`` growing upward, matching the room coordinates (``left``, ``bottom``).
Out-of-grid queries are answered rather than raised so that renderers can
window freely around a viewport.
"""

from enum import Enum, IntEnum
from typing import Iterator, List, NamedTuple, Optional

import numpy as np


class Tile(IntEnum):
    """Stored tile values."""

    GROUND = 0
    WALL = 1


class TileCategory(str, Enum):
    """What a grid query reports, including cells outside the grid."""

    GROUND = "ground"
    WALL = "wall"
    OUT_OF_BOUNDS = "out_of_bounds"


class Location(NamedTuple):
    """Integer tile coordinate."""

    x: int
    y: int


ASCII_SYMBOLS = {
    TileCategory.GROUND: ".",
    TileCategory.WALL: "#",
    TileCategory.OUT_OF_BOUNDS: " ",
}


class Grid:
    """
    Fixed-size tile matrix, initialized to all walls.

    Carving methods take global tile coordinates and refuse to write outside
    the grid. ``snapshot()`` returns a read-only copy that is handed to
    callers once generation has finished.
    """

    def __init__(self, height: int, width: int, tiles: Optional[np.ndarray] = None):
        if height < 1 or width < 1:
            raise ValueError(f"Grid dimensions must be positive, got {height}x{width}")
        self.height = height
        self.width = width
        if tiles is None:
            tiles = np.full((height, width), Tile.WALL, dtype=np.uint8)
        elif tiles.shape != (height, width):
            raise ValueError(f"Tile array shape {tiles.shape} does not match {height}x{width}")
        self.tiles = tiles

    @property
    def shape(self):
        return self.tiles.shape

    @property
    def writeable(self) -> bool:
        return bool(self.tiles.flags.writeable)

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def get(self, row: int, column: int) -> Optional[Tile]:
        """Tile at ``(row, column)`` or None when the cell does not exist."""
        if not self.in_bounds(row, column):
            return None
        return Tile(int(self.tiles[row, column]))

    def category(self, row: int, column: int) -> TileCategory:
        tile = self.get(row, column)
        if tile is None:
            return TileCategory.OUT_OF_BOUNDS
        return TileCategory.GROUND if tile == Tile.GROUND else TileCategory.WALL

    def at(self, location: Location) -> Optional[Tile]:
        """Tile under an ``(x, y)`` location."""
        return self.get(location.y, location.x)

    def is_ground(self, location: Location) -> bool:
        return self.at(location) == Tile.GROUND

    # Carving

    def _check_span(self, left: int, bottom: int, right: int, top: int) -> None:
        if left < 0 or bottom < 0 or right > self.width or top > self.height:
            raise IndexError(
                f"Span x[{left}, {right}) y[{bottom}, {top}) outside {self.width}x{self.height} grid"
            )

    def fill_rect(self, left: int, bottom: int, right: int, top: int, tile: Tile = Tile.GROUND) -> None:
        """Fill the half-open rectangle ``[left, right) x [bottom, top)``."""
        self._check_span(left, bottom, right, top)
        self.tiles[bottom:top, left:right] = tile

    def fill_row(self, y: int, x1: int, x2: int, tile: Tile = Tile.GROUND) -> None:
        """Fill row ``y`` between ``x1`` and ``x2`` inclusive, in either order."""
        low, high = min(x1, x2), max(x1, x2)
        self.fill_rect(low, y, high + 1, y + 1, tile)

    def fill_column(self, x: int, y1: int, y2: int, tile: Tile = Tile.GROUND) -> None:
        """Fill column ``x`` between ``y1`` and ``y2`` inclusive, in either order."""
        low, high = min(y1, y2), max(y1, y2)
        self.fill_rect(x, low, x + 1, high + 1, tile)

    # Views

    def snapshot(self) -> "Grid":
        """Read-only copy of the grid."""
        frozen = self.tiles.copy()
        frozen.flags.writeable = False
        return Grid(self.height, self.width, frozen)

    def ground_locations(self) -> Iterator[Location]:
        ys, xs = np.nonzero(self.tiles == Tile.GROUND)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield Location(x, y)

    def ground_count(self) -> int:
        return int(np.count_nonzero(self.tiles == Tile.GROUND))

    def window(self, center: Location, radius: int) -> List[List[TileCategory]]:
        """
        Categories of the square window around ``center``.

        Rows are ordered top (highest y) first; cells outside the grid are
        reported as ``OUT_OF_BOUNDS``.
        """
        return [
            [self.category(y, x) for x in range(center.x - radius, center.x + radius + 1)]
            for y in range(center.y + radius, center.y - radius - 1, -1)
        ]

    def to_ascii(self) -> List[str]:
        """Render rows top (highest y) first using ``.`` for ground and ``#`` for walls."""
        ground = ASCII_SYMBOLS[TileCategory.GROUND]
        wall = ASCII_SYMBOLS[TileCategory.WALL]
        return [
            "".join(ground if value == Tile.GROUND else wall for value in self.tiles[y].tolist())
            for y in range(self.height - 1, -1, -1)
        ]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.tiles, other.tiles))

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width}, ground={self.ground_count()})"
