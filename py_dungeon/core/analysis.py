"""
Reachability and summary statistics for generated maps.
"""

from collections import deque
from typing import Dict, Iterable

import numpy as np

from .rooms import Room
from .tiles import Grid, Location, Tile


def flood_fill(grid: Grid, start: Location) -> np.ndarray:
    """
    Boolean mask of ground tiles 4-connected to ``start``.

    Returns an all-False mask when ``start`` is not a ground tile.
    """
    reached = np.zeros(grid.shape, dtype=bool)
    if grid.at(start) != Tile.GROUND:
        return reached

    ground = grid.tiles == Tile.GROUND
    reached[start.y, start.x] = True
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if 0 <= nx < grid.width and 0 <= ny < grid.height and ground[ny, nx] and not reached[ny, nx]:
                reached[ny, nx] = True
                queue.append(Location(nx, ny))
    return reached


def room_reached(mask: np.ndarray, room: Room) -> bool:
    """True when every tile of the room footprint is in ``mask``."""
    return bool(mask[room.bottom:room.top, room.left:room.right].all())


def unreachable_rooms(grid: Grid, start: Location, rooms: Iterable[Room]) -> list:
    """Rooms whose footprint is not fully reachable from ``start``."""
    mask = flood_fill(grid, start)
    return [room for room in rooms if not room_reached(mask, room)]


def map_statistics(grid: Grid, spawn: Location, rooms: Iterable[Room]) -> Dict[str, float]:
    """Tile counts and reachability summary for a grid."""
    rooms = list(rooms)
    mask = flood_fill(grid, spawn)
    ground = grid.ground_count()
    total = grid.height * grid.width
    real = [room for room in rooms if not room.dummy]
    return {
        "total_tiles": total,
        "ground_tiles": ground,
        "wall_tiles": total - ground,
        "ground_ratio": round(ground / total, 4),
        "reachable_tiles": int(mask.sum()),
        "real_rooms": len(real),
        "dummy_rooms": len(rooms) - len(real),
        "real_rooms_reached": sum(1 for room in real if room_reached(mask, room)),
    }
