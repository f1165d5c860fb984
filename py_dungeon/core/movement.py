"""
Tile-level movement rules for actors on a generated grid.

Actors move one tile in any of eight directions. A step is refused when the
target is a wall or outside the grid, and a diagonal step is refused when
either orthogonal tile it passes between is a wall, so actors cannot cut
corners.
"""

from typing import Dict, List, Tuple

from .tiles import Grid, Location, Tile

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "left": (-1, 0),
    "right": (1, 0),
    "down": (0, -1),
    "up": (0, 1),
    "down_left": (-1, -1),
    "down_right": (1, -1),
    "up_left": (-1, 1),
    "up_right": (1, 1),
}


def can_step(grid: Grid, location: Location, dx: int, dy: int) -> bool:
    if (dx, dy) == (0, 0) or abs(dx) > 1 or abs(dy) > 1:
        return False
    target = Location(location.x + dx, location.y + dy)
    if grid.at(target) != Tile.GROUND:
        return False
    if dx != 0 and dy != 0:
        beside = grid.at(Location(location.x + dx, location.y))
        above = grid.at(Location(location.x, location.y + dy))
        if beside == Tile.WALL or above == Tile.WALL:
            return False
    return True


def step(grid: Grid, location: Location, dx: int, dy: int) -> Location:
    """Location after attempting a step; unchanged when the step is refused."""
    if can_step(grid, location, dx, dy):
        return Location(location.x + dx, location.y + dy)
    return location


def walkable_neighbors(grid: Grid, location: Location) -> List[Location]:
    return [
        Location(location.x + dx, location.y + dy)
        for dx, dy in DIRECTIONS.values()
        if can_step(grid, location, dx, dy)
    ]
