"""Tests for tile-level movement rules."""

import pytest

from py_dungeon.core.movement import DIRECTIONS, can_step, step, walkable_neighbors
from py_dungeon.core.tiles import Grid, Location


@pytest.fixture
def open_grid():
    grid = Grid(5, 5)
    grid.fill_rect(1, 1, 4, 4)
    return grid


class TestSteps:
    """Test single-tile moves."""

    def test_orthogonal_into_ground(self, open_grid):
        """Test straight steps onto ground."""
        assert can_step(open_grid, Location(2, 2), 1, 0)
        assert step(open_grid, Location(2, 2), 0, 1) == Location(2, 3)

    def test_wall_blocks(self, open_grid):
        """Test that walls block steps."""
        assert not can_step(open_grid, Location(1, 2), -1, 0)
        assert step(open_grid, Location(1, 2), -1, 0) == Location(1, 2)

    def test_out_of_bounds_blocks(self):
        """Test that the grid edge blocks steps."""
        grid = Grid(2, 2)
        grid.fill_rect(0, 0, 2, 2)
        assert not can_step(grid, Location(0, 0), -1, 0)
        assert not can_step(grid, Location(1, 1), 1, 1)

    @pytest.mark.parametrize("dx,dy", [(0, 0), (2, 0), (0, -2)])
    def test_invalid_step_sizes(self, open_grid, dx, dy):
        """Test that only single-tile steps are allowed."""
        assert not can_step(open_grid, Location(2, 2), dx, dy)

    def test_open_diagonal_allowed(self, open_grid):
        """Test a diagonal step through open ground."""
        assert can_step(open_grid, Location(2, 2), 1, 1)

    def test_diagonal_corner_cut_refused(self):
        """Test that diagonal steps cannot cut wall corners."""
        grid = Grid(3, 3)
        grid.fill_row(0, 0, 1)
        grid.fill_row(1, 1, 2)
        # (0, 0) -> (1, 1) passes (1, 0) ground but (0, 1) wall
        assert grid.is_ground(Location(1, 1))
        assert not can_step(grid, Location(0, 0), 1, 1)

    def test_neighbors_of_interior(self, open_grid):
        """Test that interior tiles allow all eight moves."""
        assert len(walkable_neighbors(open_grid, Location(2, 2))) == len(DIRECTIONS)

    def test_neighbors_of_corner(self, open_grid):
        """Test moves from a room corner."""
        assert set(walkable_neighbors(open_grid, Location(1, 1))) == {
            Location(2, 1),
            Location(1, 2),
            Location(2, 2),
        }


class TestPublicExports:
    """Test that movement rules are reachable from the core package."""

    def test_core_exports(self):
        """Test that movement rules are exported from the core package."""
        from py_dungeon import core

        assert core.can_step is can_step
        assert core.step is step
        assert core.walkable_neighbors is walkable_neighbors
