"""Tests for the tile grid."""

import numpy as np
import pytest

from py_dungeon.core.tiles import Grid, Location, Tile, TileCategory


class TestQueries:
    """Test bounds-aware tile queries."""

    @pytest.fixture
    def grid(self):
        grid = Grid(4, 6)
        grid.fill_rect(1, 1, 3, 3)
        return grid

    def test_starts_as_walls(self):
        """Test that a new grid is all walls."""
        grid = Grid(3, 5)
        assert grid.shape == (3, 5)
        assert grid.ground_count() == 0
        np.testing.assert_array_equal(grid.tiles, np.ones((3, 5), dtype=np.uint8))

    def test_get_inside(self, grid):
        """Test tile lookup inside the grid."""
        assert grid.get(1, 1) == Tile.GROUND
        assert grid.get(0, 0) == Tile.WALL

    @pytest.mark.parametrize("row,column", [(-1, 0), (0, -1), (4, 0), (0, 6)])
    def test_get_outside_returns_none(self, grid, row, column):
        """Test tile lookup outside the grid."""
        assert grid.get(row, column) is None
        assert grid.category(row, column) == TileCategory.OUT_OF_BOUNDS

    def test_category(self, grid):
        """Test category lookup."""
        assert grid.category(2, 2) == TileCategory.GROUND
        assert grid.category(3, 5) == TileCategory.WALL

    def test_location_lookup_is_x_then_y(self):
        """Test that locations index by x then y."""
        grid = Grid(4, 6)
        grid.fill_rect(5, 0, 6, 1)
        assert grid.is_ground(Location(5, 0))
        assert not grid.is_ground(Location(0, 5))

    def test_invalid_dimensions(self):
        """Test rejection of empty grids."""
        with pytest.raises(ValueError):
            Grid(0, 5)


class TestCarving:
    """Test fill helpers."""

    def test_fill_row_either_order(self):
        """Test row fills in either direction."""
        a = Grid(3, 8)
        b = Grid(3, 8)
        a.fill_row(1, 2, 6)
        b.fill_row(1, 6, 2)
        assert a == b
        assert a.ground_count() == 5

    def test_fill_column_either_order(self):
        """Test column fills in either direction."""
        a = Grid(8, 3)
        b = Grid(8, 3)
        a.fill_column(1, 1, 5)
        b.fill_column(1, 5, 1)
        assert a == b
        assert a.ground_count() == 5

    def test_fill_outside_raises(self):
        """Test fills outside the grid."""
        grid = Grid(4, 4)
        with pytest.raises(IndexError):
            grid.fill_rect(2, 2, 5, 3)
        with pytest.raises(IndexError):
            grid.fill_row(1, -1, 2)

    def test_snapshot_is_read_only_copy(self):
        """Test that snapshots are frozen copies."""
        grid = Grid(3, 3)
        frozen = grid.snapshot()
        assert not frozen.writeable
        grid.fill_rect(0, 0, 1, 1)
        assert frozen.ground_count() == 0
        with pytest.raises(ValueError):
            frozen.tiles[0, 0] = Tile.GROUND
        with pytest.raises(ValueError):
            frozen.fill_rect(0, 0, 1, 1)


class TestViews:
    """Test rendering helpers."""

    def test_ascii_rows_top_first(self):
        """Test ASCII rendering orientation."""
        grid = Grid(3, 4)
        grid.fill_row(0, 0, 1)
        assert grid.to_ascii() == ["####", "####", "..##"]

    def test_window_marks_out_of_bounds(self):
        """Test viewport windows at the grid edge."""
        grid = Grid(3, 3)
        grid.fill_rect(0, 0, 1, 1)
        window = grid.window(Location(0, 0), 1)
        assert len(window) == 3
        assert all(len(row) == 3 for row in window)
        assert window[1][1] == TileCategory.GROUND
        assert window[1][0] == TileCategory.OUT_OF_BOUNDS
        assert window[0][2] == TileCategory.WALL
        assert window[2] == [TileCategory.OUT_OF_BOUNDS] * 3

    def test_ground_locations(self):
        """Test ground location iteration."""
        grid = Grid(3, 3)
        grid.fill_row(2, 0, 1)
        assert set(grid.ground_locations()) == {Location(0, 2), Location(1, 2)}
