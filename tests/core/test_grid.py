"""Tests for the Grid class."""

import numpy as np
import pytest
from lifeterm.core.grid import NEIGHBOR_KERNEL, Cell, Grid

A = Cell.ALIVE
D = Cell.DEAD

DIAGONALS = [
    [A, D, A, D, D],
    [D, D, D, A, D],
    [A, D, A, D, D],
    [D, A, D, D, D],
    [D, D, D, D, D],
]


def grid_from_rows(rows):
    """Build a grid from a row-major list of Cell rows."""
    grid = Grid(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            grid.set_cell(x, y, cell)
    return grid


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.cells.shape == (20, 10)
        assert grid.population == 0

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (3, -2), (2.5, 3), (True, 3)])
    def test_invalid_dimensions(self, width, height):
        """Non-positive or non-integer dimensions are rejected."""
        with pytest.raises(ValueError):
            Grid(width, height)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 4)

        # Initially all cells should be dead
        assert grid.get_cell(0, 0) is Cell.DEAD
        assert grid.get_cell(4, 3) is Cell.DEAD

        grid.set_cell(1, 1, Cell.ALIVE)
        grid.set_cell(4, 3, Cell.ALIVE)

        assert grid.get_cell(1, 1) is Cell.ALIVE
        assert grid.get_cell(4, 3) is Cell.ALIVE
        assert grid.is_alive(4, 3)
        assert not grid.is_alive(0, 0)

        # Row-major storage
        assert grid.cells[3, 4] == 1

        grid.set_cell(1, 1, Cell.DEAD)
        assert grid.get_cell(1, 1) is Cell.DEAD

    def test_set_cell_requires_cell(self):
        """Plain booleans and ints are not cell states."""
        grid = Grid(3, 3)
        with pytest.raises(TypeError):
            grid.set_cell(0, 0, True)
        with pytest.raises(TypeError):
            grid.set_cell(0, 0, 1)

    def test_out_of_bounds(self):
        """Coordinates outside the grid raise instead of wrapping."""
        grid = Grid(3, 3)

        for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3), (-1, -1)]:
            with pytest.raises(IndexError):
                grid.set_cell(x, y, Cell.ALIVE)
            with pytest.raises(IndexError):
                grid.get_cell(x, y)
            with pytest.raises(IndexError):
                grid.alive_neighbor_count(x, y)

        # Nothing was written
        assert grid.population == 0

    def test_clear(self):
        """Test grid clearing."""
        grid = Grid(5, 5)
        grid.set_cell(1, 1, Cell.ALIVE)
        grid.set_cell(2, 2, Cell.ALIVE)
        assert grid.population == 2

        grid.clear()
        assert grid.population == 0
        assert grid.get_cell(1, 1) is Cell.DEAD

    def test_alive_cells(self):
        """Living cells are listed row by row as (x, y)."""
        grid = Grid(4, 3)
        grid.set_cell(3, 0, Cell.ALIVE)
        grid.set_cell(0, 2, Cell.ALIVE)
        grid.set_cell(1, 0, Cell.ALIVE)

        assert list(grid.alive_cells()) == [(1, 0), (3, 0), (0, 2)]

    def test_empty_grid_has_no_neighbors(self):
        """Every cell of a dead grid has zero living neighbors."""
        grid = Grid(6, 4)
        for y in range(grid.height):
            for x in range(grid.width):
                assert grid.alive_neighbor_count(x, y) == 0

    def test_diagonal_neighbors(self):
        """Neighbor counts on a scattered pattern."""
        grid = grid_from_rows(DIAGONALS)

        assert grid.alive_neighbor_count(1, 1) == 4
        assert grid.alive_neighbor_count(0, 0) == 0
        assert grid.alive_neighbor_count(2, 0) == 1
        assert grid.alive_neighbor_count(4, 4) == 0

    def test_cell_does_not_count_itself(self):
        """A live cell with no live neighbors has a count of zero."""
        grid = Grid(3, 3)
        grid.set_cell(1, 1, Cell.ALIVE)
        assert grid.alive_neighbor_count(1, 1) == 0

    def test_hard_edges(self):
        """Corner, edge and interior cells see 3, 5 and 8 candidate neighbors."""
        grid = Grid(4, 4)
        for y in range(4):
            for x in range(4):
                grid.set_cell(x, y, Cell.ALIVE)

        assert grid.alive_neighbor_count(0, 0) == 3
        assert grid.alive_neighbor_count(3, 3) == 3
        assert grid.alive_neighbor_count(0, 3) == 3
        assert grid.alive_neighbor_count(3, 0) == 3
        assert grid.alive_neighbor_count(1, 0) == 5
        assert grid.alive_neighbor_count(0, 2) == 5
        assert grid.alive_neighbor_count(3, 1) == 5
        assert grid.alive_neighbor_count(2, 3) == 5
        assert grid.alive_neighbor_count(1, 1) == 8
        assert grid.alive_neighbor_count(2, 2) == 8

    def test_opposite_edges_are_not_neighbors(self):
        """Cells on opposite edges never see each other."""
        grid = Grid(3, 3)
        grid.set_cell(0, 0, Cell.ALIVE)
        grid.set_cell(2, 2, Cell.ALIVE)

        assert grid.alive_neighbor_count(0, 0) == 0
        assert grid.alive_neighbor_count(2, 2) == 0
        assert grid.alive_neighbor_count(1, 1) == 2

    def test_count_all_neighbors(self):
        """Vectorized counts match the per-cell count everywhere."""
        grid = grid_from_rows(DIAGONALS)
        counts = grid.count_all_neighbors()

        assert counts.shape == (grid.height, grid.width)
        for y in range(grid.height):
            for x in range(grid.width):
                assert counts[y, x] == grid.alive_neighbor_count(x, y)

    def test_count_all_neighbors_random(self):
        """Vectorized and per-cell counts agree on random grids."""
        rng = np.random.default_rng(7)
        for width, height in [(1, 1), (1, 6), (7, 1), (9, 5)]:
            grid = Grid(width, height)
            grid.from_list((rng.random((height, width)) < 0.5).astype(int).tolist())
            counts = grid.count_all_neighbors()
            for y in range(height):
                for x in range(width):
                    count = grid.alive_neighbor_count(x, y)
                    assert 0 <= count <= 8
                    assert counts[y, x] == count

    def test_kernel_is_shared(self):
        """Grids use the module kernel instead of building their own."""
        grid = Grid(3, 3)
        assert NEIGHBOR_KERNEL.shape == (1, 1, 3, 3)
        assert NEIGHBOR_KERNEL[0, 0, 1, 1] == 0
        assert not hasattr(grid, "_torch_kernel")

    def test_count_all_neighbors_does_not_modify(self):
        """Counting neighbors is a pure read."""
        grid = grid_from_rows(DIAGONALS)
        before = grid.to_list()
        grid.count_all_neighbors()
        assert grid.to_list() == before

    def test_copy(self):
        """A copy is equal but independent."""
        grid = Grid(3, 3)
        grid.set_cell(1, 2, Cell.ALIVE)

        duplicate = grid.copy()
        assert duplicate == grid

        duplicate.set_cell(0, 0, Cell.ALIVE)
        assert grid.get_cell(0, 0) is Cell.DEAD
        assert duplicate != grid

    def test_to_list_and_from_list(self):
        """Test serialization to/from row-major lists."""
        grid = Grid(3, 2)
        grid.set_cell(2, 0, Cell.ALIVE)
        grid.set_cell(0, 1, Cell.ALIVE)

        data = grid.to_list()
        assert data == [[0, 0, 1], [1, 0, 0]]

        grid2 = Grid(3, 2)
        grid2.from_list(data)
        assert grid2 == grid

        with pytest.raises(ValueError):
            grid2.from_list([[1, 0], [0, 1], [1, 1]])

    def test_equality(self):
        """Test grid equality comparison."""
        grid1 = Grid(3, 3)
        grid2 = Grid(3, 3)
        assert grid1 == grid2

        grid1.set_cell(1, 1, Cell.ALIVE)
        grid2.set_cell(1, 1, Cell.ALIVE)
        assert grid1 == grid2

        grid2.set_cell(2, 2, Cell.ALIVE)
        assert grid1 != grid2

        assert Grid(3, 3) != Grid(4, 3)
        assert grid1 != "not a grid"

    def test_string_representation(self):
        """Test string representation."""
        grid = Grid(3, 2)
        assert str(grid) == "...\n..."

        grid.set_cell(0, 0, Cell.ALIVE)
        grid.set_cell(2, 1, Cell.ALIVE)
        assert str(grid) == "*..\n..*"
