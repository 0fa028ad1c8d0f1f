"""Grid data structure for the Game of Life."""

from enum import Enum
from typing import Iterator, List, Tuple
import numpy as np
import torch
import torch.nn.functional as F

# One intra-op thread: a generation is never split across threads
torch.set_num_threads(1)

# Moore neighborhood kernel, centre excluded
NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Cell(Enum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


class Grid:
    """Represents a bounded 2D grid of cells.

    Cells are stored row-major in a numpy array of shape (height, width),
    so ``cells[y, x]`` holds the cell at column ``x`` and row ``y``. The grid
    has hard edges: positions outside it do not exist and are never counted
    as neighbors.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is not a positive integer
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

        self.width = int(width)
        self.height = int(height)
        self._cells = np.zeros((self.height, self.width), dtype=np.int8)

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array, shape (height, width)."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Cell.ALIVE or Cell.DEAD

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)
        return Cell.ALIVE if self._cells[y, x] else Cell.DEAD

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        """Set the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate
            cell: New state

        Raises:
            IndexError: If coordinates are out of bounds
            TypeError: If cell is not a Cell
        """
        if not isinstance(cell, Cell):
            raise TypeError(f"Expected a Cell, got {type(cell).__name__}")
        self._check_bounds(x, y)
        self._cells[y, x] = cell.value

    def is_alive(self, x: int, y: int) -> bool:
        """Return True if the cell at (x, y) is alive."""
        return self.get_cell(x, y) is Cell.ALIVE

    def alive_neighbor_count(self, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Offsets that fall outside the grid are skipped entirely, so corner
        cells have at most 3 candidate neighbors and edge cells at most 5.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(x, y)

        count = 0
        for dy in [-1, 0, 1]:
            for dx in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height:
                    count += int(self._cells[ny, nx])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding around the grid is what makes the edges hard: padded
        positions are never alive.

        Returns:
            Array of shape (height, width) with the neighbor count of each cell
        """
        source = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(source, NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().round().astype(np.int8)

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        ys, xs = np.nonzero(self._cells)
        for y, x in zip(ys, xs):
            yield (int(x), int(y))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def copy(self) -> "Grid":
        """Return an independent grid with the same dimensions and cells."""
        duplicate = Grid(self.width, self.height)
        duplicate._cells[:] = self._cells
        return duplicate

    def to_list(self) -> List[List[int]]:
        """Convert grid to nested row-major list of 0/1 values."""
        return self._cells.tolist()

    def from_list(self, data: List[List[int]]) -> None:
        """Load grid from a nested row-major list.

        Args:
            data: List of ``height`` rows, each with ``width`` 0/1 values

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=np.int8)
        if arr.shape != (self.height, self.width):
            raise ValueError(f"Data shape {arr.shape} doesn't match grid rows x columns {(self.height, self.width)}")

        self._cells[:] = (arr != 0).astype(np.int8)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if value else "." for value in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"
