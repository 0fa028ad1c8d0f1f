"""Conway's Game of Life generation engine."""

from typing import Deque, List
from collections import deque
import numpy as np

from .grid import Cell, Grid

HISTORY_LENGTH = 100


def next_state(current: Cell, alive_neighbors: int) -> Cell:
    """Apply the Life transition rule to one cell.

    - Live cell with fewer than 2 neighbors dies (underpopulation)
    - Live cell with 2 or 3 neighbors survives
    - Live cell with more than 3 neighbors dies (overpopulation)
    - Dead cell with exactly 3 neighbors becomes alive (reproduction)

    Args:
        current: Current state of the cell
        alive_neighbors: Number of living neighbors (0-8)

    Returns:
        State of the cell in the next generation

    Raises:
        TypeError: If current is not a Cell
        ValueError: If alive_neighbors is not an integer in 0-8
    """
    if not isinstance(current, Cell):
        raise TypeError(f"Expected a Cell, got {type(current).__name__}")
    if isinstance(alive_neighbors, bool) or not isinstance(alive_neighbors, (int, np.integer)):
        raise ValueError(f"Neighbor count must be an integer, got {alive_neighbors!r}")
    if not 0 <= alive_neighbors <= 8:
        raise ValueError(f"Neighbor count must be between 0 and 8, got {alive_neighbors}")

    if current is Cell.ALIVE:
        return Cell.ALIVE if alive_neighbors in (2, 3) else Cell.DEAD
    return Cell.ALIVE if alive_neighbors == 3 else Cell.DEAD


def next_generation(grid: Grid) -> Grid:
    """Compute the next generation of a grid without modifying it.

    Every neighbor count is taken from the grid as it stands, and the new
    states are written into a separate buffer.

    Args:
        grid: Current generation

    Returns:
        New grid holding the next generation
    """
    neighbor_counts = grid.count_all_neighbors()
    cells = grid.cells

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    result = Grid(grid.width, grid.height)
    result.cells[:] = (birth_mask | survive_mask).astype(np.int8)
    return result


def step(grid: Grid) -> None:
    """Advance a grid by one generation in place.

    The whole next generation is computed before anything is written back,
    so no cell sees a neighbor that was already advanced in the same step.

    Args:
        grid: Grid to advance
    """
    grid.cells[:] = next_generation(grid).cells


class GameOfLife:
    """Drives a grid through successive generations.

    Keeps the generation counter and population history that the
    frontends report.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque([grid.population], maxlen=HISTORY_LENGTH)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> List[int]:
        """Population of the most recent generations, oldest first."""
        return list(self._population_history)

    @property
    def is_extinct(self) -> bool:
        """Whether every cell is dead."""
        return self.population == 0

    def step(self) -> None:
        """Advance the simulation by one generation."""
        step(self.grid)
        self._generation += 1
        self._population_history.append(self.population)

    def run(self, generations: int) -> int:
        """Advance the simulation by a number of generations.

        Args:
            generations: Number of ticks to run

        Returns:
            Generation number reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError("Generations must be non-negative")

        for _ in range(generations):
            self.step()
        return self._generation

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the generation counter and history.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history = deque([self.population], maxlen=HISTORY_LENGTH)
