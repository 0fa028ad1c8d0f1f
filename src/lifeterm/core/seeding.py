"""Random seeding of an initial generation."""

from typing import Optional
import numpy as np

from .grid import Cell, Grid

DEFAULT_LINE_RATE = 1 / 3
DEFAULT_CELL_RATE = 1 / 20


def populate(
    grid: Grid,
    line_rate: float = DEFAULT_LINE_RATE,
    cell_rate: float = DEFAULT_CELL_RATE,
    seed: Optional[int] = None,
) -> int:
    """Randomly populate a grid, one row at a time.

    Each row is activated with probability ``line_rate``. Inside an active
    row each cell is alive with probability ``cell_rate``; inactive rows are
    left entirely dead. Every cell is written through ``Grid.set_cell``.

    Args:
        grid: Grid to overwrite
        line_rate: Chance a row gets any living cells (0.0 to 1.0)
        cell_rate: Chance a cell in an active row is alive (0.0 to 1.0)
        seed: Optional random seed for reproducible layouts

    Returns:
        Number of cells set alive

    Raises:
        ValueError: If a rate is outside 0.0-1.0
    """
    if not 0.0 <= line_rate <= 1.0:
        raise ValueError("Line rate must be between 0.0 and 1.0")
    if not 0.0 <= cell_rate <= 1.0:
        raise ValueError("Cell rate must be between 0.0 and 1.0")

    rng = np.random.default_rng(seed)
    alive = 0

    for y in range(grid.height):
        active = rng.random() < line_rate
        for x in range(grid.width):
            if active and rng.random() < cell_rate:
                grid.set_cell(x, y, Cell.ALIVE)
                alive += 1
            else:
                grid.set_cell(x, y, Cell.DEAD)

    return alive
