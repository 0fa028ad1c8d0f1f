"""Conway's Game of Life on a bounded grid, rendered to a terminal."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.game import GameOfLife, next_generation, next_state, step
from .core.patterns import Pattern, PatternLibrary
from .core.seeding import populate

__all__ = [
    "Cell",
    "Grid",
    "GameOfLife",
    "next_generation",
    "next_state",
    "step",
    "Pattern",
    "PatternLibrary",
    "populate",
]
