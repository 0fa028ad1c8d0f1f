"""Core Game of Life logic."""

from .grid import Cell, Grid
from .game import GameOfLife, next_generation, next_state, step
from .patterns import Pattern, PatternLibrary
from .seeding import populate

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
