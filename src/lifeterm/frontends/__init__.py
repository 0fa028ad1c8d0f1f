"""Frontend interfaces for the Game of Life."""

from .terminal import SimulationConfig, TerminalError, TerminalRunner, detect_grid_size, render_frame
from .cli import main

__all__ = ["SimulationConfig", "TerminalError", "TerminalRunner", "detect_grid_size", "render_frame", "main"]
