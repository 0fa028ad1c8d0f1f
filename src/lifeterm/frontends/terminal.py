"""Terminal frontend: size discovery, frame rendering and the tick loop."""

import os
import sys
import time
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple

from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.seeding import DEFAULT_CELL_RATE, DEFAULT_LINE_RATE, populate

CURSOR_UP = "\033[1A"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


class TerminalError(RuntimeError):
    """Raised when the output stream cannot be used as a display."""


@dataclass
class SimulationConfig:
    """Configuration for a terminal run."""

    width: Optional[int] = None
    height: Optional[int] = None
    tick_seconds: float = 1 / 20
    max_generations: int = 0
    line_rate: float = DEFAULT_LINE_RATE
    cell_rate: float = DEFAULT_CELL_RATE
    seed: Optional[int] = None
    pattern: Optional[str] = None
    alive_glyph: str = "█"
    dead_glyph: str = " "


def detect_grid_size(stream: TextIO) -> Tuple[int, int]:
    """Work out a grid size that fits the terminal behind a stream.

    One column and one row are left free so a frame never scrolls the
    terminal.

    Args:
        stream: Output stream the frames will be written to

    Returns:
        Tuple of (width, height)

    Raises:
        TerminalError: If the stream is not a terminal or its size is unusable
    """
    if not stream.isatty():
        raise TerminalError("Output is not a terminal")

    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError) as e:
        raise TerminalError(f"Could not get terminal size: {e}") from e

    width, height = size.columns - 1, size.lines - 1
    if width <= 0 or height <= 0:
        raise TerminalError(f"Terminal too small for a grid (width={width}, height={height})")

    return width, height


def render_frame(grid: Grid, alive_glyph: str = "█", dead_glyph: str = " ", rewind: bool = True) -> str:
    """Render a grid as one frame of terminal text.

    Args:
        grid: Grid to draw
        alive_glyph: Text for a living cell
        dead_glyph: Text for a dead cell
        rewind: Move the cursor back over the previous frame first

    Returns:
        Frame text, one line per grid row
    """
    lines = ["".join(alive_glyph if value else dead_glyph for value in row) for row in grid.cells]
    prefix = CURSOR_UP * grid.height if rewind else ""
    return prefix + "\n".join(lines) + "\n"


class TerminalRunner:
    """Seeds a grid and animates it on a terminal at a fixed tick rate."""

    def __init__(self, config: SimulationConfig, stream: Optional[TextIO] = None, verbose: bool = False) -> None:
        """Initialize the runner.

        Args:
            config: Simulation settings
            stream: Output stream for frames (defaults to stdout)
            verbose: Print progress information to stderr
        """
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self.verbose = verbose
        self.pattern_library = PatternLibrary()

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message, file=sys.stderr)

    def grid_size(self) -> Tuple[int, int]:
        """Configured grid size, filling gaps from the terminal."""
        if self.config.width is not None and self.config.height is not None:
            return self.config.width, self.config.height

        detected_width, detected_height = detect_grid_size(self.stream)
        width = self.config.width if self.config.width is not None else detected_width
        height = self.config.height if self.config.height is not None else detected_height
        return width, height

    def build_grid(self) -> Grid:
        """Create and seed the initial grid.

        Raises:
            ValueError: If the configured pattern is unknown
            TerminalError: If the size has to be detected and cannot be
        """
        width, height = self.grid_size()
        grid = Grid(width, height)
        self._log(f"Initializing {width}x{height} grid")

        if self.config.pattern:
            pattern = self.pattern_library.get_pattern(self.config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{self.config.pattern}' not found")
            offset_x, offset_y = pattern.centered_offset(grid)
            placed = pattern.apply_to_grid(grid, offset_x, offset_y)
            self._log(f"Loaded pattern '{pattern.name}' at ({offset_x}, {offset_y}), {placed} cells")
        else:
            alive = populate(grid, self.config.line_rate, self.config.cell_rate, self.config.seed)
            self._log(
                f"Random population (line rate {self.config.line_rate:.2%}, "
                f"cell rate {self.config.cell_rate:.2%}): {alive} cells"
            )

        return grid

    def run(self, grid: Optional[Grid] = None) -> GameOfLife:
        """Draw a frame and step the grid once per tick.

        Runs until ``max_generations`` ticks have passed, or forever when it
        is 0. The cursor is restored even if the loop is interrupted.

        Args:
            grid: Initial grid (built from the config when omitted)

        Returns:
            The game after the last tick
        """
        if grid is None:
            grid = self.build_grid()
        game = GameOfLife(grid)
        limit = self.config.max_generations

        self.stream.write(HIDE_CURSOR)
        try:
            rewind = False
            while limit <= 0 or game.generation < limit:
                self.stream.write(render_frame(grid, self.config.alive_glyph, self.config.dead_glyph, rewind))
                self.stream.flush()
                rewind = True

                game.step()
                time.sleep(self.config.tick_seconds)
        finally:
            self.stream.write(SHOW_CURSOR)
            self.stream.flush()
            self._log(f"Stopped at generation {game.generation}, population {game.population}")

        return game
