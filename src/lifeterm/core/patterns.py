"""Well-known Game of Life patterns used to seed a grid."""

from typing import Dict, List, Optional, Tuple

from .grid import Cell, Grid


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> int:
        """Clear a grid and place this pattern on it.

        Cells that land outside the grid are dropped; the edges do not wrap.

        Args:
            grid: Target grid
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Returns:
            Number of cells that were placed
        """
        grid.clear()
        placed = 0
        for x, y in self.cells:
            try:
                grid.set_cell(x + offset_x, y + offset_y, Cell.ALIVE)
            except IndexError:
                continue
            placed += 1
        return placed

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        xs, ys = zip(*self.cells)
        return (min(xs), min(ys), max(xs), max(ys))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def centered_offset(self, grid: Grid) -> Tuple[int, int]:
        """Offset that puts the pattern's bounding box in the middle of a grid."""
        min_x, min_y, _, _ = self.get_bounding_box()
        width, height = self.get_size()
        return (max(0, (grid.width - width) // 2) - min_x, max(0, (grid.height - height) // 2) - min_y)


class PatternLibrary:
    """Lookup of the built-in patterns by name."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)], "Beehive still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)], "Smallest spaceship, period-4")
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
                "Methuselah that stabilizes after 1103 generations on an open plane",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {
            "Still Life": ["Block", "Beehive"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider"],
            "Methuselahs": ["R-pentomino"],
            "Custom": [],
        }

        builtin = {name for names in categories.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        return {cat: names for cat, names in categories.items() if names}
