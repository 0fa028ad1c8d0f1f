"""Command-line interface for the terminal Game of Life."""

import argparse
import sys
from typing import List, Optional

from ..core.patterns import PatternLibrary
from ..core.seeding import DEFAULT_CELL_RATE, DEFAULT_LINE_RATE
from .terminal import SimulationConfig, TerminalError, TerminalRunner


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifeterm",
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fill the terminal with a random population
  lifeterm

  # Reproducible 80x24 run that stops after 500 generations
  lifeterm -W 80 -H 24 --seed 42 --max-generations 500

  # Denser population, drawn with '#' and '.'
  lifeterm --line-rate 0.5 --cell-rate 0.2 --alive-char '#' --dead-char '.'

  # Start from a named pattern at half speed
  lifeterm --pattern Glider --tick 0.1

  # List available patterns
  lifeterm --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, help="Grid width (default: terminal width - 1)")

    parser.add_argument("-H", "--height", type=int, help="Grid height (default: terminal height - 1)")

    # Seeding configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a named pattern instead of a random population",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial population",
    )

    parser.add_argument(
        "--line-rate",
        type=float,
        default=DEFAULT_LINE_RATE,
        help="Chance each row receives living cells, 0.0-1.0 (default: 0.33)",
    )

    parser.add_argument(
        "--cell-rate",
        type=float,
        default=DEFAULT_CELL_RATE,
        help="Chance each cell of an active row is alive, 0.0-1.0 (default: 0.05)",
    )

    # Timing configuration
    parser.add_argument(
        "-t",
        "--tick",
        type=float,
        default=1 / 20,
        help="Seconds between generations (default: 0.05)",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=0,
        help="Stop after this many generations (default: 0, run until interrupted)",
    )

    # Output configuration
    parser.add_argument("--alive-char", type=str, default="█", help="Glyph for living cells (default: █)")

    parser.add_argument("--dead-char", type=str, default=" ", help="Glyph for dead cells (default: space)")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information to stderr",
    )

    return parser


def list_patterns(library: PatternLibrary) -> None:
    """Print available patterns by category."""
    print("Available patterns:")
    for category, names in library.get_patterns_by_category().items():
        print(f"\n{category}:")
        for name in names:
            pattern = library.get_pattern(name)
            if pattern:
                width, height = pattern.get_size()
                print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def validate_args(args: argparse.Namespace, library: Optional[PatternLibrary] = None) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        library: Pattern library used to check --pattern

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width is not None and args.width <= 0:
        errors.append("Width must be positive")

    if args.height is not None and args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.line_rate <= 1.0:
        errors.append("Line rate must be between 0.0 and 1.0")

    if not 0.0 <= args.cell_rate <= 1.0:
        errors.append("Cell rate must be between 0.0 and 1.0")

    if args.tick < 0:
        errors.append("Tick must be non-negative")

    if args.max_generations < 0:
        errors.append("Max generations must be non-negative")

    if len(args.alive_char) != 1 or len(args.dead_char) != 1:
        errors.append("Cell glyphs must be single characters")

    if args.pattern and library is not None and library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found (available: {', '.join(library.list_patterns())})")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        tick_seconds=args.tick,
        max_generations=args.max_generations,
        line_rate=args.line_rate,
        cell_rate=args.cell_rate,
        seed=args.seed,
        pattern=args.pattern,
        alive_glyph=args.alive_char,
        dead_glyph=args.dead_char,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args, library):
        return 1

    runner = TerminalRunner(config_from_args(args), verbose=args.verbose)

    try:
        runner.run()
        return 0
    except KeyboardInterrupt:
        print()
        return 0
    except TerminalError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Pass --width and --height to run without a terminal", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
