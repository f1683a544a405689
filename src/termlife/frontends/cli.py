"""Command-line interface that animates the Game of Life in a terminal."""

import argparse
import sys
import time
from dataclasses import dataclass, fields
from typing import Callable, Optional, TextIO

from ..core.errors import LifeError
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import Orientation, PatternBuilder, PatternLibrary

# Cursor home, then clear the screen
CLEAR_SCREEN = "\033[H\033[2J"


@dataclass
class SimulationConfig:
    """Configuration for a terminal run."""
    width: int = 150
    height: int = 50
    alive_glyph: str = "*"
    dead_glyph: str = "-"
    pattern: str = "glider"
    orientation: str = "up"
    row_offset: int = 10
    col_offset: int = 10
    interval_ms: int = 17
    max_generations: Optional[int] = None


def build_game(config: SimulationConfig) -> GameOfLife:
    """Create the grid, stamp the configured pattern and wrap it in a game.

    Raises:
        InvalidDimension: If the grid size is not positive
        UnknownPatternName: If the pattern is not in the catalog
        IndexOutOfRange: If the pattern does not fit at the offset
    """
    grid = Grid(config.width, config.height)
    pattern = PatternBuilder().select_type(config.pattern).rotate(config.orientation).build()
    grid.stamp(pattern, config.row_offset, config.col_offset)
    return GameOfLife(grid)


class TerminalRunner:
    """Render, wait, advance, clear; repeated until stopped."""

    def __init__(
        self,
        config: SimulationConfig,
        output: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Simulation configuration
            output: Stream to draw on (defaults to stdout)
            sleep: Delay function taking seconds (defaults to time.sleep)
        """
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.sleep = sleep if sleep is not None else time.sleep
        self.game = build_game(config)

    def draw(self) -> None:
        """Write the current generation."""
        frame = self.game.grid.render(self.config.alive_glyph, self.config.dead_glyph)
        self.output.write(frame + "\n")
        self.output.flush()

    def tick(self) -> None:
        """Wait one interval, advance one generation and clear the display."""
        self.sleep(self.config.interval_ms / 1000.0)
        self.game.step()
        self.output.write(CLEAR_SCREEN)

    def run(self) -> int:
        """Run the loop.

        Without max_generations this only returns when interrupted.

        Returns:
            Number of generations advanced
        """
        limit = self.config.max_generations
        while limit is None or self.game.generation < limit:
            self.draw()
            self.tick()

        # Show the generation the limit stopped on
        self.draw()
        return self.game.generation


def list_patterns(library: Optional[PatternLibrary] = None) -> None:
    """List available patterns by category."""
    library = library or PatternLibrary()

    print("Available patterns:")
    for category, names in library.get_patterns_by_category().items():
        print(f"\n{category}:")
        for name in names:
            pattern = library.get_pattern(name)
            if pattern:
                print(f"  {name}: {pattern.height}x{pattern.width}, {pattern.population} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = SimulationConfig()

    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Glider at (10, 10) on a 150x50 grid, forever
  termlife

  # Pulsar on a small grid, 200 generations
  termlife -W 40 -H 20 --pattern pulsar --row 4 --col 14 -m 200

  # Spaceship facing left, drawn with block characters
  termlife --pattern spaceship --orientation left --alive "##" --dead "  "

  # List available patterns
  termlife --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=defaults.width,
                        help=f"Grid width (default: {defaults.width})")

    parser.add_argument("-H", "--height", type=int, default=defaults.height,
                        help=f"Grid height (default: {defaults.height})")

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        default=defaults.pattern,
        help=f"Seed pattern name (default: {defaults.pattern})",
    )

    parser.add_argument(
        "--orientation",
        type=str,
        default=defaults.orientation,
        choices=[orientation.value for orientation in Orientation],
        help=f"Facing of the seed pattern (default: {defaults.orientation})",
    )

    parser.add_argument(
        "--row",
        type=int,
        default=defaults.row_offset,
        help=f"Grid row of the pattern's top edge (default: {defaults.row_offset})",
    )

    parser.add_argument(
        "--col",
        type=int,
        default=defaults.col_offset,
        help=f"Grid column of the pattern's left edge (default: {defaults.col_offset})",
    )

    # Simulation configuration
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=defaults.interval_ms,
        help=f"Milliseconds between generations (default: {defaults.interval_ms})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=defaults.max_generations,
        help="Stop after this many generations (default: run until interrupted)",
    )

    # Output configuration
    parser.add_argument(
        "--alive",
        type=str,
        default=defaults.alive_glyph,
        help=f"Text drawn for a living cell (default: '{defaults.alive_glyph}')",
    )

    parser.add_argument(
        "--dead",
        type=str,
        default=defaults.dead_glyph,
        help=f"Text drawn for a dead cell (default: '{defaults.dead_glyph}')",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details and final statistics",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.row < 0:
        errors.append("Pattern row must be non-negative")

    if args.col < 0:
        errors.append("Pattern column must be non-negative")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if not args.alive or not args.dead:
        errors.append("Cell glyphs must not be empty")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Map parsed arguments onto a SimulationConfig."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        alive_glyph=args.alive,
        dead_glyph=args.dead,
        pattern=args.pattern,
        orientation=args.orientation,
        row_offset=args.row,
        col_offset=args.col,
        interval_ms=args.interval,
        max_generations=args.max_generations,
    )


def print_setup(config: SimulationConfig) -> None:
    """Print the effective configuration."""
    print("Simulation setup:")
    for field in fields(config):
        print(f"  {field.name}: {getattr(config, field.name)}")


def print_results(game: GameOfLife) -> None:
    """Print end-of-run statistics."""
    stats = game.get_statistics()

    print(f"\nStopped after {stats['generation']} generations")
    print(f"  Grid size: {stats['grid_size'][1]}x{stats['grid_size'][0]}")
    print(f"  Population: {stats['population']} ({stats['population_density']:.2%})")
    print(f"  Population change rate: {stats['population_change_rate']:.2f}")
    if stats["cycle_detected"]:
        print(
            f"  Cycle: length {stats['cycle_length']}, "
            f"started at generation {stats['cycle_start_generation']}"
        )
    if stats["bounding_box"]:
        bbox = stats["bounding_box"]
        print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]})")


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        list_patterns()
        return 0

    if not validate_args(args):
        return 1

    config = config_from_args(args)

    try:
        runner = TerminalRunner(config)
    except LifeError as e:
        print(f"Error: {e}")
        return 1

    if args.verbose:
        print_setup(config)

    try:
        runner.run()
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")

    if args.verbose:
        print_results(runner.game)

    return 0


if __name__ == "__main__":
    sys.exit(main())
