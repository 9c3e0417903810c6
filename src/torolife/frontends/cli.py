"""Command-line interface for the toroidal Game of Life."""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional, TextIO, Tuple

from ..core.config import SimulationConfig
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary
from ..core.seeding import SEED_NAMES

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        """Initialize CLI interface.

        Args:
            output: Stream to write to (defaults to stdout at call time)
        """
        self.pattern_library = PatternLibrary()
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output or sys.stdout

    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.output)

    def _show(self, game: GameOfLife, config: SimulationConfig) -> None:
        self._print(f"Generation {game.generation} (population {game.population}):")
        self._print(game.render(config.alive_glyph, config.dead_glyph), end="")

    def run_simulation(self, config: SimulationConfig) -> Tuple[int, Dict]:
        """Run a Game of Life simulation and print its generations.

        Generations are stepped and rendered strictly one after another.

        Args:
            config: Simulation configuration

        Returns:
            Tuple of (final_generation, statistics)
        """
        grid = config.build_grid(self.pattern_library)
        game = GameOfLife(grid)
        logger.info("Running %d generations on %dx%d grid", config.generations, grid.width, grid.height)

        initial_population = game.population
        if not config.final_only:
            self._show(game, config)

        def on_generation(current: GameOfLife) -> None:
            if config.final_only:
                return
            if config.interval > 0:
                time.sleep(config.interval)
            self._print()
            self._show(current, config)

        start_time = time.time()
        final_generation = game.run(config.generations, on_generation)
        duration = time.time() - start_time

        if config.final_only:
            self._show(game, config)

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration
        return final_generation, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        self._print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            self._print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                if pattern is None:
                    continue
                size = pattern.get_size()
                self._print(f"  {name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    self._print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="torolife",
        description="Run Conway's Game of Life on a toroidal grid and print each generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ten generations of the default 64x64 grid
  torolife

  # Glider on a 12x12 torus, one frame every 0.2 seconds
  torolife -W 12 -H 12 --pattern Glider -n 48 -i 0.2

  # Reproducible random grid, final generation only
  torolife --seed random -p 0.3 --random-seed 7 -n 100 --final-only

  # Plain ASCII output
  torolife --alive-glyph '#' --dead-glyph '.'
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=64, help="Grid width (default: 64)")

    parser.add_argument("-H", "--height", type=int, default=64, help="Grid height (default: 64)")

    parser.add_argument(
        "--seed",
        choices=SEED_NAMES,
        default="default",
        help="Initial state: 'default' (cell i alive when i%%2==0 or i%%7==0), 'blank' or 'random'",
    )

    parser.add_argument(
        "-p",
        "--probability",
        type=float,
        default=0.5,
        help="Alive probability for --seed random, 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument("--random-seed", type=int, help="Random seed for --seed random")

    # Pattern configuration
    parser.add_argument("--pattern", type=str, help="Start from a named pattern on an empty grid")

    parser.add_argument("--pattern-x", type=int, default=0, help="X offset for pattern placement (default: 0)")

    parser.add_argument("--pattern-y", type=int, default=0, help="Y offset for pattern placement (default: 0)")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to advance (default: 10)",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=0.0,
        help="Seconds to wait between generations (default: 0)",
    )

    # Output configuration
    parser.add_argument("--alive-glyph", default="◼", help="Symbol for live cells (default: ◼)")

    parser.add_argument("--dead-glyph", default="◻", help="Symbol for dead cells (default: ◻)")

    parser.add_argument("--final-only", action="store_true", help="Print only the last generation")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a simulation configuration from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        generations=args.generations,
        seed=args.seed,
        probability=args.probability,
        random_seed=args.random_seed,
        pattern=args.pattern,
        pattern_x=args.pattern_x,
        pattern_y=args.pattern_y,
        interval=args.interval,
        alive_glyph=args.alive_glyph,
        dead_glyph=args.dead_glyph,
        final_only=args.final_only,
    )


def validate_args(args: argparse.Namespace, output: Optional[TextIO] = None) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        output: Stream for error lines (defaults to stdout)

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if errors:
        print("Error: Invalid arguments:", file=output)
        for error in errors:
            print(f"  - {error}", file=output)
        return False

    return True


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def print_results(final_generation: int, stats: Dict, output: Optional[TextIO] = None) -> None:
    """Print a one-line summary of a finished run."""
    print(
        f"\nFinished at generation {final_generation}: "
        f"population {stats['initial_population']} -> {stats['population']}, "
        f"density {stats['population_density']:.2%}",
        file=output,
    )


def main(argv: Optional[List[str]] = None, output: Optional[TextIO] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    cli = CLIGameOfLife(output)

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, output):
        return 1

    try:
        final_generation, stats = cli.run_simulation(config_from_args(args))
        print_results(final_generation, stats, output)
        return 0
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user", file=output)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=output)
        if args.verbose:
            logger.exception("Simulation failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
