"""Command-line interface for Conway's Game of Life."""

import argparse
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from ..core.board import Board
from ..core.cell import CellEncoding
from ..core.engine import Engine
from ..core.exceptions import GameOfLifeError
from ..core.patterns import PatternLibrary
from ..core.rules import GameRules


@dataclass
class RunConfig:
    """Configuration for a command-line run."""

    iterations: int = 1
    input_path: Optional[str] = None
    pattern: Optional[str] = None
    output_dir: Optional[str] = None
    dump_all: bool = False
    alive: str = "*"
    dead: str = "_"
    separator: str = "\n"
    min_survive: int = 2
    max_survive: int = 3
    min_spawn: int = 3
    max_spawn: int = 3
    show: bool = False
    verbose: bool = False

    @property
    def encoding(self) -> CellEncoding:
        return CellEncoding(self.alive, self.dead, self.separator)

    @property
    def rules(self) -> GameRules:
        return GameRules(self.min_survive, self.max_survive, self.min_spawn, self.max_spawn)


class CLIGameOfLife:
    """Command-line driver: load a board, run it and write snapshots."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def load_board(self, config: RunConfig) -> Tuple[Board, Path]:
        """Load the initial board from a file or the pattern library.

        Returns:
            Tuple of (board, base output path used to name snapshots)

        Raises:
            GameOfLifeError: If the input can not be parsed
            OSError: If the input file is missing or unreadable
        """
        encoding = config.encoding

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise GameOfLifeError(f"Pattern '{config.pattern}' not found")
            stem = config.pattern.replace(" ", "_").lower()
            return pattern.to_board(), Path(config.output_dir or ".") / f"{stem}.txt"

        input_path = Path(config.input_path)
        if not input_path.exists() or input_path.is_dir():
            raise OSError(f"{input_path} is not a valid path to an input file")

        board = Board()
        with open(input_path, "r", newline="") as f:
            board.load(f, encoding.decode, encoding.row_separator)

        if config.output_dir:
            return board, Path(config.output_dir) / input_path.name
        return board, input_path

    def snapshot_path(self, base_path: Path, iteration: int) -> Path:
        """Name of the file holding the board after the given iteration."""
        return base_path.parent / f"{base_path.stem}_{iteration}{base_path.suffix}"

    def write_snapshot(self, board: Board, path: Path, encoding: CellEncoding) -> None:
        """Write the living cells' bounding rectangle of a board to a file."""
        with open(path, "w", newline="") as f:
            board.save(f, board.get_occupied_cells_bounding_rectangle(), encoding.encode, encoding.row_separator)

    def run(self, config: RunConfig) -> Tuple[Engine, List[Path]]:
        """Run a simulation and write snapshots.

        Snapshots are written after every iteration when ``dump_all`` is
        set, otherwise only after the last one.

        Returns:
            Tuple of (engine in its final state, list of written files)
        """
        encoding = config.encoding
        rules = config.rules
        board, base_path = self.load_board(config)

        if config.verbose:
            print(f"Loaded {board.length}x{board.height} board with {board.population} living cells")

        if config.show:
            print("Initial board:")
            print(board.to_string(encoding), end="")

        engine = Engine(board, rules)
        written = []
        start_time = time.time()

        for iteration in range(1, config.iterations + 1):
            engine.next()
            if iteration == config.iterations or config.dump_all:
                path = self.snapshot_path(base_path, iteration)
                self.write_snapshot(engine.board, path, encoding)
                written.append(path)
                if config.verbose:
                    print(f"Iteration {iteration}: population {engine.population}, wrote {path}")

        duration = time.time() - start_time
        if config.verbose:
            print(f"Ran {config.iterations} generations in {duration:.3f}s")

        if config.show:
            print(f"Board after {engine.generation} generations:")
            print(engine.board.to_string(encoding), end="")

        return engine, written

    def list_patterns(self) -> None:
        """Print the available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                length, height = pattern.get_size()
                print(f"  {name} ({length}x{height}) - {pattern.description}")


def _single_char(value: str) -> str:
    """Argument type for single characters, accepting escapes like '\\n'."""
    decoded = value.encode().decode("unicode_escape") if value.startswith("\\") else value
    if len(decoded) != 1:
        raise argparse.ArgumentTypeError(f"expected a single character, got {value!r}")
    return decoded


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a board loaded from a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run 10 generations, write board_10.txt next to board.txt
  gameoflife-cli --input board.txt --iterations 10

  # Write a snapshot after every generation
  gameoflife-cli --input board.txt --iterations 10 --all

  # Start from a built-in pattern
  gameoflife-cli --pattern Glider --iterations 4 --output-dir out --show

  # Custom survive/spawn bounds and characters
  gameoflife-cli --input board.txt --iterations 5 --alive O --dead . --survive 2 3 --spawn 3 3
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-i", "--input", type=str, help="Path of the input board file")
    source.add_argument("--pattern", type=str, help="Start from a built-in pattern instead of a file")

    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=1,
        help="Number of generations to compute (default: 1)",
    )

    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Write every iteration, not only the last one",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        help="Directory for snapshots (default: next to the input file)",
    )

    # Encoding
    parser.add_argument("--alive", type=_single_char, default="*", help="Character for living cells (default: *)")
    parser.add_argument("--dead", type=_single_char, default="_", help="Character for dead cells (default: _)")
    parser.add_argument(
        "--separator",
        type=_single_char,
        default="\n",
        help="Row separator character (default: newline)",
    )

    # Rules
    parser.add_argument(
        "--survive",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        default=[2, 3],
        help="Inclusive neighbor range for a living cell to survive (default: 2 3)",
    )
    parser.add_argument(
        "--spawn",
        type=int,
        nargs=2,
        metavar=("MIN", "MAX"),
        default=[3, 3],
        help="Inclusive neighbor range for a dead cell to become alive (default: 3 3)",
    )

    # Output
    parser.add_argument("-s", "--show", action="store_true", help="Print the initial and final boards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress information")
    parser.add_argument("--list-patterns", action="store_true", help="List all available patterns and exit")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not args.input and not args.pattern:
        errors.append("Either --input or --pattern is required")

    if args.iterations <= 0:
        errors.append("Iterations must be positive")

    if min(args.survive + args.spawn) < 0:
        errors.append("Neighbor counts must be non-negative")

    if args.output_dir and not Path(args.output_dir).is_dir():
        errors.append(f"Output directory {args.output_dir} does not exist")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Collect parsed arguments into a RunConfig."""
    return RunConfig(
        iterations=args.iterations,
        input_path=args.input,
        pattern=args.pattern,
        output_dir=args.output_dir,
        dump_all=args.all,
        alive=args.alive,
        dead=args.dead,
        separator=args.separator,
        min_survive=args.survive[0],
        max_survive=args.survive[1],
        min_spawn=args.spawn[0],
        max_spawn=args.spawn[1],
        show=args.show,
        verbose=args.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        config = config_from_args(args)
        engine, written = cli.run(config)
    except (GameOfLifeError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Finished after {engine.generation} generations, population {engine.population}")
    if args.verbose:
        print(f"Wrote {len(written)} file(s)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
