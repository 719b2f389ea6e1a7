"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
from typing import Optional, TextIO, Tuple

from ..core.grid import Board
from ..core.game import GameOfLife
from ..core.patterns import InvalidBoardSize, SeederLibrary, seed_board

WELCOME = (
    "Welcome to the Game of Life.\n"
    "Please enter the height and width of the game board you'd like to create:"
)
NEXT_PROMPT = 'Press "ENTER" to move to the next generation.\n'


def render_board(
    board: Board,
    live_glyph: str = "O",
    dead_glyph: str = " ",
    border_glyph: str = "*",
) -> str:
    """Render a board as framed text.

    The first and last row and column always show the border glyph. The
    frame is drawn over the cells; they remain ordinary cells for the rules.

    Args:
        board: Board to render
        live_glyph: Character for interior live cells
        dead_glyph: Character for interior dead cells
        border_glyph: Character for the frame

    Returns:
        One line per board row, joined by newlines
    """
    lines = []
    for row in range(board.rows):
        chars = []
        for col in range(board.cols):
            if col == 0 or col == board.cols - 1 or row == 0 or row == board.rows - 1:
                chars.append(border_glyph)
            elif board.get_cell(row, col):
                chars.append(live_glyph)
            else:
                chars.append(dead_glyph)
        lines.append("".join(chars))
    return "\n".join(lines)


def read_dimensions(stream: TextIO) -> Tuple[int, int]:
    """Read board height and width from a text stream.

    Height and width may be on separate lines or together on one line.

    Returns:
        Tuple of (rows, cols)

    Raises:
        ValueError: On non-numeric input or if the stream ends early
    """
    values = []
    while len(values) < 2:
        line = stream.readline()
        if not line:
            raise ValueError("Expected board height and width, got end of input")
        for token in line.split():
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"Board dimensions must be integers, got '{token}'") from None

    if len(values) > 2:
        raise ValueError(f"Expected two board dimensions, got {len(values)}")

    return values[0], values[1]


class CLIGameOfLife:
    """Text-mode driver that seeds a board, then advances it on demand."""

    def __init__(
        self,
        live_glyph: str = "O",
        dead_glyph: str = " ",
        border_glyph: str = "*",
        verbose: bool = False,
    ) -> None:
        """Initialize CLI interface.

        Args:
            live_glyph: Character for live cells
            dead_glyph: Character for dead cells
            border_glyph: Character for the frame
            verbose: Print generation and population after each render
        """
        self.seeder_library = SeederLibrary()
        self.live_glyph = live_glyph
        self.dead_glyph = dead_glyph
        self.border_glyph = border_glyph
        self.verbose = verbose
        self.game: Optional[GameOfLife] = None

    def start(self, rows: int, cols: int, pattern: str = "Glider") -> GameOfLife:
        """Seed a new board and show generation 0.

        Args:
            rows: Board height
            cols: Board width
            pattern: Name of the seed pattern

        Returns:
            The new game

        Raises:
            ValueError: If the pattern is unknown
            InvalidBoardSize: If the board is too small for the pattern
        """
        seeder = self.seeder_library.get_seeder(pattern)
        if seeder is None:
            raise ValueError(f"Pattern '{pattern}' not found")

        self.game = GameOfLife(seed_board(seeder, rows, cols))
        self.show()
        return self.game

    def step(self) -> Board:
        """Advance one generation and show it."""
        if self.game is None:
            raise RuntimeError("No game in progress, call start() first")

        board = self.game.advance()
        self.show()
        return board

    def show(self) -> None:
        """Print the current board."""
        print(
            render_board(
                self.game.current_state(),
                self.live_glyph,
                self.dead_glyph,
                self.border_glyph,
            )
        )
        if self.verbose:
            print(f"Generation {self.game.generation}, population {self.game.population}")

    def run_interactive(self, stream: TextIO) -> int:
        """Advance one generation per line read until the stream ends.

        Returns:
            Number of generations advanced
        """
        advanced = 0
        while True:
            print(NEXT_PROMPT)
            if not stream.readline():
                return advanced
            self.step()
            advanced += 1

    def run_batch(self, generations: int) -> int:
        """Advance a fixed number of generations without waiting for input.

        Returns:
            Number of generations advanced
        """
        for _ in range(generations):
            self.step()
        return generations

    def list_patterns(self) -> None:
        """List available seed patterns."""
        print("Available patterns:")
        for name in self.seeder_library.list_seeders():
            seeder = self.seeder_library.get_seeder(name)
            print(f"  {name}: minimum {seeder.min_rows}x{seeder.min_cols}")
            if seeder.description:
                print(f"    {seeder.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Play Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Board height and width are read from standard input.

Examples:
  # Interactive: press ENTER for each new generation
  lifeboard-cli

  # Print 20 generations of a 10x10 board without waiting
  printf '10\\n10\\n' | lifeboard-cli --generations 20

  # List available patterns
  lifeboard-cli --list-patterns
        """,
    )

    parser.add_argument("-p", "--pattern", default="Glider", help="Seed pattern (default: Glider)")
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=None,
        help="Advance this many generations without waiting for input",
    )
    parser.add_argument("--live-glyph", default="O", help="Character for live cells (default: O)")
    parser.add_argument("--dead-glyph", default=" ", help="Character for dead cells (default: space)")
    parser.add_argument("--border-glyph", default="*", help="Character for the border (default: *)")
    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show generation and population")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    for option in ("live_glyph", "dead_glyph", "border_glyph"):
        if len(getattr(args, option)) != 1:
            errors.append(f"--{option.replace('_', '-')} must be a single character")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife(
        live_glyph=args.live_glyph,
        dead_glyph=args.dead_glyph,
        border_glyph=args.border_glyph,
        verbose=args.verbose,
    )

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if cli.seeder_library.get_seeder(args.pattern) is None:
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(cli.seeder_library.list_seeders())}")
        return 1

    try:
        print(WELCOME)
        rows, cols = read_dimensions(sys.stdin)

        try:
            cli.start(rows, cols, args.pattern)
        except InvalidBoardSize as e:
            print("There was an error initializing the Game of Life. Please check your board size and try again.")
            print(f"Error: {e}")
            return 1

        if args.generations is not None:
            cli.run_batch(args.generations)
        else:
            advanced = cli.run_interactive(sys.stdin)
            if args.verbose:
                print(f"End of input after {advanced} generations")
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
