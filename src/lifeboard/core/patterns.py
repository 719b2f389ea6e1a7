"""Seed patterns for starting a Game of Life board."""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, List, Optional

from .grid import Board, Cell


class InvalidBoardSize(ValueError):
    """Raised when a board is too small to hold a seed pattern."""

    def __init__(self, rows: int, cols: int, min_rows: int, min_cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.min_rows = min_rows
        self.min_cols = min_cols
        super().__init__(
            f"The game board must be at least {min_rows}x{min_cols} in size (got {rows}x{cols})."
        )


class Seeder(ABC):
    """Base class for seed patterns.

    Subclasses describe a shape by implementing _cells(); seed() checks the
    requested board size first.
    """

    name = ""
    description = ""
    min_rows = 1
    min_cols = 1

    def seed(self, rows: int, cols: int) -> FrozenSet[Cell]:
        """Get the initial live cells for a board of the given size.

        Args:
            rows: Number of board rows
            cols: Number of board columns

        Returns:
            Frozenset of (row, col) coordinates of live cells

        Raises:
            InvalidBoardSize: If the board is smaller than the pattern needs
        """
        if rows < self.min_rows or cols < self.min_cols:
            raise InvalidBoardSize(rows, cols, self.min_rows, self.min_cols)
        return frozenset(self._cells(rows, cols))

    @abstractmethod
    def _cells(self, rows: int, cols: int) -> List[Cell]:
        """Return the live cells for a board already known to be large enough."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class GliderSeeder(Seeder):
    """Glider centred on the board midpoint."""

    name = "Glider"
    description = "Smallest spaceship, period-4"
    min_rows = 3
    min_cols = 3

    def _cells(self, rows: int, cols: int) -> List[Cell]:
        mid_row = rows // 2
        mid_col = cols // 2
        return [
            (mid_row - 1, mid_col),
            (mid_row, mid_col + 1),
            (mid_row + 1, mid_col - 1),
            (mid_row + 1, mid_col),
            (mid_row + 1, mid_col + 1),
        ]


def seed_board(seeder: Seeder, rows: int, cols: int) -> Board:
    """Build a board of the given size seeded with a pattern.

    Raises:
        InvalidBoardSize: If the board is smaller than the pattern needs
    """
    return Board(rows, cols, seeder.seed(rows, cols))


class SeederLibrary:
    """Manages the available seed patterns."""

    def __init__(self) -> None:
        self._seeders: Dict[str, Seeder] = {}
        self._load_builtin_seeders()

    def _load_builtin_seeders(self) -> None:
        """Load built-in seed patterns."""
        self.add_seeder(GliderSeeder())

    def add_seeder(self, seeder: Seeder) -> None:
        """Add a seeder to the library, replacing any with the same name.

        Args:
            seeder: Seeder to add
        """
        self._seeders[seeder.name] = seeder

    def get_seeder(self, name: str) -> Optional[Seeder]:
        """Get a seeder by name.

        Args:
            name: Pattern name

        Returns:
            Seeder instance or None if not found
        """
        return self._seeders.get(name)

    def list_seeders(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._seeders.keys())
