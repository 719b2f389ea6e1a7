"""Board data structure for the Game of Life."""

from typing import FrozenSet, Iterable, Iterator, Tuple
import numpy as np
import torch
import torch.nn.functional as F

Cell = Tuple[int, int]

# 3x3 ring kernel: every neighbor counts once, the centre cell not at all
_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)

_NEIGHBOR_OFFSETS: Tuple[Cell, ...] = (
    (-1, -1),  # top-left
    (-1, 0),  # top
    (-1, 1),  # top-right
    (0, 1),  # right
    (1, 1),  # bottom-right
    (1, 0),  # bottom
    (1, -1),  # bottom-left
    (0, -1),  # left
)


class Board:
    """A fixed-size, immutable 2D board of live/dead cells.

    Cells are stored in a numpy array of shape (rows, cols) indexed by
    [row, col]. Edges do not wrap: coordinates outside
    [0, rows) x [0, cols) simply do not exist.
    """

    def __init__(self, rows: int, cols: int, live_cells: Iterable[Cell] = ()) -> None:
        """Initialize a new board.

        Args:
            rows: Number of rows
            cols: Number of columns
            live_cells: (row, col) coordinates of the cells that start alive

        Raises:
            ValueError: If rows or cols is not positive
            IndexError: If a live cell lies outside the board
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        cells = np.zeros((rows, cols), dtype=np.int8)
        for row, col in live_cells:
            if not (0 <= row < rows and 0 <= col < cols):
                raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
            cells[row, col] = 1

        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_array(cls, data) -> "Board":
        """Create a board from a 2D array-like of cell states.

        Args:
            data: Nested list or array; truthy entries are alive

        Returns:
            New Board holding a copy of the data

        Raises:
            ValueError: If data is not two-dimensional
        """
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise ValueError(f"Board data must be two-dimensional, got shape {arr.shape}")

        board = cls(arr.shape[0], arr.shape[1])
        cells = (arr != 0).astype(np.int8)
        cells.flags.writeable = False
        board._cells = cells
        return board

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (rows, cols)."""
        return (self._rows, self._cols)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        return self._cells

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.sum(self._cells > 0))

    def is_empty(self) -> bool:
        return self.population == 0

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        return bool(self._cells[row, col])

    def live_cells(self) -> FrozenSet[Cell]:
        """Get coordinates of all living cells."""
        rows, cols = np.nonzero(self._cells)
        return frozenset((int(r), int(c)) for r, c in zip(rows, cols))

    def iter_cells(self) -> Iterator[Tuple[int, int, bool]]:
        """Iterate over every cell in row-major order.

        Yields:
            Tuples of (row, col, alive)
        """
        for row in range(self._rows):
            for col in range(self._cols):
                yield (row, col, bool(self._cells[row, col]))

    def living_neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        A neighbor contributes only if it lies inside the board, so corner
        cells have three candidate neighbors and edge cells five.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr, dc in _NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self._rows and 0 <= nc < self._cols:
                count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding gives the same clamped, non-wrapping topology as
        living_neighbor_count.

        Returns:
            Array of shape (rows, cols) with the neighbor count of each cell
        """
        board_input = torch.from_numpy((self._cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(board_input, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def to_list(self) -> list:
        """Convert board to nested list of 0/1 values."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two boards are equal."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, cols={self._cols}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as 'O' and dead as '.'."""
        return "\n".join(
            "".join("O" if alive else "." for alive in row) for row in self._cells
        )
