"""Conway's Game of Life implementation."""

import numpy as np

from .grid import Board


def next_cell_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rules to a single cell.

    Args:
        alive: Whether the cell is currently alive
        neighbors: Number of living neighbors (0-8)

    Returns:
        Whether the cell is alive in the next generation
    """
    if alive and (neighbors < 2 or neighbors > 3):
        return False  # under- or overpopulation
    if alive:
        return True  # survival on 2 or 3
    if neighbors == 3:
        return True  # reproduction
    return False


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with fewer than 2 or more than 3 neighbors dies
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - Any other dead cell stays dead

    Each generation is computed from the previous board into a fresh array
    and then swapped in as a whole; the board being read is never written.
    """

    def __init__(self, board: Board) -> None:
        """Initialize the game with a board.

        Args:
            board: The starting board
        """
        self._board = board
        self._generation = 0

    @property
    def board(self) -> Board:
        """Current board."""
        return self._board

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    def current_state(self) -> Board:
        """Get the current board (boards are immutable, so this is safe to share)."""
        return self._board

    def advance(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The newly committed board
        """
        self._board = Board.from_array(self._apply_rules(self._board))
        self._generation += 1
        return self._board

    def run(self, generations: int) -> Board:
        """Advance several generations.

        Args:
            generations: Number of generations to advance

        Returns:
            The board after the last generation

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.advance()
        return self._board

    @staticmethod
    def _apply_rules(board: Board) -> np.ndarray:
        """Compute the next generation's cells from a board."""
        neighbor_counts = board.count_all_neighbors()
        alive = board.cells > 0
        dead = ~alive

        dies = alive & ((neighbor_counts < 2) | (neighbor_counts > 3))
        survives = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
        born = dead & (neighbor_counts == 3)
        stays_dead = dead & (neighbor_counts != 3)

        next_cells = np.zeros(board.shape, dtype=np.int8)
        next_cells[dies] = 0
        next_cells[survives] = 1
        next_cells[born] = 1
        next_cells[stays_dead] = 0
        return next_cells
