"""Conway's Game of Life on a fixed-size, non-wrapping board."""

__version__ = "0.1.0"

from .core.grid import Board
from .core.game import GameOfLife
from .core.patterns import GliderSeeder, InvalidBoardSize, Seeder, SeederLibrary, seed_board

__all__ = ["Board", "GameOfLife", "GliderSeeder", "InvalidBoardSize", "Seeder", "SeederLibrary", "seed_board"]
