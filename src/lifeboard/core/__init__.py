"""Core Game of Life logic."""

from .grid import Board
from .game import GameOfLife, next_cell_state
from .patterns import GliderSeeder, InvalidBoardSize, Seeder, SeederLibrary, seed_board

__all__ = [
    "Board",
    "GameOfLife",
    "next_cell_state",
    "GliderSeeder",
    "InvalidBoardSize",
    "Seeder",
    "SeederLibrary",
    "seed_board",
]
