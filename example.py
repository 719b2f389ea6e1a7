#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import GameOfLife, SeederLibrary, seed_board
from lifeboard.frontends.cli import render_board


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    library = SeederLibrary()
    glider = library.get_seeder("Glider")

    # Seed a glider in the middle of a 12x12 board
    game = GameOfLife(seed_board(glider, 12, 12))

    print("Initial state:")
    print(render_board(game.current_state()))
    print(f"Population: {game.population}")
    print()

    # The glider drifts toward the bottom-right corner until it hits the edge
    for _ in range(24):
        board = game.advance()
        print(f"Generation {game.generation}:")
        print(board)
        print(f"Population: {game.population}")

        if board.is_empty():
            print("Extinct!")
            break

        print()


if __name__ == "__main__":
    main()
