"""Tests for the GameOfLife class."""

import numpy as np
import pytest
from lifeboard.core.grid import Board
from lifeboard.core.game import GameOfLife, next_cell_state


class TestNextCellState:
    """Test cases for the single-cell rule."""

    @pytest.mark.parametrize("neighbors", [0, 1, 4, 5, 6, 7, 8])
    def test_live_cell_dies(self, neighbors):
        """Test under- and overpopulation."""
        assert next_cell_state(True, neighbors) is False

    @pytest.mark.parametrize("neighbors", [2, 3])
    def test_live_cell_survives(self, neighbors):
        """Test survival."""
        assert next_cell_state(True, neighbors) is True

    def test_dead_cell_born(self):
        """Test reproduction."""
        assert next_cell_state(False, 3) is True

    @pytest.mark.parametrize("neighbors", [0, 1, 2, 4, 5, 6, 7, 8])
    def test_dead_cell_stays_dead(self, neighbors):
        """Test that other dead cells stay dead."""
        assert next_cell_state(False, neighbors) is False


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        board = Board(10, 10)
        game = GameOfLife(board)

        assert game.board is board
        assert game.current_state() is board
        assert game.generation == 0
        assert game.population == 0

    def test_dead_board_stays_dead(self):
        """Test that nothing is born on an empty board."""
        game = GameOfLife(Board(6, 6))
        board = game.advance()
        assert board.is_empty()
        assert game.generation == 1

    def test_extinction(self):
        """Test that a lone cell dies of underpopulation."""
        game = GameOfLife(Board(10, 10, [(5, 5)]))
        assert game.population == 1

        game.advance()
        assert game.population == 0
        assert game.generation == 1

    def test_dimensions_never_change(self):
        """Test that advancing keeps the board dimensions."""
        rng = np.random.default_rng(3)
        game = GameOfLife(Board.from_array(rng.random((7, 11)) < 0.5))

        for _ in range(5):
            assert game.advance().shape == (7, 11)

    def test_advance_returns_current_state(self):
        """Test that advance commits and returns the new board."""
        game = GameOfLife(Board(5, 5, [(2, 1), (2, 2), (2, 3)]))
        board = game.advance()
        assert game.current_state() is board

    def test_previous_board_is_untouched(self):
        """Test that advancing builds a new board instead of editing the old one."""
        initial = Board(5, 5, [(2, 1), (2, 2), (2, 3)])
        game = GameOfLife(initial)
        game.advance()

        assert initial.live_cells() == frozenset({(2, 1), (2, 2), (2, 3)})
        assert game.current_state() is not initial

    def test_full_block_board_is_still_life(self):
        """Test that a fully live 2x2 board never changes."""
        initial = Board(2, 2, [(0, 0), (0, 1), (1, 0), (1, 1)])
        game = GameOfLife(initial)

        for _ in range(5):
            assert game.advance() == initial

    def test_still_life_block(self):
        """Test that a block in open space is stable."""
        cells = {(4, 4), (4, 5), (5, 4), (5, 5)}
        game = GameOfLife(Board(10, 10, cells))

        for _ in range(5):
            game.advance()

        assert game.board.live_cells() == cells
        assert game.generation == 5

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        horizontal = {(2, 1), (2, 2), (2, 3)}
        vertical = {(1, 2), (2, 2), (3, 2)}
        game = GameOfLife(Board(5, 5, horizontal))

        assert game.advance().live_cells() == vertical
        assert game.advance().live_cells() == horizontal

    def test_blinker_on_edge(self):
        """Test that a blinker against an edge loses its out-of-range phase."""
        game = GameOfLife(Board(5, 5, [(0, 1), (0, 2), (0, 3)]))
        assert game.advance().live_cells() == frozenset({(0, 2), (1, 2)})

    def test_edge_cells_take_part_in_rules(self):
        """Test a full 3x3 board: corners survive, everything else dies."""
        game = GameOfLife(Board.from_array(np.ones((3, 3))))
        assert game.advance().live_cells() == frozenset({(0, 0), (0, 2), (2, 0), (2, 2)})

    def test_birth_in_corner(self):
        """Test that a corner cell with three live neighbors is born."""
        game = GameOfLife(Board(4, 4, [(0, 1), (1, 0), (1, 1)]))
        assert game.advance().get_cell(0, 0)

    def test_glider_translates(self):
        """Test that a glider moves one cell diagonally every four generations."""
        glider = {(4, 5), (5, 6), (6, 4), (6, 5), (6, 6)}
        game = GameOfLife(Board(10, 10, glider))

        board = game.run(4)

        assert board.live_cells() == frozenset((r + 1, c + 1) for r, c in glider)
        assert game.generation == 4

    def test_advance_matches_single_cell_rule(self):
        """Test the whole-board pass against the per-cell rule on random boards."""
        rng = np.random.default_rng(11)
        for _ in range(5):
            board = Board.from_array(rng.random((8, 9)) < 0.35)
            expected = {
                (row, col)
                for row, col, alive in board.iter_cells()
                if next_cell_state(alive, board.living_neighbor_count(row, col))
            }
            assert GameOfLife(board).advance().live_cells() == expected

    def test_run(self):
        """Test running several generations at once."""
        game1 = GameOfLife(Board(6, 6, [(2, 1), (2, 2), (2, 3), (3, 3)]))
        game2 = GameOfLife(game1.board)

        final = game1.run(3)
        for _ in range(3):
            game2.advance()

        assert final == game2.board
        assert game1.generation == 3

    def test_run_zero_generations(self):
        """Test that running zero generations keeps the board."""
        board = Board(3, 3, [(1, 1)])
        game = GameOfLife(board)
        assert game.run(0) is board
        assert game.generation == 0

    def test_run_negative_generations(self):
        """Test that negative generation counts are rejected."""
        game = GameOfLife(Board(3, 3))
        with pytest.raises(ValueError):
            game.run(-1)
