"""
Unit tests for the line-window static evaluator.

Window values: four = SCORE_WIN (10000), three + gap = SCORE_THREE (50),
two + two gaps = SCORE_TWO (10).
"""

import numpy as np
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from c4_beast.game.board import Board
from c4_beast.engine.evaluator import (
    DIRECTIONS,
    SCORE_THREE,
    SCORE_TWO,
    SCORE_WIN,
    direction_score,
    evaluate,
    line_score,
    window_indices,
)


EMPTY_ROWS = ["......."] * 7


def board_with(*rows_from_bottom):
    """7x7 board; the given rows fill the bottom of the board, bottom row first."""
    rows = EMPTY_ROWS[:7 - len(rows_from_bottom)] + list(reversed(rows_from_bottom))
    return Board.from_rows(rows)


def random_position(rng, size=7, num_moves=12):
    board = Board(size)
    color = 1
    for _ in range(num_moves):
        valid = board.valid_moves()
        if not valid:
            break
        board.drop(int(rng.choice(valid)), color)
        color = -color
    return board


class TestWindows:

    def test_window_counts_7x7(self):
        assert len(window_indices(7, DIRECTIONS['horizontal'])) == 28
        assert len(window_indices(7, DIRECTIONS['vertical'])) == 28
        assert len(window_indices(7, DIRECTIONS['diagonal'])) == 16
        assert len(window_indices(7, DIRECTIONS['anti_diagonal'])) == 16

    def test_board_too_small_for_a_window(self):
        board = Board.from_rows(["XXX", "XXX", "XXX"])
        assert len(window_indices(3, DIRECTIONS['horizontal'])) == 0
        assert line_score(board, 1) == 0


class TestLineScore:

    def test_empty_board(self):
        board = Board(7)
        assert line_score(board, 1) == 0
        assert line_score(board, -1) == 0
        assert evaluate(board, 1) == 0

    def test_single_disc_scores_nothing(self):
        board = board_with("...X...")
        assert line_score(board, 1) == 0

    def test_open_three_horizontal(self):
        # XXX. -> three with a gap, XX.. -> two with two gaps
        board = board_with("XXX....")
        assert line_score(board, 1) == SCORE_THREE + SCORE_TWO

    def test_opposing_disc_kills_window(self):
        board = board_with("XXXO...")
        assert line_score(board, 1) == 0
        assert line_score(board, -1) == 0

    def test_open_three_vertical(self):
        board = board_with("X......", "X......", "X......")
        assert direction_score(board, 1, DIRECTIONS['vertical']) == SCORE_THREE + SCORE_TWO
        assert direction_score(board, 1, DIRECTIONS['horizontal']) == 0
        assert line_score(board, 1) == SCORE_THREE + SCORE_TWO

    def test_opponent_score_is_subtracted(self):
        board = board_with("XXX.OO.")
        x_score = line_score(board, 1)
        o_score = line_score(board, -1)
        assert evaluate(board, 1) == x_score - o_score
        assert evaluate(board, -1) == o_score - x_score


class TestWinMagnitude:
    """A completed four is worth exactly one SCORE_WIN on top of small partials."""

    def test_horizontal_four(self):
        board = board_with("XXXX...")
        # XXXX, XXX., XX..
        assert direction_score(board, 1, DIRECTIONS['horizontal']) == SCORE_WIN + SCORE_THREE + SCORE_TWO
        assert line_score(board, 1) == SCORE_WIN + SCORE_THREE + SCORE_TWO

    def test_vertical_four(self):
        board = board_with("X......", "X......", "X......", "X......")
        assert line_score(board, 1) == SCORE_WIN + SCORE_THREE + SCORE_TWO

    def test_diagonal_four(self):
        board = Board.from_rows([
            ".......",
            ".......",
            ".......",
            "X......",
            ".X.....",
            "..X....",
            "...X...",
        ])
        assert direction_score(board, 1, DIRECTIONS['diagonal']) == SCORE_WIN
        assert line_score(board, 1) == SCORE_WIN

    def test_anti_diagonal_four(self):
        board = Board.from_rows([
            ".......",
            ".......",
            ".......",
            "...O...",
            "..O....",
            ".O.....",
            "O......",
        ])
        assert direction_score(board, -1, DIRECTIONS['anti_diagonal']) == SCORE_WIN + SCORE_THREE + SCORE_TWO
        assert evaluate(board, 1) == -(SCORE_WIN + SCORE_THREE + SCORE_TWO)

    def test_win_dominates_non_winning_boards(self):
        rng = np.random.default_rng(7)
        winning = line_score(board_with("XXXX..."), 1)
        for _ in range(50):
            board = random_position(rng, num_moves=6)
            # Six plies leave each side three discs: no four possible
            assert evaluate(board, 1) < winning


class TestSymmetry:

    def test_evaluate_is_zero_sum(self):
        rng = np.random.default_rng(1234)
        for num_moves in range(0, 40, 3):
            board = random_position(rng, num_moves=num_moves)
            assert evaluate(board, 1) == -evaluate(board, -1)

    def test_other_sizes(self):
        rng = np.random.default_rng(99)
        for size in (4, 5, 6, 8, 9):
            board = random_position(rng, size=size, num_moves=size * 2)
            assert evaluate(board, 1) == -evaluate(board, -1)

    def test_pure_function(self):
        board = board_with("XOXX...", "OXO....")
        before = board.state.copy()
        first = evaluate(board, 1)
        assert evaluate(board, 1) == first
        assert np.array_equal(board.state, before)
