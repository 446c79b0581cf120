"""
Unit tests for the player interface and the C4Beast decision entry point.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from c4_beast.game.board import Board
from c4_beast.engine.transposition_table import CachePolicy
from c4_beast.player import BeastPlayer, NO_MOVE, Player, RandomPlayer


def random_position(seed, num_moves, size=7):
    rng = np.random.default_rng(seed)
    board = Board(size)
    color = 1
    for _ in range(num_moves):
        board.drop(int(rng.choice(board.valid_moves())), color)
        color = -color
    return board


class TestBeastPlayer:

    def test_name(self):
        assert BeastPlayer().name() == "C4Beast"
        assert BeastPlayer(name="Other").name() == "Other"
        assert isinstance(BeastPlayer(), Player)

    def test_empty_board_center(self):
        player = BeastPlayer(depth=2)
        assert player.choose_move(Board(7), 1) == 3
        assert player.choose_move(Board(7), -1) == 3

    def test_blocks_threat(self):
        board = Board.from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "XOOO...",
        ])
        assert BeastPlayer(depth=2).choose_move(board, 1) == 4

    def test_caller_board_unchanged(self):
        board = random_position(seed=1, num_moves=11)
        before = board.state.copy()
        col = BeastPlayer(depth=3).choose_move(board, 1)
        assert np.array_equal(board.state, before)
        assert board.is_column_playable(col)

    def test_deterministic(self):
        board = random_position(seed=2, num_moves=8)
        player = BeastPlayer(depth=3)
        first = player.choose_move(board, -1)
        first_nodes = player.last_result.nodes_searched
        second = player.choose_move(board, -1)

        assert first == second
        # Fresh cache per decision: identical work both times
        assert player.last_result.nodes_searched == first_nodes

    def test_no_legal_move(self):
        board = Board(2)
        for col in (0, 0, 1, 1):
            board.drop(col, 1)
        player = BeastPlayer(depth=2)
        assert player.choose_move(board, 1) == NO_MOVE
        assert player.last_result.move_scores == {}

    def test_cache_policies_agree_on_simple_threat(self):
        board = Board.from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "OOO....",
        ])
        for policy in CachePolicy:
            assert BeastPlayer(depth=3, cache_policy=policy).choose_move(board, 1) == 3

    def test_last_result_diagnostics(self):
        player = BeastPlayer(depth=2, cache_policy="bounded")
        player.choose_move(Board(7), 1)
        result = player.last_result
        assert result.depth == 2
        assert set(result.move_scores) == set(range(7))
        assert result.nodes_searched > 7
        assert result.tt_stats['policy'] == 'bounded'

    def test_rejects_bad_depth(self):
        with pytest.raises(ValueError):
            BeastPlayer(depth=0)

    def test_rejects_bad_cache_policy(self):
        with pytest.raises(ValueError):
            BeastPlayer(cache_policy="forever")

    def test_logs_decision(self, caplog):
        with caplog.at_level("INFO", logger="c4_beast.player"):
            BeastPlayer(depth=1).choose_move(Board(7), 1)
        messages = " ".join(r.getMessage() for r in caplog.records)
        assert "nodes explored" in messages
        assert "chosen column 3" in messages


class TestRandomPlayer:

    def test_plays_legal_moves(self):
        board = Board.from_rows([
            "X.X.",
            "O.O.",
            "X.X.",
            "O.O.",
        ])
        player = RandomPlayer(seed=0)
        for _ in range(20):
            assert player.choose_move(board, 1) in (1, 3)

    def test_seeded(self):
        board = Board(7)
        a = [RandomPlayer(seed=5).choose_move(board, 1) for _ in range(3)]
        b = [RandomPlayer(seed=5).choose_move(board, 1) for _ in range(3)]
        assert a == b

    def test_full_board(self):
        board = Board(1)
        board.drop(0, 1)
        assert RandomPlayer(seed=0).choose_move(board, -1) == NO_MOVE
