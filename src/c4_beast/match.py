"""
Referee: plays one game between two players.
"""

import logging
import numbers
from dataclasses import dataclass, field
from typing import Optional

from c4_beast.config import BOARD_CONFIG
from c4_beast.game.board import Board

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of a finished game."""
    winner: Optional[int]           # 1, -1, or None for a draw
    moves: list[int] = field(default_factory=list)
    board: Optional[Board] = None
    forfeit: bool = False           # Winner won because the loser made an illegal move

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def play_game(first, second, size=BOARD_CONFIG['size'], win_length=BOARD_CONFIG['win_length'],
              on_move=None) -> GameRecord:
    """
    Play a full game. `first` plays color 1 and moves first, `second` plays -1.

    Players receive a copy of the board each turn. A player answering with
    NO_MOVE, a non-integer or an unplayable column forfeits.

    Args:
        first: Player for color 1
        second: Player for color -1
        size: Board side length
        win_length: Discs in a row needed to win
        on_move: Optional callback (board, color, column) after each legal move

    Returns:
        GameRecord
    """
    board = Board(size, win_length=win_length)
    players = {1: first, -1: second}
    moves = []
    color = 1

    while board.has_any_legal_move():
        player = players[color]
        col = player.choose_move(board.copy(), color)

        if not isinstance(col, numbers.Integral) or not board.is_column_playable(col):
            logger.warning("%s (color %+d) played illegal column %r and forfeits",
                           player.name(), color, col)
            return GameRecord(winner=-color, moves=moves, board=board, forfeit=True)

        board.drop(col, color)
        moves.append(col)
        if on_move is not None:
            on_move(board, color, col)

        if board.check_win(col):
            logger.info("%s (color %+d) wins after %d moves", player.name(), color, len(moves))
            return GameRecord(winner=color, moves=moves, board=board)

        color = -color

    logger.info("Draw after %d moves", len(moves))
    return GameRecord(winner=None, moves=moves, board=board)
