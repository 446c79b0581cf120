"""
C4Beast: alpha-beta player for gravity-drop four-in-a-row on square boards.
"""

from c4_beast.game.board import Board
from c4_beast.player import Player, BeastPlayer, RandomPlayer, NO_MOVE
from c4_beast.match import play_game, GameRecord

__all__ = [
    'Board',
    'Player',
    'BeastPlayer',
    'RandomPlayer',
    'NO_MOVE',
    'play_game',
    'GameRecord',
]

__version__ = "0.1"
