"""
Players: the interface a referee drives, and the search-based C4Beast.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from c4_beast.config import PLAYER_CONFIG, SEARCH_CONFIG
from c4_beast.engine.alphabeta import NO_MOVE, AlphaBetaEngine, SearchResult
from c4_beast.engine.transposition_table import CachePolicy

logger = logging.getLogger(__name__)


class Player(ABC):
    """
    Abstract Base Class for anything that can take a turn.
    """

    @abstractmethod
    def name(self) -> str:
        """
        Returns the player's display name.
        """
        pass

    @abstractmethod
    def choose_move(self, board, color: int) -> int:
        """
        Returns the column to play for `color` on `board`, or NO_MOVE.
        """
        pass


class BeastPlayer(Player):
    """
    Alpha-beta minimax player.

    Each decision runs a fresh AlphaBetaEngine: empty transposition table,
    node counter at zero, own color and board size taken from the call.
    The caller's board is never modified.
    """

    def __init__(
        self,
        depth: int = SEARCH_CONFIG['max_depth'],
        cache_policy=SEARCH_CONFIG['cache_policy'],
        name: str = PLAYER_CONFIG['name'],
    ):
        """
        Args:
            depth: Plies searched per decision, root move included (>= 1)
            cache_policy: 'verbatim', 'bounded', 'disabled' or a CachePolicy
            name: Display name
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.depth = depth
        self.cache_policy = CachePolicy.parse(cache_policy)
        self._name = name

        # Diagnostics from the most recent decision
        self.last_result: Optional[SearchResult] = None

    def __repr__(self):
        return f"BeastPlayer(depth={self.depth}, cache_policy={self.cache_policy.value!r})"

    def name(self) -> str:
        return self._name

    def choose_move(self, board, color: int) -> int:
        logger.info("%s: starting decision at depth %d (board %dx%d, color %+d)",
                    self._name, self.depth, board.size, board.size, color)

        engine = AlphaBetaEngine(color, board.size, self.cache_policy)
        result = engine.search_root(board, self.depth)
        self.last_result = result

        logger.info("%s: nodes explored: %d", self._name, result.nodes_searched)
        if result.best_move == NO_MOVE:
            logger.info("%s: no playable column", self._name)
        else:
            logger.info("%s: chosen column %d with value %d", self._name, result.best_move, result.score)
        logger.debug("%s: column scores %s, cache %s, %d ms",
                     self._name, result.move_scores, result.tt_stats, result.time_ms)

        return result.best_move


class RandomPlayer(Player):
    """
    Uniformly random legal moves, for matches and smoke tests.
    """

    def __init__(self, seed: Optional[int] = None, name: str = "Random"):
        self.rng = np.random.default_rng(seed)
        self._name = name

    def name(self) -> str:
        return self._name

    def choose_move(self, board, color: int) -> int:
        valid = board.valid_moves()
        if not valid:
            return NO_MOVE
        return int(self.rng.choice(valid))
