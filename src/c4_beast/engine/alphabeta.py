"""
Depth-bounded minimax search with alpha-beta pruning.

One AlphaBetaEngine instance holds all the mutable state of a single root
decision (own color, board size, node counter, transposition table). The
player builds a fresh engine for every decision, so nothing leaks from one
move to the next and separate decisions never share state.

Algorithm overview:

    def minimax(board, depth, maximizing, alpha, beta):
        if (score := tt.probe(key(board, depth), alpha, beta)) is not None:
            return score

        if depth == 0 or board is full:
            return evaluate(board)

        best = -inf if maximizing else +inf
        for col in center_out_order:
            child = copy(board); child.drop(col, side_to_move)
            value = minimax(child, depth - 1, not maximizing, alpha, beta)
            if maximizing:
                best = max(best, value); alpha = max(alpha, best)
            else:
                best = min(best, value); beta = min(beta, best)
            if beta <= alpha:
                break  # cutoff

        tt.store(key(board, depth), best, bound_type)
        return best

Scores are always from the engine's own point of view (plain minimax, not
negamax). A completed four is only seen through the evaluator's SCORE_WIN
term at the leaves; the search has no separate terminal check and all wins
compare equal regardless of depth.
"""

import time
from dataclasses import dataclass, field

from c4_beast.engine.evaluator import evaluate
from c4_beast.engine.move_ordering import MoveOrdering
from c4_beast.engine.state_key import state_key
from c4_beast.engine.transposition_table import (
    BoundType,
    CachePolicy,
    TranspositionTable,
    classify_bound,
)


# Returned when the root has no playable column
NO_MOVE = -1

# Open window bound, far above any reachable evaluation
SCORE_INF = 10**9


@dataclass
class SearchResult:
    """Result of a root search."""
    best_move: int
    score: int
    depth: int
    nodes_searched: int
    time_ms: int
    move_scores: dict[int, int] = field(default_factory=dict)
    tt_stats: dict = field(default_factory=dict)


class AlphaBetaEngine:
    """
    Alpha-beta minimax engine for one decision.

    Args:
        own_color: Side the engine maximizes for (1 or -1)
        size: Board width, used for the move order
        cache_policy: CachePolicy or its name
    """

    def __init__(self, own_color: int, size: int, cache_policy=CachePolicy.VERBATIM):
        if own_color not in (1, -1):
            raise ValueError(f"own_color must be 1 or -1, got {own_color}")
        self.own_color = own_color
        self.size = size
        self.move_ordering = MoveOrdering(size)
        self.tt = TranspositionTable(cache_policy)

        # Search statistics
        self.nodes_searched = 0

    def search_root(self, board, max_depth: int) -> SearchResult:
        """
        Pick the column with the highest minimax value.

        Every playable column is searched with the full window, opponent to
        move, `max_depth - 1` plies below it. Ties keep the column that comes
        first in the center-out order.

        Args:
            board: Current position (not modified)
            max_depth: Total plies including the root move, >= 1

        Returns:
            SearchResult; best_move is NO_MOVE if no column is playable
        """
        start = time.perf_counter()

        best_move = NO_MOVE
        best_score = -SCORE_INF
        move_scores = {}

        for col in self.move_ordering.order_moves(board):
            child = board.copy()
            child.drop(col, self.own_color)

            score = self.minimax(child, max_depth - 1, False, -SCORE_INF, SCORE_INF)
            move_scores[col] = score

            if score > best_score:
                best_score = score
                best_move = col

        elapsed_ms = int((time.perf_counter() - start) * 1000)

        return SearchResult(
            best_move=best_move,
            score=best_score if best_move != NO_MOVE else 0,
            depth=max_depth,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            move_scores=move_scores,
            tt_stats=self.tt.get_stats(),
        )

    def minimax(self, board, depth: int, maximizing: bool, alpha: int, beta: int) -> int:
        """
        Minimax value of `board` with alpha-beta pruning.

        Args:
            board: Position to search (not modified)
            depth: Remaining depth
            maximizing: True if the engine's own side moves next
            alpha: Best score the maximizer can already guarantee
            beta: Best score the minimizer can already guarantee

        Returns:
            Score from the engine's point of view. With a cutoff inside this
            node the value is a bound, not necessarily exact.
        """
        self.nodes_searched += 1

        key = state_key(board, depth)
        cached = self.tt.probe(key, alpha, beta)
        if cached is not None:
            return cached

        if depth == 0 or not board.has_any_legal_move():
            score = evaluate(board, self.own_color)
            self.tt.store(key, score, BoundType.EXACT)
            return score

        original_alpha, original_beta = alpha, beta
        color = self.own_color if maximizing else -self.own_color
        best = -SCORE_INF if maximizing else SCORE_INF

        for col in self.move_ordering.order_moves(board):
            child = board.copy()
            child.drop(col, color)

            value = self.minimax(child, depth - 1, not maximizing, alpha, beta)

            if maximizing:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)

            if beta <= alpha:
                break  # Alpha-beta cutoff

        self.tt.store(key, best, classify_bound(best, original_alpha, original_beta))
        return best
