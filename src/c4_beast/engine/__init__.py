"""
Alpha-beta search engine for gravity-drop four in a row.

This module contains the search components:
- State keys (exact board snapshot + remaining depth)
- Transposition table scoped to one decision
- Line-window static evaluation
- Center-out move ordering
- Alpha-beta minimax search and root move selection
"""

from c4_beast.engine.state_key import StateKey, state_key
from c4_beast.engine.transposition_table import TranspositionTable, BoundType, CachePolicy, TTEntry
from c4_beast.engine.move_ordering import MoveOrdering, center_out_order
from c4_beast.engine.evaluator import evaluate, line_score, SCORE_WIN, SCORE_THREE, SCORE_TWO
from c4_beast.engine.alphabeta import AlphaBetaEngine, SearchResult, NO_MOVE, SCORE_INF

__all__ = [
    'StateKey',
    'state_key',
    'TranspositionTable',
    'BoundType',
    'CachePolicy',
    'TTEntry',
    'MoveOrdering',
    'center_out_order',
    'evaluate',
    'line_score',
    'SCORE_WIN',
    'SCORE_THREE',
    'SCORE_TWO',
    'AlphaBetaEngine',
    'SearchResult',
    'NO_MOVE',
    'SCORE_INF',
]
