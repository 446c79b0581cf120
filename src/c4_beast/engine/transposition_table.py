"""
Transposition table for caching alpha-beta search results.

The table lives for a single root decision: it is created empty when the
search starts and dropped with the engine afterwards. Keys are StateKey
tuples (exact board snapshot + remaining depth), so there are no collisions
and no depth-sufficiency check is needed.

Key concepts:
- Bound types: EXACT (value searched inside the window), LOWER (fail-high,
  true value >= stored), UPPER (fail-low, true value <= stored)
- Reuse policy: how a stored entry may be returned on a later probe

Reuse policies:
- VERBATIM: every hit is returned as stored, whatever its bound. A value
  produced by a cutoff can therefore be reused as if it were exact, which is
  an approximation of the true minimax value. This is the reference
  behavior of the player and the default.
- BOUNDED: EXACT entries are always usable, LOWER entries only when they
  already fail high against the current beta, UPPER entries only when they
  already fail low against the current alpha.
- DISABLED: nothing is stored, every probe misses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from c4_beast.engine.state_key import StateKey


class BoundType(Enum):
    """Type of bound stored in transposition table entry."""
    EXACT = 0   # Exact value (searched with the window open)
    LOWER = 1   # Lower bound (beta cutoff, actual value >= stored value)
    UPPER = 2   # Upper bound (alpha cutoff, actual value <= stored value)


class CachePolicy(Enum):
    """How stored entries are reused on probe."""
    VERBATIM = "verbatim"
    BOUNDED = "bounded"
    DISABLED = "disabled"

    @classmethod
    def parse(cls, value) -> "CachePolicy":
        """Accept a CachePolicy or its string name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown cache policy {value!r} (expected one of: {names})") from None


@dataclass
class TTEntry:
    """
    Transposition table entry.

    Attributes:
        score: Evaluation score (or bound)
        bound: Type of bound (EXACT/LOWER/UPPER)
    """
    score: int
    bound: BoundType


def classify_bound(score: int, alpha: int, beta: int) -> BoundType:
    """
    Bound type of a node value given the window the node was entered with.

    Args:
        score: Value returned by the node
        alpha: Alpha when the node was entered
        beta: Beta when the node was entered
    """
    if score <= alpha:
        return BoundType.UPPER  # All moves failed low
    if score >= beta:
        return BoundType.LOWER  # We failed high
    return BoundType.EXACT


class TranspositionTable:
    """
    Dict-backed transposition table scoped to one decision.
    """

    def __init__(self, policy=CachePolicy.VERBATIM):
        self.policy = CachePolicy.parse(policy)
        self.table: dict[StateKey, TTEntry] = {}

        # Statistics
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self):
        return len(self.table)

    def __contains__(self, key):
        return key in self.table

    def probe(self, key: StateKey, alpha: int, beta: int) -> Optional[int]:
        """
        Probe transposition table for a cached score.

        Args:
            key: Node key
            alpha: Current alpha bound
            beta: Current beta bound

        Returns:
            Stored score if the entry is usable under the table's policy,
            None otherwise
        """
        entry = self.table.get(key)

        if entry is None:
            self.misses += 1
            return None

        if self.policy is CachePolicy.VERBATIM or entry.bound is BoundType.EXACT:
            self.hits += 1
            return entry.score

        if entry.bound is BoundType.LOWER and entry.score >= beta:
            self.hits += 1
            return entry.score
        if entry.bound is BoundType.UPPER and entry.score <= alpha:
            self.hits += 1
            return entry.score

        self.misses += 1
        return None

    def store(self, key: StateKey, score: int, bound: BoundType = BoundType.EXACT):
        """
        Store a node value. Later stores for the same key replace earlier ones.
        """
        if self.policy is CachePolicy.DISABLED:
            return
        self.table[key] = TTEntry(score=score, bound=bound)
        self.stores += 1

    def clear(self):
        """Drop all entries and reset statistics."""
        self.table.clear()
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get_stats(self) -> dict:
        """
        Get transposition table statistics.

        Returns:
            Dictionary with hits, misses, hit rate, stores and size
        """
        total_queries = self.hits + self.misses
        hit_rate = self.hits / total_queries if total_queries > 0 else 0.0

        return {
            'policy': self.policy.value,
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'stores': self.stores,
            'size_entries': len(self.table),
        }
