"""
Cache keys for search nodes.

A node is identified by the full board contents plus the remaining search
depth. The board part comes from Board.snapshot_key(), which is exact (no
hashing collisions), so two keys are equal iff the boards are identical and
the same depth remains to be searched.

Within one root search the depth remaining fixes the ply from the root, and
with it the side to move, so the key does not need to carry the player.
"""

from typing import Hashable, NamedTuple


class StateKey(NamedTuple):
    """Key of one search node in the transposition table."""
    snapshot: Hashable
    depth: int


def state_key(board, depth: int) -> StateKey:
    """
    Derive the cache key for `board` searched with `depth` plies remaining.

    Args:
        board: Board exposing snapshot_key()
        depth: Remaining search depth

    Returns:
        StateKey usable as a dict key
    """
    return StateKey(board.snapshot_key(), depth)
