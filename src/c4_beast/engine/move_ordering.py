"""
Move ordering for alpha-beta search.

Good move ordering is critical for alpha-beta pruning efficiency: the earlier
the best reply is searched, the more beta cutoffs happen. For gravity-drop
four in a row the center columns take part in the most lines, so columns are
visited center first, then alternating outward:

    center, center+1, center-1, center+2, center-2, ...

For the classic 7-wide board this gives 3, 4, 2, 5, 1, 6, 0.

The same order is used at the root and at every interior node; it is a pure
function of the board width.
"""

from functools import lru_cache


@lru_cache(maxsize=None)
def _center_out(width: int) -> tuple[int, ...]:
    center = width // 2
    order = [center]
    for offset in range(1, width):
        for col in (center + offset, center - offset):
            if 0 <= col < width:
                order.append(col)
    return tuple(order)


def center_out_order(width: int) -> list[int]:
    """
    Column visitation order for a board `width` columns wide.

    Args:
        width: Number of columns

    Returns:
        Every column index exactly once, center first
    """
    if width < 1:
        raise ValueError(f"Board width must be positive, got {width}")
    return list(_center_out(width))


class MoveOrdering:
    """
    Fixed center-out ordering bound to one board width.
    """

    def __init__(self, width: int):
        self.width = width
        self.order = center_out_order(width)

    def __iter__(self):
        return iter(self.order)

    def order_moves(self, board) -> list[int]:
        """Playable columns of `board`, highest priority first."""
        return [col for col in self.order if board.is_column_playable(col)]
