"""
Static evaluation of a board: directional line windows.

Every cell is the start of one window of four cells in each of the four
directions (horizontal, vertical, diagonal, anti-diagonal). A window is
scanned in order and abandoned at the first opposing disc; otherwise it is
worth

    4 own                  -> SCORE_WIN
    3 own + 1 empty        -> SCORE_THREE
    2 own + 2 empty        -> SCORE_TWO
    anything else          -> 0

Cells past the edge of the board count as neither own nor empty. Scoring
needs four own-or-empty cells, so only windows lying fully on the board can
score, and any window holding an opposing disc scores 0. The windows are
therefore precomputed per board size as flat cell indices and scored in one
vectorized pass.
"""

from functools import lru_cache

import numpy as np


# Window values
SCORE_WIN = 10000
SCORE_THREE = 50
SCORE_TWO = 10

WINDOW_LENGTH = 4

# (d_row, d_col)
DIRECTIONS = {
    'horizontal': (0, 1),
    'vertical': (1, 0),
    'diagonal': (1, 1),
    'anti_diagonal': (1, -1),
}


@lru_cache(maxsize=None)
def window_indices(size: int, direction: tuple[int, int]) -> np.ndarray:
    """
    Flat cell indices of every on-board window for one direction.

    Args:
        size: Board side length
        direction: (d_row, d_col)

    Returns:
        Array of shape (num_windows, WINDOW_LENGTH); empty if the board is
        too small to hold a window
    """
    dr, dc = direction
    windows = []
    for row in range(size):
        for col in range(size):
            cells = [(row + k * dr, col + k * dc) for k in range(WINDOW_LENGTH)]
            if all(0 <= r < size and 0 <= c < size for r, c in cells):
                windows.append([r * size + c for r, c in cells])
    result = np.array(windows, dtype=np.intp).reshape(-1, WINDOW_LENGTH)
    result.flags.writeable = False
    return result


def direction_score(board, color: int, direction: tuple[int, int]) -> int:
    """Sum of window values for `color` along one direction."""
    windows = window_indices(board.size, direction)
    if len(windows) == 0:
        return 0

    cells = board.state.reshape(-1)[windows]
    own = np.count_nonzero(cells == color, axis=1)
    empty = np.count_nonzero(cells == 0, axis=1)

    wins = np.count_nonzero(own == 4)
    threes = np.count_nonzero((own == 3) & (empty == 1))
    twos = np.count_nonzero((own == 2) & (empty == 2))

    return int(wins * SCORE_WIN + threes * SCORE_THREE + twos * SCORE_TWO)


def line_score(board, color: int) -> int:
    """
    How favorable the board's lines are for `color`.

    Args:
        board: Board to score
        color: Side to score (1 or -1)

    Returns:
        Non-negative score; each completed four adds SCORE_WIN
    """
    return sum(direction_score(board, color, d) for d in DIRECTIONS.values())


def evaluate(board, own_color: int) -> int:
    """
    Zero-sum leaf score: positive favors `own_color`.
    """
    return line_score(board, own_color) - line_score(board, -own_color)
