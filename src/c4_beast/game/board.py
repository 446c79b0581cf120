import numpy as np


EMPTY = 0


class Board:
    """
    Square gravity-drop board (generalized four in a row).

    Board: size x size cells
    Values: 0 = empty, 1 and -1 for the two sides
    Row 0 is the TOP of the board, row size-1 is the BOTTOM.
    Actions: column index (0 to size-1) - disc drops to lowest empty row
    """

    def __init__(self, size=7, state=None, win_length=4):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.win_length = win_length
        if state is None:
            self.state = np.zeros((size, size), dtype=np.int8)
        else:
            self.state = np.asarray(state, dtype=np.int8).copy()
            if self.state.shape != (size, size):
                raise ValueError(f"State shape {self.state.shape} does not match size {size}")

    def __repr__(self):
        return f"Board({self.size}x{self.size}, pieces={int(np.count_nonzero(self.state))})"

    def __str__(self):
        symbols = {1: "X", -1: "O", 0: "."}
        lines = [" " + " ".join(str(c % 10) for c in range(self.size))]
        for row in range(self.size):
            lines.append("|" + "|".join(symbols[int(v)] for v in self.state[row]) + "|")
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.state, other.state)

    # Mutable: boards compare by contents and are not hashable
    __hash__ = None

    @classmethod
    def from_rows(cls, rows, win_length=4):
        """
        Build a board from text rows, top row first.

        'X' is side 1, 'O' is side -1, '.' is empty. Rows are not checked
        for gravity, so floating pieces are accepted.

        Example:
            Board.from_rows([
                ".......",
                ...
                "OOO....",
            ])
        """
        mapping = {"X": 1, "O": -1, ".": EMPTY}
        size = len(rows)
        state = np.zeros((size, size), dtype=np.int8)
        for r, line in enumerate(rows):
            if len(line) != size:
                raise ValueError(f"Row {r} has length {len(line)}, expected {size}")
            for c, ch in enumerate(line):
                if ch not in mapping:
                    raise ValueError(f"Unknown cell symbol {ch!r} at ({r}, {c})")
                state[r, c] = mapping[ch]
        return cls(size, state, win_length=win_length)

    def copy(self):
        """Independent board with identical contents."""
        return Board(self.size, self.state, win_length=self.win_length)

    def color_at(self, row, col):
        return int(self.state[row, col])

    def is_column_playable(self, col):
        """A column is playable if it is on the board and its top cell is empty."""
        if col < 0 or col >= self.size:
            return False
        return bool(self.state[0, col] == EMPTY)

    def valid_moves(self):
        """Returns the list of playable column indices, left to right."""
        return [int(c) for c in np.flatnonzero(self.state[0] == EMPTY)]

    def has_any_legal_move(self):
        return bool(np.any(self.state[0] == EMPTY))

    def drop(self, col, color):
        """
        Gravity-place a disc of `color` in column `col`, in place.

        Returns:
            Row index where the disc landed
        """
        if not self.is_column_playable(col):
            raise ValueError(f"Column {col} is full or off the board")

        for row in range(self.size - 1, -1, -1):
            if self.state[row, col] == EMPTY:
                self.state[row, col] = color
                return row

        # Unreachable: the top cell was checked above
        raise ValueError(f"Column {col} is full")

    def snapshot_key(self):
        """Canonical hashable snapshot of the full board contents."""
        return (self.size, self.state.tobytes())

    def check_win(self, col):
        """
        Check if the last move (topmost disc in `col`) completed a line.

        Args:
            col: Column index of the last move

        Returns:
            True if win_length in a row achieved through that disc
        """
        if col is None or col < 0 or col >= self.size:
            return False

        column = self.state[:, col]
        occupied = np.flatnonzero(column != EMPTY)
        if len(occupied) == 0:
            return False

        row = int(occupied[0])
        player = self.state[row, col]

        for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
            count = 1
            for sign in (1, -1):
                r, c = row + sign * dr, col + sign * dc
                while 0 <= r < self.size and 0 <= c < self.size and self.state[r, c] == player:
                    count += 1
                    r += sign * dr
                    c += sign * dc
            if count >= self.win_length:
                return True

        return False
