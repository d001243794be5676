"""
N x N TicTacToe board and rules.

Board representation: numpy int8 array of shape (size, size)
  - 0: empty
  - +1: X
  - -1: O

Coordinates from move sources are text, 1-indexed, "row column" (e.g. "2 3").
Internally rows and columns are 0-indexed.
"""

import re
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np


EMPTY_GLYPH = "."

# ASCII digits only, no "_" separators
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class Cell(IntEnum):
    """Cell state. X and O are the two player symbols."""
    EMPTY = 0
    X = 1
    O = -1

    @property
    def glyph(self) -> str:
        return EMPTY_GLYPH if self is Cell.EMPTY else self.name

    def __str__(self) -> str:
        return self.glyph


PLAYER_SYMBOLS = (Cell.X, Cell.O)


def is_player_symbol(symbol) -> bool:
    """True only for Cell.X and Cell.O, not for plain ints equal to them."""
    return isinstance(symbol, Cell) and symbol is not Cell.EMPTY


class MoveResult(Enum):
    """Outcome of a placement attempt."""
    OK = "ok"
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """
    Parse "row column" text into a 0-indexed (row, col) pair.

    Returns None when the text is not exactly two whitespace-separated
    integers. No bounds check is done here.
    """
    if not isinstance(text, str):
        return None
    parts = text.split()
    if len(parts) != 2:
        return None
    if not all(INTEGER_TOKEN.fullmatch(p) for p in parts):
        return None
    row, col = (int(p) for p in parts)
    return row - 1, col - 1


class Board:
    """
    Square game field. Only full-length lines win, so the line length
    grows with the board (a 5x5 board needs 5 in a line).
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"board size must be >= 1, got {size}")
        self._size = int(size)
        self._cells = np.zeros((self._size, self._size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    def reset(self):
        """Clear every cell."""
        self._cells.fill(Cell.EMPTY)

    def render(self) -> str:
        """Row-major text, one row per line, cells separated by spaces."""
        return "\n".join(
            " ".join(Cell(int(v)).glyph for v in row) for row in self._cells
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self):
        return f"Board(size={self._size}, moves={self.move_count})"

    # Moves

    def try_place(self, symbol: Cell, coordinates: str) -> MoveResult:
        """
        Place symbol at 1-indexed "row column" coordinates.

        Never raises for bad input; the grid is untouched unless the
        result is MoveResult.OK.
        """
        if not is_player_symbol(symbol):
            return MoveResult.MALFORMED

        parsed = parse_coordinates(coordinates)
        if parsed is None:
            return MoveResult.MALFORMED

        row, col = parsed
        if not (0 <= row < self._size and 0 <= col < self._size):
            return MoveResult.OUT_OF_RANGE

        if self._cells[row, col] != Cell.EMPTY:
            return MoveResult.OCCUPIED

        self._cells[row, col] = symbol
        return MoveResult.OK

    def place_symbol(self, symbol: Cell, coordinates: str) -> bool:
        """Return True if the move was applied."""
        return self.try_place(symbol, coordinates) is MoveResult.OK

    # Queries

    def cell(self, row: int, col: int) -> Cell:
        """Cell at 0-indexed (row, col)."""
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(f"({row}, {col}) is outside a {self._size}x{self._size} board")
        return Cell(int(self._cells[row, col]))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Return 1-indexed (row, col) of empty cells, row-major."""
        rows, cols = np.nonzero(self._cells == Cell.EMPTY)
        return [(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]

    def to_array(self) -> np.ndarray:
        """Copy of the grid."""
        return self._cells.copy()

    @property
    def move_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def is_full(self) -> bool:
        return not np.any(self._cells == Cell.EMPTY)

    def is_win(self, symbol: Cell) -> bool:
        """True if symbol fills any row, column or main diagonal."""
        if not is_player_symbol(symbol):
            return False
        return (
            self.check_rows(symbol)
            or self.check_columns(symbol)
            or self.check_diagonals(symbol)
        )

    def check_rows(self, symbol: Cell) -> bool:
        for i in range(self._size):
            if np.count_nonzero(self._cells[i, :] == symbol) == self._size:
                return True
        return False

    def check_columns(self, symbol: Cell) -> bool:
        for j in range(self._size):
            if np.count_nonzero(self._cells[:, j] == symbol) == self._size:
                return True
        return False

    def check_diagonals(self, symbol: Cell) -> bool:
        if np.count_nonzero(np.diag(self._cells) == symbol) == self._size:
            return True
        # anti-diagonal: (i, size - 1 - i)
        return np.count_nonzero(np.diag(np.fliplr(self._cells)) == symbol) == self._size
