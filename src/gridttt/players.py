"""
Move sources. A player only supplies raw coordinate text; the board
decides whether the move is legal.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator

from .game import Board, Cell, is_player_symbol


class Player(ABC):
    """Abstract base class for all players"""

    def __init__(self, name: str, symbol: Cell):
        if not is_player_symbol(symbol):
            raise ValueError(f"player symbol must be X or O, got {symbol!r}")
        self.name = name
        self.symbol = symbol

    @abstractmethod
    def make_move(self, board: Board) -> str:
        """Return coordinates as "row column" text."""

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r}, symbol={self.symbol.glyph})"


class HumanPlayer(Player):
    """Human player with console input"""

    def __init__(self, name: str, symbol: Cell, input_fn: Callable[[str], str] = input):
        super().__init__(name, symbol)
        self.input_fn = input_fn

    def make_move(self, board: Board) -> str:
        return self.input_fn(f"{self.name} ({self.symbol.glyph}), enter row and column: ")


class ScriptedPlayer(Player):
    """Replays a fixed list of coordinate strings (tests, demos)."""

    def __init__(self, name: str, symbol: Cell, moves: Iterable[str]):
        super().__init__(name, symbol)
        self._moves: Iterator[str] = iter(moves)

    def make_move(self, board: Board) -> str:
        try:
            return next(self._moves)
        except StopIteration:
            raise RuntimeError(f"{self.name} has no scripted moves left") from None
