"""
Game session: turn order, re-prompting and end-of-game detection.

All game state lives on a GameSession instance that the loop passes around.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .game import Board, Cell, MoveResult
from .players import HumanPlayer, Player


InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

REJECT_MESSAGES = {
    MoveResult.MALFORMED: "Invalid input, enter two numbers: row and column (e.g. 2 3).",
    MoveResult.OUT_OF_RANGE: "Row and column must be between 1 and {size}.",
    MoveResult.OCCUPIED: "Cell already taken, try again.",
}


@dataclass
class GameConfig:
    """Game configuration."""

    # Board size; None asks on the console
    size: Optional[int] = None

    # Allowed size range
    min_size: int = 3
    max_size: int = 8

    # X moves first
    player_names: Tuple[str, str] = ("Player 1", "Player 2")


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


def prompt_board_size(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    min_size: int = 3,
    max_size: int = 8,
) -> int:
    """
    Ask for a board size until an integer in [min_size, max_size] is entered.

    There is no retry limit.
    """
    while True:
        output_fn(f"Enter board size ({min_size} to {max_size}).")
        try:
            size = int(input_fn("").strip())
        except ValueError:
            continue
        if min_size <= size <= max_size:
            return size


@dataclass
class GameSession:
    """Board, players in turn order, and the game-over state."""

    board: Board
    players: List[Player]
    output_fn: OutputFn = print
    game_over: bool = False
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Player] = None
    turns: int = 0

    @classmethod
    def new(cls, size: int, players: Sequence[Player], output_fn: OutputFn = print) -> "GameSession":
        if len(players) != 2:
            raise ValueError(f"exactly two players required, got {len(players)}")
        symbols = {p.symbol for p in players}
        if len(symbols) != 2 or Cell.EMPTY in symbols:
            raise ValueError("players need distinct symbols X and O")
        # X always moves first
        ordered = sorted(players, key=lambda p: p.symbol is not Cell.X)
        return cls(board=Board(size), players=ordered, output_fn=output_fn)

    def play_turn(self, player: Player) -> Outcome:
        """
        Ask player for moves until one is accepted, then check win/draw.

        Returns:
            Outcome after the move
        """
        while True:
            coordinates = player.make_move(self.board)
            result = self.board.try_place(player.symbol, coordinates)
            if result is MoveResult.OK:
                break
            self.output_fn(REJECT_MESSAGES[result].format(size=self.board.size))

        self.turns += 1
        self.output_fn(self.board.render())

        if self.board.is_win(player.symbol):
            self.game_over = True
            self.outcome = Outcome.WON
            self.winner = player
            self.output_fn(f"Game over. {player.name} wins.")
        elif self.board.is_full():
            self.game_over = True
            self.outcome = Outcome.DRAWN
            self.output_fn("Game over. Draw.")
        return self.outcome

    def run(self) -> Outcome:
        """Alternate turns until someone wins or the board fills."""
        while not self.game_over:
            for player in self.players:
                self.play_turn(player)
                if self.game_over:
                    break
        return self.outcome


def play_game(
    config: GameConfig,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> GameSession:
    """Console game between two humans."""
    output_fn("Game \"Tic-Tac-Toe\".")

    size = config.size
    if size is None:
        size = prompt_board_size(input_fn, output_fn, config.min_size, config.max_size)

    name_x, name_o = config.player_names
    players = [
        HumanPlayer(name_x, Cell.X, input_fn=input_fn),
        HumanPlayer(name_o, Cell.O, input_fn=input_fn),
    ]
    session = GameSession.new(size, players, output_fn=output_fn)
    output_fn(session.board.render())
    session.run()
    return session
