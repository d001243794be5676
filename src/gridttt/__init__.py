"""
gridttt - TicTacToe on an N x N board (3 to 8) for two players.

A line only wins when it spans the whole board: rows, columns and the
two main diagonals.
"""

from .game import Board, Cell, MoveResult, PLAYER_SYMBOLS, is_player_symbol, parse_coordinates
from .players import Player, HumanPlayer, ScriptedPlayer
from .session import GameConfig, GameSession, Outcome, prompt_board_size, play_game

__version__ = "0.1.0"
__all__ = [
    "Board",
    "Cell",
    "MoveResult",
    "PLAYER_SYMBOLS",
    "is_player_symbol",
    "parse_coordinates",
    "Player",
    "HumanPlayer",
    "ScriptedPlayer",
    "GameConfig",
    "GameSession",
    "Outcome",
    "prompt_board_size",
    "play_game",
]
