import pytest

from gridttt.game import Cell
from gridttt.players import ScriptedPlayer
from gridttt.session import (
    GameConfig,
    GameSession,
    Outcome,
    play_game,
    prompt_board_size,
)


def feeder(lines):
    it = iter(lines)
    return lambda prompt="": next(it)


def make_session(size, x_moves, o_moves, out):
    players = [
        ScriptedPlayer("Xavier", Cell.X, x_moves),
        ScriptedPlayer("Olga", Cell.O, o_moves),
    ]
    return GameSession.new(size, players, output_fn=out.append)


def test_x_wins_on_row():
    out = []
    session = make_session(3, ["1 1", "1 2", "1 3"], ["2 1", "2 2"], out)
    assert session.run() is Outcome.WON
    assert session.game_over
    assert session.winner.name == "Xavier"
    assert session.turns == 5
    assert out[-1] == "Game over. Xavier wins."


def test_draw():
    out = []
    # X O X
    # X O O
    # O X X
    session = make_session(
        3,
        ["1 1", "1 3", "2 1", "3 2", "3 3"],
        ["1 2", "2 2", "2 3", "3 1"],
        out,
    )
    assert session.run() is Outcome.DRAWN
    assert session.winner is None
    assert session.board.is_full()
    assert out[-1] == "Game over. Draw."


def test_rejected_moves_are_retried_with_reason():
    out = []
    session = make_session(
        3,
        ["abc", "0 1", "1 1", "1 2", "1 3"],
        ["1 1", "2 1", "2 2"],
        out,
    )
    assert session.run() is Outcome.WON
    assert "Invalid input, enter two numbers: row and column (e.g. 2 3)." in out
    assert "Row and column must be between 1 and 3." in out
    assert "Cell already taken, try again." in out
    assert session.board.cell(0, 0) is Cell.X


def test_o_wins_on_larger_board():
    out = []
    session = make_session(
        4,
        ["1 1", "1 2", "2 2", "3 3"],
        ["1 4", "2 3", "3 2", "4 1"],
        out,
    )
    assert session.run() is Outcome.WON
    assert session.winner.symbol is Cell.O


def test_play_turn_reports_in_progress():
    out = []
    session = make_session(3, ["2 2"], [], out)
    assert session.play_turn(session.players[0]) is Outcome.IN_PROGRESS
    assert not session.game_over
    assert out == [". . .\n. X .\n. . ."]


def test_x_moves_first_whatever_the_player_order():
    out = []
    players = [
        ScriptedPlayer("Olga", Cell.O, ["1 1", "1 2", "1 3"]),
        ScriptedPlayer("Xavier", Cell.X, ["3 1", "3 2", "3 3"]),
    ]
    session = GameSession.new(3, players, output_fn=out.append)
    assert [p.symbol for p in session.players] == [Cell.X, Cell.O]
    assert session.run() is Outcome.WON
    assert session.winner.name == "Xavier"
    assert session.turns == 5


def test_sessions_do_not_share_state():
    a = make_session(3, ["1 1"], [], [])
    b = make_session(3, [], [], [])
    a.play_turn(a.players[0])
    assert b.board.move_count == 0


def test_requires_two_players_with_distinct_symbols():
    with pytest.raises(ValueError):
        GameSession.new(3, [ScriptedPlayer("a", Cell.X, [])])
    with pytest.raises(ValueError):
        GameSession.new(3, [ScriptedPlayer("a", Cell.X, []), ScriptedPlayer("b", Cell.X, [])])


def test_prompt_board_size_loops_until_valid():
    out = []
    size = prompt_board_size(feeder(["abc", "2", "9", "", " 5 "]), out.append)
    assert size == 5
    assert out.count("Enter board size (3 to 8).") == 5


def test_prompt_board_size_custom_range():
    assert prompt_board_size(feeder(["3", "4"]), lambda s: None, min_size=4, max_size=6) == 4


def test_play_game_with_prompted_size():
    out = []
    lines = ["9", "3", "1 1", "2 1", "1 2", "2 2", "1 3"]
    session = play_game(GameConfig(player_names=("Ann", "Bob")), feeder(lines), out.append)
    assert session.board.size == 3
    assert session.outcome is Outcome.WON
    assert out[0] == "Game \"Tic-Tac-Toe\"."
    assert ". . .\n. . .\n. . ." in out
    assert out[-1] == "Game over. Ann wins."


def test_play_game_with_configured_size():
    out = []
    moves = ["1 1", "1 2", "2 2", "1 3", "3 3"]
    session = play_game(GameConfig(size=3), feeder(moves), out.append)
    assert not any(line.startswith("Enter board size") for line in out)
    assert session.winner.name == "Player 1"
