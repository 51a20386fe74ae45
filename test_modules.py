"""
Smoke tests for the TicTacToe modules and the console driver.
"""

import sys

import pytest

import logic
import main
from logic import Cell, Difficulty, GameConfig, GameMode, Outcome


def feed_input(monkeypatch, lines):
    """Make input() return the given lines, one per call."""
    answers = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_package_exports():
    for name in ["Board", "WinChecker", "Minimax", "AIPlayer", "MoveValidator",
                 "GameSession", "GameError", "CellOccupied", "InvalidCoordinate",
                 "RoundAlreadyOver", "InvalidAITurn", "SessionSnapshot"]:
        assert hasattr(logic, name), name


def test_config_bounds():
    assert GameConfig.in_bounds(0, 0)
    assert GameConfig.in_bounds(2, 2)
    assert not GameConfig.in_bounds(3, 0)
    assert not GameConfig.in_bounds(0, -1)
    assert GameConfig.MAX_TURNS == 9
    assert GameConfig.SCORE_BOUND == 19


def test_cell_opposite():
    assert Cell.X.opposite() == Cell.O
    assert Cell.O.opposite() == Cell.X
    with pytest.raises(ValueError):
        Cell.EMPTY.opposite()


def test_console_two_player_round(monkeypatch, capsys):
    feed_input(monkeypatch, ["0 0", "1 0", "0 1", "1 1", "0 2", "q"])
    game = main.ConsoleGame(mode=GameMode.TWO_PLAYER)
    game.start()

    out = capsys.readouterr().out
    assert "Player 1 wins!" in out
    assert "Score - Player 1: 1  Player 2: 0" in out
    # A new round was started after the win
    assert game.session.turn_count == 0
    assert game.session.player1_score == 1


def test_console_reports_bad_moves(monkeypatch, capsys):
    feed_input(monkeypatch, ["1 1", "1 1", "5 5", "hello", "q"])
    game = main.ConsoleGame(mode=GameMode.TWO_PLAYER)
    game.start()

    out = capsys.readouterr().out
    assert "Cell (1, 1) is already occupied" in out
    assert "Invalid position (5, 5)" in out
    assert "Please enter a move" in out
    assert game.session.turn_count == 1


def test_console_resets(monkeypatch):
    feed_input(monkeypatch, ["0 0", "1 0", "0 1", "1 1", "0 2", "2 2", "r", "s", "q"])
    game = main.ConsoleGame(mode=GameMode.TWO_PLAYER)
    game.start()

    assert game.session.turn_count == 0
    assert game.session.player1_score == 0


def test_console_single_player(monkeypatch, capsys):
    feed_input(monkeypatch, ["0 0", "q"])
    game = main.ConsoleGame(mode=GameMode.SINGLE_PLAYER, difficulty=Difficulty.HARD)
    game.start()

    out = capsys.readouterr().out
    assert "Computer placed O at (1, 1)" in out
    assert game.session.turn_count == 2


def test_main_entry_point(monkeypatch, capsys):
    feed_input(monkeypatch, ["q"])
    monkeypatch.setattr(sys, "argv", ["main.py", "--mode", "two"])
    main.main()

    out = capsys.readouterr().out
    assert "Player 1 plays X, Player 2 plays O" in out
    assert "Goodbye!" in out


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_more_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    monkeypatch.setattr(sys, "argv", ["main.py", "--difficulty", "easy"])
    main.main()

    assert "Game interrupted by user." in capsys.readouterr().out


def test_verbose_ai_prints_stats(capsys):
    config = GameConfig()
    config.VERBOSE = True
    session = logic.GameSession(GameMode.SINGLE_PLAYER, Difficulty.HARD, config)
    session.submit_move(0, 0)
    session.request_ai_move()

    assert "AI evaluated" in capsys.readouterr().out
    assert session.verdict == Outcome.NONE
