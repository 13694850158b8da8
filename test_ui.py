"""
Tests for the console UI and the main entry point.
Run with pytest, or directly: python test_ui.py
"""

import json
import sys

import pytest

from game_engine import Game, Player, Win, ONGOING
from ui import ConsoleUI
import main


def scripted_input(lines):
    """Feed a fixed list of answers to ConsoleUI, then stop like Ctrl-D."""
    answers = iter(lines)

    def read(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    return read


# ==================== CONSOLE UI ====================

def test_board_as_string():
    game = Game()
    for position in [0, 1, 3, 4, 6]:
        game.play_move(position)
    expected = " X | O |   \n-----------\n X | O |   \n-----------\n X |   |   \n"
    assert ConsoleUI.board_as_string(game.get_state()) == expected


def test_handle_input_plays_move():
    ui = ConsoleUI()
    assert ui.handle_input(" 4\n")
    assert ui.game.get_state().board[4] == Player.X


def test_handle_input_reset():
    ui = ConsoleUI()
    ui.handle_input("0")
    assert ui.handle_input("r")
    assert ui.game.get_state() == Game().get_state()


def test_handle_input_rejects_text(capsys):
    ui = ConsoleUI()
    assert not ui.handle_input("middle")
    assert "Invalid input" in capsys.readouterr().out


def test_handle_input_rejects_bad_moves(capsys):
    ui = ConsoleUI()
    ui.handle_input("0")
    assert not ui.handle_input("0")
    assert not ui.handle_input("9")
    out = capsys.readouterr().out
    assert "already occupied" in out
    assert "Must be 0-8" in out
    assert ui.game.get_state().board.count(None) == 8


def test_run_plays_to_a_win_and_quits(capsys):
    ui = ConsoleUI(input_func=scripted_input(["0", "3", "1", "4", "2", "q"]))
    ui.run()
    out = capsys.readouterr().out
    assert "Game over! Winner: X" in out
    assert "Goodbye!" in out
    assert ui.game.status == Win(Player.X)
    assert not ui.is_running


def test_run_resets_after_game_over(capsys):
    moves = ["0", "1", "2", "4", "3", "5", "7", "6", "8"]
    ui = ConsoleUI(input_func=scripted_input(moves + ["r"]))
    ui.run()
    out = capsys.readouterr().out
    assert "It's a draw!" in out
    # Input ran out after the reset
    assert "Game interrupted by user." in out
    assert ui.game.status == ONGOING


# ==================== MAIN ====================

def test_main_replays_moves(capsys):
    assert main.main(["--moves", "0,3,1,4,2"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["status"] == {"type": "Win", "value": "X"}
    assert state["board"][:3] == ["X", "X", "X"]


def test_main_flat_status(capsys):
    assert main.main(["--moves", "4", "--status-format", "flat"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state == {
        "board": ["", "", "", "", "X", "", "", "", ""],
        "currentPlayer": "O",
        "status": "Ongoing",
    }


def test_main_stops_on_rejected_move(capsys):
    assert main.main(["--moves", "4,4,0"]) == 1
    captured = capsys.readouterr()
    assert "already occupied" in captured.err
    state = json.loads(captured.out)
    assert state["board"].count("") == 8


def test_main_rejects_malformed_moves():
    with pytest.raises(SystemExit):
        main.main(["--moves", "a,b"])


def run_all_tests():
    """Run all tests."""
    return pytest.main([__file__, "-v"])


if __name__ == "__main__":
    sys.exit(run_all_tests())
