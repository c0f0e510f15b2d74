"""
Tests for the terminal front end.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

import reversi.cli
from reversi.cli import ConsoleInterface, main, parse_move, render_board
from reversi.config import GameConfig, get_default_config
from reversi.game import Board, Player, ReversiGame


def scripted(lines):
    """Input function that replays lines, then behaves like a closed stdin."""
    remaining = list(lines)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def make_console(lines, game=None):
    output = []
    config = get_default_config()
    console = ConsoleInterface(game or ReversiGame(), config, scripted(lines), output.append)
    return console, output


def test_render_board_with_hints():
    game = ReversiGame()
    text = render_board(game.board_snapshot(), GameConfig(), game.get_legal_moves())
    lines = text.splitlines()
    assert lines[0] == "  0 1 2 3 4 5 6 7"
    assert lines[3] == "2 . . . * . . . ."
    assert lines[4] == "3 . . * W B . . ."
    assert lines[5] == "4 . . . B W * . ."


def test_render_board_without_hints():
    lines = render_board(Board().snapshot(), GameConfig(black_symbol="X")).splitlines()
    assert lines[4] == "3 . . . W X . . ."
    assert "*" not in "\n".join(lines)


@pytest.mark.parametrize("text,expected", [("2 3", (2, 3)), ("2,3", (2, 3)), (" 5  4 ", (5, 4))])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["23", "a b", "1 2 3", ""])
def test_parse_move_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_a_move_switches_turns():
    console, output = make_console(["2 3", "q"])
    console.run()
    assert output[-1] == "Current turn: White"
    assert console.game.current_player is Player.WHITE


def test_rejections_are_reported():
    console, output = make_console(["3 3", "0 0", "9 9", "hello"])
    console.run()
    assert "A stone is already placed there." in output
    assert any(line.startswith("You cannot place a stone there.") for line in output)
    assert "Row and column must be between 0 and 7." in output
    assert any(line.startswith("Enter a move as") for line in output)
    assert console.game.current_player is Player.BLACK


def test_pass_and_game_end_are_announced():
    board = Board.from_rows(["BW......"] + ["........"] * 6 + ["BW......"])
    game = ReversiGame.from_board(board, Player.BLACK)
    console, output = make_console(["0 2", "7 2", "1 1"], game)
    console.run()

    assert "White has no legal moves and must pass. Black plays again." in output
    assert "Game over! Black wins! (6 to 0)" in output
    assert output[-1] == "The game is over. Type 'new' to play again or 'q' to quit."


def test_new_and_help_commands():
    console, output = make_console(["2 3", "new", "help"])
    console.run()
    assert console.game.current_player is Player.BLACK
    assert output[-1].startswith("Commands:")


def test_main_plays_from_scripted_input(tmp_path):
    output = []
    code = main(
        ["--config", str(tmp_path / "missing.json"), "--quiet", "--no-hints",
         "--log-dir", str(tmp_path / "logs")],
        input_fn=scripted(["2 3", "quit"]),
        output_fn=output.append,
    )
    assert code == 0
    assert "Current turn: White" in output
    assert not any("*" in line for line in output)

    run_dirs = list((tmp_path / "logs").iterdir())
    assert len(run_dirs) == 1
    assert "Move accepted" in (run_dirs[0] / "game.log").read_text()


@pytest.mark.parametrize("flag,file_verbose,expected", [
    ("--verbose", False, True),
    ("--quiet", True, False),
    (None, False, False),
    (None, True, True),
])
def test_console_logging_flags(tmp_path, monkeypatch, flag, file_verbose, expected):
    config = get_default_config()
    config.logging.verbose = file_verbose
    config_path = tmp_path / "config.json"
    config.save(str(config_path))

    seen = []
    real_logger = reversi.cli.Logger

    def record(cfg):
        seen.append(cfg.logging.verbose)
        return real_logger(cfg)

    monkeypatch.setattr(reversi.cli, "Logger", record)
    argv = ["--config", str(config_path)] + ([flag] if flag else [])
    assert main(argv, input_fn=scripted(["q"]), output_fn=lambda line: None) == 0
    assert seen == [expected]


def test_verbose_and_quiet_are_exclusive():
    with pytest.raises(SystemExit):
        main(["--verbose", "--quiet"], input_fn=scripted([]), output_fn=lambda line: None)
