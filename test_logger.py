"""
Tests for logging setup.
"""
import json
import logging
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from reversi.config import get_default_config
from reversi.game import Player, ReversiGame
from reversi.logger import Logger, setup_logger


def quiet_config(log_dir=None):
    config = get_default_config()
    config.logging.verbose = False
    config.logging.log_dir = log_dir
    return config


def test_log_files_are_created(tmp_path):
    logger = Logger(quiet_config(str(tmp_path)))
    try:
        run_dir = Path(logger.run_dir)
        assert run_dir.parent == tmp_path
        assert run_dir.name.startswith("Reversi_")
        assert (run_dir / "game.log").exists()
        saved = json.loads((run_dir / "config.json").read_text())
        assert saved["project_name"] == "Reversi"
    finally:
        logger.close()


def test_game_events_are_written(tmp_path):
    logger = setup_logger(quiet_config(str(tmp_path)))
    game = ReversiGame()
    logger.log_result(game.attempt_move(2, 3, Player.BLACK))
    logger.log_result(game.attempt_move(0, 0, Player.WHITE))
    logger.close()

    text = (Path(logger.run_dir) / "game.log").read_text()
    assert "Black played (2, 3), captured 1 stone(s)" in text
    assert "Move accepted: captured=1 next=White" in text
    assert "Move (0, 0) rejected" in text


def test_close_removes_handlers():
    package_logger = logging.getLogger("reversi")
    before = list(package_logger.handlers)

    logger = Logger(get_default_config())
    assert len(package_logger.handlers) == len(before) + 1
    logger.close()
    assert package_logger.handlers == before


def test_no_handlers_when_quiet_without_log_dir():
    logger = Logger(quiet_config())
    assert logger.run_dir is None
    assert logger.handlers == []
    logger.close()
