"""
Logging utilities for the Reversi engine.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config
from .game import MoveResult


class Logger:
    """Sets up console and file logging for a session and records game events."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name) if self.log_dir else None
        self.handlers = []

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        if config.logging.verbose:
            console = logging.StreamHandler()
            console.setLevel(level)
            console.setFormatter(formatter)
            self.handlers.append(console)

        # Set up file logging
        if self.run_dir is not None:
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger('reversi')
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.run_dir is not None:
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file in the run directory."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_result(self, result: MoveResult):
        """Write one line describing a placement request and its outcome."""
        if not result.accepted:
            error = result.error
            self.logger.info("Move (%d, %d) rejected: %s", error.row, error.col, error)
            return

        parts = [f"captured={len(result.captured)}"]
        if result.pass_event is not None:
            parts.append(f"pass={result.pass_event.passed_player.label}")
        if result.game_ended:
            score = result.final_score
            parts.append(f"final=Black {score.black} / White {score.white}")
        else:
            parts.append(f"next={result.next_player.label}")
        self.logger.info("Move accepted: %s", " ".join(parts))

    def close(self):
        """Remove and close the handlers this logger installed."""
        for handler in getattr(self, 'handlers', []):
            logging.getLogger('reversi').removeHandler(handler)
            handler.close()
        self.handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
