"""
Terminal front end for playing Reversi between two people at one keyboard.
"""
import os
import argparse
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .config import Config, GameConfig, get_default_config
from .game import Board, ReversiGame
from .game.messages import score_message
from .logger import Logger

HELP_TEXT = """Commands:
  <row> <col>   place a stone, e.g. "2 3"
  new           start a new game
  help          show this help
  q, quit       leave"""


def render_board(board: np.ndarray, config: GameConfig,
                 legal: Iterable[Tuple[int, int]] = ()) -> str:
    """
    Draw a board snapshot as text with row and column numbers.

    Args:
        board: 8x8 array of cell values
        config: Symbols to use
        legal: Cells to mark as playable

    Returns:
        Multi-line string
    """
    symbols = {
        Board.EMPTY: config.empty_symbol,
        Board.BLACK: config.black_symbol,
        Board.WHITE: config.white_symbol,
    }
    legal = set(legal)
    lines = ["  " + " ".join(str(c) for c in range(Board.SIZE))]
    for r in range(Board.SIZE):
        cells = []
        for c in range(Board.SIZE):
            if (r, c) in legal:
                cells.append(config.legal_symbol)
            else:
                cells.append(symbols[int(board[r, c])])
        lines.append(f"{r} " + " ".join(cells))
    return "\n".join(lines)


def parse_move(text: str) -> Tuple[int, int]:
    """Parse "row col" or "row,col". Raises ValueError on anything else."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {text!r}")
    return int(parts[0]), int(parts[1])


class ConsoleInterface:
    """Reads moves from the user and shows what the engine reports back."""

    def __init__(self, game: ReversiGame, config: Config,
                 input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print,
                 event_logger: Optional[Logger] = None):
        self.game = game
        self.config = config
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.event_logger = event_logger

    def show(self) -> None:
        """Redraw the board and the status line."""
        legal = ()
        if self.config.game.show_legal_moves and not self.game.is_over:
            legal = self.game.get_legal_moves()
        self.output_fn(render_board(self.game.board_snapshot(), self.config.game, legal))
        if self.config.game.show_score:
            self.output_fn(score_message(self.game.score()))
        self.output_fn(self.game.status_message())

    def handle(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False when the user asked to quit
        """
        command = line.strip().lower()
        if not command:
            return True
        if command in ('q', 'quit', 'exit'):
            return False
        if command == 'help':
            self.output_fn(HELP_TEXT)
            return True
        if command == 'new':
            self.game.new_game()
            self.show()
            return True

        try:
            row, col = parse_move(command)
        except ValueError:
            self.output_fn("Enter a move as 'row col', e.g. '2 3'. Type 'help' for commands.")
            return True

        if self.game.is_over:
            self.output_fn("The game is over. Type 'new' to play again or 'q' to quit.")
            return True
        if not Board.in_bounds(row, col):
            self.output_fn(f"Row and column must be between 0 and {Board.SIZE - 1}.")
            return True

        result = self.game.attempt_move(row, col, self.game.current_player)
        if self.event_logger is not None:
            self.event_logger.log_result(result)
        if result.accepted:
            legal = ()
            if self.config.game.show_legal_moves and not result.game_ended:
                legal = self.game.get_legal_moves()
            self.output_fn(render_board(result.board, self.config.game, legal))
            if self.config.game.show_score:
                self.output_fn(score_message(self.game.score()))
        for message in result.messages:
            self.output_fn(message)
        return True

    def run(self) -> None:
        self.show()
        while True:
            prompt = "> " if self.game.is_over else f"{self.game.current_player.label} to move> "
            try:
                line = self.input_fn(prompt)
            except EOFError:
                break
            if not self.handle(line):
                break


def main(argv: Optional[List[str]] = None,
         input_fn: Callable[[str], str] = input,
         output_fn: Callable[[str], None] = print) -> int:
    """Parse arguments and play a game in the terminal."""
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='Directory for game logs (overrides the config file)')
    parser.add_argument('--no-hints', action='store_true',
                        help='Do not mark legal moves on the board')
    echo = parser.add_mutually_exclusive_group()
    echo.add_argument('--verbose', dest='verbose', action='store_true', default=None,
                      help='Echo log records to the console')
    echo.add_argument('--quiet', dest='verbose', action='store_false',
                      help='Do not echo log records to the console')
    args = parser.parse_args(argv)

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.log_dir:
        config.logging.log_dir = args.log_dir
    if args.no_hints:
        config.game.show_legal_moves = False
    if args.verbose is not None:
        config.logging.verbose = args.verbose

    event_logger = Logger(config)
    try:
        ConsoleInterface(ReversiGame(), config, input_fn, output_fn, event_logger).run()
    finally:
        event_logger.close()
    return 0
