"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, Player, Score
from .errors import (
    GameOverError,
    IllegalPlacementError,
    InvalidMoveError,
    OccupiedCellError,
    OutOfBoundsError,
    ReversiError,
    WrongPlayerError,
)
from .game import GamePhase, MoveResult, PassEvent, ReversiGame
from .rules import DIRECTIONS, MoveOutcome, has_legal_move, legal_moves, resolve_placement

__all__ = [
    'Board', 'Player', 'Score',
    'ReversiError', 'InvalidMoveError', 'OccupiedCellError', 'IllegalPlacementError',
    'WrongPlayerError', 'GameOverError', 'OutOfBoundsError',
    'GamePhase', 'MoveResult', 'PassEvent', 'ReversiGame',
    'DIRECTIONS', 'MoveOutcome', 'has_legal_move', 'legal_moves', 'resolve_placement',
]
