"""
Exceptions raised by the Reversi engine.
"""


class ReversiError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(ReversiError):
    """A placement request that was rejected without touching the board."""

    reason = "Invalid move."

    def __init__(self, row: int, col: int, player=None, message: str = None):
        self.row = row
        self.col = col
        self.player = player
        super().__init__(message or self.reason)


class OccupiedCellError(InvalidMoveError):
    reason = "A stone is already placed there."


class IllegalPlacementError(InvalidMoveError):
    reason = "You cannot place a stone there. It must sandwich at least one opponent stone."


class WrongPlayerError(InvalidMoveError):
    reason = "It is not that player's turn."


class GameOverError(InvalidMoveError):
    reason = "The game is over."


class OutOfBoundsError(ReversiError, IndexError):
    """Coordinates outside the 8x8 grid. Indicates a caller bug, not bad input."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Coordinates ({row}, {col}) are off the board")
