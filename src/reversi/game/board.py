"""
Board module for Reversi.
Holds the 8x8 grid of cells and the stone counts derived from it.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np

from .errors import OutOfBoundsError


class Player(IntEnum):
    """The two sides. Values double as the cell values stored on the board."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def label(self) -> str:
        return 'Black' if self is Player.BLACK else 'White'


@dataclass(frozen=True)
class Score:
    """Stone counts for both sides."""
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    @property
    def is_draw(self) -> bool:
        return self.black == self.white

    @property
    def winner(self) -> Optional[Player]:
        """The side with more stones, or None on equal counts."""
        if self.black > self.white:
            return Player.BLACK
        if self.white > self.black:
            return Player.WHITE
        return None


class Board:
    """
    Represents the Reversi game board as an 8x8 numpy array.

    Cell values:
    - 0: empty
    - 1: black stone
    - 2: white stone
    """

    # Board dimensions
    SIZE = 8

    # Cell constants
    EMPTY = 0
    BLACK = Player.BLACK
    WHITE = Player.WHITE

    _SYMBOLS = {'.': 0, '-': 0, ' ': 0, 'B': 1, 'X': 1, 'W': 2, 'O': 2}

    def __init__(self):
        """Initialize a board with the four starting stones in the center."""
        self._board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._board[3, 3] = self.WHITE
        self._board[4, 4] = self.WHITE
        self._board[3, 4] = self.BLACK
        self._board[4, 3] = self.BLACK

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with no stones on it."""
        board = cls()
        board._board.fill(cls.EMPTY)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[int]]]) -> 'Board':
        """
        Build a board from eight rows.

        Args:
            rows: Either strings such as "..BW...." (spaces between cells are
                allowed) or sequences of cell values 0/1/2.

        Returns:
            A new Board holding exactly that position
        """
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}")

        board = cls.empty()
        for r, row in enumerate(rows):
            if isinstance(row, str):
                cells = [cls._parse_symbol(ch) for ch in row.replace(' ', '')]
            else:
                cells = [int(v) for v in row]
            if len(cells) != cls.SIZE:
                raise ValueError(f"Row {r} has {len(cells)} cells, expected {cls.SIZE}")
            for value in cells:
                if value not in (cls.EMPTY, cls.BLACK, cls.WHITE):
                    raise ValueError(f"Invalid cell value {value!r} in row {r}")
            board._board[r, :] = cells
        return board

    @classmethod
    def _parse_symbol(cls, ch: str) -> int:
        try:
            return cls._SYMBOLS[ch.upper()]
        except KeyError:
            raise ValueError(f"Unknown board symbol {ch!r}") from None

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)

    def get(self, row: int, col: int) -> int:
        """Return the value of a cell (EMPTY, BLACK or WHITE)."""
        self._check_bounds(row, col)
        return int(self._board[row, col])

    def set(self, row: int, col: int, player: Player) -> None:
        """
        Put a stone of the given color on a cell.

        This is the only write path; it is used by the capture resolver.
        """
        self._check_bounds(row, col)
        self._board[row, col] = Player(player)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == self.EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All empty cells in row-major order."""
        rows, cols = np.nonzero(self._board == self.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return not np.any(self._board == self.EMPTY)

    def count(self) -> Score:
        """Count the stones of each color."""
        black = int(np.count_nonzero(self._board == self.BLACK))
        white = int(np.count_nonzero(self._board == self.WHITE))
        return Score(black=black, white=white)

    def snapshot(self) -> np.ndarray:
        """
        Get a read-only copy of the board for rendering.

        Returns:
            8x8 numpy array that cannot be written to
        """
        state = self._board.copy()
        state.setflags(write=False)
        return state

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.empty()
        new_board._board[:, :] = self._board
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._board, other._board)

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {self.EMPTY: '.', self.BLACK: 'B', self.WHITE: 'W'}
        rows = []
        for i in range(self.SIZE):
            row = [symbols[int(self._board[i, j])] for j in range(self.SIZE)]
            rows.append(' '.join(row))
        return "\n".join(rows)
