"""
Reversi game module.
Handles turn order, forced passes and the end of the game.
"""
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Tuple
import numpy as np

from .board import Board, Player, Score
from .errors import (
    GameOverError,
    IllegalPlacementError,
    InvalidMoveError,
    OccupiedCellError,
    OutOfBoundsError,
    WrongPlayerError,
)
from .messages import pass_message, result_message, score_message, turn_message
from .rules import has_legal_move, legal_moves, resolve_placement

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    AWAITING_MOVE = 'awaiting_move'
    ENDED = 'ended'


@dataclass(frozen=True)
class PassEvent:
    """A side was skipped because it had no legal move."""
    passed_player: Player
    next_player: Player
    plays_again: bool = True

    @property
    def message(self) -> str:
        return pass_message(self.passed_player, self.plays_again)


@dataclass(eq=False)
class MoveResult:
    """Everything the presentation layer needs after a placement request."""
    accepted: bool
    board: np.ndarray
    next_player: Optional[Player]
    captured: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)
    pass_event: Optional[PassEvent] = None
    game_ended: bool = False
    final_score: Optional[Score] = None
    error: Optional[InvalidMoveError] = None

    @property
    def messages(self) -> List[str]:
        """Texts to show, in order."""
        if not self.accepted:
            return [str(self.error)]
        lines = []
        if self.pass_event is not None:
            lines.append(self.pass_event.message)
        if self.game_ended:
            lines.append(result_message(self.final_score))
        else:
            lines.append(turn_message(self.next_player))
        return lines



class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.

    One instance owns one board and the active player. Callers only ever see
    read-only snapshots; every placement is processed to completion under a
    single lock, so the board is never seen half-updated.
    """

    def __init__(self):
        """Initialize a new game in the standard starting position."""
        self._lock = threading.RLock()
        self.new_game()

    @classmethod
    def from_board(cls, board: Board, active_player: Player = Player.BLACK) -> 'ReversiGame':
        """
        Start a game from an arbitrary position.

        The position is settled immediately: a full board or a position where
        neither side can move ends the game, and an active side with no move
        passes to the opponent.

        Args:
            board: Position to start from (copied)
            active_player: Side to move

        Returns:
            A new ReversiGame
        """
        game = cls()
        with game._lock:
            game._board = board.copy()
            game._current_player = Player(active_player)
            game._last_pass = game._settle()
        return game

    def new_game(self) -> Tuple[np.ndarray, Player]:
        """
        Reset the game to its initial state.

        Returns:
            Board snapshot and the player to move (always Black)
        """
        with self._lock:
            self._board = Board()
            self._current_player = Player.BLACK
            self._phase = GamePhase.AWAITING_MOVE
            self._final_score = None
            self._last_pass = None
            logger.debug("New game started")
            return self._board.snapshot(), self._current_player

    def play(self, row: int, col: int, player: Optional[Player] = None) -> MoveResult:
        """
        Place a stone for the active player.

        Args:
            row: Row of the move (0-7)
            col: Column of the move (0-7)
            player: The player making the move. If None, uses current_player

        Returns:
            MoveResult for the accepted move

        Raises:
            InvalidMoveError: The move was rejected; the board is unchanged
            OutOfBoundsError: Coordinates are off the board
        """
        with self._lock:
            if not Board.in_bounds(row, col):
                raise OutOfBoundsError(row, col)
            if self._phase is GamePhase.ENDED:
                raise GameOverError(row, col, player)
            if player is None:
                player = self._current_player
            try:
                player = Player(player)
            except ValueError:
                raise WrongPlayerError(row, col, player) from None
            if player is not self._current_player:
                raise WrongPlayerError(row, col, player)
            if not self._board.is_empty(row, col):
                raise OccupiedCellError(row, col, player)

            outcome = resolve_placement(self._board, row, col, player, commit=True)
            if not outcome.legal:
                raise IllegalPlacementError(row, col, player)

            logger.info("%s played (%d, %d), captured %d stone(s)",
                        player.label, row, col, len(outcome.captured))

            pass_event = self._advance()
            self._last_pass = pass_event
            ended = self._phase is GamePhase.ENDED
            return MoveResult(
                accepted=True,
                board=self._board.snapshot(),
                next_player=None if ended else self._current_player,
                captured=outcome.captured,
                pass_event=pass_event,
                game_ended=ended,
                final_score=self._final_score,
            )

    def attempt_move(self, row: int, col: int, player: Optional[Player] = None) -> MoveResult:
        """
        Like play(), but report rejected moves in the result instead of raising.

        Off-board coordinates still raise OutOfBoundsError.
        """
        with self._lock:
            try:
                return self.play(row, col, player)
            except InvalidMoveError as e:
                logger.info("Rejected move at (%d, %d): %s", row, col, e)
                ended = self._phase is GamePhase.ENDED
                return MoveResult(
                    accepted=False,
                    board=self._board.snapshot(),
                    next_player=None if ended else self._current_player,
                    game_ended=ended,
                    final_score=self._final_score,
                    error=e,
                )

    def _advance(self) -> Optional[PassEvent]:
        """Decide who moves next after the current player has placed a stone."""
        mover = self._current_player
        if self._board.is_full():
            self._end()
            return None

        if has_legal_move(self._board, mover.opponent):
            self._current_player = mover.opponent
            return None

        if has_legal_move(self._board, mover):
            event = PassEvent(passed_player=mover.opponent, next_player=mover)
            logger.info(event.message)
            return event

        self._end()
        return None

    def _settle(self) -> Optional[PassEvent]:
        """Resolve passes and game end for a position where the current player is to move."""
        self._phase = GamePhase.AWAITING_MOVE
        self._final_score = None
        if self._board.is_full():
            self._end()
            return None

        if has_legal_move(self._board, self._current_player):
            return None

        other = self._current_player.opponent
        if has_legal_move(self._board, other):
            event = PassEvent(passed_player=self._current_player, next_player=other,
                              plays_again=False)
            logger.info(event.message)
            self._current_player = other
            return event

        self._end()
        return None

    def _end(self) -> None:
        self._phase = GamePhase.ENDED
        self._final_score = self._board.count()
        logger.info(result_message(self._final_score))

    def get_legal_moves(self, player: Optional[Player] = None) -> Set[Tuple[int, int]]:
        """
        Get all legal moves for a player.

        Args:
            player: The player to check. If None, uses current_player

        Returns:
            Set of (row, col) tuples
        """
        with self._lock:
            if player is None:
                player = self._current_player
            return legal_moves(self._board, Player(player))

    @property
    def current_player(self) -> Player:
        with self._lock:
            return self._current_player

    @property
    def phase(self) -> GamePhase:
        with self._lock:
            return self._phase

    @property
    def final_score(self) -> Optional[Score]:
        with self._lock:
            return self._final_score

    @property
    def last_pass(self) -> Optional[PassEvent]:
        """The pass resolved by the most recent move or by from_board, if any."""
        with self._lock:
            return self._last_pass

    @property
    def is_over(self) -> bool:
        with self._lock:
            return self._phase is GamePhase.ENDED

    @property
    def winner(self) -> Optional[Player]:
        """The winning side once the game is over; None while playing or on a draw."""
        with self._lock:
            if self._phase is not GamePhase.ENDED:
                return None
            return self._final_score.winner

    def score(self) -> Score:
        """Current stone counts."""
        with self._lock:
            return self._board.count()

    def board_snapshot(self) -> np.ndarray:
        with self._lock:
            return self._board.snapshot()

    def status_message(self) -> str:
        """The turn label, or the final banner once the game is over."""
        with self._lock:
            if self._phase is GamePhase.ENDED:
                return result_message(self._final_score)
            return turn_message(self._current_player)

    def __str__(self) -> str:
        """String representation of the game state."""
        with self._lock:
            lines = [str(self._board), score_message(self._board.count()), self.status_message()]
        return "\n".join(lines)
