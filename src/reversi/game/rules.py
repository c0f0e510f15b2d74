"""
Move validation and capture resolution.

A placement is legal when, in at least one of the eight directions, the
stones adjacent to it form a contiguous run of opponent stones that is closed
off by one of the placing player's own stones.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Set, Tuple

from .board import Board, Player
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)

# Directions: N, S, W, E, NW, NE, SW, SE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of probing or committing a placement."""
    legal: bool
    captured: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)


def _confirmed_run(board: Board, row: int, col: int, player: Player,
                   dr: int, dc: int) -> List[Tuple[int, int]]:
    """
    Walk from (row, col) along (dr, dc) over opponent stones.

    Returns:
        The opponent stones passed over if the run is closed by one of the
        player's own stones, otherwise an empty list
    """
    opponent = player.opponent
    run = []
    r, c = row + dr, col + dc
    while Board.in_bounds(r, c) and board.get(r, c) == opponent:
        run.append((r, c))
        r += dr
        c += dc

    if run and Board.in_bounds(r, c) and board.get(r, c) == player:
        return run
    return []


def resolve_placement(board: Board, row: int, col: int, player: Player,
                      commit: bool = False) -> MoveOutcome:
    """
    Check a placement and optionally carry it out.

    Args:
        board: Board to evaluate
        row: Row of the placement (0-7)
        col: Column of the placement (0-7)
        player: Player placing the stone
        commit: If False only probe; if True and the placement is legal, put
            the stone down and flip every captured stone

    Returns:
        MoveOutcome with legality and the set of captured cells. An illegal
        placement never modifies the board, even with commit=True.
    """
    if not Board.in_bounds(row, col):
        raise OutOfBoundsError(row, col)
    player = Player(player)

    captured = set()
    for dr, dc in DIRECTIONS:
        captured.update(_confirmed_run(board, row, col, player, dr, dc))

    outcome = MoveOutcome(legal=bool(captured), captured=frozenset(captured))

    if commit and outcome.legal:
        board.set(row, col, player)
        for r, c in outcome.captured:
            board.set(r, c, player)
        logger.debug("%s placed at (%d, %d), flipped %d stone(s)",
                     player.label, row, col, len(outcome.captured))

    return outcome


def legal_moves(board: Board, player: Player) -> Set[Tuple[int, int]]:
    """All empty cells where the player may place a stone."""
    return {
        (r, c) for r, c in board.empty_cells()
        if resolve_placement(board, r, c, player).legal
    }


def has_legal_move(board: Board, player: Player) -> bool:
    """Check if the player has at least one legal placement."""
    return any(
        resolve_placement(board, r, c, player).legal
        for r, c in board.empty_cells()
    )
