"""
Text shown to players: turn labels, pass announcements and the final banner.
"""
from .board import Player, Score


def turn_message(player: Player) -> str:
    return f"Current turn: {player.label}"


def pass_message(passed: Player, plays_again: bool = True) -> str:
    """
    Announce that a side has no legal move and is skipped.

    plays_again is True when the opponent has just moved and keeps the turn.
    """
    other = passed.opponent.label
    if plays_again:
        return f"{passed.label} has no legal moves and must pass. {other} plays again."
    return f"{passed.label} has no legal moves and must pass. It is {other}'s turn."


def result_message(score: Score) -> str:
    """Final banner with winner (or draw) and the stone tally."""
    winner = score.winner
    if winner is Player.BLACK:
        outcome = f"Black wins! ({score.black} to {score.white})"
    elif winner is Player.WHITE:
        outcome = f"White wins! ({score.white} to {score.black})"
    else:
        outcome = f"It's a draw! ({score.black} to {score.white})"
    return f"Game over! {outcome}"


def score_message(score: Score) -> str:
    return f"Score - Black: {score.black}, White: {score.white}"
