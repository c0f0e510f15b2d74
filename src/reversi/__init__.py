"""
Reversi rules engine.
"""

from .game import Board, Player, ReversiGame

__version__ = '0.1'

__all__ = ['Board', 'Player', 'ReversiGame']
