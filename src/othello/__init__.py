"""
Othello (Reversi) board engine.
"""

from .game import Board, Move, OthelloGame, Player, Position

__version__ = "0.1"

__all__ = ['Board', 'Move', 'OthelloGame', 'Player', 'Position']
