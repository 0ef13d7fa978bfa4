"""
Othello game module.
This package contains the core game logic for Othello.
"""

from .board import Board, BoardParsed, BoardRejected, ParseResult, statistics
from .game import GameStatus, OthelloGame, is_game_over, must_pass, pass_turn
from .moves import DIRECTIONS, captures_for, has_any_legal_move, legal_moves, try_apply_move
from .notation import format_position, parse_position
from .types import Cell, GameStatistics, Move, Player, Position, SIZE

__all__ = [
    'Board', 'BoardParsed', 'BoardRejected', 'ParseResult', 'statistics',
    'GameStatus', 'OthelloGame', 'is_game_over', 'must_pass', 'pass_turn',
    'DIRECTIONS', 'captures_for', 'has_any_legal_move', 'legal_moves', 'try_apply_move',
    'format_position', 'parse_position',
    'Cell', 'GameStatistics', 'Move', 'Player', 'Position', 'SIZE',
]
