"""
Othello game module.
Handles game flow: passes, termination and the winner.
"""
import logging
from enum import Enum
from typing import List, Optional

from ..errors import IllegalPassError
from .board import Board, statistics
from .moves import MoveTarget, has_any_legal_move, legal_moves, try_apply_move
from .types import GameStatistics, Move, Player

logger = logging.getLogger(__name__)

# Consecutive passes that end the game
PASSES_TO_END = 2


class GameStatus(Enum):
    ACTIVE = "active"
    GAME_OVER = "game_over"


def must_pass(board: Board, player: Optional[Player] = None) -> bool:
    """Check if the player (default: side to move) has no legal move anywhere."""
    return not has_any_legal_move(board, player)


def is_game_over(board: Board) -> bool:
    """Neither side has a legal move, so the next two turns would both be passes."""
    return must_pass(board, Player.BLACK) and must_pass(board, Player.WHITE)


def pass_turn(board: Board) -> None:
    """
    Hand the turn to the opponent without placing a piece.

    Raises:
        IllegalPassError: if the side to move has a legal move
    """
    player = board.current_player
    if has_any_legal_move(board, player):
        raise IllegalPassError(f"{player.display_name} has a legal move and cannot pass")
    board._hand_over()
    logger.debug("%s passes", player.display_name)


class OthelloGame:
    """
    Game-flow wrapper that tracks consecutive passes alongside a Board.
    """

    def __init__(self, board: Optional[Board] = None):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
        """
        self.board = board if board is not None else Board.create_empty()
        self.consecutive_passes = 0
        self.status = GameStatus.ACTIVE

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board.create_empty()
        self.consecutive_passes = 0
        self.status = GameStatus.ACTIVE

    def make_move(self, target: MoveTarget) -> bool:
        """
        Play a move for the side to move.

        Args:
            target: Position, (row, col) tuple, or notation such as "D3"

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.is_game_over():
            return False

        if not try_apply_move(self.board, target):
            return False

        self.consecutive_passes = 0
        return True

    def pass_turn(self) -> bool:
        """
        Pass for the side to move.

        Returns:
            bool: True if the pass was recorded, False if the game is over
            or the side to move has a legal move
        """
        if self.is_game_over() or self.board.has_any_legal_move():
            return False

        pass_turn(self.board)
        self.consecutive_passes += 1
        if self.consecutive_passes >= PASSES_TO_END:
            self.status = GameStatus.GAME_OVER
            stats = self.get_score()
            logger.info("Game over: Black %d - White %d", stats.black, stats.white)
        return True

    def advance(self) -> bool:
        """Pass if the side to move is forced to; returns whether a pass happened."""
        if self.is_game_over() or not must_pass(self.board):
            return False
        return self.pass_turn()

    def get_valid_moves(self) -> List[Move]:
        """Legal moves for the side to move (none once the game is over)."""
        if self.is_game_over():
            return []
        return legal_moves(self.board)

    def get_current_player(self) -> Player:
        return self.board.current_player

    def is_game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def get_score(self) -> GameStatistics:
        return statistics(self.board)

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            Player.BLACK or Player.WHITE; None for a draw or while the game is running
        """
        if not self.is_game_over():
            return None
        return self.get_score().leader

    def __str__(self) -> str:
        stats = self.get_score()
        lines = [
            self.board.to_formatted_string(),
            f"Current player: {self.get_current_player().display_name}",
            f"Score - Black: {stats.black}, White: {stats.white}",
        ]
        if self.is_game_over():
            winner = self.get_winner()
            lines.append("Game over! It's a draw!" if winner is None
                         else f"Game over! {winner.display_name} wins!")
        return "\n".join(lines)
