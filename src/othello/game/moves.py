"""
Move generation and application.

A run of opponent pieces is captured only when the ray that walks over it
ends on one of the mover's own pieces; a ray that reaches an empty square or
the edge of the board captures nothing.
"""
import logging
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

import numpy as np

from .notation import parse_position
from .types import Cell, Move, Player, Position, SIZE

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

# Neighbour offsets, excluding (0, 0)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

MoveTarget = Union[Position, Tuple[int, int], str]


def _on_board(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def _scan(grid: np.ndarray, row: int, col: int, player: Player) -> List[Position]:
    """Capture set for placing at (row, col) on a raw grid; empty if illegal."""
    if not _on_board(row, col) or grid[row, col] != Cell.EMPTY:
        return []

    own = player.cell
    enemy = player.opponent.cell
    captures: List[Position] = []

    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        run: List[Position] = []
        while _on_board(r, c) and grid[r, c] == enemy:
            run.append(Position(r, c))
            r += dr
            c += dc
        if run and _on_board(r, c) and grid[r, c] == own:
            captures.extend(run)

    return captures


def captures_for(board: 'Board', position, player: Optional[Player] = None) -> Tuple[Position, ...]:
    """
    Get the opponent pieces a placement would flip.

    Args:
        board: Board to inspect (not modified)
        position: (row, col) of the candidate placement
        player: Side placing the piece. If None, uses the side to move.

    Returns:
        Tuple of captured positions; empty if the placement is not legal
    """
    if player is None:
        player = board.current_player
    position = _resolve_target(position)
    if position is None:
        return ()
    return tuple(_scan(board.get_board_state(), position.row, position.col, player))


def legal_moves(board: 'Board', player: Optional[Player] = None) -> List[Move]:
    """
    Get all legal moves in row-major order.

    Args:
        board: Board to inspect (not modified)
        player: Side to generate moves for. If None, uses the side to move.

    Returns:
        List of Move, each with its full capture set
    """
    if player is None:
        player = board.current_player
    grid = board.get_board_state()

    moves = []
    for r in range(SIZE):
        for c in range(SIZE):
            captures = _scan(grid, r, c, player)
            if captures:
                moves.append(Move(Position(r, c), tuple(captures)))
    return moves


def has_any_legal_move(board: 'Board', player: Optional[Player] = None) -> bool:
    """Check whether the player has at least one legal move."""
    if player is None:
        player = board.current_player
    grid = board.get_board_state()

    for r, c in zip(*np.nonzero(grid == Cell.EMPTY)):
        if _scan(grid, int(r), int(c), player):
            return True
    return False


def _resolve_target(target: MoveTarget) -> Optional[Position]:
    if isinstance(target, str):
        return parse_position(target)
    try:
        row, col = target
    except (TypeError, ValueError):
        return None
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            return None
    return Position(int(row), int(col))


def try_apply_move(board: 'Board', target: MoveTarget) -> bool:
    """
    Play a move for the side to move.

    Args:
        board: Board to update in place
        target: Position, (row, col) tuple, or algebraic notation such as "D3"

    Returns:
        bool: True if the move was legal and applied, False otherwise.
        On False the board and side to move are unchanged.
    """
    position = _resolve_target(target)
    if position is None:
        logger.debug("Rejected unparseable move %r", target)
        return False

    player = board.current_player
    captures = _scan(board.get_board_state(), position.row, position.col, player)
    if not captures:
        logger.debug("Rejected illegal move %s for %s", tuple(position), player.display_name)
        return False

    board._place(player, position, captures)
    logger.debug("%s played %s capturing %d", player.display_name,
                 position.to_notation(), len(captures))
    return True
