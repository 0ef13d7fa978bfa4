"""
Board module for Othello.
Handles the board state, its text form, and piece statistics.
The grid is stored as an 8x8 numpy array of Cell values.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import numpy as np

from ..errors import (
    BoardFormatError,
    InvalidCharacterError,
    RowCountError,
    RowLengthError,
)
from .types import Cell, GameStatistics, Move, Player, Position, SIZE

VALID_CHARS = frozenset('BW.')

# Symbols used by the formatted (human-facing) rendering
DISC_SYMBOLS = {Cell.EMPTY: ' ', Cell.BLACK: '●', Cell.WHITE: '○'}
HINT_SYMBOL = '·'


@dataclass(frozen=True)
class BoardParsed:
    """Successful result of Board.from_text."""
    board: 'Board'

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> 'Board':
        return self.board


@dataclass(frozen=True)
class BoardRejected:
    """Failed result of Board.from_text, carrying the first violation found."""
    error: BoardFormatError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> 'Board':
        raise self.error


ParseResult = Union[BoardParsed, BoardRejected]


class Board:
    """
    An 8x8 Othello position plus the side to move.

    Only move application mutates the grid; every other method is read-only.
    """

    SIZE = SIZE

    def __init__(self, grid: Optional[np.ndarray] = None, current_player: Player = Player.BLACK):
        """
        Initialize a board.

        Args:
            grid: 8x8 array of Cell values (copied). Defaults to the opening position.
            current_player: Side to move
        """
        if grid is None:
            self._board = self._opening_grid()
        else:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid must be {SIZE}x{SIZE}, got {grid.shape}")
            if not np.issubdtype(grid.dtype, np.integer):
                raise ValueError(f"Grid must hold integer Cell values, got dtype {grid.dtype}")
            if not np.isin(grid, [cell.value for cell in Cell]).all():
                raise ValueError("Grid may only contain EMPTY, BLACK or WHITE cells")
            self._board = grid.astype(np.int8)
        self._current_player = Player(current_player)

    @staticmethod
    def _opening_grid() -> np.ndarray:
        grid = np.full((SIZE, SIZE), Cell.EMPTY, dtype=np.int8)
        mid = SIZE // 2
        grid[mid - 1, mid - 1] = Cell.WHITE  # D4
        grid[mid - 1, mid] = Cell.BLACK      # E4
        grid[mid, mid - 1] = Cell.BLACK      # D5
        grid[mid, mid] = Cell.WHITE          # E5
        return grid

    @classmethod
    def create_empty(cls) -> 'Board':
        """Create the standard opening position with Black to move."""
        return cls()

    @classmethod
    def from_text(cls, text: str, side_to_move: Player = Player.BLACK) -> ParseResult:
        """
        Parse the 8-line text form of a board.

        Checks are made in order (row count, row length, characters) and only
        the first violation is reported.

        Args:
            text: Eight lines of eight characters from ``B``, ``W`` and ``.``
            side_to_move: Player to move in the resulting position

        Returns:
            BoardParsed with the new board, or BoardRejected with the error
        """
        rows = text.split('\n')

        if len(rows) != SIZE:
            return BoardRejected(RowCountError())

        for row in rows:
            if len(row) != SIZE:
                return BoardRejected(RowLengthError())
            if not set(row) <= VALID_CHARS:
                return BoardRejected(InvalidCharacterError())

        grid = np.array([[Cell.from_char(ch) for ch in row] for row in rows], dtype=np.int8)
        return BoardParsed(cls(grid, side_to_move))

    @classmethod
    def parse(cls, text: str, side_to_move: Player = Player.BLACK) -> 'Board':
        """Like from_text, but raises the BoardFormatError instead of returning it."""
        return cls.from_text(text, side_to_move).unwrap()

    def to_text(self) -> str:
        """Return the 8-line text form (no trailing newline)."""
        return '\n'.join(
            ''.join(Cell(value).char for value in row) for row in self._board
        )

    def reset(self) -> None:
        """Reset to the opening position with Black to move."""
        self._board = self._opening_grid()
        self._current_player = Player.BLACK

    def copy(self) -> 'Board':
        """Create an independent copy of the board."""
        return Board(self._board, self._current_player)

    @property
    def current_player(self) -> Player:
        return self._current_player

    def get_current_player(self) -> Player:
        """Get the side to move."""
        return self._current_player

    def cell(self, row: int, col: int) -> Cell:
        if not Position(row, col).is_on_board():
            raise IndexError(f"Out of bounds: {(row, col)}")
        return Cell(int(self._board[row, col]))

    def __getitem__(self, position) -> Cell:
        row, col = position
        return self.cell(row, col)

    def get_board_state(self) -> np.ndarray:
        """
        Get the grid as a numpy array.

        Returns:
            A copy of the 8x8 array of Cell values
        """
        return self._board.copy()

    def statistics(self) -> GameStatistics:
        return statistics(self)

    def legal_moves(self, player: Optional[Player] = None) -> List[Move]:
        from .moves import legal_moves
        return legal_moves(self, player)

    def has_any_legal_move(self, player: Optional[Player] = None) -> bool:
        from .moves import has_any_legal_move
        return has_any_legal_move(self, player)

    def try_apply_move(self, target) -> bool:
        from .moves import try_apply_move
        return try_apply_move(self, target)

    def _place(self, player: Player, position: Position, captures: Iterable[Position]) -> None:
        """Write a validated move to the grid and hand the turn over."""
        self._board[position.row, position.col] = player.cell
        for row, col in captures:
            self._board[row, col] = player.cell
        self._current_player = player.opponent

    def _hand_over(self) -> None:
        self._current_player = self._current_player.opponent

    def to_formatted_string(self, highlight: Iterable[Position] = ()) -> str:
        """
        Render the board for a terminal, with column letters and row numbers.

        Args:
            highlight: Empty squares to mark with a dot, e.g. the legal moves

        Returns:
            Multi-line string: header, top border, 8 rows, bottom border
        """
        marked = set(highlight)
        lines = ["   A B C D E F G H", "  ┌───────────────┐"]
        for r in range(SIZE):
            cells = []
            for c in range(SIZE):
                cell = Cell(int(self._board[r, c]))
                if cell is Cell.EMPTY and (r, c) in marked:
                    cells.append(HINT_SYMBOL)
                else:
                    cells.append(DISC_SYMBOLS[cell])
            lines.append(f"{r + 1} │{' '.join(cells)}│")
        lines.append("  └───────────────┘")
        return "\n".join(lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._current_player == other._current_player
                and np.array_equal(self._board, other._board))

    __hash__ = None

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        stats = statistics(self)
        return (f"Board(to_move={self._current_player.display_name}, "
                f"black={stats.black}, white={stats.white})")


def statistics(board: Board) -> GameStatistics:
    """Count each side's pieces on the board."""
    grid = board.get_board_state()
    return GameStatistics(
        black=int(np.count_nonzero(grid == Cell.BLACK)),
        white=int(np.count_nonzero(grid == Cell.WHITE)),
    )
