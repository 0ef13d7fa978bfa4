"""
Value types shared by the Othello engine.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional, Tuple

# Board dimensions
SIZE = 8


class Cell(IntEnum):
    """Contents of a single square. Values are what the numpy grid stores."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def char(self) -> str:
        return _CELL_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> 'Cell':
        """Map one of ``.``, ``B``, ``W`` to a cell; raises ``KeyError`` otherwise."""
        return _CHAR_CELLS[char]


_CELL_CHARS = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}
_CHAR_CELLS = {char: cell for cell, char in _CELL_CHARS.items()}


class Player(IntEnum):
    """A side. Shares its integer value with the matching ``Cell``."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Player':
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def cell(self) -> Cell:
        return Cell(self.value)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Position(NamedTuple):
    """A board square; row 0 is the top row, column 0 the leftmost column."""
    row: int
    col: int

    def is_on_board(self) -> bool:
        return 0 <= self.row < SIZE and 0 <= self.col < SIZE

    def to_notation(self) -> str:
        from .notation import format_position
        return format_position(self)

    @classmethod
    def from_notation(cls, text: str) -> Optional['Position']:
        from .notation import parse_position
        return parse_position(text)


@dataclass(frozen=True)
class Move:
    """
    A legal placement and the opponent squares it captures.

    Args:
        position: Square the new piece is placed on
        captures: Every opponent square flipped by the placement, in scan order
    """
    position: Position
    captures: Tuple[Position, ...]

    def __post_init__(self):
        if not self.captures:
            raise ValueError(f"A move must capture at least one piece: {self.position}")


@dataclass(frozen=True)
class GameStatistics:
    """Piece counts for both sides."""
    black: int
    white: int

    @property
    def empty(self) -> int:
        return SIZE * SIZE - self.black - self.white

    @property
    def leader(self) -> Optional[Player]:
        """The side with more pieces, or None on a tie."""
        if self.black > self.white:
            return Player.BLACK
        if self.white > self.black:
            return Player.WHITE
        return None
