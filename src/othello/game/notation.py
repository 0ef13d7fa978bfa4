"""
Algebraic square notation: a column letter A-H followed by a row number 1-8.
"""
from typing import Optional

from .types import Position, SIZE

COLUMNS = "ABCDEFGH"


def parse_position(text: str) -> Optional[Position]:
    """
    Parse notation such as ``"D3"`` or ``"h8"``.

    Args:
        text: Column letter (case-insensitive) immediately followed by the row number

    Returns:
        The matching Position, or None if the text is not valid notation
    """
    if not isinstance(text, str) or not 2 <= len(text) <= 3:
        return None

    col = COLUMNS.find(text[0].upper())
    if col < 0:
        return None

    row_text = text[1:]
    if not (row_text.isascii() and row_text.isdigit()):
        return None
    row = int(row_text)
    if row < 1 or row > SIZE:
        return None

    return Position(row - 1, col)


def format_position(position: Position) -> str:
    """Inverse of parse_position: ``Position(2, 3)`` -> ``"D3"``."""
    position = Position(*position)
    if not position.is_on_board():
        raise ValueError(f"Position off the board: {position}")
    return f"{COLUMNS[position.col]}{position.row + 1}"
