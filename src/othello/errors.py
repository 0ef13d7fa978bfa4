"""
Exception types for the Othello engine.

Board-format errors are normally handed back as values inside a
``BoardRejected`` result; they are only raised when a caller unwraps it.
"""


class OthelloError(Exception):
    """Base exception for the package."""


class BoardFormatError(OthelloError):
    """Text board failed validation."""

    message = "Invalid board."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class RowCountError(BoardFormatError):
    message = "Board must contain exactly 8 rows."


class RowLengthError(BoardFormatError):
    message = "Each row must contain exactly 8 fields."


class InvalidCharacterError(BoardFormatError):
    message = "Board can only contain the characters B, W, or ."


class IllegalPassError(OthelloError):
    """Pass attempted while the side to move still has a legal move."""
