"""
Tests for board construction, the text form and statistics.
"""
import numpy as np
import pytest

from othello.errors import (
    BoardFormatError,
    InvalidCharacterError,
    RowCountError,
    RowLengthError,
)
from othello.game import Board, BoardParsed, BoardRejected, Cell, Player, Position, statistics

OPENING = "........\n........\n........\n...WB...\n...BW...\n........\n........\n........"
EMPTY = "\n".join(["........"] * 8)


def test_initial_board():
    """Test the initial board setup."""
    board = Board.create_empty()
    grid = board.get_board_state()

    assert grid.shape == (8, 8), "Board should be 8x8"
    assert board.cell(3, 3) == Cell.WHITE
    assert board.cell(3, 4) == Cell.BLACK
    assert board.cell(4, 3) == Cell.BLACK
    assert board.cell(4, 4) == Cell.WHITE
    assert np.sum(grid == Cell.EMPTY) == 60, "Should have 60 empty squares initially"
    assert board.current_player is Player.BLACK
    assert board.to_text() == OPENING


def test_from_text_valid_board():
    result = Board.from_text(OPENING)
    assert isinstance(result, BoardParsed)
    assert result.ok
    assert result.board == Board.create_empty()
    assert result.board.current_player is Player.BLACK


def test_from_text_uses_supplied_side_to_move():
    board = Board.from_text(OPENING, Player.WHITE).unwrap()
    assert board.get_current_player() is Player.WHITE
    assert board != Board.create_empty()


@pytest.mark.parametrize("text", [
    "........",
    OPENING + "\n........",
    OPENING + "\n",
    "",
])
def test_from_text_rejects_wrong_row_count(text):
    result = Board.from_text(text)
    assert isinstance(result, BoardRejected)
    assert not result.ok
    assert isinstance(result.error, RowCountError)
    assert result.message == "Board must contain exactly 8 rows."


@pytest.mark.parametrize("bad_row", [".......", "........."])
def test_from_text_rejects_wrong_row_length(bad_row):
    rows = OPENING.split("\n")
    rows[1] = bad_row
    result = Board.from_text("\n".join(rows))
    assert isinstance(result.error, RowLengthError)
    assert result.message == "Each row must contain exactly 8 fields."


def test_from_text_rejects_invalid_characters():
    text = "........\n........\n........\n...WB...\n...BX...\n........\n........\n........"
    result = Board.from_text(text)
    assert isinstance(result.error, InvalidCharacterError)
    assert result.message == "Board can only contain the characters B, W, or ."


def test_from_text_rejects_lowercase_pieces():
    result = Board.from_text(OPENING.replace("WB", "wb", 1))
    assert isinstance(result.error, InvalidCharacterError)


def test_from_text_reports_first_violation_only():
    # Short row comes before the bad character, so the length error wins
    rows = OPENING.split("\n")
    rows[0] = "......."
    rows[5] = "...X...."
    assert isinstance(Board.from_text("\n".join(rows)).error, RowLengthError)

    # Bad character comes before the short row
    rows = OPENING.split("\n")
    rows[0] = "X......."
    rows[5] = "......."
    assert isinstance(Board.from_text("\n".join(rows)).error, InvalidCharacterError)


def test_rejected_unwrap_and_parse_raise():
    result = Board.from_text("........")
    with pytest.raises(RowCountError):
        result.unwrap()
    with pytest.raises(BoardFormatError, match="exactly 8 fields"):
        Board.parse(OPENING.replace("........", ".......", 1))


def test_to_text_shape():
    text = Board.create_empty().to_text()
    rows = text.split("\n")
    assert len(rows) == 8
    assert all(len(row) == 8 for row in rows)
    assert not text.endswith("\n")


def test_round_trip_through_text():
    board = Board.create_empty()
    for _ in range(12):
        moves = board.legal_moves()
        if not moves:
            break
        assert board.try_apply_move(moves[-1].position)
        copy = Board.from_text(board.to_text(), board.current_player).unwrap()
        assert copy == board
        assert copy.to_text() == board.to_text()


def test_copy_is_independent():
    board = Board.create_empty()
    snapshot = board.copy()
    assert board.try_apply_move("D3")
    assert snapshot == Board.create_empty()
    assert snapshot != board


def test_get_board_state_returns_copy():
    board = Board.create_empty()
    grid = board.get_board_state()
    grid[0, 0] = Cell.BLACK
    assert board.cell(0, 0) == Cell.EMPTY


def test_reset():
    board = Board.from_text(EMPTY, Player.WHITE).unwrap()
    board.reset()
    assert board == Board.create_empty()


def test_cell_access():
    board = Board.create_empty()
    assert board[Position(3, 4)] == Cell.BLACK
    assert board[(0, 0)] == Cell.EMPTY
    with pytest.raises(IndexError):
        board.cell(8, 0)
    with pytest.raises(IndexError):
        board.cell(0, -1)


def test_grid_shape_is_enforced():
    with pytest.raises(ValueError):
        Board(np.zeros((7, 8), dtype=np.int8))


def test_grid_values_are_enforced():
    """Only integer grids holding EMPTY, BLACK or WHITE are accepted."""
    unknown = np.zeros((8, 8), dtype=np.int8)
    unknown[0, 0] = 7
    with pytest.raises(ValueError):
        Board(unknown)

    fractional = np.zeros((8, 8))
    fractional[0, 0] = 1.9
    with pytest.raises(ValueError):
        Board(fractional)

    with pytest.raises(ValueError):
        Board(np.zeros((8, 8), dtype=bool))

    wide = np.zeros((8, 8), dtype=np.int64)
    wide[0, 0] = Cell.WHITE
    board = Board(wide)
    assert board.cell(0, 0) == Cell.WHITE
    assert board.get_board_state().dtype == np.int8


def test_statistics():
    stats = statistics(Board.create_empty())
    assert (stats.black, stats.white) == (2, 2)
    assert stats.empty == 60
    assert stats.leader is None

    stats = Board.parse(EMPTY).statistics()
    assert (stats.black, stats.white) == (0, 0)

    board = Board.parse("........\n........\n........\n..BBB...\n........\n........\n........\n........")
    stats = board.statistics()
    assert (stats.black, stats.white) == (3, 0)
    assert stats.leader is Player.BLACK


def test_statistics_does_not_mutate():
    board = Board.create_empty()
    before = board.to_text()
    board.statistics()
    assert board.to_text() == before
    assert board.current_player is Player.BLACK


def test_formatted_string():
    formatted = Board.create_empty().to_formatted_string()
    lines = formatted.split("\n")

    assert len(lines) == 11
    assert lines[0] == "   A B C D E F G H"
    assert lines[1] == "  ┌───────────────┐"
    assert lines[-1] == "  └───────────────┘"
    assert lines[2] == "1 │" + " " * 15 + "│"
    assert lines[5] == "4 │      ○ ●      │"
    assert lines[6] == "5 │      ● ○      │"


def test_formatted_string_complex_setup():
    text = "\n".join(["BBBBBBBB", "WWWWWWWW"] * 4)
    lines = Board.parse(text).to_formatted_string().split("\n")
    assert "● ● ● ● ● ● ● ●" in lines[2]
    assert "○ ○ ○ ○ ○ ○ ○ ○" in lines[3]


def test_formatted_string_highlight():
    board = Board.create_empty()
    lines = board.to_formatted_string([m.position for m in board.legal_moves()]).split("\n")
    assert lines[4] == "3 │      ·        │"
    # Highlighting an occupied square leaves the disc visible
    assert "·" not in board.to_formatted_string([Position(3, 3)])


if __name__ == "__main__":
    test_initial_board()
    test_from_text_valid_board()
    test_round_trip_through_text()
    print("Board tests passed!")
