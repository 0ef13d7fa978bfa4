"""
Tests for algebraic square notation.
"""
import pytest

from othello.game import Position, format_position, parse_position


@pytest.mark.parametrize("text, expected", [
    ("A1", (0, 0)),
    ("H8", (7, 7)),
    ("D3", (2, 3)),
    ("d3", (2, 3)),
    ("h1", (0, 7)),
    ("C04", (3, 2)),
])
def test_parse_position(text, expected):
    assert parse_position(text) == expected
    assert Position.from_notation(text) == expected


@pytest.mark.parametrize("text", [
    "", "A", "XYZ", "I1", "A9", "A0", "A-1", "1A", "AA", "A10", " D3", "D3 ", "D²",
])
def test_parse_position_rejects(text):
    assert parse_position(text) is None


def test_parse_position_rejects_non_strings():
    assert parse_position(None) is None
    assert parse_position(23) is None


def test_format_position():
    assert format_position(Position(0, 0)) == "A1"
    assert format_position(Position(2, 3)) == "D3"
    assert Position(7, 7).to_notation() == "H8"
    with pytest.raises(ValueError):
        format_position(Position(8, 0))


def test_format_parse_inverse():
    for row in range(8):
        for col in range(8):
            assert parse_position(format_position(Position(row, col))) == (row, col)
