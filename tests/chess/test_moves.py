"""Unit tests for /src/chess/moves.py"""

import pytest

from src.chess.location import Location
from src.chess.moves import Move


def test_differences_are_absolute() -> None:
    move = Move(Location(5, 6), Location(2, 1))
    assert move.x_diff == 3
    assert move.y_diff == 5


def test_null_move_is_accepted() -> None:
    """Constructing a move that goes nowhere is fine, rejecting it is up to the Board"""
    move = Move(Location(3, 3), Location(3, 3))
    assert move.is_null
    assert move.x_diff == 0 and move.y_diff == 0
    assert move.path == ()


@pytest.mark.parametrize(
    "uci, expected_path",
    [
        ("a1a4", ["a2", "a3"]),  # up a file
        ("a4a1", ["a3", "a2"]),  # down a file
        ("a1d1", ["b1", "c1"]),  # along a rank
        ("h1e1", ["g1", "f1"]),
        ("a1d4", ["b2", "c3"]),  # diagonals in all directions
        ("d4a1", ["c3", "b2"]),
        ("a8d5", ["b7", "c6"]),
        ("h1a8", ["g2", "f3", "e4", "d5", "c6", "b7"]),
        ("a1a2", []),  # adjacent squares: nothing in between
        ("a1b2", []),
    ],
)
def test_path_between_squares(uci: str, expected_path: list[str]) -> None:
    """Path holds the squares strictly between source and destination, in the order they are passed."""
    move = Move.from_uci(uci)
    assert list(move.path) == [Location.from_algebraic(sq) for sq in expected_path]


@pytest.mark.parametrize("uci", ["b1c3", "a1c2", "a1h3"])
def test_path_of_irregular_move_is_empty(uci: str) -> None:
    """Not on a rank, file or diagonal -> no squares are passed over"""
    assert Move.from_uci(uci).path == ()


def test_path_is_computed_once() -> None:
    move = Move.from_uci("a1a8")
    assert move.path is move.path


def test_uci_round_trip() -> None:
    move = Move.from_uci("e2e4")
    assert move.from_location == Location(4, 1)
    assert move.to_location == Location(4, 3)
    assert move.to_uci() == "e2e4"


def test_string_representation() -> None:
    assert str(Move(Location(0, 1), Location(0, 3))) == "(0,1)-(0,3)"
