"""Unit tests for /src/chess/location.py"""

from string import ascii_lowercase

import pytest

from src.chess.location import BOARD_DIMENSIONS, Location


@pytest.mark.parametrize(
    "x, y, notation",
    [(x, y, f"{ascii_lowercase[x]}{y + 1}") for x in range(8) for y in range(8)],
)
def test_creating_from_algebraic(x: int, y: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to (0, 0), etc."""
    location = Location.from_algebraic(notation)
    assert location == Location(x, y)


def test_to_algebraic_notation() -> None:
    assert Location(0, 0).to_algebraic() == "a1"
    assert Location(4, 1).to_algebraic() == "e2"
    assert Location(7, 7).to_algebraic() == "h8"


def test_location_within_bounds() -> None:
    """happy case: every location on the board"""
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            assert Location(x, y).is_within_bounds()


@pytest.mark.parametrize("x, y", [(8, 0), (0, 8), (-1, 0), (0, -1), (8, 8)])
def test_location_out_of_bounds(x: int, y: int) -> None:
    assert not Location(x, y).is_within_bounds()


def test_locations_are_values() -> None:
    """Structural equality: usable as dictionary keys / set members"""
    assert Location(3, 4) == Location(3, 4)
    assert len({Location(3, 4), Location(3, 4), Location(4, 3)}) == 2
