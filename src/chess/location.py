"""
A location on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Location:
    """Zero-based coordinates: x is the file (a-h), y is the rank (1-8)."""

    x: int
    y: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Location:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        x = ord(sq[0]) - ord("a")
        y = int(sq[1:]) - 1
        return cls(x, y)

    def to_algebraic(self) -> str:
        return f"{chr(self.x + ord('a'))}{self.y + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
