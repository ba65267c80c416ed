"""
A square on the board: either empty or occupied by a piece.

The identity of a square is its location; what stands on it is encoded by the type of square (never by None).
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.location import Location
from src.chess.moves import Move
from src.chess.pieces import Color, Piece


@dataclass(frozen=True)
class EmptySquare:
    location: Location

    def holds_color(self, color: Color) -> bool:
        return False

    def to_occupied(self) -> Optional["OccupiedSquare"]:
        return None

    def __str__(self) -> str:
        return "-"


@dataclass(frozen=True)
class OccupiedSquare:
    piece: Piece
    location: Location

    def holds_color(self, color: Color) -> bool:
        return self.piece.color == color

    def to_occupied(self) -> Optional["OccupiedSquare"]:
        return self

    def move_to(self, destination: Location) -> Move:
        return Move(self.location, destination)

    def shape_is_valid(self, destination: Location) -> bool:
        """Only the geometry: ignores anything else standing on the board."""
        return self.piece.shape_is_valid(self.move_to(destination))

    def __str__(self) -> str:
        return self.piece.code


Square = EmptySquare | OccupiedSquare
