"""
Geometry of a move: the displacement between two locations and the squares it passes over.

Legality is checked later by the Board
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Self

from src.chess.location import Location

Vector = tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_location: Location
    to_location: Location

    @classmethod
    def from_uci(cls, uci: str) -> Self:
        """
        UCI-like notation: "a2a4" moves whatever stands on a2 to a4.

        NOTE: no promotion suffix, promotion is not part of this simulator.
        """
        from_loc = Location.from_algebraic(uci[:2])
        to_loc = Location.from_algebraic(uci[2:4])
        return cls(from_loc, to_loc)

    def to_uci(self) -> str:
        return f"{self.from_location.to_algebraic()}{self.to_location.to_algebraic()}"

    @property
    def x_diff(self) -> int:
        return abs(self.from_location.x - self.to_location.x)

    @property
    def y_diff(self) -> int:
        return abs(self.from_location.y - self.to_location.y)

    @property
    def is_null(self) -> bool:
        """Degenerate move: the piece would stay where it is."""
        return self.from_location == self.to_location

    @property
    def is_straight(self) -> bool:
        """Along a rank or a file"""
        return not self.is_null and (self.x_diff == 0 or self.y_diff == 0)

    @property
    def is_diagonal(self) -> bool:
        return not self.is_null and self.x_diff == self.y_diff

    @property
    def direction(self) -> Vector:
        """Unit step (per axis) from the source towards the destination"""
        return (
            _sign(self.to_location.x - self.from_location.x),
            _sign(self.to_location.y - self.from_location.y),
        )

    @cached_property
    def path(self) -> tuple[Location, ...]:
        """
        The locations strictly between source and destination.
        ---

        Step x and y in lockstep along the direction of the move. Only a move along a rank, file or diagonal
        passes over squares: anything else (a knight jump for instance) has an empty path.
        Computed once per Move, every obstruction check against the same Move reuses it.
        """
        if not (self.is_straight or self.is_diagonal):
            return ()

        dx, dy = self.direction
        num_steps = max(self.x_diff, self.y_diff)
        return tuple(
            Location(self.from_location.x + step * dx, self.from_location.y + step * dy)
            for step in range(1, num_steps)
        )

    def __str__(self) -> str:
        return f"{self.from_location}-{self.to_location}"
