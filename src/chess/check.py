"""
Check / checkmate evaluation

Everything here is expressed in terms of the Board's legality composition (shape + obstruction + occupancy),
so a blocked line of attack never counts as an attack.
"""

from typing import Optional, Protocol

from src.chess.location import Location
from src.chess.pieces import Color, PieceType
from src.chess.square import OccupiedSquare
from src.core.exceptions import MissingKingError

# The (up to) eight squares surrounding the king
KING_DELTAS: list[tuple[int, int]] = [
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]


class Board(Protocol):
    """Just the parts the evaluator needs"""

    def occupied_squares(
        self, color: Color, piece_type: Optional[PieceType] = None
    ) -> list[OccupiedSquare]: ...
    def is_valid_move(self, occupied_square: OccupiedSquare, destination: Location) -> bool: ...
    def move_piece(self, occupied_square: OccupiedSquare, destination: Location) -> "Board": ...


def find_king(board: Board, color: Color) -> OccupiedSquare:
    """
    The first king of the given color in scan order.

    NOTE: a board with more than one king of a color is not rejected, the extra ones are just never looked at.
    """
    kings = board.occupied_squares(color, PieceType.KING)
    if not kings:
        raise MissingKingError(f"No {color.name.lower()} king on the board.")
    return kings[0]


def squares_that_can_take(board: Board, target: OccupiedSquare) -> list[OccupiedSquare]:
    """All opponent's pieces that could legally move onto the target's square"""
    return [
        attacker
        for attacker in board.occupied_squares(target.piece.opposite_color)
        if board.is_valid_move(attacker, target.location)
    ]


def is_in_check(board: Board, color: Color) -> bool:
    king = find_king(board, color)
    return len(squares_that_can_take(board, king)) > 0


def king_escape_squares(board: Board, color: Color) -> list[Location]:
    """
    Squares next to the king it can go to: empty or holding an opponent's piece (capture),
    and not leaving the king in check afterwards.
    """
    king = find_king(board, color)
    escapes: list[Location] = []
    for dx, dy in KING_DELTAS:
        destination = Location(king.location.x + dx, king.location.y + dy)
        if not destination.is_within_bounds():
            continue
        if not board.is_valid_move(king, destination):
            continue
        if is_in_check(board.move_piece(king, destination), color):
            continue
        escapes.append(destination)
    return escapes


def king_cannot_move(board: Board, color: Color) -> bool:
    return len(king_escape_squares(board, color)) == 0


def is_in_checkmate(board: Board, color: Color) -> bool:
    """
    Simplified: in check and the king itself has nowhere to go.

    NOTE: blocking the check or capturing the checking piece with another piece is not searched for.
    """
    return is_in_check(board, color) and king_cannot_move(board, color)
