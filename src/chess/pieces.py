"""
Defines the types of chess pieces and the shape of the moves they make

Key idea: Use strategy pattern to map every piece type to a rule that only looks at the geometry of a move.
Obstruction and occupancy are checked later by the Board.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from src.chess.moves import Move


class PieceType(Enum):
    PAWN = auto()
    ROOK = auto()
    KNIGHT = auto()
    BISHOP = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# White moves UP the board (increasing y), black moves DOWN
FORWARD: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}

# Rank a pawn starts on, and the rank it reaches with its double step
PAWN_DOUBLE_STEP: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 3),
    Color.BLACK: (6, 4),
}


# --- SHAPE RULES ---
def pawn_shape(move: Move, color: Color) -> bool:
    """
    A pawn:
    - moves by a single square forward, staying on its file
    - can move by two when it is still on its starting rank
    - takes diagonally (one square forward, one file over)

    NOTE: whether the target square is empty / holds an opponent's piece is checked by the Board
    """
    forward = FORWARD[color]
    dy = move.to_location.y - move.from_location.y
    if dy == forward:
        return move.x_diff <= 1

    home_rank, double_step_rank = PAWN_DOUBLE_STEP[color]
    return (
        move.x_diff == 0
        and move.from_location.y == home_rank
        and move.to_location.y == double_step_rank
    )


def rook_shape(move: Move, color: Color) -> bool:
    """Rooks move either horizontally or vertically"""
    return move.x_diff == 0 or move.y_diff == 0


def knight_shape(move: Move, color: Color) -> bool:
    """Knights always move such that {|delta_x|, |delta_y|} = {1, 2}"""
    return (move.x_diff, move.y_diff) in {(1, 2), (2, 1)}


def bishop_shape(move: Move, color: Color) -> bool:
    """
    Bishops move diagonally: |delta_x| = |delta_y|

    NOTE: guard against the zero displacement, a horizontal move is simply not a diagonal.
    """
    return move.x_diff != 0 and move.x_diff == move.y_diff


def queen_shape(move: Move, color: Color) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return bishop_shape(move, color) or rook_shape(move, color)


def king_shape(move: Move, color: Color) -> bool:
    """The king can move by a single square at the time."""
    return move.x_diff <= 1 and move.y_diff <= 1


# -- STRATEGY PATTERN: SHAPE RULES ---
ShapeRuleFn = Callable[[Move, Color], bool]
SHAPE_RULES: dict[PieceType, ShapeRuleFn] = {
    PieceType.PAWN: pawn_shape,
    PieceType.ROOK: rook_shape,
    PieceType.KNIGHT: knight_shape,
    PieceType.BISHOP: bishop_shape,
    PieceType.QUEEN: queen_shape,
    PieceType.KING: king_shape,
}

PIECE_TO_CODE: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.ROOK: "r",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

CODE_TO_PIECE: dict[str, PieceType] = {value: key for key, value in PIECE_TO_CODE.items()}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @property
    def code(self) -> str:
        """Short name used when printing the board: lower case for white, upper case for black"""
        code = PIECE_TO_CODE[self.type]
        return code.upper() if self.color == Color.BLACK else code

    @property
    def opposite_color(self) -> Color:
        return self.color.opposite

    def shape_is_valid(self, move: Move) -> bool:
        """Does the displacement match the way this type of piece moves?"""
        return SHAPE_RULES[self.type](move, self.color)
