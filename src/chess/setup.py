"""The standard starting position"""

from src.chess.board import Board
from src.chess.location import BOARD_DIMENSIONS, Location
from src.chess.pieces import Color, Piece, PieceType

# Files a (x=0) through h (x=7)
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# (back rank, pawn rank) per color
STARTING_RANKS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (7, 6),
}


def standard_board() -> Board:
    board = Board.empty()
    for color, (back_rank, pawn_rank) in STARTING_RANKS.items():
        for x in range(BOARD_DIMENSIONS[0]):
            board = board.add_piece(Piece(PieceType.PAWN, color), Location(x, pawn_rank))
            board = board.add_piece(Piece(BACK_RANK[x], color), Location(x, back_rank))
    return board
