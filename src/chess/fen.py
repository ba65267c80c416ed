"""
Piece placement in FEN (Forsyth-Edwards Notation): the first field of a FEN string.

rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
means:
* black pieces are on the 8th rank, starting with the rook on a8, knight on b8, etc.
* pawns cover the 7th rank entirely
* ranks 6 through 3 have 8 consecutive empty squares
* rank 2 are the white pawns (capital letters)
* 1st rank are the white pieces. Left-to-right reads a1-h1.

NOTE: FEN uses capitals for white, the board rendering uses capitals for black. Don't mix them up.
"""

from src.chess.board import Board
from src.chess.location import BOARD_DIMENSIONS, Location
from src.chess.pieces import CODE_TO_PIECE, PIECE_TO_CODE, Color, Piece
from src.core.exceptions import InvalidFENError

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "/".join(["8"] * BOARD_DIMENSIONS[1])


def _is_empty_count(character: str) -> bool:
    # str.isdigit() also accepts unicode digits such as "²", which int() rejects
    return character.isascii() and character.isdigit()


def is_valid_placement(placement: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_files, num_ranks = BOARD_DIMENSIONS
    rank_fens = placement.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if _is_empty_count(character):
                file_count += int(character)
            elif character.lower() in CODE_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True


def piece_from_fen(character: str) -> Piece:
    # lower case: Black pieces, upper case: White pieces
    color = Color.WHITE if character.isupper() else Color.BLACK
    return Piece(CODE_TO_PIECE[character.lower()], color)


def piece_to_fen(piece: Piece) -> str:
    code = PIECE_TO_CODE[piece.type]
    return code.upper() if piece.color == Color.WHITE else code


def board_from_fen(placement: str) -> Board:
    """Construct a board from the piece placement field of a FEN string."""
    if not is_valid_placement(placement):
        raise InvalidFENError(f"Cannot interpret supplied string as FEN placement: {placement}")

    board = Board.empty()
    for rank_idx, fen_one_rank in enumerate(placement.split("/")):
        # FEN string is read from top rank (8th) to bottom rank (1st)
        y = BOARD_DIMENSIONS[1] - 1 - rank_idx
        x = 0
        for character in fen_one_rank:
            if _is_empty_count(character):
                # A number denotes the amount of empty squares after each other
                x += int(character)
            else:
                board = board.add_piece(piece_from_fen(character), Location(x, y))
                x += 1
    return board


def board_to_fen(board: Board) -> str:
    """Ranks are separated by slashes in FEN string."""
    return "/".join(
        _rank_to_fen(board, y) for y in range(BOARD_DIMENSIONS[1] - 1, -1, -1)
    )


def _rank_to_fen(board: Board, y: int) -> str:
    """FEN string of a single rank"""
    fen_characters: list[str] = []
    empty_count = 0
    for x in range(BOARD_DIMENSIONS[0]):
        piece = board.piece_at(Location(x, y))

        if piece is not None:
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece_to_fen(piece))
        else:
            empty_count += 1

    # if the entire rank is empty, then we still place this number in the string
    if empty_count > 0:
        fen_characters.append(str(empty_count))
    return "".join(fen_characters)
