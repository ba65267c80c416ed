"""Text rendering of a board. Pure formatting, no rules in here."""

from src.chess.board import Board
from src.chess.location import BOARD_DIMENSIONS


def render_board(board: Board) -> str:
    """
    One line per rank, starting at the first rank (y=0). Squares separated by commas.
    Empty squares show as '-', pieces by their code (white lower case, black upper case).

    ex) the first lines of the starting position:
    r,n,b,q,k,b,n,r
    p,p,p,p,p,p,p,p
    -,-,-,-,-,-,-,-
    """
    num_files, num_ranks = BOARD_DIMENSIONS
    lines = [
        ",".join(str(board.grid[x][y]) for x in range(num_files))
        for y in range(num_ranks)
    ]
    # blank line to separate consecutive boards in a transcript
    return "\n".join(lines) + "\n"
