"""The Board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)

The board is an immutable value: adding, removing or moving a piece returns a new Board.
Only the column that changes is rebuilt, the other columns are shared with the previous snapshot.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Self

from src.chess import check
from src.chess.location import BOARD_DIMENSIONS, Location
from src.chess.moves import Move
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import EmptySquare, OccupiedSquare, Square
from src.core.exceptions import OutOfBoundsError

Column = tuple[Square, ...]
Grid = tuple[Column, ...]


def empty_grid() -> Grid:
    num_files, num_ranks = BOARD_DIMENSIONS
    return tuple(
        tuple(EmptySquare(Location(x, y)) for y in range(num_ranks))
        for x in range(num_files)
    )


@dataclass(frozen=True)
class Board:
    # indexed grid[x][y]
    grid: Grid = field(default_factory=empty_grid)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    # --- QUERIES ---
    def squares(self) -> Iterator[Square]:
        """All squares in scan order: file by file, within a file from the first rank upwards"""
        for column in self.grid:
            yield from column

    def square_at(self, location: Location) -> Square:
        self._assert_within_bounds(location)
        return self.grid[location.x][location.y]

    def piece_at(self, location: Location) -> Optional[Piece]:
        square = self.square_at(location)
        return square.piece if isinstance(square, OccupiedSquare) else None

    def occupied_square_at(self, location: Location) -> Optional[OccupiedSquare]:
        return self.square_at(location).to_occupied()

    def occupied_squares(
        self, color: Color, piece_type: Optional[PieceType] = None
    ) -> list[OccupiedSquare]:
        """Pieces of the given color (and type, if specified), in scan order."""
        if piece_type is None:
            return self._find_pieces(lambda os: os.piece.color == color)
        return self._find_pieces(
            lambda os: os.piece.color == color and os.piece.type == piece_type
        )

    def count_pieces(self) -> dict[Color, int]:
        counts = Counter(
            square.piece.color
            for square in self.squares()
            if isinstance(square, OccupiedSquare)
        )
        return {color: counts[color] for color in Color}

    # --- MUTATIONS (return a new Board) ---
    def add_piece(self, piece: Piece, location: Location) -> Self:
        return self._replace_square(OccupiedSquare(piece, location))

    def remove_piece(self, occupied_square: OccupiedSquare) -> Self:
        return self._replace_square(EmptySquare(occupied_square.location))

    def move_piece(self, occupied_square: OccupiedSquare, destination: Location) -> Self:
        """
        Take the piece off its square and put it on the destination (capturing whatever stood there).

        NOTE: no validation happens here. Ask `is_valid_move()` first.
        """
        return self.remove_piece(occupied_square).add_piece(
            occupied_square.piece, destination
        )

    # --- LEGALITY ---
    def pieces_in_the_way(self, occupied_square: OccupiedSquare, destination: Location) -> bool:
        """Knights jump. Any other piece is blocked by a piece (of any color) on the path."""
        return self._path_is_blocked(occupied_square, occupied_square.move_to(destination))

    def same_color_at_target(self, occupied_square: OccupiedSquare, destination: Location) -> bool:
        """You cannot take your own pieces"""
        return self.square_at(destination).holds_color(occupied_square.piece.color)

    def is_valid_move(self, occupied_square: OccupiedSquare, destination: Location) -> bool:
        """
        Can the piece on the given square move to the destination?
        ---

        Combines:
        1. the move has to go somewhere (a null move is never valid)
        2. shape of the move fits the type of piece
        3. nothing in the way
        4. no piece of your own color on the destination
        5. pawns: push onto an empty square, take diagonally

        ---
        Raises OutOfBoundsError if the destination is not on the board: that is malformed input, not an illegal move.
        """
        self._assert_within_bounds(destination)
        move = occupied_square.move_to(destination)
        if move.is_null:
            return False

        piece = occupied_square.piece
        return (
            piece.shape_is_valid(move)
            and not self._path_is_blocked(occupied_square, move)
            and not self.same_color_at_target(occupied_square, destination)
            and self._pawn_occupancy_rule(occupied_square, move)
        )

    # --- CHECK / CHECKMATE ---
    def squares_that_can_take(self, target: OccupiedSquare) -> list[OccupiedSquare]:
        return check.squares_that_can_take(self, target)

    def is_in_check(self, color: Color) -> bool:
        return check.is_in_check(self, color)

    def king_cannot_move(self, color: Color) -> bool:
        return check.king_cannot_move(self, color)

    def is_in_checkmate(self, color: Color) -> bool:
        return check.is_in_checkmate(self, color)

    # --- Internal helpers ---
    def _find_pieces(
        self, filter_fn: Callable[[OccupiedSquare], bool]
    ) -> list[OccupiedSquare]:
        return [
            square
            for square in self.squares()
            if isinstance(square, OccupiedSquare) and filter_fn(square)
        ]

    def _replace_square(self, square: Square) -> Self:
        x, y = square.location.x, square.location.y
        self._assert_within_bounds(square.location)
        column = self.grid[x]
        new_column = column[:y] + (square,) + column[y + 1 :]
        return type(self)(self.grid[:x] + (new_column,) + self.grid[x + 1 :])

    def _path_is_blocked(self, occupied_square: OccupiedSquare, move: Move) -> bool:
        if occupied_square.piece.type == PieceType.KNIGHT:
            return False
        return any(self.piece_at(location) is not None for location in move.path)

    def _pawn_occupancy_rule(self, occupied_square: OccupiedSquare, move: Move) -> bool:
        """Pawns push onto empty squares only, and only move diagonally to take an opponent's piece."""
        if occupied_square.piece.type != PieceType.PAWN:
            return True
        target = self.piece_at(move.to_location)
        if move.x_diff == 0:
            return target is None
        return target is not None and target.color == occupied_square.piece.opposite_color

    def _assert_within_bounds(self, location: Location) -> None:
        if not location.is_within_bounds():
            raise OutOfBoundsError(f"Location {location} is not on the board.")
