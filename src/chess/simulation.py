"""
The Simulation is the entrypoint into the domain layer for the service layer.
It plays a scripted sequence of moves on a board, and records what happened to each of them.

NOTE: there is no notion of turns. Any piece can be moved at any time, as long as the move itself is valid.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Self

from src.chess.board import Board
from src.chess.fen import board_from_fen, board_to_fen
from src.chess.moves import Move
from src.chess.pieces import Color
from src.chess.render import render_board
from src.chess.setup import standard_board
from src.core.exceptions import MissingKingError
from src.core.models import SimulationModel

logger = logging.getLogger(__name__)

# The scripted demonstration: two pawn pushes that clear the way for the rook.
DEMO_MOVES: list[Move] = [
    Move.from_uci("a2a4"),
    Move.from_uci("b2b3"),
    Move.from_uci("a1a3"),
]


class Outcome(Enum):
    APPLIED = "applied"
    ILLEGAL = "illegal"
    NO_PIECE = "no piece"


@dataclass(frozen=True)
class SimulationStep:
    """What happened to a single move, and the board right after it."""

    move: Move
    outcome: Outcome
    board: Board
    # None when that color has no king on the board
    check: dict[Color, Optional[bool]]
    checkmate: dict[Color, Optional[bool]]

    @property
    def applied(self) -> bool:
        return self.outcome == Outcome.APPLIED


@dataclass
class Simulation:
    starting_board: Board
    steps: list[SimulationStep] = field(default_factory=list)

    @classmethod
    def standard(cls) -> Self:
        """Start from the standard starting position"""
        return cls(standard_board())

    @classmethod
    def from_fen(cls, placement: str) -> Self:
        return cls(board_from_fen(placement))

    @property
    def board(self) -> Board:
        """Board after the last move played (the starting board if nothing was played yet)"""
        return self.steps[-1].board if self.steps else self.starting_board

    def play(self, move: Move) -> SimulationStep:
        """
        Attempt a single move on the current board
        -----

        1. find the piece on the source square (nothing there? the move is skipped)
        2. check if the move is valid
        3. valid? move the piece. Otherwise the board stays as it was
        4. record check / checkmate for both colors on the resulting board
        """
        board = self.board
        occupied_square = board.occupied_square_at(move.from_location)

        if occupied_square is None:
            outcome = Outcome.NO_PIECE
            new_board = board
        elif board.is_valid_move(occupied_square, move.to_location):
            outcome = Outcome.APPLIED
            new_board = board.move_piece(occupied_square, move.to_location)
        else:
            outcome = Outcome.ILLEGAL
            new_board = board

        if outcome == Outcome.NO_PIECE:
            logger.info("%s skipped: no piece on %s", move, move.from_location)
        else:
            logger.info("%s is valid %s", move, outcome == Outcome.APPLIED)
        step = SimulationStep(
            move=move,
            outcome=outcome,
            board=new_board,
            check={color: _safe_eval(new_board.is_in_check, color) for color in Color},
            checkmate={
                color: _safe_eval(new_board.is_in_checkmate, color) for color in Color
            },
        )
        self.steps.append(step)
        return step

    def run(self, moves: Iterable[Move]) -> list[SimulationStep]:
        """Play the moves one after the other"""
        return [self.play(move) for move in moves]

    def transcript(self) -> str:
        """
        The starting board followed by every board reached by an applied move (rendered as text).

        Moves from an empty square are skipped without a line in the transcript.
        """
        parts = [render_board(self.starting_board)]
        for step in self.steps:
            if step.outcome == Outcome.NO_PIECE:
                continue
            parts.append(f"{step.move} is valid {str(step.applied).lower()}\n")
            if step.applied:
                parts.append(render_board(step.board))
        return "\n".join(parts)

    def to_model(self) -> SimulationModel:
        """Encode into a format the Service layer uses"""
        last_check, last_checkmate = self._final_status()
        return SimulationModel(
            starting_fen=board_to_fen(self.starting_board),
            moves_uci=[step.move.to_uci() for step in self.steps],
            outcomes=[step.outcome.value for step in self.steps],
            final_fen=board_to_fen(self.board),
            check={color.name.lower(): value for color, value in last_check.items()},
            checkmate={
                color.name.lower(): value for color, value in last_checkmate.items()
            },
        )

    def _final_status(self) -> tuple[dict[Color, Optional[bool]], dict[Color, Optional[bool]]]:
        if self.steps:
            return self.steps[-1].check, self.steps[-1].checkmate
        board = self.starting_board
        return (
            {color: _safe_eval(board.is_in_check, color) for color in Color},
            {color: _safe_eval(board.is_in_checkmate, color) for color in Color},
        )


def _safe_eval(predicate: Callable[[Color], bool], color: Color) -> Optional[bool]:
    """Boards without a king of a color (test positions, puzzles) simply have no check status for it."""
    try:
        return predicate(color)
    except MissingKingError:
        logger.debug("No %s king on the board, skipping check evaluation", color.name.lower())
        return None
