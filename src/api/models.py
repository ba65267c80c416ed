"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.fen import is_valid_placement
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Outcome

PieceColor = str


def _is_algebraic_notation(value: str) -> bool:
    """a letter for the file (a-h) + a number for the rank (1-8)"""
    if len(value) != 2:
        return False
    file_char, rank_char = value[0], value[1]
    return file_char in "abcdefgh" and rank_char in "12345678"


def _validate_placement(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    placement = value.strip()
    if not is_valid_placement(placement):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a FEN piece placement."
        )
    return placement


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value

    def to_uci(self) -> str:
        return f"{self.from_square}{self.to_square}"


class RunSimulationRequest(BaseModel):
    """Play the moves, one after the other, starting from the given placement (standard start if not supplied)."""

    starting_fen: Optional[str] = None
    moves: list[MoveRequest]

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        return _validate_placement(value)


class ValidateMoveRequest(BaseModel):
    """Is a single move valid on the given position (no record is stored)."""

    fen: str
    move: MoveRequest

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        return _validate_placement(value)


class CheckStatusRequest(BaseModel):
    fen: str
    color: Color

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        return _validate_placement(value)


class GetSimulationRequest(BaseModel):
    simulation_id: UUID


class DeleteSimulationRequest(BaseModel):
    simulation_id: UUID


# --- RESPONSE MODELS ---
class SimulationResponse(BaseModel):
    simulation_id: UUID
    starting_fen: str
    moves: list[str]
    outcomes: list[Outcome]
    final_fen: str
    check: dict[PieceColor, Optional[bool]]
    checkmate: dict[PieceColor, Optional[bool]]


class MoveValidationResponse(BaseModel):
    move: str
    is_valid: bool
    resulting_fen: str


class CheckStatusResponse(BaseModel):
    color: Color
    is_in_check: bool
    is_in_checkmate: bool
    attackers: list[str]
