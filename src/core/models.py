"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make SimulationModel easier to read
PieceColor = str


@dataclass
class SimulationModel:
    """Transport-safe representation of a simulation run used between API, Service, DB, and domain layers."""

    starting_fen: str
    moves_uci: list[str]
    outcomes: list[str]
    final_fen: str
    check: dict[PieceColor, Optional[bool]]
    checkmate: dict[PieceColor, Optional[bool]]
