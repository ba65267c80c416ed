"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CheckStatusRequest,
    CheckStatusResponse,
    DeleteSimulationRequest,
    GetSimulationRequest,
    MoveValidationResponse,
    RunSimulationRequest,
    SimulationResponse,
    ValidateMoveRequest,
)
from src.chess.check import find_king
from src.chess.fen import board_from_fen, board_to_fen
from src.chess.moves import Move
from src.chess.pieces import Color as DomainColor
from src.chess.simulation import Simulation
from src.core.exceptions import RepositoryError
from src.core.models import SimulationModel
from src.core.shared_types import Outcome
from src.db.repository import SimulationRepository

logger = logging.getLogger(__name__)


class SimulationService:
    """Orchestration of layers for the chess simulator."""

    def __init__(self, repository: SimulationRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def run_simulation(self, request: RunSimulationRequest) -> SimulationResponse:
        """Play a scripted list of moves and store the result."""

        # Create the Simulation from the requested starting position
        simulation = (
            Simulation.from_fen(request.starting_fen)
            if request.starting_fen
            else Simulation.standard()
        )

        # Play all moves
        simulation.run(Move.from_uci(move.to_uci()) for move in request.moves)
        logger.debug("Simulation transcript:\n%s", simulation.transcript())

        # Store the SimulationModel in the repository
        stored, simulation_id = self.repo.create_simulation(simulation.to_model())
        logger.info(
            "Stored simulation %s (%d moves, %d applied)",
            simulation_id,
            len(stored.moves_uci),
            stored.outcomes.count(Outcome.APPLIED),
        )
        return self._create_simulation_response(simulation_id, stored)

    def get_simulation(self, request: GetSimulationRequest) -> SimulationResponse:
        """Retrieve a stored simulation run."""
        model = self._fetch_simulation(request.simulation_id)
        return self._create_simulation_response(request.simulation_id, model)

    def validate_move(self, request: ValidateMoveRequest) -> MoveValidationResponse:
        """Check a single move against a position. Nothing gets stored."""
        board = board_from_fen(request.fen)
        move = Move.from_uci(request.move.to_uci())

        occupied_square = board.occupied_square_at(move.from_location)
        is_valid = occupied_square is not None and board.is_valid_move(
            occupied_square, move.to_location
        )
        resulting_board = (
            board.move_piece(occupied_square, move.to_location)
            if is_valid and occupied_square is not None
            else board
        )
        return MoveValidationResponse(
            move=move.to_uci(),
            is_valid=is_valid,
            resulting_fen=board_to_fen(resulting_board),
        )

    def check_status(self, request: CheckStatusRequest) -> CheckStatusResponse:
        """
        Is the given color in check / checkmate?

        NOTE: MissingKingError propagates if the position has no king of that color.
        """
        board = board_from_fen(request.fen)
        color = DomainColor[request.color.name]
        king = find_king(board, color)
        attackers = [
            attacker.location.to_algebraic()
            for attacker in board.squares_that_can_take(king)
        ]
        return CheckStatusResponse(
            color=request.color,
            is_in_check=len(attackers) > 0,
            is_in_checkmate=board.is_in_checkmate(color),
            attackers=attackers,
        )

    def delete_simulation(self, request: DeleteSimulationRequest) -> None:
        """Handle a request to delete a Simulation record."""
        if self.repo.delete_simulation(request.simulation_id) is None:
            raise RepositoryError(
                f"Simulation with simulation_id={request.simulation_id} not found."
            )

    # -- Internal helpers --
    def _create_simulation_response(
        self, simulation_id: UUID, model: SimulationModel
    ) -> SimulationResponse:
        return SimulationResponse(
            simulation_id=simulation_id,
            starting_fen=model.starting_fen,
            moves=model.moves_uci,
            outcomes=[Outcome(outcome) for outcome in model.outcomes],
            final_fen=model.final_fen,
            check=model.check,
            checkmate=model.checkmate,
        )

    def _fetch_simulation(self, simulation_id: UUID) -> SimulationModel:
        """Attempt to find the simulation in the repository and raise error if it fails."""
        model = self.repo.get_simulation(simulation_id)
        if model is None:
            raise RepositoryError(f"Simulation with {simulation_id=} not found.")
        return model
