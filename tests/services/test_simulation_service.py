"""Unit tests for src/services/simulation_service.py"""

from typing import Iterator
from uuid import UUID, uuid4

import pytest

from src.core.exceptions import MissingKingError, RepositoryError
from src.core.models import SimulationModel
from src.core.shared_types import Color, Outcome
from src.services.simulation_service import (
    CheckStatusRequest,
    DeleteSimulationRequest,
    GetSimulationRequest,
    MoveValidationResponse,
    RunSimulationRequest,
    SimulationResponse,
    SimulationService,
    ValidateMoveRequest,
)
from src.api.models import MoveRequest
from src.chess.fen import STARTING_PLACEMENT

FOOLS_MATE_PLACEMENT = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the SimulationRepository using a dictionary of simulation models."""

    def __init__(self) -> None:
        self._simulations: dict[UUID, SimulationModel] = {}

    def create_simulation(self, simulation: SimulationModel) -> tuple[SimulationModel, UUID]:
        simulation_id = uuid4()
        self._simulations[simulation_id] = simulation
        return simulation, simulation_id

    def get_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        return self._simulations.get(simulation_id)

    def delete_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        return self._simulations.pop(simulation_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._simulations.clear()


@pytest.fixture
def mock_repository() -> Iterator[MockRepository]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


def _moves(*ucis: str) -> list[MoveRequest]:
    return [MoveRequest(from_square=uci[:2], to_square=uci[2:4]) for uci in ucis]


# --- SERVICE - RUN SIMULATION ----
def test_run_demo_simulation(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    response = service.run_simulation(
        RunSimulationRequest(moves=_moves("a2a4", "b2b3", "a1a3"))
    )

    assert isinstance(response, SimulationResponse)
    assert response.starting_fen == STARTING_PLACEMENT
    assert response.moves == ["a2a4", "b2b3", "a1a3"]
    assert response.outcomes == [Outcome.APPLIED] * 3
    assert response.final_fen == "rnbqkbnr/pppppppp/8/8/P7/RP6/2PPPPPP/1NBQKBNR"
    assert response.check == {"white": False, "black": False}

    # persisted
    assert mock_repository.get_simulation(response.simulation_id) is not None


def test_run_simulation_from_placement(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    response = service.run_simulation(
        RunSimulationRequest(
            starting_fen="4k3/8/8/8/8/8/8/4K2R", moves=_moves("h1h8", "e1e3")
        )
    )
    assert response.outcomes == [Outcome.APPLIED, Outcome.ILLEGAL]
    assert response.check == {"white": False, "black": True}
    assert response.checkmate == {"white": False, "black": False}


def test_get_simulation(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    created = service.run_simulation(RunSimulationRequest(moves=_moves("e2e4")))
    fetched = service.get_simulation(GetSimulationRequest(simulation_id=created.simulation_id))
    assert fetched == created


def test_get_unknown_simulation(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    with pytest.raises(RepositoryError):
        service.get_simulation(GetSimulationRequest(simulation_id=uuid4()))


def test_delete_simulation(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    created = service.run_simulation(RunSimulationRequest(moves=[]))
    service.delete_simulation(DeleteSimulationRequest(simulation_id=created.simulation_id))
    assert mock_repository.get_simulation(created.simulation_id) is None

    with pytest.raises(RepositoryError):
        service.delete_simulation(
            DeleteSimulationRequest(simulation_id=created.simulation_id)
        )


# --- SERVICE - VALIDATE MOVE ----
@pytest.mark.parametrize(
    "uci, is_valid, resulting_fen",
    [
        ("g1f3", True, "rnbqkbnr/pppppppp/8/8/8/5N2/PPPPPPPP/RNBQKB1R"),
        ("a1a3", False, STARTING_PLACEMENT),
        ("e4e5", False, STARTING_PLACEMENT),  # nothing on e4
    ],
)
def test_validate_move(
    mock_repository: MockRepository, uci: str, is_valid: bool, resulting_fen: str
) -> None:
    service = SimulationService(mock_repository)
    response = service.validate_move(
        ValidateMoveRequest(fen=STARTING_PLACEMENT, move=_moves(uci)[0])
    )
    assert response == MoveValidationResponse(
        move=uci, is_valid=is_valid, resulting_fen=resulting_fen
    )


# --- SERVICE - CHECK STATUS ----
def test_check_status_checkmate(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    response = service.check_status(
        CheckStatusRequest(fen=FOOLS_MATE_PLACEMENT, color=Color.WHITE)
    )
    assert response.is_in_check
    assert response.is_in_checkmate
    assert response.attackers == ["h4"]


def test_check_status_no_check(mock_repository: MockRepository) -> None:
    service = SimulationService(mock_repository)
    response = service.check_status(
        CheckStatusRequest(fen=STARTING_PLACEMENT, color=Color.BLACK)
    )
    assert response.color == Color.BLACK
    assert not response.is_in_check
    assert not response.is_in_checkmate
    assert response.attackers == []


def test_check_status_without_king(mock_repository: MockRepository) -> None:
    """Make sure service propagates the exceptions."""
    service = SimulationService(mock_repository)
    with pytest.raises(MissingKingError):
        service.check_status(CheckStatusRequest(fen="8/8/8/8/8/8/8/4K3", color=Color.BLACK))
