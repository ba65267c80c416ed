"""Protocol repository (implemented with SQLAlchemy, tests use a dictionary)"""

from typing import Protocol
from uuid import UUID

from src.core.models import SimulationModel


class SimulationRepository(Protocol):
    """Persistence layer orchestration"""

    def get_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        """Get simulation by ID, if record exists."""
        ...

    def create_simulation(self, simulation: SimulationModel) -> tuple[SimulationModel, UUID]:
        """Store new simulation and return the stored data + newly created ID."""
        ...

    def delete_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        """Remove a simulation's record."""
        ...
