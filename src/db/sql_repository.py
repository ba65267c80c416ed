"""Implementation of (Simulation)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import SimulationModel
from src.db.schema import DBSimulation


class SQLSimulationRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        """Get simulation by ID, if record exists."""
        simulation_db = self._fetch_simulation(simulation_id)
        if simulation_db:
            return self._to_model(simulation_db)
        return None

    def create_simulation(self, simulation: SimulationModel) -> tuple[SimulationModel, UUID]:
        """Store new simulation and return the stored data + newly created ID."""

        new_id = uuid4()
        simulation_db = DBSimulation(
            id=new_id,
            starting_fen=simulation.starting_fen,
            moves_uci=simulation.moves_uci,
            outcomes=simulation.outcomes,
            final_fen=simulation.final_fen,
            check=simulation.check,
            checkmate=simulation.checkmate,
        )
        self.db.add(simulation_db)
        self.db.commit()
        self.db.refresh(simulation_db)
        return self._to_model(simulation_db), new_id

    def delete_simulation(self, simulation_id: UUID) -> SimulationModel | None:
        """Remove a simulation's record."""
        simulation_db = self._fetch_simulation(simulation_id)
        if not simulation_db:
            return None
        model = self._to_model(simulation_db)
        self.db.delete(simulation_db)
        self.db.commit()
        return model

    def _fetch_simulation(self, simulation_id: UUID) -> DBSimulation | None:
        query = select(DBSimulation).where(DBSimulation.id == simulation_id)
        return self.db.scalar(query)

    def _to_model(self, simulation_db: DBSimulation) -> SimulationModel:
        """Convert SQLAlchemy model to data transfer model."""
        return SimulationModel(
            starting_fen=simulation_db.starting_fen,
            moves_uci=simulation_db.moves_uci,
            outcomes=simulation_db.outcomes,
            final_fen=simulation_db.final_fen,
            check=simulation_db.check,
            checkmate=simulation_db.checkmate,
        )
