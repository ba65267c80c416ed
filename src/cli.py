"""Command line driver: play a scripted list of moves and print the boards.

Usage:
    python -m src.cli [moves ...] [--fen PLACEMENT] [--store]

Without moves, the demonstration script (a2a4 b2b3 a1a3) is played from the standard starting position.
With --store, the run is persisted in the database configured by CHESS_SIM_DATABASE_URL.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.api.models import MoveRequest, RunSimulationRequest
from src.chess.moves import Move
from src.chess.simulation import DEMO_MOVES, Simulation
from src.core.config import configure_logging, get_settings
from src.core.exceptions import ChessSimError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess position simulator")
    parser.add_argument("moves", nargs="*", help="moves in UCI-like notation, e.g. a2a4")
    parser.add_argument("--fen", default=None, help="FEN piece placement to start from")
    parser.add_argument("--store", action="store_true", help="persist the simulation run")
    return parser


def _store(fen: Optional[str], moves: list[Move]) -> None:
    # imported here: creating the engine needs the configured database
    from src.db.database import SessionLocal, init_db
    from src.db.sql_repository import SQLSimulationRepository
    from src.services.simulation_service import SimulationService

    init_db()
    request = RunSimulationRequest(
        starting_fen=fen,
        moves=[
            MoveRequest(
                from_square=move.from_location.to_algebraic(),
                to_square=move.to_location.to_algebraic(),
            )
            for move in moves
        ],
    )
    with SessionLocal() as session:
        response = SimulationService(SQLSimulationRepository(session)).run_simulation(request)
    print(f"stored simulation {response.simulation_id}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())

    try:
        moves = [Move.from_uci(uci) for uci in args.moves] if args.moves else DEMO_MOVES
        simulation = Simulation.from_fen(args.fen) if args.fen else Simulation.standard()
        simulation.run(moves)
        print(simulation.transcript())
        if args.store:
            _store(args.fen, moves)
    except (ChessSimError, ValueError, IndexError) as error:
        logger.error("Simulation failed: %s", error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
