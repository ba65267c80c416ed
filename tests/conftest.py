"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.chess.board import Board
from src.chess.location import Location
from src.chess.pieces import Color, Piece, PieceType
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

PiecePlacement = dict[str, tuple[PieceType, Color]]


@pytest.fixture
def db_session_repo() -> Iterator[Session]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def board_with() -> Callable[[PiecePlacement], Board]:
    """Call the inner function with {algebraic square: (piece type, color)} to get an otherwise empty board"""

    def _create_board(placement: PiecePlacement) -> Board:
        board = Board.empty()
        for square_name, (piece_type, color) in placement.items():
            board = board.add_piece(
                Piece(piece_type, color), Location.from_algebraic(square_name)
            )
        return board

    return _create_board
