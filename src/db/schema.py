"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBSimulation(Base):
    __tablename__ = "simulations"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    starting_fen: Mapped[str]
    moves_uci: Mapped[list[str]] = mapped_column(JSON, default=list)
    outcomes: Mapped[list[str]] = mapped_column(JSON, default=list)
    final_fen: Mapped[str]
    check: Mapped[dict[str, Optional[bool]]] = mapped_column(JSON)
    checkmate: Mapped[dict[str, Optional[bool]]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
