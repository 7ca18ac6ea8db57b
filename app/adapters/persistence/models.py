"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import datetime, time

from sqlalchemy import (
    Boolean,
    DateTime,
    Index,
    Integer,
    String,
    Time,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class AgentModel(Base):
    __tablename__ = "agents"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Nullable so that partially filled records load and get skipped, not crash
    role: Mapped[str | None] = mapped_column(String(20), nullable=True)
    status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    auto_assign: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    specialization: Mapped[str | None] = mapped_column(String(30), nullable=True)
    max_tickets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    work_start: Mapped[time | None] = mapped_column(Time, nullable=True)
    work_end: Mapped[time | None] = mapped_column(Time, nullable=True)
    timezone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    work_days: Mapped[list[str] | None] = mapped_column(ARRAY(String(3)), nullable=True)

    __table_args__ = (Index("idx_agents_role_status", "role", "status"),)


class TicketModel(Base):
    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False, default="")
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default="medium")
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="open")
    assigned_to: Mapped[str | None] = mapped_column(String(64), nullable=True)
    assigned_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        Index("idx_tickets_status", "status"),
        Index("idx_tickets_assigned_to", "assigned_to"),
    )
