"""SQLAlchemy implementations of the agent directory and ticket ledger."""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from enum import Enum
from typing import TypeVar

from sqlalchemy import select, update
from sqlalchemy.exc import InterfaceError, OperationalError, PendingRollbackError
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import AgentModel, TicketModel
from app.application.ports.agent_directory import AgentDirectory
from app.application.ports.ticket_ledger import TicketLedger
from app.domain.entities.agent import Agent
from app.domain.entities.ticket import Ticket
from app.domain.errors import ConflictError, NotFoundError, TransientError
from app.domain.value_objects.enums import (
    LOAD_BEARING_STATUSES,
    AgentStatus,
    Priority,
    Role,
    Specialization,
    TicketStatus,
    Weekday,
)
from app.domain.value_objects.working_hours import WEEKDAYS, WorkingHours

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_LOAD_BEARING = [s.value for s in LOAD_BEARING_STATUSES]


def _store_errors(method):
    """Translate connection-level database failures into TransientError.

    PendingRollbackError counts too: it is what a session raises on every
    call after its connection was invalidated mid-transaction.
    """

    @functools.wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except (OperationalError, InterfaceError, PendingRollbackError) as e:
            logger.warning("Data store unavailable in %s: %s", method.__name__, e)
            raise TransientError(str(e)) from e

    return wrapper


# ─── Mappers ─────────────────────────────────────────────────────────


def _parse_enum(enum_cls: type[E], raw: str | None, agent_id: str) -> E | None:
    if raw is None:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        logger.warning("Agent %s: unknown %s value %r", agent_id, enum_cls.__name__, raw)
        return None


def _working_hours(m: AgentModel) -> tuple[WorkingHours | None, tuple[str, ...]]:
    """Build the agent's schedule; all-empty columns mean "use the default"."""
    if m.work_start is None and m.work_end is None and not m.timezone and not m.work_days:
        return None, ()
    if m.work_start is None or m.work_end is None:
        return None, ("working_hours",)
    try:
        days = frozenset(Weekday(d.lower()) for d in m.work_days) if m.work_days else WEEKDAYS
    except ValueError:
        return None, ("work_days",)
    return WorkingHours(
        start=m.work_start,
        end=m.work_end,
        timezone=m.timezone or "UTC",
        work_days=days,
    ), ()


def _agent_to_domain(m: AgentModel) -> Agent:
    hours, defects = _working_hours(m)
    specialization = _parse_enum(Specialization, m.specialization, m.id)
    return Agent(
        id=m.id,
        name=m.name,
        role=_parse_enum(Role, m.role, m.id),
        status=_parse_enum(AgentStatus, m.status, m.id),
        auto_assign=m.auto_assign,
        specialization=specialization or Specialization.GENERAL,
        max_tickets=m.max_tickets,
        working_hours=hours,
        defects=defects,
    )


def _ticket_to_domain(m: TicketModel) -> Ticket:
    return Ticket(
        id=m.id,
        title=m.title,
        priority=Priority(m.priority),
        status=TicketStatus(m.status),
        assigned_to=m.assigned_to,
        assigned_at=m.assigned_at,
        version=m.version,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlAgentDirectory(AgentDirectory):
    def __init__(self, session: AsyncSession):
        self._s = session

    @_store_errors
    async def list_agents(self) -> list[Agent]:
        result = await self._s.execute(select(AgentModel).order_by(AgentModel.id))
        return [_agent_to_domain(m) for m in result.scalars()]


class SqlTicketLedger(TicketLedger):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def _load(self, ticket_id: int) -> TicketModel | None:
        result = await self._s.execute(
            select(TicketModel)
            .where(TicketModel.id == ticket_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @_store_errors
    async def get_ticket(self, ticket_id: int) -> Ticket | None:
        m = await self._load(ticket_id)
        return _ticket_to_domain(m) if m else None

    @_store_errors
    async def list_open_tickets(self) -> list[Ticket]:
        result = await self._s.execute(
            select(TicketModel)
            .where(TicketModel.status.in_(_LOAD_BEARING))
            .order_by(TicketModel.id)
        )
        return [_ticket_to_domain(m) for m in result.scalars()]

    @_store_errors
    async def list_unassigned_tickets(self, limit: int | None = None) -> list[Ticket]:
        stmt = (
            select(TicketModel)
            .where(
                TicketModel.status.in_(_LOAD_BEARING),
                TicketModel.assigned_to.is_(None),
            )
            .order_by(TicketModel.created_at, TicketModel.id)
        )
        if limit:
            stmt = stmt.limit(limit)
        result = await self._s.execute(stmt)
        return [_ticket_to_domain(m) for m in result.scalars()]

    @_store_errors
    async def set_assignment(
        self,
        ticket_id: int,
        agent_id: str,
        timestamp: datetime,
        expected_version: int,
    ) -> Ticket:
        result = await self._s.execute(
            update(TicketModel)
            .where(
                TicketModel.id == ticket_id,
                TicketModel.version == expected_version,
                TicketModel.assigned_to.is_(None),
            )
            .values(
                assigned_to=agent_id,
                assigned_at=timestamp,
                version=TicketModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        await self._s.flush()

        m = await self._load(ticket_id)
        if m is None:
            raise NotFoundError(ticket_id)
        if result.rowcount == 0:
            raise ConflictError(ticket_id, expected_version)
        return _ticket_to_domain(m)
