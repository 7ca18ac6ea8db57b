"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.clock.system_clock import SystemClock
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import SqlAgentDirectory, SqlTicketLedger
from app.application.use_cases.agent_workload import GetWorkloadUseCase
from app.application.use_cases.auto_assign import AutoAssignUseCase
from app.application.use_cases.sweep_unassigned import SweepUnassignedUseCase
from app.config import settings

# Stateless singleton
_clock = SystemClock()


def get_auto_assign_uc(
    session: AsyncSession = Depends(get_session),
) -> AutoAssignUseCase:
    return AutoAssignUseCase(
        agent_directory=SqlAgentDirectory(session),
        ticket_ledger=SqlTicketLedger(session),
        clock=_clock,
        max_attempts=settings.assign_max_attempts,
    )


def get_sweep_uc(
    session: AsyncSession = Depends(get_session),
) -> SweepUnassignedUseCase:
    ledger = SqlTicketLedger(session)
    auto_assign = AutoAssignUseCase(
        agent_directory=SqlAgentDirectory(session),
        ticket_ledger=ledger,
        clock=_clock,
        max_attempts=settings.assign_max_attempts,
    )
    return SweepUnassignedUseCase(
        auto_assign=auto_assign,
        ticket_ledger=ledger,
        batch_limit=settings.sweep_batch_limit,
    )


def get_workload_uc(
    session: AsyncSession = Depends(get_session),
) -> GetWorkloadUseCase:
    return GetWorkloadUseCase(
        agent_directory=SqlAgentDirectory(session),
        ticket_ledger=SqlTicketLedger(session),
        clock=_clock,
    )
