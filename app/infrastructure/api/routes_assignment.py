"""Assignment endpoints — auto-assign a ticket, sweep orphaned tickets."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import commit, get_session
from app.application.use_cases.auto_assign import AutoAssignUseCase
from app.application.use_cases.sweep_unassigned import SweepUnassignedUseCase
from app.domain.errors import ConflictError, NotFoundError, TransientError
from app.infrastructure.api.dependencies import get_auto_assign_uc, get_sweep_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["assignment"])


@router.post("/tickets/{ticket_id}/auto-assign")
async def auto_assign_ticket(
    ticket_id: int,
    uc: AutoAssignUseCase = Depends(get_auto_assign_uc),
    session: AsyncSession = Depends(get_session),
):
    """Pick an owner for one ticket (creation hook or manual "auto-assign now")."""
    try:
        result = await uc.execute(ticket_id)
        await commit(session)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Ticket not found")
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except TransientError:
        raise HTTPException(
            status_code=503,
            detail="Data store unavailable, retry later",
            headers={"Retry-After": "1"},
        )

    return result.to_dict()


@router.post("/assignments/sweep")
async def sweep_unassigned(
    uc: SweepUnassignedUseCase = Depends(get_sweep_uc),
    session: AsyncSession = Depends(get_session),
):
    """Run auto-assignment over every open ticket that still has no owner."""
    try:
        sweep = await uc.execute()
        await commit(session)
    except TransientError:
        raise HTTPException(
            status_code=503,
            detail="Data store unavailable, retry later",
            headers={"Retry-After": "5"},
        )

    return {
        "status": "ok",
        "total": sweep.total,
        "assigned": sweep.assigned,
        "no_eligible_agent": sweep.unassigned,
        "failed": len(sweep.errors),
        "results": [r.to_dict() for r in sweep.results],
        "errors": [
            {"ticket_id": ticket_id, "error": error}
            for ticket_id, error in sweep.errors.items()
        ],
    }
