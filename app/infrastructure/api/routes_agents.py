"""Agent endpoints — live workload and eligibility."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.application.use_cases.agent_workload import GetWorkloadUseCase
from app.domain.errors import TransientError
from app.infrastructure.api.dependencies import get_workload_uc

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("/workload")
async def agent_workload(uc: GetWorkloadUseCase = Depends(get_workload_uc)):
    """Current load, capacity and auto-assign eligibility of every agent."""
    try:
        rows = await uc.execute()
    except TransientError:
        raise HTTPException(status_code=503, detail="Data store unavailable, retry later")

    return {
        "total": len(rows),
        "eligible": sum(1 for r in rows if r.eligible),
        "agents": [
            {
                "agent_id": r.agent_id,
                "name": r.name,
                "specialization": r.specialization,
                "load": r.load,
                "capacity": r.capacity,
                "eligible": r.eligible,
                "reason": r.reason,
            }
            for r in rows
        ],
    }
