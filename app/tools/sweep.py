"""Recurring sweep: auto-assign open tickets that have no owner.

Usage:
    python -m app.tools.sweep --once
    python -m app.tools.sweep --interval 30
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from app.adapters.clock.system_clock import SystemClock
from app.adapters.persistence.database import async_session_factory, commit, engine
from app.adapters.persistence.repositories import SqlAgentDirectory, SqlTicketLedger
from app.application.use_cases.auto_assign import AutoAssignUseCase
from app.application.use_cases.sweep_unassigned import SweepResult, SweepUnassignedUseCase
from app.config import settings
from app.domain.errors import TransientError

logging.basicConfig(level=settings.log_level, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def sweep_once(limit: int | None = None) -> SweepResult:
    """One sweep in its own session and transaction."""
    clock = SystemClock()
    async with async_session_factory() as session:
        ledger = SqlTicketLedger(session)
        uc = SweepUnassignedUseCase(
            auto_assign=AutoAssignUseCase(
                agent_directory=SqlAgentDirectory(session),
                ticket_ledger=ledger,
                clock=clock,
                max_attempts=settings.assign_max_attempts,
            ),
            ticket_ledger=ledger,
            batch_limit=limit or settings.sweep_batch_limit,
        )
        result = await uc.execute()
        await commit(session)
        return result


async def run(interval: float, once: bool, limit: int | None) -> None:
    try:
        while True:
            try:
                await sweep_once(limit)
            except TransientError as e:
                if once:
                    raise
                logger.warning("Sweep skipped, data store unavailable: %s", e)
            if once:
                break
            await asyncio.sleep(interval)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Auto-assign orphaned tickets")
    parser.add_argument("--once", action="store_true", help="run a single sweep and exit")
    parser.add_argument(
        "--interval",
        type=float,
        default=settings.sweep_interval_seconds,
        help="seconds between sweeps",
    )
    parser.add_argument("--limit", type=int, default=None, help="max tickets per sweep")
    args = parser.parse_args()

    asyncio.run(run(args.interval, args.once, args.limit))


if __name__ == "__main__":
    main()
