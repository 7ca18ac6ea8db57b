"""SweepUnassignedUseCase — periodic pass over orphaned tickets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.application.ports.ticket_ledger import TicketLedger
from app.application.use_cases.auto_assign import AssignmentResult, AutoAssignUseCase
from app.domain.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Summary of one sweep."""

    results: list[AssignmentResult] = field(default_factory=list)
    errors: dict[int, str] = field(default_factory=dict)

    @property
    def assigned(self) -> int:
        return sum(1 for r in self.results if r.assigned and r.changed)

    @property
    def unassigned(self) -> int:
        return sum(1 for r in self.results if not r.assigned)

    @property
    def total(self) -> int:
        return len(self.results) + len(self.errors)


class SweepUnassignedUseCase:
    """Run auto-assignment for every open ticket that has no owner."""

    def __init__(
        self,
        auto_assign: AutoAssignUseCase,
        ticket_ledger: TicketLedger,
        batch_limit: int | None = None,
    ):
        self._auto_assign = auto_assign
        self._tickets = ticket_ledger
        self._limit = batch_limit

    async def execute(self) -> SweepResult:
        """Each ticket is an independent decision.

        A ticket that vanished or kept changing is recorded in ``errors`` and
        the sweep moves on. TransientError aborts the whole sweep: the
        session is unusable after a lost connection, so the caller retries
        later from scratch.
        """
        tickets = await self._tickets.list_unassigned_tickets(limit=self._limit)
        logger.info("Sweeping %d unassigned tickets", len(tickets))

        sweep = SweepResult()
        for ticket in tickets:
            try:
                sweep.results.append(await self._auto_assign.execute(ticket.id))
            except (NotFoundError, ConflictError) as e:
                logger.warning("Sweep: ticket %d failed: %s", ticket.id, e)
                sweep.errors[ticket.id] = str(e)

        logger.info(
            "Sweep complete: %d assigned, %d without eligible agent, %d errors",
            sweep.assigned, sweep.unassigned, len(sweep.errors),
        )
        return sweep
