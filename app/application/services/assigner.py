"""Assigner — commit a decision to the ticket ledger, single writer wins."""

from __future__ import annotations

import logging
from datetime import datetime

from app.application.ports.clock_port import ClockPort
from app.application.ports.ticket_ledger import TicketLedger
from app.domain.entities.assignment import Assignment
from app.domain.entities.ticket import Ticket
from app.domain.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class Assigner:
    """Applies an Assignment via the ledger's compare-and-set write."""

    def __init__(self, ledger: TicketLedger, clock: ClockPort):
        self._ledger = ledger
        self._clock = clock

    async def apply(
        self,
        assignment: Assignment,
        current: Ticket | None = None,
        timestamp: datetime | None = None,
    ) -> Ticket:
        """Set assigned_to / assigned_at on the ticket.

        ``timestamp`` is the instant the decision was made; the clock is read
        only when the caller does not supply one. Re-applying a pair that is
        already committed returns the ticket unchanged, so callers may retry
        freely.

        Raises:
            NotFoundError: the ticket no longer exists.
            ConflictError: a different assignment (or any other edit) won.
                ``current`` carries the ticket as re-read after the failed write.
        """
        if current is not None and current.assigned_to == assignment.agent_id:
            return current

        if timestamp is None:
            timestamp = self._clock.utcnow()
        if current is not None and current.assigned_at and current.assigned_at > timestamp:
            # assigned_at never moves backwards, even with clock skew
            timestamp = current.assigned_at

        try:
            return await self._ledger.set_assignment(
                assignment.ticket_id,
                assignment.agent_id,
                timestamp,
                assignment.expected_version,
            )
        except ConflictError as e:
            latest = await self._ledger.get_ticket(assignment.ticket_id)
            if latest is None:
                raise NotFoundError(assignment.ticket_id)
            if latest.assigned_to == assignment.agent_id:
                logger.info(
                    "Ticket %d already assigned to %s, treating retry as no-op",
                    assignment.ticket_id, assignment.agent_id,
                )
                return latest
            raise ConflictError(
                assignment.ticket_id, assignment.expected_version, current=latest
            ) from e
