"""AutoAssignUseCase — the scheduler trigger: load → eligibility → rank → assign."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from app.application.ports.agent_directory import AgentDirectory
from app.application.ports.clock_port import ClockPort
from app.application.ports.ticket_ledger import TicketLedger
from app.application.services.assigner import Assigner
from app.domain.entities.assignment import Assignment
from app.domain.entities.ticket import Ticket
from app.domain.errors import ConflictError, NotFoundError
from app.domain.policies.eligibility import SkippedAgent, filter_eligible
from app.domain.policies.load_accounting import compute_loads, load_of
from app.domain.policies.ranking import select_agent

logger = logging.getLogger(__name__)

NO_ELIGIBLE_AGENT = "no-eligible-agent"


@dataclass
class AssignmentResult:
    """Outcome of one auto-assign invocation.

    ``changed`` is False when the ticket was already owned (by an earlier
    call, or by a concurrent invocation that won the race).
    """

    ticket_id: int
    assigned: bool
    agent_id: str | None = None
    assigned_at: datetime | None = None
    reason: str | None = None
    changed: bool = False
    skipped_agents: list[SkippedAgent] = field(default_factory=list)

    def to_dict(self) -> dict:
        data = {"ticket_id": self.ticket_id, "assigned": self.assigned}
        if self.assigned:
            data["agent_id"] = self.agent_id
            data["assigned_at"] = self.assigned_at.isoformat() if self.assigned_at else None
            data["changed"] = self.changed
        else:
            data["reason"] = self.reason
        if self.skipped_agents:
            data["skipped_agents"] = [
                {"agent_id": s.agent_id, "problem": s.problem} for s in self.skipped_agents
            ]
        return data


def _already_assigned(ticket: Ticket, skipped: list[SkippedAgent] | None = None) -> AssignmentResult:
    return AssignmentResult(
        ticket_id=ticket.id,
        assigned=True,
        agent_id=ticket.assigned_to,
        assigned_at=ticket.assigned_at,
        changed=False,
        skipped_agents=skipped or [],
    )


class AutoAssignUseCase:
    """Decides and commits an owner for a single ticket."""

    def __init__(
        self,
        agent_directory: AgentDirectory,
        ticket_ledger: TicketLedger,
        clock: ClockPort,
        max_attempts: int = 3,
    ):
        self._agents = agent_directory
        self._tickets = ticket_ledger
        self._clock = clock
        self._assigner = Assigner(ticket_ledger, clock)
        self._max_attempts = max(1, max_attempts)

    async def execute(self, ticket_id: int) -> AssignmentResult:
        """Auto-assign a ticket.

        Pipeline (restarted from scratch after a lost version race):
        1. Read the ticket; already-owned tickets are a no-op
        2. Fresh load snapshot from open tickets
        3. Eligibility filter against one clock reading, taken per attempt
        4. Rank and pick the first agent
        5. Compare-and-set write

        Raises:
            NotFoundError: the ticket does not exist.
            TransientError: the store is unreachable.
            ConflictError: the ticket kept changing for every attempt.
        """
        for attempt in range(1, self._max_attempts + 1):
            ticket = await self._tickets.get_ticket(ticket_id)
            if ticket is None:
                raise NotFoundError(ticket_id)
            if ticket.is_assigned():
                logger.info(
                    "Ticket %d already assigned to %s → no-op", ticket_id, ticket.assigned_to
                )
                return _already_assigned(ticket)

            agents = await self._agents.list_agents()
            loads = compute_loads(await self._tickets.list_open_tickets())
            # every agent is judged against the same instant, which also stamps assigned_at
            moment = self._clock.utcnow()
            report = filter_eligible(
                agents, loads, lambda timezone: self._clock.local(moment, timezone)
            )

            for skipped in report.skipped:
                logger.warning(
                    "Agent %s skipped for ticket %d: %s",
                    skipped.agent_id, ticket_id, skipped.problem,
                )

            chosen = select_agent(report.eligible, ticket.priority, loads)
            if chosen is None:
                logger.info(
                    "Ticket %d: no eligible agent among %d (rejections: %s)",
                    ticket_id, len(agents), report.rejected,
                )
                return AssignmentResult(
                    ticket_id=ticket_id,
                    assigned=False,
                    reason=NO_ELIGIBLE_AGENT,
                    skipped_agents=report.skipped,
                )

            load = load_of(loads, chosen.id)
            if ticket.is_critical() and chosen.is_technical():
                match = "technical tier"
            else:
                match = "lowest load"
            decision = Assignment(
                ticket_id=ticket_id,
                agent_id=chosen.id,
                expected_version=ticket.version,
                reason=f"{match}, load {load}/{chosen.capacity}",
            )

            try:
                updated = await self._assigner.apply(decision, ticket, timestamp=moment)
            except ConflictError as e:
                latest = e.current
                if latest is not None and latest.is_assigned():
                    logger.info(
                        "Ticket %d: lost race, already assigned to %s",
                        ticket_id, latest.assigned_to,
                    )
                    return _already_assigned(latest, report.skipped)
                logger.info(
                    "Ticket %d: version moved on (attempt %d/%d), recomputing",
                    ticket_id, attempt, self._max_attempts,
                )
                continue

            logger.info(
                "Ticket %d (%s) → Agent %s (%s)",
                ticket_id, ticket.priority.value, chosen.id, decision.reason,
            )
            return AssignmentResult(
                ticket_id=ticket_id,
                assigned=True,
                agent_id=updated.assigned_to,
                assigned_at=updated.assigned_at,
                changed=True,
                skipped_agents=report.skipped,
            )

        raise ConflictError(ticket_id)
