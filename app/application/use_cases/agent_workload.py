"""GetWorkloadUseCase — per-agent load and current eligibility."""

from __future__ import annotations

from dataclasses import dataclass

from app.application.ports.agent_directory import AgentDirectory
from app.application.ports.clock_port import ClockPort
from app.application.ports.ticket_ledger import TicketLedger
from app.domain.policies.eligibility import filter_eligible
from app.domain.policies.load_accounting import compute_loads, load_of


@dataclass
class AgentWorkload:
    agent_id: str
    name: str
    specialization: str
    load: int
    capacity: int
    eligible: bool
    reason: str | None = None


class GetWorkloadUseCase:
    def __init__(self, agent_directory: AgentDirectory, ticket_ledger: TicketLedger, clock: ClockPort):
        self._agents = agent_directory
        self._tickets = ticket_ledger
        self._clock = clock

    async def execute(self) -> list[AgentWorkload]:
        agents = await self._agents.list_agents()
        loads = compute_loads(await self._tickets.list_open_tickets())
        moment = self._clock.utcnow()
        report = filter_eligible(
            agents, loads, lambda timezone: self._clock.local(moment, timezone)
        )
        eligible_ids = {a.id for a in report.eligible}

        return [
            AgentWorkload(
                agent_id=a.id,
                name=a.name,
                specialization=a.specialization.value,
                load=load_of(loads, a.id),
                capacity=a.capacity,
                eligible=a.id in eligible_ids,
                reason=report.rejected.get(a.id),
            )
            for a in agents
        ]
