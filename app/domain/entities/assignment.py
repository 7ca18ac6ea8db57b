"""Assignment decision — the (ticket, agent) pair a single invocation produced.

Ephemeral: it is never persisted as its own record, only applied to the ticket.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Assignment:
    ticket_id: int
    agent_id: str
    expected_version: int
    reason: str
