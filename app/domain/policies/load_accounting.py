"""LoadAccountant — derive per-agent open-ticket counts from a ticket snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities.ticket import Ticket


def compute_loads(tickets: Iterable[Ticket]) -> dict[str, int]:
    """Pure function: count assigned tickets per agent.

    Only tickets in ``open`` or ``in-progress`` count; ``waiting``,
    ``resolved`` and ``closed`` tickets do not. Agents without any counted
    ticket are absent from the mapping (use ``load_of``).
    """
    loads: dict[str, int] = {}
    for ticket in tickets:
        if ticket.counts_toward_load():
            loads[ticket.assigned_to] = loads.get(ticket.assigned_to, 0) + 1
    return loads


def load_of(loads: dict[str, int], agent_id: str) -> int:
    return loads.get(agent_id, 0)
