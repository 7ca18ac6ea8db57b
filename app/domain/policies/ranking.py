"""RankingPolicy — order eligible agents by fitness for a ticket."""

from __future__ import annotations

from app.domain.entities.agent import Agent
from app.domain.policies.load_accounting import load_of
from app.domain.value_objects.enums import Priority


def specialization_tier(agent: Agent, priority: Priority) -> int:
    """0 for agents whose specialty matches the ticket's routing preference.

    Currently the only preference is critical → technical; for any other
    priority every agent shares tier 0.
    """
    if priority == Priority.CRITICAL and not agent.is_technical():
        return 1
    return 0


def rank_agents(
    eligible: list[Agent],
    priority: Priority,
    loads: dict[str, int],
) -> list[Agent]:
    """Sort by (specialization tier, current load).

    ``sorted`` is stable, so agents with equal tier and load keep their
    input order. No randomness: the same input always yields the same order.
    """
    return sorted(
        eligible,
        key=lambda a: (specialization_tier(a, priority), load_of(loads, a.id)),
    )


def select_agent(
    eligible: list[Agent],
    priority: Priority,
    loads: dict[str, int],
) -> Agent | None:
    """Return the best-ranked agent, or None when nobody is eligible."""
    ranked = rank_agents(eligible, priority, loads)
    return ranked[0] if ranked else None
