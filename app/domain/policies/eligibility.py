"""EligibilityPolicy — narrow the agent directory to who may receive work now."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from app.domain.entities.agent import Agent
from app.domain.errors import InvalidTimezoneError
from app.domain.policies.load_accounting import load_of
from app.domain.value_objects.enums import Role
from app.domain.value_objects.working_hours import LocalTime

# Rejection reasons, in the order the checks run
NOT_AN_AGENT = "role"
INACTIVE = "inactive"
OPTED_OUT = "auto-assign-disabled"
OFF_DAY = "outside-work-days"
OFF_HOURS = "outside-working-hours"
AT_CAPACITY = "at-capacity"
MALFORMED = "malformed"


@dataclass(frozen=True)
class SkippedAgent:
    """An agent record that could not be evaluated."""

    agent_id: str
    problem: str


@dataclass
class EligibilityReport:
    """Result of the policy evaluation.

    ``eligible`` keeps directory order, which the ranker relies on for
    stable tie-breaking.
    """

    eligible: list[Agent] = field(default_factory=list)
    rejected: dict[str, str] = field(default_factory=dict)
    skipped: list[SkippedAgent] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.eligible


def rejection_reason(
    agent: Agent,
    load: int,
    local_time_in: Callable[[str], LocalTime],
) -> str | None:
    """Return why *agent* cannot receive work right now, or None if it can.

    Business rules (all must hold for eligibility):
      1. role == agent
      2. status == active
      3. auto-assign opt-in is on
      4. current local weekday is a work day
      5. current local time-of-day is within [start, end] inclusive
      6. load < max_tickets (an agent exactly at capacity is excluded)

    Raises:
        InvalidTimezoneError: if the agent's timezone cannot be resolved.
    """
    if agent.role != Role.AGENT:
        return NOT_AN_AGENT
    if not agent.is_active():
        return INACTIVE
    if not agent.auto_assign:
        return OPTED_OUT

    schedule = agent.schedule
    local = local_time_in(schedule.timezone)
    if not schedule.covers_day(local.weekday):
        return OFF_DAY
    if not schedule.covers_time(local.time_of_day):
        return OFF_HOURS

    if load >= agent.capacity:
        return AT_CAPACITY
    return None


def filter_eligible(
    agents: list[Agent],
    loads: dict[str, int],
    local_time_in: Callable[[str], LocalTime],
) -> EligibilityReport:
    """Evaluate every agent; malformed records are skipped, never fatal.

    Args:
        agents: the agent directory snapshot.
        loads: output of ``compute_loads`` for the same decision.
        local_time_in: clock lookup returning (weekday, time-of-day) for a
            timezone name.
    """
    report = EligibilityReport()
    for agent in agents:
        missing = agent.missing_fields()
        if missing:
            report.skipped.append(
                SkippedAgent(agent.id, f"missing or invalid: {', '.join(missing)}")
            )
            report.rejected[agent.id] = MALFORMED
            continue

        try:
            reason = rejection_reason(agent, load_of(loads, agent.id), local_time_in)
        except InvalidTimezoneError as e:
            report.skipped.append(SkippedAgent(agent.id, str(e)))
            report.rejected[agent.id] = MALFORMED
            continue

        if reason is None:
            report.eligible.append(agent)
        else:
            report.rejected[agent.id] = reason
    return report
