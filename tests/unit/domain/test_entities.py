"""Tests for domain entities."""

from datetime import time

from app.domain.entities.agent import DEFAULT_MAX_TICKETS, Agent
from app.domain.entities.ticket import Ticket
from app.domain.value_objects.enums import (
    AgentStatus,
    Priority,
    Role,
    Specialization,
    TicketStatus,
)
from app.domain.value_objects.working_hours import DEFAULT_WORKING_HOURS


def _agent(**overrides) -> Agent:
    fields = dict(
        id="a1", name="Ada", role=Role.AGENT, status=AgentStatus.ACTIVE, auto_assign=True,
    )
    fields.update(overrides)
    return Agent(**fields)


def test_agent_defaults_capacity_and_schedule():
    a = _agent()
    assert a.capacity == DEFAULT_MAX_TICKETS == 10
    assert a.schedule == DEFAULT_WORKING_HOURS
    assert a.schedule.start == time(9, 0)
    assert a.schedule.end == time(17, 0)
    assert a.schedule.timezone == "UTC"
    assert a.specialization == Specialization.GENERAL


def test_agent_explicit_capacity():
    assert _agent(max_tickets=3).capacity == 3


def test_agent_missing_fields():
    a = _agent(role=None, auto_assign=None)
    assert a.missing_fields() == ["role", "auto_assign"]


def test_agent_non_positive_capacity_is_malformed():
    assert _agent(max_tickets=0).missing_fields() == ["max_tickets"]


def test_agent_defects_reported():
    assert _agent(defects=("working_hours",)).missing_fields() == ["working_hours"]


def test_agent_complete_record_has_no_missing_fields():
    assert _agent().missing_fields() == []


def test_agent_is_technical():
    assert _agent(specialization=Specialization.TECHNICAL).is_technical() is True
    assert _agent(specialization=Specialization.BILLING).is_technical() is False


def test_ticket_counts_toward_load():
    t = Ticket(id=1, title="t", priority=Priority.LOW, assigned_to="a1")
    assert t.counts_toward_load() is True

    for status in (TicketStatus.WAITING, TicketStatus.RESOLVED, TicketStatus.CLOSED):
        t.status = status
        assert t.counts_toward_load() is False


def test_unassigned_ticket_does_not_count():
    t = Ticket(id=1, title="t", priority=Priority.LOW)
    assert t.is_assigned() is False
    assert t.counts_toward_load() is False


def test_ticket_is_critical():
    assert Ticket(id=1, title="t", priority=Priority.CRITICAL).is_critical() is True
    assert Ticket(id=1, title="t", priority=Priority.HIGH).is_critical() is False
