"""Tests for the HTTP layer with fakes injected through dependency overrides."""

import pytest
from fastapi.testclient import TestClient

from app.adapters.persistence.database import get_session
from app.application.use_cases.agent_workload import GetWorkloadUseCase
from app.application.use_cases.auto_assign import AutoAssignUseCase
from app.application.use_cases.sweep_unassigned import SweepUnassignedUseCase
from app.domain.value_objects.enums import Priority, Specialization
from app.infrastructure.api.dependencies import (
    get_auto_assign_uc,
    get_sweep_uc,
    get_workload_uc,
)
from app.main import create_app
from tests.fakes import (
    FakeAgentDirectory,
    FakeClock,
    FakeTicketLedger,
    make_agent,
    make_ticket,
)


class FakeSession:
    def __init__(self):
        self.commits = 0

    async def commit(self):
        self.commits += 1


@pytest.fixture
def env():
    directory = FakeAgentDirectory([
        make_agent("g", Specialization.GENERAL),
        make_agent("t", Specialization.TECHNICAL),
    ])
    ledger = FakeTicketLedger([make_ticket(1, priority=Priority.CRITICAL), make_ticket(2)])
    clock = FakeClock()
    session = FakeSession()
    auto_assign = AutoAssignUseCase(directory, ledger, clock)

    app = create_app()

    async def _session():
        yield session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_auto_assign_uc] = lambda: auto_assign
    app.dependency_overrides[get_sweep_uc] = lambda: SweepUnassignedUseCase(auto_assign, ledger)
    app.dependency_overrides[get_workload_uc] = lambda: GetWorkloadUseCase(directory, ledger, clock)
    return TestClient(app), directory, ledger, session


def test_auto_assign_endpoint(env):
    client, _, ledger, session = env
    resp = client.post("/api/tickets/1/auto-assign")
    assert resp.status_code == 200
    body = resp.json()
    assert body["assigned"] is True
    assert body["agent_id"] == "t"
    assert body["changed"] is True
    assert ledger.tickets[1].assigned_to == "t"
    assert session.commits == 1


def test_auto_assign_unknown_ticket_404(env):
    client, *_ = env
    assert client.post("/api/tickets/99/auto-assign").status_code == 404


def test_auto_assign_store_down_503(env):
    client, directory, _, _ = env
    directory.fail = True
    resp = client.post("/api/tickets/1/auto-assign")
    assert resp.status_code == 503
    assert resp.headers["Retry-After"] == "1"


def test_auto_assign_no_eligible_agent(env):
    client, directory, _, _ = env
    directory.agents = []
    resp = client.post("/api/tickets/2/auto-assign")
    assert resp.status_code == 200
    assert resp.json() == {"ticket_id": 2, "assigned": False, "reason": "no-eligible-agent"}


def test_sweep_endpoint(env):
    client, _, ledger, _ = env
    resp = client.post("/api/assignments/sweep")
    assert resp.status_code == 200
    body = resp.json()
    assert body["assigned"] == 2
    assert body["failed"] == 0
    assert ledger.tickets[1].assigned_to == "t"
    assert ledger.tickets[2].assigned_to == "g"


def test_workload_endpoint(env):
    client, _, _, _ = env
    client.post("/api/tickets/1/auto-assign")
    body = client.get("/api/agents/workload").json()
    loads = {a["agent_id"]: a["load"] for a in body["agents"]}
    assert loads == {"g": 0, "t": 1}
    assert body["eligible"] == 2
