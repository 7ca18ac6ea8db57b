"""Tests for the eligibility policy."""

from datetime import datetime, time

import pytz

from app.domain.policies.eligibility import (
    AT_CAPACITY,
    INACTIVE,
    MALFORMED,
    NOT_AN_AGENT,
    OFF_DAY,
    OFF_HOURS,
    OPTED_OUT,
    filter_eligible,
)
from app.domain.value_objects.enums import AgentStatus, Role, Weekday
from tests.fakes import SATURDAY_10AM, FakeClock, make_agent


def _filter(agents, loads=None, moment=None):
    clock = FakeClock(moment) if moment else FakeClock()
    return filter_eligible(agents, loads or {}, clock.now)


def test_fully_qualified_agent_is_eligible():
    report = _filter([make_agent("a")])
    assert [a.id for a in report.eligible] == ["a"]
    assert report.rejected == {}
    assert report.skipped == []


def test_role_status_and_opt_in_rejections():
    agents = [
        make_agent("admin", role=Role.ADMIN),
        make_agent("user", role=Role.USER),
        make_agent("off", status=AgentStatus.INACTIVE),
        make_agent("optout", auto_assign=False),
    ]
    report = _filter(agents)
    assert report.is_empty()
    assert report.rejected == {
        "admin": NOT_AN_AGENT,
        "user": NOT_AN_AGENT,
        "off": INACTIVE,
        "optout": OPTED_OUT,
    }


def test_capacity_is_strict():
    agents = [make_agent("full", max_tickets=3), make_agent("room", max_tickets=3)]
    report = _filter(agents, loads={"full": 3, "room": 2})
    assert [a.id for a in report.eligible] == ["room"]
    assert report.rejected["full"] == AT_CAPACITY


def test_default_capacity_is_ten():
    agent = make_agent("a", max_tickets=None)
    assert _filter([agent], loads={"a": 9}).eligible
    assert _filter([agent], loads={"a": 10}).rejected["a"] == AT_CAPACITY


def test_outside_working_hours():
    agent = make_agent("a", start=time(12, 0), end=time(17, 0))
    report = _filter([agent])
    assert report.rejected["a"] == OFF_HOURS


def test_weekend_is_off_day_by_default():
    report = _filter([make_agent("a")], moment=SATURDAY_10AM)
    assert report.rejected["a"] == OFF_DAY


def test_weekend_worker_eligible_on_saturday():
    agent = make_agent("a", work_days=frozenset({Weekday.SAT, Weekday.SUN}))
    assert _filter([agent], moment=SATURDAY_10AM).eligible


def test_working_hours_evaluated_in_agent_timezone():
    # 15:00 UTC Wednesday = 10:00 New York, 00:00 Thursday Tokyo
    moment = datetime(2024, 1, 10, 15, 0, tzinfo=pytz.utc)
    agents = [
        make_agent("ny", timezone="America/New_York"),
        make_agent("tokyo", timezone="Asia/Tokyo"),
    ]
    report = _filter(agents, moment=moment)
    assert [a.id for a in report.eligible] == ["ny"]
    assert report.rejected["tokyo"] == OFF_HOURS


def test_weekday_evaluated_in_agent_timezone():
    # Friday 23:30 UTC is already Saturday 08:30 in Tokyo
    moment = datetime(2024, 1, 12, 23, 30, tzinfo=pytz.utc)
    agent = make_agent("tokyo", start=time(8, 0), end=time(12, 0), timezone="Asia/Tokyo")
    assert _filter([agent], moment=moment).rejected["tokyo"] == OFF_DAY


def test_malformed_agent_skipped_not_fatal():
    agents = [make_agent("broken", status=None), make_agent("ok")]
    report = _filter(agents)
    assert [a.id for a in report.eligible] == ["ok"]
    assert report.rejected["broken"] == MALFORMED
    assert len(report.skipped) == 1
    assert report.skipped[0].agent_id == "broken"
    assert "status" in report.skipped[0].problem


def test_unknown_timezone_skipped_as_malformed():
    agents = [make_agent("mars", timezone="Mars/Olympus_Mons"), make_agent("ok")]
    report = _filter(agents)
    assert [a.id for a in report.eligible] == ["ok"]
    assert report.rejected["mars"] == MALFORMED
    assert "Mars/Olympus_Mons" in report.skipped[0].problem


def test_eligible_preserves_directory_order():
    agents = [make_agent(x) for x in ("c", "a", "b")]
    assert [a.id for a in _filter(agents).eligible] == ["c", "a", "b"]
