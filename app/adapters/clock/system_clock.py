"""System clock backed by pytz timezone data."""

from __future__ import annotations

from datetime import datetime

import pytz

from app.application.ports.clock_port import ClockPort
from app.domain.errors import InvalidTimezoneError
from app.domain.value_objects.enums import Weekday
from app.domain.value_objects.working_hours import LocalTime


def to_local(moment: datetime, timezone: str) -> LocalTime:
    """Convert an aware UTC datetime to a (weekday, time-of-day) reading."""
    try:
        tz = pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError:
        raise InvalidTimezoneError(timezone)
    local = moment.astimezone(tz)
    return LocalTime(
        weekday=Weekday.from_index(local.weekday()),
        time_of_day=local.time().replace(tzinfo=None),
    )


class SystemClock(ClockPort):
    def utcnow(self) -> datetime:
        return datetime.now(pytz.utc)

    def local(self, moment: datetime, timezone: str) -> LocalTime:
        return to_local(moment, timezone)
