"""WorkingHours value object — a daily window in a named timezone."""

from dataclasses import dataclass, field
from datetime import time

from app.domain.value_objects.enums import Weekday

WEEKDAYS = frozenset({Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU, Weekday.FRI})


@dataclass(frozen=True)
class LocalTime:
    """Wall-clock reading in some timezone, as returned by the clock port."""

    weekday: Weekday
    time_of_day: time


@dataclass(frozen=True)
class WorkingHours:
    start: time
    end: time
    timezone: str = "UTC"
    work_days: frozenset[Weekday] = field(default=WEEKDAYS)

    def is_overnight(self) -> bool:
        return self.start > self.end

    def covers_time(self, moment: time) -> bool:
        """True when *moment* falls inside [start, end], both ends inclusive.

        A window with start later than end wraps past midnight
        (e.g. 22:00–06:00).
        """
        if self.is_overnight():
            return moment >= self.start or moment <= self.end
        return self.start <= moment <= self.end

    def covers_day(self, weekday: Weekday) -> bool:
        return weekday in self.work_days

    def contains(self, local: LocalTime) -> bool:
        return self.covers_day(local.weekday) and self.covers_time(local.time_of_day)


DEFAULT_WORKING_HOURS = WorkingHours(start=time(9, 0), end=time(17, 0))
