"""Port interface for the wall clock."""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.value_objects.working_hours import LocalTime


class ClockPort(ABC):
    @abstractmethod
    def utcnow(self) -> datetime:
        """Current timezone-aware UTC timestamp."""
        ...

    @abstractmethod
    def local(self, moment: datetime, timezone: str) -> LocalTime:
        """(weekday, time-of-day) of a fixed UTC instant in the named timezone.

        Raises InvalidTimezoneError for unknown names.
        """
        ...

    def now(self, timezone: str) -> LocalTime:
        """Current (weekday, time-of-day) in the named timezone."""
        return self.local(self.utcnow(), timezone)
