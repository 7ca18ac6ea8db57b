"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Role(str, Enum):
    AGENT = "agent"
    ADMIN = "admin"
    USER = "user"


class Specialization(str, Enum):
    GENERAL = "general"
    TECHNICAL = "technical"
    BILLING = "billing"
    BUG_REPORTS = "bug-reports"
    FEATURE_REQUESTS = "feature-requests"


class AgentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    WAITING = "waiting"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Weekday(str, Enum):
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Map ``datetime.weekday()`` (0 = Monday) to a Weekday."""
        return list(cls)[index]


# Statuses that count toward an agent's load
LOAD_BEARING_STATUSES = frozenset({TicketStatus.OPEN, TicketStatus.IN_PROGRESS})
