"""Scheduler error taxonomy.

"No eligible agent" is deliberately absent: it is a normal outcome of
auto-assignment, not a failure.
"""


class SchedulerError(Exception):
    """Base class for all scheduler failures."""


class NotFoundError(SchedulerError):
    """The ticket vanished between the trigger and the decision."""

    def __init__(self, ticket_id: int):
        super().__init__(f"Ticket {ticket_id} not found")
        self.ticket_id = ticket_id


class ConflictError(SchedulerError):
    """Another writer changed the ticket since the decision was computed."""

    def __init__(self, ticket_id: int, expected_version: int | None = None, current=None):
        super().__init__(
            f"Ticket {ticket_id} changed concurrently (expected version {expected_version})"
        )
        self.ticket_id = ticket_id
        self.expected_version = expected_version
        # The ticket as re-read after the failed write, when the raiser has it
        self.current = current


class TransientError(SchedulerError):
    """The data store is unreachable. Safe to retry the whole decision."""


class InvalidTimezoneError(SchedulerError, ValueError):
    def __init__(self, timezone: str):
        super().__init__(f"Unknown timezone: {timezone!r}")
        self.timezone = timezone
