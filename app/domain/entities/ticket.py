"""Ticket entity — a support request that may need an owner."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.value_objects.enums import LOAD_BEARING_STATUSES, Priority, TicketStatus


@dataclass
class Ticket:
    id: int | None
    title: str
    priority: Priority
    status: TicketStatus = TicketStatus.OPEN
    assigned_to: str | None = None
    assigned_at: datetime | None = None
    version: int = 0

    def is_assigned(self) -> bool:
        return bool(self.assigned_to)

    def counts_toward_load(self) -> bool:
        return self.is_assigned() and self.status in LOAD_BEARING_STATUSES

    def is_critical(self) -> bool:
        return self.priority == Priority.CRITICAL
