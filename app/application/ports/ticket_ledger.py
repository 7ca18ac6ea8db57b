"""Port interface for ticket reads and the assignment write-back."""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities.ticket import Ticket


class TicketLedger(ABC):
    @abstractmethod
    async def get_ticket(self, ticket_id: int) -> Ticket | None:
        ...

    @abstractmethod
    async def list_open_tickets(self) -> list[Ticket]:
        """Return tickets in ``open`` or ``in-progress`` status."""
        ...

    @abstractmethod
    async def list_unassigned_tickets(self, limit: int | None = None) -> list[Ticket]:
        """Return ``open`` / ``in-progress`` tickets with no owner, oldest first."""
        ...

    @abstractmethod
    async def set_assignment(
        self,
        ticket_id: int,
        agent_id: str,
        timestamp: datetime,
        expected_version: int,
    ) -> Ticket:
        """Compare-and-set the ticket's owner.

        The write succeeds only if the ticket is still at *expected_version*
        and has no owner; the version is bumped on success.

        Raises:
            NotFoundError: the ticket no longer exists.
            ConflictError: the ticket changed since *expected_version*.
            TransientError: the store is unreachable.
        """
        ...
