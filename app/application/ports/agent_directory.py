"""Port interface for the read-only agent directory."""

from abc import ABC, abstractmethod

from app.domain.entities.agent import Agent


class AgentDirectory(ABC):
    @abstractmethod
    async def list_agents(self) -> list[Agent]:
        """Return every agent record in a stable order.

        Raises TransientError if the store is unreachable.
        """
        ...
