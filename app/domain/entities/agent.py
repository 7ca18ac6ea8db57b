"""Agent entity — a support team member who may receive tickets."""

from dataclasses import dataclass

from app.domain.value_objects.enums import AgentStatus, Role, Specialization
from app.domain.value_objects.working_hours import DEFAULT_WORKING_HOURS, WorkingHours

DEFAULT_MAX_TICKETS = 10


@dataclass
class Agent:
    id: str
    name: str
    role: Role | None
    status: AgentStatus | None
    auto_assign: bool | None
    specialization: Specialization = Specialization.GENERAL
    max_tickets: int | None = None
    working_hours: WorkingHours | None = None
    # Fields the record carried but that could not be parsed
    defects: tuple[str, ...] = ()

    @property
    def capacity(self) -> int:
        return self.max_tickets if self.max_tickets is not None else DEFAULT_MAX_TICKETS

    @property
    def schedule(self) -> WorkingHours:
        return self.working_hours or DEFAULT_WORKING_HOURS

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or unusable."""
        missing = []
        if self.role is None:
            missing.append("role")
        if self.status is None:
            missing.append("status")
        if self.auto_assign is None:
            missing.append("auto_assign")
        if self.max_tickets is not None and self.max_tickets <= 0:
            missing.append("max_tickets")
        missing.extend(self.defects)
        return missing

    def is_active(self) -> bool:
        return self.status == AgentStatus.ACTIVE

    def is_technical(self) -> bool:
        return self.specialization == Specialization.TECHNICAL
