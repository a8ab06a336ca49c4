from __future__ import annotations

from enum import Enum


class TicketStatus(str, Enum):
    """Supported states for a ticket's lifecycle."""

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    DONE = "done"

    @classmethod
    def initial_state(cls) -> TicketStatus:
        return cls.TODO

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS: dict[TicketStatus, str] = {
    TicketStatus.TODO: "To-Do",
    TicketStatus.IN_PROGRESS: "In progress",
    TicketStatus.BLOCKED: "Blocked",
    TicketStatus.DONE: "Done",
}
