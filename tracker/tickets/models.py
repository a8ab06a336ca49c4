from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .errors import ValidationError
from .state import TicketStatus

TicketId = int

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 3000


@dataclass(frozen=True, slots=True)
class TicketTitle:
    """A non-empty ticket title of at most 50 characters."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("A title must be a string!")
        if not self.value:
            raise ValidationError("Title cannot be empty!")
        if len(self.value) > TITLE_MAX_LENGTH:
            raise ValidationError(
                f"A title cannot be longer than {TITLE_MAX_LENGTH} characters!"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TicketDescription:
    """A ticket description of at most 3000 characters; may be empty."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("A description must be a string!")
        if len(self.value) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"A description cannot be longer than {DESCRIPTION_MAX_LENGTH} characters!"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TicketDraft:
    """Validated input for a ticket that has not been saved yet."""

    title: TicketTitle
    description: TicketDescription

    @classmethod
    def from_raw(cls, title: str, description: str = "") -> TicketDraft:
        return cls(title=TicketTitle(title), description=TicketDescription(description))


@dataclass(frozen=True, slots=True)
class TicketPatch:
    """Partial update for a stored ticket.

    Every field left as ``None`` keeps the current value of the ticket.
    ``None`` is never a valid title, description or status, so an empty
    description still counts as a change.
    """

    title: TicketTitle | None = None
    description: TicketDescription | None = None
    status: TicketStatus | None = None

    @classmethod
    def from_raw(
        cls,
        *,
        title: str | None = None,
        description: str | None = None,
        status: TicketStatus | str | None = None,
    ) -> TicketPatch:
        return cls(
            title=None if title is None else TicketTitle(title),
            description=None if description is None else TicketDescription(description),
            status=None if status is None else _to_status(status),
        )

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.status is None


@dataclass(frozen=True, slots=True)
class Ticket:
    """A ticket saved in a :class:`~tracker.tickets.store.TicketStore`."""

    id: TicketId
    title: TicketTitle
    description: TicketDescription
    status: TicketStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class DeletedTicket:
    """Final state of a removed ticket together with its deletion time."""

    ticket: Ticket
    deleted_at: datetime


def _to_status(value: TicketStatus | str) -> TicketStatus:
    if isinstance(value, TicketStatus):
        return value
    try:
        return TicketStatus(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown ticket status: {value!r}") from exc
