"""In-memory ticket store with validated value types."""

from .errors import ValidationError
from .models import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    DeletedTicket,
    Ticket,
    TicketDescription,
    TicketDraft,
    TicketId,
    TicketPatch,
    TicketTitle,
)
from .state import TicketStatus
from .store import TicketStore

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "DeletedTicket",
    "Ticket",
    "TicketDescription",
    "TicketDraft",
    "TicketId",
    "TicketPatch",
    "TicketStatus",
    "TicketStore",
    "TicketTitle",
    "ValidationError",
]
