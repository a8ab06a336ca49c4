"""Ticket tracker core: validated ticket types and an in-memory store."""

from .tickets import (
    DeletedTicket,
    Ticket,
    TicketDescription,
    TicketDraft,
    TicketPatch,
    TicketStatus,
    TicketStore,
    TicketTitle,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "DeletedTicket",
    "Ticket",
    "TicketDescription",
    "TicketDraft",
    "TicketPatch",
    "TicketStatus",
    "TicketStore",
    "TicketTitle",
    "ValidationError",
]
