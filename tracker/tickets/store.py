from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable

from opentelemetry import trace

from .models import DeletedTicket, Ticket, TicketDraft, TicketId, TicketPatch
from .state import TicketStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketStore:
    """In-memory owner of every saved ticket.

    Identities come from a counter local to the store instance: they start at
    1, grow by one per save and are never handed out twice, even once the
    ticket they belonged to has been deleted.

    Tickets are frozen, so callers can only change them through
    :meth:`update` and :meth:`delete`.
    """

    def __init__(self, clock: Clock | None = None, tracer: trace.Tracer | None = None) -> None:
        self._clock = clock or utcnow
        self._tracer = tracer or trace.get_tracer(__name__)
        self._data: dict[TicketId, Ticket] = {}
        self._current_id: TicketId = 0

    def save(self, draft: TicketDraft) -> TicketId:
        with self._tracer.start_as_current_span("ticket_store.save") as span:
            ticket_id = self._generate_id()
            timestamp = self._clock()
            ticket = Ticket(
                id=ticket_id,
                title=draft.title,
                description=draft.description,
                status=TicketStatus.initial_state(),
                created_at=timestamp,
                updated_at=timestamp,
            )
            self._data[ticket_id] = ticket
            span.set_attribute("ticket.id", ticket_id)
            logger.info("Saved ticket %s", ticket_id)
            return ticket_id

    def get(self, ticket_id: TicketId) -> Ticket | None:
        with self._tracer.start_as_current_span("ticket_store.get") as span:
            span.set_attribute("ticket.id", ticket_id)
            ticket = self._data.get(ticket_id)
            if ticket is None:
                logger.debug("Ticket %s not found", ticket_id)
            return ticket

    def list(self) -> list[Ticket]:
        with self._tracer.start_as_current_span("ticket_store.list") as span:
            tickets = list(self._data.values())
            span.set_attribute("ticket.count", len(tickets))
            return tickets

    def update(self, ticket_id: TicketId, patch: TicketPatch) -> Ticket | None:
        """Apply the fields present in ``patch`` and return the new version.

        ``updated_at`` is refreshed on every call for a known ticket, also
        when the patch is empty. Unknown identities return ``None`` and leave
        the store untouched.
        """

        with self._tracer.start_as_current_span("ticket_store.update") as span:
            span.set_attribute("ticket.id", ticket_id)
            current = self._data.get(ticket_id)
            if current is None:
                logger.debug("Cannot update ticket %s: not found", ticket_id)
                return None

            changes: dict[str, Any] = {}
            if patch.title is not None:
                changes["title"] = patch.title
            if patch.description is not None:
                changes["description"] = patch.description
            if patch.status is not None:
                changes["status"] = patch.status
            changes["updated_at"] = self._clock()

            updated = replace(current, **changes)
            self._data[ticket_id] = updated
            logger.info("Updated ticket %s (%s)", ticket_id, ", ".join(sorted(changes)))
            return updated

    def delete(self, ticket_id: TicketId) -> DeletedTicket | None:
        with self._tracer.start_as_current_span("ticket_store.delete") as span:
            span.set_attribute("ticket.id", ticket_id)
            ticket = self._data.pop(ticket_id, None)
            if ticket is None:
                logger.debug("Cannot delete ticket %s: not found", ticket_id)
                return None
            logger.info("Deleted ticket %s", ticket_id)
            return DeletedTicket(ticket=ticket, deleted_at=self._clock())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, ticket_id: object) -> bool:
        return ticket_id in self._data

    def _generate_id(self) -> TicketId:
        self._current_id += 1
        return self._current_id
