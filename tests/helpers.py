import random
import string
from datetime import datetime, timedelta, timezone

from tracker.tickets import TicketDescription, TicketDraft, TicketTitle


class FakeClock:
    """Clock that moves forward by ``step`` on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + self.step
        return current


def random_text(min_length: int, max_length: int) -> str:
    length = random.randint(min_length, max_length)
    return "".join(random.choices(string.ascii_letters + string.digits + " ", k=length))


def generate_ticket_draft() -> TicketDraft:
    return TicketDraft(
        title=TicketTitle(random_text(1, 50)),
        description=TicketDescription(random_text(0, 3000)),
    )
