from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a ticket field fails its invariants at construction time."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
