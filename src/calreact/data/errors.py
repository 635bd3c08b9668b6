from __future__ import annotations


class PersistenceError(RuntimeError):
    """Raised when the event store rejects a call or returns no record."""


class EventNotFoundError(PersistenceError):
    """Raised when an update or delete targets an id the store does not hold."""
