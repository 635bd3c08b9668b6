"""Data access layer."""

from __future__ import annotations

from .cache import EventCollection
from .errors import EventNotFoundError, PersistenceError
from .repositories import AsyncEventStore, EventRepository, EventStore, JsonEventRepository
from .supabase import SupabaseGateway, SupabaseNotInitializedError

__all__ = [
    "AsyncEventStore",
    "EventCollection",
    "EventNotFoundError",
    "EventRepository",
    "EventStore",
    "JsonEventRepository",
    "PersistenceError",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
]
