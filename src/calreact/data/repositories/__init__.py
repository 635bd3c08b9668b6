"""Event stores: Supabase table, local JSON file, and the awaitable adapter."""

from __future__ import annotations

from .async_store import AsyncEventStore
from .base import EventStore
from .events import EventRepository
from .local import JsonEventRepository

__all__ = ["AsyncEventStore", "EventRepository", "EventStore", "JsonEventRepository"]
