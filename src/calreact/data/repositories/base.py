from __future__ import annotations

from typing import Any, Dict, List, Protocol, runtime_checkable

from ...domain import CalendarEvent


@runtime_checkable
class EventStore(Protocol):
    """Synchronous persistence contract shared by the Supabase and local stores."""

    def list(self, owner_id: str) -> List[CalendarEvent]: ...

    def create(self, owner_id: str, data: Dict[str, Any]) -> CalendarEvent: ...

    def update(self, owner_id: str, event_id: str, patch: Dict[str, Any]) -> CalendarEvent: ...

    def delete(self, owner_id: str, event_id: str) -> None: ...
