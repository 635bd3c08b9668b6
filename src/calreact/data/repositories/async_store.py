from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List

from ...domain import CalendarEvent
from .base import EventStore


@dataclass(slots=True)
class AsyncEventStore:
    """Runs a synchronous store's calls on the default executor so callers can await them."""

    store: EventStore

    async def list(self, owner_id: str) -> List[CalendarEvent]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.store.list, owner_id)

    async def create(self, owner_id: str, data: Dict[str, Any]) -> CalendarEvent:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.store.create, owner_id, data)

    async def update(self, owner_id: str, event_id: str, patch: Dict[str, Any]) -> CalendarEvent:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.store.update, owner_id, event_id, patch)

    async def delete(self, owner_id: str, event_id: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self.store.delete, owner_id, event_id)
