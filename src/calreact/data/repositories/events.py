from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from ...domain import CalendarEvent, event_fields_to_record
from ..errors import EventNotFoundError, PersistenceError
from ..supabase import SupabaseGateway

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EventRepository:
    gateway: SupabaseGateway
    table_name: str
    owner_column: str = "user_id"

    def _to_event(self, record: Dict[str, Any]) -> CalendarEvent:
        record = dict(record)
        record.pop(self.owner_column, None)
        return CalendarEvent.from_record(record)

    def list(self, owner_id: str) -> List[CalendarEvent]:
        response = (
            self.gateway.table(self.table_name)
            .select("*")
            .eq(self.owner_column, owner_id)
            .order("start", desc=False)
            .execute()
        )
        records = response.data or []
        logger.debug("Fetched %d events for %s", len(records), owner_id)
        return [self._to_event(record) for record in records]

    def create(self, owner_id: str, data: Dict[str, Any]) -> CalendarEvent:
        payload = event_fields_to_record(data)
        payload[self.owner_column] = owner_id
        response = self.gateway.table(self.table_name).insert(payload).execute()
        rows = response.data or []
        if not rows:
            raise PersistenceError("Event insert returned no record.")
        return self._to_event(rows[0])

    def update(self, owner_id: str, event_id: str, patch: Dict[str, Any]) -> CalendarEvent:
        response = (
            self.gateway.table(self.table_name)
            .update(event_fields_to_record(patch))
            .eq("id", event_id)
            .eq(self.owner_column, owner_id)
            .execute()
        )
        rows = response.data or []
        if not rows:
            raise EventNotFoundError(f"Event {event_id} not found for {owner_id}.")
        return self._to_event(rows[0])

    def delete(self, owner_id: str, event_id: str) -> None:
        response = (
            self.gateway.table(self.table_name)
            .delete()
            .eq("id", event_id)
            .eq(self.owner_column, owner_id)
            .execute()
        )
        if not response.data:
            raise EventNotFoundError(f"Event {event_id} not found for {owner_id}.")
