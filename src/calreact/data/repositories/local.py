from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import orjson

from ...domain import CalendarEvent, event_fields_to_record
from ..errors import EventNotFoundError

DEFAULT_STATE: Dict[str, Any] = {
    "events": [],
    "counters": {"event": 0},
}


class JsonEventRepository:
    """Event store backed by a single orjson-encoded file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._state: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_materialized(self) -> Dict[str, Any]:
        if self._state is not None:
            return self._state
        if not self._path.exists() or not self._path.read_bytes():
            self._state = deepcopy(DEFAULT_STATE)
            self.persist()
            return self._state
        self._state = orjson.loads(self._path.read_bytes())
        # Backfill missing keys when upgrading.
        for key, value in DEFAULT_STATE.items():
            self._state.setdefault(key, deepcopy(value))
        return self._state

    def persist(self) -> None:
        if self._state is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = orjson.dumps(self._state, option=orjson.OPT_INDENT_2)
        self._path.write_bytes(payload + b"\n")

    def mutate(self, callback: Callable[[Dict[str, Any]], Any]) -> Any:
        state = self._ensure_materialized()
        result = callback(state)
        self.persist()
        return result

    @staticmethod
    def consume_id(state: Dict[str, Any], prefix: str) -> str:
        counters = state.setdefault("counters", {})
        current = counters.get(prefix, 0) + 1
        counters[prefix] = current
        return f"{prefix}_{current:04d}"

    @staticmethod
    def _to_event(record: Dict[str, Any]) -> CalendarEvent:
        return CalendarEvent.from_record({key: value for key, value in record.items() if key != "owner_id"})

    @staticmethod
    def _find(state: Dict[str, Any], owner_id: str, event_id: str) -> Dict[str, Any]:
        for record in state["events"]:
            if record["id"] == event_id and record.get("owner_id") == owner_id:
                return record
        raise EventNotFoundError(f"Event {event_id} not found for {owner_id}.")

    def list(self, owner_id: str) -> List[CalendarEvent]:
        state = self._ensure_materialized()
        records = [record for record in state["events"] if record.get("owner_id") == owner_id]
        return sorted((self._to_event(record) for record in records), key=lambda event: event.start)

    def create(self, owner_id: str, data: Dict[str, Any]) -> CalendarEvent:
        def _insert(state: Dict[str, Any]) -> Dict[str, Any]:
            record = {"id": self.consume_id(state, "event"), "owner_id": owner_id, **event_fields_to_record(data)}
            state["events"].append(record)
            return record

        return self._to_event(self.mutate(_insert))

    def update(self, owner_id: str, event_id: str, patch: Dict[str, Any]) -> CalendarEvent:
        def _apply(state: Dict[str, Any]) -> Dict[str, Any]:
            record = self._find(state, owner_id, event_id)
            record.update(event_fields_to_record(patch))
            return dict(record)

        return self._to_event(self.mutate(_apply))

    def delete(self, owner_id: str, event_id: str) -> None:
        def _remove(state: Dict[str, Any]) -> None:
            record = self._find(state, owner_id, event_id)
            state["events"].remove(record)

        self.mutate(_remove)
