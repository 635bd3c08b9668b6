from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, Iterator, List, Optional

from ...domain import CalendarEvent
from ...engine.dates import as_date, each_day


@dataclass
class EventCollection:
    """In-memory event list owned by the controller, keyed by id.

    Iteration and per-day lookups follow insertion order. Replacing an event
    keeps its slot, so stable sorts downstream see the same tie order after
    an update.
    """

    events_by_id: Dict[str, CalendarEvent] = field(default_factory=dict)
    days_index: Dict[date, List[str]] = field(default_factory=dict)

    def hydrate(self, events: Iterable[CalendarEvent]) -> None:
        self.clear()
        for event in events:
            self.events_by_id[event.id] = event
            self._index_event(event)

    def _index_event(self, event: CalendarEvent) -> None:
        for day in each_day(as_date(event.start), as_date(event.end)):
            self.days_index.setdefault(day, []).append(event.id)

    def _unindex_event(self, event: CalendarEvent) -> None:
        for day in each_day(as_date(event.start), as_date(event.end)):
            ids = self.days_index.get(day, [])
            if event.id in ids:
                ids.remove(event.id)
            if not ids:
                self.days_index.pop(day, None)

    def upsert(self, event: CalendarEvent) -> None:
        existing = self.events_by_id.get(event.id)
        if existing is not None:
            self._unindex_event(existing)
        self.events_by_id[event.id] = event
        self._index_event(event)

    def remove(self, event_id: str) -> bool:
        event = self.events_by_id.pop(event_id, None)
        if event is None:
            return False
        self._unindex_event(event)
        return True

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        return self.events_by_id.get(event_id)

    def events_for_day(self, target_day: date) -> List[CalendarEvent]:
        """Events touching ``target_day`` in collection order."""

        identifiers = set(self.days_index.get(target_day, ()))
        if not identifiers:
            return []
        return [event for event in self.events_by_id.values() if event.id in identifiers]

    def clear(self) -> None:
        self.events_by_id.clear()
        self.days_index.clear()

    def __iter__(self) -> Iterator[CalendarEvent]:
        return iter(list(self.events_by_id.values()))

    def __len__(self) -> int:
        return len(self.events_by_id)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self.events_by_id
