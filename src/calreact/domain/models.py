from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from .enums import EventKind, ViewMode, WeekStart


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    else:
        raise ValueError(f"Unsupported datetime value: {value!r}")
    # the engine works on naive wall-clock time
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _format_datetime(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds")


@dataclass(slots=True)
class CalendarEvent:
    """A scheduled event.

    ``start <= end`` is guaranteed by whoever builds the event (the edit
    dialog payload validation); the engine relies on it without checking.
    """

    id: str
    title: str
    start: datetime
    end: datetime
    description: str = ""
    color: Optional[str] = None
    kind: Optional[EventKind] = None
    reference_id: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "CalendarEvent":
        kind = record.get("kind")
        return cls(
            id=str(record["id"]),
            title=str(record["title"]),
            start=_parse_datetime(record["start"]),
            end=_parse_datetime(record["end"]),
            description=record.get("description") or "",
            color=record.get("color"),
            kind=EventKind(kind) if kind else None,
            reference_id=record.get("reference_id"),
            status=record.get("status"),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            **event_fields_to_record(
                {
                    "title": self.title,
                    "start": self.start,
                    "end": self.end,
                    "description": self.description,
                    "color": self.color,
                    "kind": self.kind,
                    "reference_id": self.reference_id,
                    "status": self.status,
                }
            ),
        }

    def with_times(self, start: datetime, end: datetime) -> "CalendarEvent":
        return replace(self, start=start, end=end)


def event_fields_to_record(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize a (possibly partial) mapping of event fields for storage."""

    record: Dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, datetime):
            record[key] = _format_datetime(value)
        elif isinstance(value, EventKind):
            record[key] = value.value
        else:
            record[key] = value
    return record


@dataclass(frozen=True, slots=True)
class ViewState:
    """Controller-held navigation state. Never derived from events."""

    anchor_date: date
    view_mode: ViewMode = ViewMode.MONTH
    week_start: WeekStart = WeekStart.SUNDAY
    filter_term: str = ""

    def with_anchor(self, anchor_date: date) -> "ViewState":
        return replace(self, anchor_date=anchor_date)

    def with_view(self, view_mode: ViewMode) -> "ViewState":
        return replace(self, view_mode=ViewMode(view_mode))

    def with_filter(self, filter_term: str) -> "ViewState":
        return replace(self, filter_term=filter_term)

    def with_week_start(self, week_start: WeekStart) -> "ViewState":
        return replace(self, week_start=week_start)
