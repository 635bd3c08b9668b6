from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping

from ..domain import CalendarEvent
from ..engine import MonthCell, TimedColumn, TimedPlacement
from .models import EventPayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump()


def serialize_month_cells(cells: Mapping[Any, MonthCell]) -> list[Dict[str, Any]]:
    return [
        {
            "date": cell.day.key,
            "in_month": cell.day.in_month,
            "is_today": cell.day.is_today,
            "shown": [serialize_event(event) for event in cell.shown],
            "overflow": cell.overflow,
        }
        for cell in cells.values()
    ]


def serialize_placement(placement: TimedPlacement) -> Dict[str, Any]:
    return {
        "event": serialize_event(placement.event),
        "visible_start": placement.visible_start.isoformat(timespec="milliseconds"),
        "visible_end": placement.visible_end.isoformat(timespec="milliseconds"),
        "top_offset_minutes": placement.top_offset_minutes,
        "duration_minutes": placement.duration_minutes,
    }


def serialize_columns(columns: Iterable[TimedColumn]) -> list[Dict[str, Any]]:
    return [
        {
            "date": column.day.key,
            "is_today": column.day.is_today,
            "placements": [serialize_placement(placement) for placement in column.placements],
        }
        for column in columns
    ]
