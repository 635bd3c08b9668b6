"""Start/end recomputation for drag-to-move and resize gestures."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, NamedTuple

from ..domain import CalendarEvent
from .dates import end_of_day, start_of_day


class InvalidTargetError(ValueError):
    """Raised when a drop target cannot be resolved to a calendar date or instant."""


class TimeRange(NamedTuple):
    start: datetime
    end: datetime


def resolve_target_day(target: Any) -> date:
    """Accept a ``date``, a ``datetime``, an ISO ``YYYY-MM-DD`` day key or an ISO datetime string."""

    if isinstance(target, datetime):
        return target.date()
    if isinstance(target, date):
        return target
    if isinstance(target, str):
        text = target.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidTargetError(f"Invalid target day: {target!r}") from exc
    raise InvalidTargetError(f"Invalid target day: {target!r}")


def _resolve_instant(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return start_of_day(value)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidTargetError(f"Invalid target instant: {value!r}") from exc
    raise InvalidTargetError(f"Invalid target instant: {value!r}")


def is_all_day(event: CalendarEvent) -> bool:
    """Start at exactly midnight and end at exactly the end of that same day."""

    return event.start == start_of_day(event.start) and event.end == end_of_day(event.start)


def reschedule(event: CalendarEvent, target_day: Any) -> TimeRange:
    """Move ``event`` onto ``target_day``.

    All-day events take the whole target day. Timed events keep their
    time of day and their exact duration.
    """

    day = resolve_target_day(target_day)
    if is_all_day(event):
        return TimeRange(start_of_day(day), end_of_day(day))
    duration = event.end - event.start
    new_start = datetime.combine(day, event.start.time())
    return TimeRange(new_start, new_start + duration)


def resize(new_start: Any, new_end: Any) -> TimeRange:
    """Snap a resized range outward to whole days, dropping any time of day."""

    return TimeRange(start_of_day(_resolve_instant(new_start)), end_of_day(_resolve_instant(new_end)))
