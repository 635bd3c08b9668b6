"""Event placement for month cells and week/day time columns."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..domain import CalendarEvent
from .dates import as_date, end_of_day, minutes_between, start_of_day
from .grid import CalendarDay, Week

DEFAULT_MAX_EVENTS_PER_CELL = 3


def touches_day(event: CalendarEvent, day: date) -> bool:
    """True when the event's date span (times dropped) includes ``day``."""

    return as_date(event.start) <= day <= as_date(event.end)


def events_for_day(events: Iterable[CalendarEvent], day: date) -> List[CalendarEvent]:
    # sorted() is stable, so equal starts keep their list order
    return sorted((event for event in events if touches_day(event, day)), key=lambda event: event.start)


@dataclass(frozen=True, slots=True)
class MonthCell:
    day: CalendarDay
    shown: Tuple[CalendarEvent, ...] = ()
    overflow: int = 0

    @property
    def total(self) -> int:
        return len(self.shown) + self.overflow


def place_for_month(
    events: Sequence[CalendarEvent],
    grid: Sequence[Week],
    max_per_cell: int = DEFAULT_MAX_EVENTS_PER_CELL,
) -> Dict[date, MonthCell]:
    """Map every grid day (out-of-month days included) to its capped event list."""

    cells: Dict[date, MonthCell] = {}
    for week in grid:
        for day in week:
            matches = events_for_day(events, day.date)
            shown = tuple(matches[:max_per_cell])
            cells[day.date] = MonthCell(day=day, shown=shown, overflow=len(matches) - len(shown))
    return cells


@dataclass(frozen=True, slots=True)
class TimedPlacement:
    """The part of one event visible on one day of a week or day view.

    Offsets are minutes measured from the view's start hour on that day;
    ``scale`` turns them into rendering units.
    """

    event: CalendarEvent
    day: date
    visible_start: datetime
    visible_end: datetime
    top_offset_minutes: float
    duration_minutes: float
    interval_minutes: int = 60

    @property
    def continues_before(self) -> bool:
        return self.event.start < self.visible_start

    @property
    def continues_after(self) -> bool:
        return self.event.end > self.visible_end

    def scale(self, slot_height: float) -> Tuple[float, float]:
        """Return ``(top, height)`` for slots ``slot_height`` units tall."""

        return (
            self.top_offset_minutes * slot_height / self.interval_minutes,
            self.duration_minutes * slot_height / self.interval_minutes,
        )


def place_event_on_day(
    event: CalendarEvent,
    day: date,
    start_hour: int = 0,
    interval_minutes: int = 60,
) -> Optional[TimedPlacement]:
    visible_start = max(event.start, start_of_day(day))
    visible_end = min(event.end, end_of_day(day))
    if visible_start >= visible_end:
        return None
    range_start = start_of_day(day) + timedelta(hours=start_hour)
    return TimedPlacement(
        event=event,
        day=day,
        visible_start=visible_start,
        visible_end=visible_end,
        top_offset_minutes=max(0.0, minutes_between(range_start, visible_start)),
        duration_minutes=minutes_between(visible_start, visible_end),
        interval_minutes=interval_minutes,
    )


def place_for_timed_view(
    events: Iterable[CalendarEvent],
    day: date,
    start_hour: int = 0,
    interval_minutes: int = 60,
) -> List[TimedPlacement]:
    placements: list[TimedPlacement] = []
    for event in events:
        placement = place_event_on_day(event, day, start_hour, interval_minutes)
        if placement is not None:
            placements.append(placement)
    placements.sort(key=lambda item: item.visible_start)
    return placements


@dataclass(frozen=True, slots=True)
class TimedColumn:
    day: CalendarDay
    placements: Tuple[TimedPlacement, ...] = field(default_factory=tuple)


def place_for_week(
    events: Sequence[CalendarEvent],
    days: Sequence[CalendarDay],
    start_hour: int = 0,
    interval_minutes: int = 60,
) -> List[TimedColumn]:
    return [
        TimedColumn(
            day=day,
            placements=tuple(place_for_timed_view(events, day.date, start_hour, interval_minutes)),
        )
        for day in days
    ]
