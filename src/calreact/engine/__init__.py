"""Pure calendar layout engine: grids, placement and gesture arithmetic."""

from __future__ import annotations

from .dates import end_of_day, start_of_day, start_of_week
from .filtering import filter_events, matches_term
from .grid import CalendarDay, TimeSlot, Week, build_month_grid, build_time_slots, build_week_days
from .navigation import next_period, period_title, previous_period, today
from .placement import (
    DEFAULT_MAX_EVENTS_PER_CELL,
    MonthCell,
    TimedColumn,
    TimedPlacement,
    events_for_day,
    place_for_month,
    place_for_timed_view,
    place_for_week,
)
from .reschedule import InvalidTargetError, TimeRange, is_all_day, reschedule, resize, resolve_target_day

__all__ = [
    "CalendarDay",
    "DEFAULT_MAX_EVENTS_PER_CELL",
    "InvalidTargetError",
    "MonthCell",
    "TimeRange",
    "TimeSlot",
    "TimedColumn",
    "TimedPlacement",
    "Week",
    "build_month_grid",
    "build_time_slots",
    "build_week_days",
    "end_of_day",
    "events_for_day",
    "filter_events",
    "is_all_day",
    "matches_term",
    "next_period",
    "period_title",
    "place_for_month",
    "place_for_timed_view",
    "place_for_week",
    "previous_period",
    "reschedule",
    "resize",
    "resolve_target_day",
    "start_of_day",
    "start_of_week",
    "today",
]
