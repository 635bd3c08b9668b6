"""Time-grid builder: month cells and week/day time slots."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import List, Optional

from ..domain import WeekStart
from .dates import each_day, end_of_month, end_of_week, start_of_month, start_of_week


@dataclass(frozen=True, slots=True)
class CalendarDay:
    date: date
    in_month: bool
    is_today: bool

    @property
    def key(self) -> str:
        return self.date.isoformat()


Week = List[CalendarDay]


@dataclass(frozen=True, slots=True)
class TimeSlot:
    start: time

    @property
    def label(self) -> str:
        return self.start.strftime("%H:%M")

    @property
    def minutes(self) -> int:
        return self.start.hour * 60 + self.start.minute


def build_month_grid(
    anchor_date: date,
    week_start: WeekStart = WeekStart.SUNDAY,
    *,
    today: Optional[date] = None,
) -> list[Week]:
    """Return the weeks covering ``anchor_date``'s month, each exactly 7 days long.

    The range is widened back to the week start on or before the 1st and
    forward to the last day of the week containing the month's final day.
    Days outside the month are kept and tagged ``in_month=False``.
    """

    today = today or date.today()
    first = start_of_month(anchor_date)
    grid_start = start_of_week(first, week_start)
    grid_end = end_of_week(end_of_month(first), week_start)

    days = [
        CalendarDay(
            date=day,
            in_month=(day.year, day.month) == (first.year, first.month),
            is_today=day == today,
        )
        for day in each_day(grid_start, grid_end)
    ]
    return [days[index : index + 7] for index in range(0, len(days), 7)]


def build_week_days(
    anchor_date: date,
    week_start: WeekStart = WeekStart.SUNDAY,
    *,
    today: Optional[date] = None,
) -> Week:
    today = today or date.today()
    first = start_of_week(anchor_date, week_start)
    return [
        CalendarDay(date=day, in_month=True, is_today=day == today)
        for day in each_day(first, end_of_week(first, week_start))
    ]


def build_time_slots(start_hour: int = 0, end_hour: int = 24, interval_minutes: int = 60) -> list[TimeSlot]:
    """One slot per ``interval_minutes`` from ``start_hour:00`` up to ``end_hour:00`` (exclusive).

    Callers must pass ``start_hour < end_hour`` and an interval that divides 60.
    """

    return [
        TimeSlot(start=time(hour, minute))
        for hour in range(start_hour, end_hour)
        for minute in range(0, 60, interval_minutes)
    ]
