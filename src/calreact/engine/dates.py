"""Calendar boundary arithmetic shared by the grid and placement code."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterator, Union

from ..domain import WeekStart

DateLike = Union[date, datetime]

# Stored instants keep millisecond precision, so the last instant of a day is .999.
END_OF_DAY_TIME = time(23, 59, 59, 999000)


def as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def start_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    return datetime.combine(as_date(value), END_OF_DAY_TIME)


def start_of_week(value: DateLike, week_start: WeekStart = WeekStart.SUNDAY) -> date:
    day = as_date(value)
    offset = (day.weekday() - week_start.python_weekday) % 7
    return day - timedelta(days=offset)


def end_of_week(value: DateLike, week_start: WeekStart = WeekStart.SUNDAY) -> date:
    return start_of_week(value, week_start) + timedelta(days=6)


def start_of_month(value: DateLike) -> date:
    return as_date(value).replace(day=1)


def end_of_month(value: DateLike) -> date:
    return add_months(start_of_month(value), 1) - timedelta(days=1)


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""

    index = value.year * 12 + (value.month - 1) + months
    year, month0 = divmod(index, 12)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(value.day, last_day))


def each_day(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""

    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def is_same_month(left: DateLike, right: DateLike) -> bool:
    a, b = as_date(left), as_date(right)
    return (a.year, a.month) == (b.year, b.month)


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60
