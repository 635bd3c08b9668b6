from __future__ import annotations

from enum import Enum


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


class WeekStart(int, Enum):
    """First day of the calendar week, numbered the way the grid counts it (Sunday = 0)."""

    SUNDAY = 0
    MONDAY = 1

    @property
    def python_weekday(self) -> int:
        # date.weekday() counts Monday as 0
        return 6 if self is WeekStart.SUNDAY else 0

    @classmethod
    def parse(cls, value: "str | int | WeekStart") -> "WeekStart":
        if isinstance(value, WeekStart):
            return value
        if isinstance(value, int):
            return cls(value)
        normalized = value.strip().lower()
        if normalized in {"0", "sun", "sunday"}:
            return cls.SUNDAY
        if normalized in {"1", "mon", "monday"}:
            return cls.MONDAY
        raise ValueError(f"Unsupported week start: {value!r}")


class EventKind(str, Enum):
    PROJECT = "Proyecto"
    AFTER_SALES = "Postventa"
    VISIT = "Visita"
