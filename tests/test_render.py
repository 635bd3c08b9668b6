from datetime import date, datetime

from calreact.domain import CalendarEvent, WeekStart
from calreact.engine import build_month_grid, build_time_slots, build_week_days, place_for_month, place_for_week
from calreact.render import render_month, render_timed
from calreact.services import MonthLayout, TimedLayout


def _event(id, start, end, title):
    return CalendarEvent(id=id, title=title, start=start, end=end)


def test_month_rendering_marks_overflow_and_outside_days():
    events = [_event(str(i), datetime(2026, 10, 5, 8 + i), datetime(2026, 10, 5, 9 + i), f"Job {i}") for i in range(5)]
    weeks = build_month_grid(date(2026, 10, 1), WeekStart.SUNDAY, today=date(2026, 10, 19))
    layout = MonthLayout(title="October 2026", weeks=weeks, cells=place_for_month(events, weeks))

    text = render_month(layout)

    assert text.splitlines()[0] == "October 2026"
    assert "+2 more" in text
    assert "(27)" in text
    assert "*19" in text
    assert "Job 3" not in text


def test_timed_rendering_spans_rows():
    event = _event("a", datetime(2026, 10, 19, 9), datetime(2026, 10, 19, 11), "Install")
    days = build_week_days(date(2026, 10, 19), WeekStart.MONDAY, today=date(2026, 10, 19))[:1]
    layout = TimedLayout(
        title="October 19, 2026",
        slots=build_time_slots(8, 12, 60),
        columns=place_for_week([event], days, 8, 60),
        start_hour=8,
        interval_minutes=60,
    )

    rows = render_timed(layout).splitlines()[3:]

    assert rows[0].startswith("08:00") and "Install" not in rows[0]
    assert "Install" in rows[1]
    assert "|" in rows[2]
    assert "|" not in rows[3]


def _single_day_layout(events):
    days = build_week_days(date(2026, 10, 19), WeekStart.MONDAY, today=date(2026, 10, 19))[:1]
    return TimedLayout(
        title="October 19, 2026",
        slots=build_time_slots(8, 12, 60),
        columns=place_for_week(events, days, 8, 60),
        start_hour=8,
        interval_minutes=60,
    )


def test_timed_rendering_skips_events_before_start_hour():
    early = _event("early", datetime(2026, 10, 19, 6), datetime(2026, 10, 19, 7), "Early")

    text = render_timed(_single_day_layout([early]))

    assert "Early" not in text
    assert all("|" not in row for row in text.splitlines()[3:])


def test_timed_rendering_clips_event_straddling_start_hour():
    straddling = _event("s", datetime(2026, 10, 19, 6), datetime(2026, 10, 19, 9), "Crew")

    rows = render_timed(_single_day_layout([straddling])).splitlines()[3:]

    assert rows[0].startswith("08:00") and "Crew" in rows[0]
    assert all("Crew" not in row and "|" not in row for row in rows[1:])


def test_timed_rendering_skips_events_after_end_hour():
    late = _event("late", datetime(2026, 10, 19, 12), datetime(2026, 10, 19, 14), "Late")
    running = _event("run", datetime(2026, 10, 19, 11), datetime(2026, 10, 19, 15), "Run")

    rows = render_timed(_single_day_layout([late, running])).splitlines()[3:]

    assert len(rows) == 4
    assert "Late" not in "\n".join(rows)
    assert "Run" in rows[3]
