from datetime import date

import pytest

from calreact.domain import ViewMode, ViewState, WeekStart
from calreact.engine.navigation import next_period, period_title, previous_period, today


@pytest.mark.parametrize(
    "view, anchor, expected_next, expected_previous",
    [
        (ViewMode.MONTH, date(2026, 1, 31), date(2026, 2, 1), date(2025, 12, 1)),
        (ViewMode.WEEK, date(2026, 10, 19), date(2026, 10, 26), date(2026, 10, 12)),
        (ViewMode.DAY, date(2026, 12, 31), date(2027, 1, 1), date(2026, 12, 30)),
    ],
)
def test_period_steps(view, anchor, expected_next, expected_previous):
    state = ViewState(anchor_date=anchor, view_mode=view)
    assert next_period(state).anchor_date == expected_next
    assert previous_period(state).anchor_date == expected_previous
    assert state.anchor_date == anchor


def test_today_re_anchors_without_touching_other_fields():
    state = ViewState(anchor_date=date(2020, 1, 1), view_mode=ViewMode.WEEK, filter_term="visit")
    moved = today(state, date(2026, 10, 19))
    assert moved.anchor_date == date(2026, 10, 19)
    assert moved.view_mode is ViewMode.WEEK
    assert moved.filter_term == "visit"


def test_titles():
    anchor = date(2026, 10, 19)
    assert period_title(ViewState(anchor, ViewMode.MONTH)) == "October 2026"
    assert period_title(ViewState(anchor, ViewMode.WEEK, WeekStart.SUNDAY)) == "Oct 18 - Oct 24, 2026"
    assert period_title(ViewState(anchor, ViewMode.WEEK, WeekStart.MONDAY)) == "Oct 19 - Oct 25, 2026"
    assert period_title(ViewState(anchor, ViewMode.DAY)) == "October 19, 2026"


def test_week_title_spanning_years():
    assert period_title(ViewState(date(2025, 12, 31), ViewMode.WEEK)) == "Dec 28 - Jan 3, 2026"
