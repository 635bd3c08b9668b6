from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from ..domain import ViewMode, ViewState
from .dates import add_months, start_of_month, start_of_week


def _step(state: ViewState, direction: int) -> ViewState:
    anchor = state.anchor_date
    if state.view_mode is ViewMode.MONTH:
        return state.with_anchor(add_months(start_of_month(anchor), direction))
    if state.view_mode is ViewMode.WEEK:
        return state.with_anchor(anchor + timedelta(days=7 * direction))
    return state.with_anchor(anchor + timedelta(days=direction))


def previous_period(state: ViewState) -> ViewState:
    return _step(state, -1)


def next_period(state: ViewState) -> ViewState:
    return _step(state, 1)


def today(state: ViewState, current: Optional[date] = None) -> ViewState:
    return state.with_anchor(current or date.today())


def period_title(state: ViewState) -> str:
    anchor = state.anchor_date
    if state.view_mode is ViewMode.MONTH:
        return anchor.strftime("%B %Y")
    if state.view_mode is ViewMode.WEEK:
        first = start_of_week(anchor, state.week_start)
        last = first + timedelta(days=6)
        return f"{first.strftime('%b')} {first.day} - {last.strftime('%b')} {last.day}, {last.year}"
    return f"{anchor.strftime('%B')} {anchor.day}, {anchor.year}"
