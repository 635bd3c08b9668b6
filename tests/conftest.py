from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Callable

import pytest

from calreact.config import AppSettings, CalendarSettings, LoggingSettings, StorageSettings, SupabaseSettings
from calreact.domain import CalendarEvent, ViewMode, WeekStart


@pytest.fixture
def make_event() -> Callable[..., CalendarEvent]:
    counter = {"value": 0}

    def _make(
        start: datetime,
        end: datetime,
        title: str = "Site visit",
        description: str = "",
        id: str | None = None,
        **extra,
    ) -> CalendarEvent:
        counter["value"] += 1
        return CalendarEvent(
            id=id or f"evt-{counter['value']}",
            title=title,
            start=start,
            end=end,
            description=description,
            **extra,
        )

    return _make


@pytest.fixture
def calendar_settings() -> CalendarSettings:
    return CalendarSettings(
        week_start=WeekStart.SUNDAY,
        default_view=ViewMode.MONTH,
        start_hour=0,
        end_hour=24,
        slot_interval_minutes=60,
        max_events_per_cell=3,
    )


@pytest.fixture
def app_settings(tmp_path: Path, calendar_settings: CalendarSettings) -> AppSettings:
    return AppSettings(
        supabase=SupabaseSettings(url=None, anon_key=None),
        storage=StorageSettings(
            backend="local",
            events_table="events",
            owner_column="user_id",
            events_file=tmp_path / "events.json",
            owner_id="owner-1",
        ),
        calendar=calendar_settings,
        logging=LoggingSettings(level="INFO", directory=tmp_path / "logs"),
    )


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 10, 19)
