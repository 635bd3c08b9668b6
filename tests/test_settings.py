from pathlib import Path

import pytest

from calreact.config import get_settings
from calreact.domain import ViewMode, WeekStart


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in (
        "CALREACT_WEEK_START",
        "CALREACT_DEFAULT_VIEW",
        "CALREACT_START_HOUR",
        "CALREACT_END_HOUR",
        "CALREACT_SLOT_MINUTES",
        "CALREACT_MAX_EVENTS_PER_CELL",
        "CALREACT_STORAGE_BACKEND",
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.calendar.week_start is WeekStart.SUNDAY
    assert settings.calendar.default_view is ViewMode.MONTH
    assert (settings.calendar.start_hour, settings.calendar.end_hour) == (0, 24)
    assert settings.calendar.slot_interval_minutes == 60
    assert settings.calendar.max_events_per_cell == 3
    assert not settings.storage.uses_supabase
    assert settings.supabase.missing_env_vars == ["SUPABASE_URL", "SUPABASE_ANON_KEY"]


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CALREACT_WEEK_START", "Monday")
    monkeypatch.setenv("CALREACT_DEFAULT_VIEW", "WEEK")
    monkeypatch.setenv("CALREACT_START_HOUR", "7")
    monkeypatch.setenv("CALREACT_SLOT_MINUTES", "30")
    monkeypatch.setenv("CALREACT_STORAGE_BACKEND", "supabase")
    monkeypatch.setenv("CALREACT_EVENTS_FILE", str(tmp_path / "cal.json"))

    settings = get_settings()

    assert settings.calendar.week_start is WeekStart.MONDAY
    assert settings.calendar.default_view is ViewMode.WEEK
    assert settings.calendar.start_hour == 7
    assert settings.calendar.slot_interval_minutes == 30
    assert settings.storage.uses_supabase
    assert settings.storage.events_file == Path(tmp_path / "cal.json")


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("CALREACT_WEEK_START", "someday")
    monkeypatch.setenv("CALREACT_DEFAULT_VIEW", "year")
    monkeypatch.setenv("CALREACT_MAX_EVENTS_PER_CELL", "three")

    settings = get_settings()

    assert settings.calendar.week_start is WeekStart.SUNDAY
    assert settings.calendar.default_view is ViewMode.MONTH
    assert settings.calendar.max_events_per_cell == 3
