from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ..domain.enums import ViewMode, WeekStart
from .paths import EVENTS_FILE, LOG_DIR

load_dotenv()


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    backend: str
    events_table: str
    owner_column: str
    events_file: Path
    owner_id: str

    @property
    def uses_supabase(self) -> bool:
        return self.backend == "supabase"


@dataclass(frozen=True)
class CalendarSettings:
    """Grid and placement configuration consumed by the view controller.

    ``start_hour < end_hour`` and an interval dividing 60 are caller
    obligations; they are not re-checked by the grid builder.
    """

    week_start: WeekStart
    default_view: ViewMode
    start_hour: int
    end_hour: int
    slot_interval_minutes: int
    max_events_per_cell: int


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    calendar: CalendarSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _week_start_from_env(name: str, default: WeekStart) -> WeekStart:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return WeekStart.parse(raw)
    except ValueError:
        return default


def _view_from_env(name: str, default: ViewMode) -> ViewMode:
    raw = (os.getenv(name) or "").strip().lower()
    try:
        return ViewMode(raw) if raw else default
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        backend=os.getenv("CALREACT_STORAGE_BACKEND", "local").strip().lower(),
        events_table=os.getenv("CALREACT_EVENTS_TABLE", "events"),
        owner_column=os.getenv("CALREACT_OWNER_COLUMN", "user_id"),
        events_file=Path(os.getenv("CALREACT_EVENTS_FILE") or EVENTS_FILE),
        owner_id=os.getenv("CALREACT_OWNER_ID", "local-user"),
    )

    calendar = CalendarSettings(
        week_start=_week_start_from_env("CALREACT_WEEK_START", WeekStart.SUNDAY),
        default_view=_view_from_env("CALREACT_DEFAULT_VIEW", ViewMode.MONTH),
        start_hour=_int_from_env("CALREACT_START_HOUR", 0),
        end_hour=_int_from_env("CALREACT_END_HOUR", 24),
        slot_interval_minutes=_int_from_env("CALREACT_SLOT_MINUTES", 60),
        max_events_per_cell=_int_from_env("CALREACT_MAX_EVENTS_PER_CELL", 3),
    )

    logging = LoggingSettings(
        level=os.getenv("CALREACT_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("CALREACT_LOG_DIR") or LOG_DIR),
    )

    return AppSettings(supabase=supabase, storage=storage, calendar=calendar, logging=logging)
