"""Configuration models and helpers."""

from __future__ import annotations

from .paths import DATA_DIR, EVENTS_FILE, LOG_DIR
from .settings import (
    AppSettings,
    CalendarSettings,
    LoggingSettings,
    StorageSettings,
    SupabaseSettings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "CalendarSettings",
    "DATA_DIR",
    "EVENTS_FILE",
    "LOG_DIR",
    "LoggingSettings",
    "StorageSettings",
    "SupabaseSettings",
    "get_settings",
]
