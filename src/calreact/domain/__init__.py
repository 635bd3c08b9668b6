"""Domain models for the calendar."""

from __future__ import annotations

from .enums import EventKind, ViewMode, WeekStart
from .models import CalendarEvent, ViewState, event_fields_to_record

__all__ = ["CalendarEvent", "EventKind", "ViewMode", "ViewState", "WeekStart", "event_fields_to_record"]
