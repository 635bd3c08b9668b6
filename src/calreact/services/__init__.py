"""Application services orchestrating data access and the layout engine."""

from __future__ import annotations

from .calendar import CalendarController, EventBusyError, Layout, MonthLayout, TimedLayout
from .context import ServiceContext
from .notifications import Notification, NotificationLog, NotificationVariant, log_notifier

__all__ = [
    "CalendarController",
    "EventBusyError",
    "Layout",
    "MonthLayout",
    "Notification",
    "NotificationLog",
    "NotificationVariant",
    "ServiceContext",
    "TimedLayout",
    "log_notifier",
]
