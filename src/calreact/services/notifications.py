from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant is NotificationVariant.DESTRUCTIVE


Notifier = Callable[[Notification], None]


def log_notifier(notification: Notification) -> None:
    level = logging.WARNING if notification.is_error else logging.INFO
    logger.log(level, "%s: %s", notification.title, notification.description)


@dataclass
class NotificationLog:
    """Notifier that keeps every notification for the caller to present."""

    entries: List[Notification] = field(default_factory=list)

    def __call__(self, notification: Notification) -> None:
        self.entries.append(notification)

    @property
    def last(self) -> Optional[Notification]:
        return self.entries[-1] if self.entries else None

    @property
    def has_errors(self) -> bool:
        return any(entry.is_error for entry in self.entries)
