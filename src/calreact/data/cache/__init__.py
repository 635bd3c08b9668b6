from __future__ import annotations

from .event_collection import EventCollection

__all__ = ["EventCollection"]
