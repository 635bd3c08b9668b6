"""Payload schemas and serializers for the calendar surface."""

from __future__ import annotations

from .models import EventDraft, EventPayload
from .serializers import serialize_columns, serialize_event, serialize_month_cells, serialize_placement

__all__ = [
    "EventDraft",
    "EventPayload",
    "serialize_columns",
    "serialize_event",
    "serialize_month_cells",
    "serialize_placement",
]
