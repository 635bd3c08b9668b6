from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from calreact.api import EventDraft, EventPayload, serialize_event
from calreact.domain import CalendarEvent, EventKind


def test_record_round_trip():
    record = {
        "id": "evt-1",
        "title": "Install windows",
        "start": "2026-10-19T09:30:00.000",
        "end": "2026-10-19T11:00:00.000",
        "description": "Second floor",
        "color": "#0ea5e9",
        "kind": "Proyecto",
        "reference_id": "proj-9",
        "status": "open",
    }

    event = CalendarEvent.from_record(record)

    assert event.kind is EventKind.PROJECT
    assert event.start == datetime(2026, 10, 19, 9, 30)
    assert event.to_record() == record


def test_from_record_defaults_optional_fields():
    event = CalendarEvent.from_record({"id": 7, "title": "Visit", "start": "2026-10-19T09:00:00", "end": "2026-10-19T10:00:00"})
    assert event.id == "7"
    assert event.description == ""
    assert event.color is None and event.kind is None


def test_aware_instants_become_naive_local_time():
    event = CalendarEvent.from_record(
        {"id": "x", "title": "Call", "start": "2026-10-19T09:00:00Z", "end": "2026-10-19T10:00:00Z"}
    )
    expected = datetime(2026, 10, 19, 9, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert event.start.tzinfo is None
    assert event.start == expected


def test_with_times_returns_a_copy():
    event = CalendarEvent("e", "Call", datetime(2026, 1, 1, 9), datetime(2026, 1, 1, 10))
    moved = event.with_times(datetime(2026, 1, 2, 9), datetime(2026, 1, 2, 10))
    assert moved.start.day == 2
    assert event.start.day == 1


class TestEventDraft:
    def test_valid_payload(self):
        draft = EventDraft.model_validate(
            {"title": "  Visit  ", "start": "2026-10-19T09:00:00", "end": "2026-10-19T10:00:00", "kind": "Visita"}
        )
        assert draft.title == "Visit"
        assert draft.kind is EventKind.VISIT
        assert "id" not in draft.event_fields()

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError):
            EventDraft(title="   ", start=datetime(2026, 1, 1), end=datetime(2026, 1, 1))

    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValidationError):
            EventDraft(title="Visit", start=datetime(2026, 1, 2), end=datetime(2026, 1, 1))


def test_event_payload_serialization():
    event = CalendarEvent("e", "Call", datetime(2026, 1, 1, 9), datetime(2026, 1, 1, 10), kind=EventKind.AFTER_SALES)
    payload = serialize_event(event)
    assert payload["start"] == "2026-01-01T09:00:00.000"
    assert payload["kind"] == "Postventa"
    assert EventPayload.from_domain(event).id == "e"
