from __future__ import annotations

from typing import Iterable, List

from ..domain import CalendarEvent


def matches_term(event: CalendarEvent, term: str) -> bool:
    """Case-insensitive substring match on the title or, when present, the description.

    A blank term matches everything; otherwise the term is matched as given,
    surrounding whitespace included.
    """

    if not term.strip():
        return True
    needle = term.lower()
    if needle in event.title.lower():
        return True
    return bool(event.description) and needle in event.description.lower()


def filter_events(events: Iterable[CalendarEvent], term: str) -> List[CalendarEvent]:
    if not term or not term.strip():
        return list(events)
    return [event for event in events if matches_term(event, term)]
