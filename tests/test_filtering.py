from datetime import datetime

import pytest

from calreact.engine.filtering import filter_events, matches_term


@pytest.fixture
def events(make_event):
    start, end = datetime(2026, 10, 19, 9), datetime(2026, 10, 19, 10)
    return [
        make_event(start, end, title="Window install", description="Casa López"),
        make_event(start, end, title="After-sales call", description="warranty claim"),
        make_event(start, end, title="Site VISIT"),
    ]


def test_matches_title_case_insensitively(events):
    assert [event.title for event in filter_events(events, "visit")] == ["Site VISIT"]


def test_matches_description(events):
    assert [event.title for event in filter_events(events, "WARRANTY")] == ["After-sales call"]


def test_missing_description_does_not_match(events):
    assert not matches_term(events[2], "claim")


@pytest.mark.parametrize("term", ["", "   ", "\t"])
def test_blank_terms_match_everything(events, term):
    assert filter_events(events, term) == events


def test_filter_is_idempotent_and_keeps_order(events):
    once = filter_events(events, "a")
    assert once == filter_events(once, "a")
    assert once == [event for event in events if event in once]


def test_surrounding_whitespace_is_part_of_the_term(events):
    assert filter_events(events, "  install ") == []
    assert [event.title for event in filter_events(events, "w install")] == ["Window install"]


def test_lowercase_match_does_not_fold_sharp_s(make_event):
    event = make_event(datetime(2026, 10, 19, 9), datetime(2026, 10, 19, 10), title="Straße repair")
    assert filter_events([event], "strasse") == []
    assert filter_events([event], "STRASSE") == []
    assert filter_events([event], "straße") == [event]
