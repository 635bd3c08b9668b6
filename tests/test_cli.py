from datetime import datetime

import orjson
import pytest

from calreact.cli import build_parser, run
from calreact.services import ServiceContext


@pytest.fixture
def context(app_settings):
    instance = ServiceContext(settings=app_settings)
    instance.store.create(
        "owner-1",
        {"title": "Install", "start": datetime(2026, 10, 5, 14), "end": datetime(2026, 10, 5, 16)},
    )
    return instance


async def _run(context, *argv):
    return await run(build_parser().parse_args(list(argv)), context)


async def test_show_month_as_json(context, capsys):
    status = await _run(context, "show", "--view", "month", "--date", "2026-10-01", "--json")

    payload = orjson.loads(capsys.readouterr().out)
    assert status == 0
    assert payload["title"] == "October 2026"
    cell = next(cell for cell in payload["cells"] if cell["date"] == "2026-10-05")
    assert [event["title"] for event in cell["shown"]] == ["Install"]


async def test_show_week_as_text(context, capsys):
    status = await _run(context, "show", "--view", "week", "--date", "2026-10-05", "--week-start", "monday")

    out = capsys.readouterr().out
    assert status == 0
    assert "Oct 5 - Oct 11, 2026" in out
    assert "Install" in out


async def test_move_persists_to_the_local_store(context, capsys):
    status = await _run(context, "move", "event_0001", "2026-10-12")

    assert status == 0
    [event] = context.store.list("owner-1")
    assert event.start == datetime(2026, 10, 12, 14)
    assert "Event updated" in capsys.readouterr().out


async def test_failed_gesture_exits_non_zero(context, capsys):
    status = await _run(context, "move", "event_0042", "2026-10-12")

    assert status == 1
    assert "not loaded" in capsys.readouterr().err


async def test_add_and_delete(context, capsys):
    assert await _run(context, "add", "--title", "Visit", "--start", "2026-10-21T09:00:00", "--end", "2026-10-21T10:00:00") == 0
    created = orjson.loads(capsys.readouterr().out.splitlines()[0])
    assert created["start"] == "2026-10-21T00:00:00.000"

    assert await _run(context, "delete", created["id"]) == 0
    assert [event.title for event in context.store.list("owner-1")] == ["Install"]
