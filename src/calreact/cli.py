from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from typing import Optional, Sequence

import orjson

from .api import serialize_columns, serialize_event, serialize_month_cells
from .bootstrap import configure_logging
from .domain import ViewMode
from .render import render_month, render_timed
from .services import CalendarController, MonthLayout, NotificationLog, ServiceContext

logger = logging.getLogger(__name__)


def _iso_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calreact", description="CalReact calendar console.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser("show", help="Render the month, week or day layout.")
    show_parser.add_argument("--view", choices=[mode.value for mode in ViewMode])
    show_parser.add_argument("--date", type=_iso_day, help="Anchor date (YYYY-MM-DD); defaults to today.")
    show_parser.add_argument("--filter", default="", help="Only show events whose title or description contains TEXT.")
    show_parser.add_argument("--week-start", choices=["sunday", "monday"])
    show_parser.add_argument("--json", action="store_true", help="Emit the layout as JSON.")

    add_parser = subparsers.add_parser("add", help="Create an event.")
    add_parser.add_argument("--title", required=True)
    add_parser.add_argument("--start", required=True, help="ISO date or datetime.")
    add_parser.add_argument("--end", required=True, help="ISO date or datetime.")
    add_parser.add_argument("--description", default="")
    add_parser.add_argument("--color")

    move_parser = subparsers.add_parser("move", help="Move an event to another day.")
    move_parser.add_argument("event_id")
    move_parser.add_argument("day", help="Target day (YYYY-MM-DD).")

    resize_parser = subparsers.add_parser("resize", help="Resize an event; the range snaps to whole days.")
    resize_parser.add_argument("event_id")
    resize_parser.add_argument("start")
    resize_parser.add_argument("end")

    delete_parser = subparsers.add_parser("delete", help="Delete an event.")
    delete_parser.add_argument("event_id")

    return parser


def _print_notifications(log: NotificationLog) -> None:
    for entry in log.entries:
        stream = sys.stderr if entry.is_error else sys.stdout
        print(f"{entry.title}: {entry.description}", file=stream)


def _show(controller: CalendarController, args: argparse.Namespace) -> None:
    if args.week_start:
        controller.set_week_start(args.week_start)
    if args.view:
        controller.switch_view(args.view)
    if args.date:
        controller.go_to(args.date)
    controller.set_filter(args.filter)

    layout = controller.layout()
    if args.json:
        if isinstance(layout, MonthLayout):
            payload = {"title": layout.title, "view": "month", "cells": serialize_month_cells(layout.cells)}
        else:
            payload = {
                "title": layout.title,
                "view": controller.state.view_mode.value,
                "slots": [slot.label for slot in layout.slots],
                "columns": serialize_columns(layout.columns),
            }
        sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")
    elif isinstance(layout, MonthLayout):
        print(render_month(layout))
    else:
        print(render_timed(layout))


async def run(args: argparse.Namespace, context: Optional[ServiceContext] = None) -> int:
    context = context or ServiceContext()
    log = NotificationLog()
    controller = CalendarController(context.events, context.owner_id, context.settings.calendar, notifier=log)
    if not await controller.load():
        _print_notifications(log)
        return 1

    if args.command == "show":
        _show(controller, args)
    elif args.command == "add":
        created = await controller.save_event(
            {
                "title": args.title,
                "start": args.start,
                "end": args.end,
                "description": args.description,
                "color": args.color,
            }
        )
        if created is not None:
            print(orjson.dumps(serialize_event(created)).decode())
    elif args.command == "move":
        await controller.move_event(args.event_id, args.day)
    elif args.command == "resize":
        await controller.resize_event(args.event_id, args.start, args.end)
    elif args.command == "delete":
        await controller.delete_event(args.event_id)

    _print_notifications(log)
    return 1 if log.has_errors else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("CalReact CLI running %s", args.command)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
