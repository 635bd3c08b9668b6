"""Plain-text rendering of month and timed layouts for the console."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import List, Optional, Tuple

from ..engine.dates import minutes_between, start_of_day
from ..engine.placement import TimedPlacement
from ..services.calendar import MonthLayout, TimedLayout

CELL_WIDTH = 16


def _fit(text: str, width: int = CELL_WIDTH) -> str:
    if len(text) > width - 1:
        text = text[: width - 2] + "~"
    return text.ljust(width)


def render_month(layout: MonthLayout) -> str:
    lines: List[str] = [layout.title, ""]
    if not layout.weeks:
        return "\n".join(lines)
    lines.append("".join(_fit(day.date.strftime("%a")) for day in layout.weeks[0]))
    for week in layout.weeks:
        cells = [layout.cells[day.date] for day in week]
        header = []
        for day in week:
            label = str(day.date.day) if day.in_month else f"({day.date.day})"
            header.append(_fit(f"*{label}" if day.is_today else label))
        lines.append("".join(header))
        depth = max((len(cell.shown) for cell in cells), default=0)
        for index in range(depth):
            lines.append("".join(_fit(cell.shown[index].title if index < len(cell.shown) else "") for cell in cells))
        if any(cell.overflow for cell in cells):
            lines.append("".join(_fit(f"+{cell.overflow} more" if cell.overflow else "") for cell in cells))
        lines.append("-" * (CELL_WIDTH * len(week)))
    return "\n".join(lines)


def _visible_rows(placement: TimedPlacement, layout: TimedLayout, rows_per_slot: int) -> Optional[Tuple[float, float]]:
    """Clip a placement to the layout's hour range and return ``(top, height)`` in rows."""

    range_start = start_of_day(placement.day) + timedelta(hours=layout.start_hour)
    range_end = range_start + timedelta(minutes=len(layout.slots) * layout.interval_minutes)
    if placement.visible_end <= range_start or placement.visible_start >= range_end:
        return None
    clipped_start = max(placement.visible_start, range_start)
    clipped_end = min(placement.visible_end, range_end)
    top = minutes_between(range_start, clipped_start) * rows_per_slot / layout.interval_minutes
    height = minutes_between(clipped_start, clipped_end) * rows_per_slot / layout.interval_minutes
    return top, height


def render_timed(layout: TimedLayout, rows_per_slot: int = 1) -> str:
    lines = [layout.title, ""]
    lines.append(_fit("", 7) + "".join(_fit(column.day.date.strftime("%a %d")) for column in layout.columns))
    clipped = []
    for column in layout.columns:
        visible = []
        for placement in column.placements:
            rows = _visible_rows(placement, layout, rows_per_slot)
            if rows is not None:
                visible.append((placement, *rows))
        clipped.append(visible)
    for slot_index, slot in enumerate(layout.slots):
        for sub_row in range(rows_per_slot):
            row = slot_index * rows_per_slot + sub_row
            label = slot.label if sub_row == 0 else ""
            cells = []
            for column in clipped:
                text = ""
                for placement, top, height in column:
                    first_row = math.floor(top)
                    last_row = max(first_row, math.ceil(top + height) - 1)
                    if row == first_row:
                        text = placement.event.title
                        break
                    if first_row < row <= last_row:
                        text = "|"
                        break
                cells.append(_fit(text))
            lines.append(_fit(label, 7) + "".join(cells))
    return "\n".join(lines)
