"""View controller: view state, gesture handling and store synchronization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from ..api import EventDraft
from ..config import CalendarSettings
from ..data import AsyncEventStore, EventCollection
from ..domain import CalendarEvent, ViewMode, ViewState, WeekStart
from ..engine import (
    InvalidTargetError,
    MonthCell,
    TimedColumn,
    TimeSlot,
    Week,
    build_month_grid,
    build_time_slots,
    build_week_days,
    filter_events,
    next_period,
    period_title,
    place_for_month,
    place_for_week,
    previous_period,
    reschedule,
    resize,
    resolve_target_day,
)
from ..engine import today as today_state
from ..engine.dates import end_of_day, start_of_day
from ..engine.grid import CalendarDay
from .notifications import Notification, NotificationVariant, Notifier, log_notifier

logger = logging.getLogger(__name__)


class EventBusyError(RuntimeError):
    """Raised when a gesture targets an event whose previous write is still pending."""


@dataclass(frozen=True, slots=True)
class MonthLayout:
    title: str
    weeks: List[Week]
    cells: Dict[date, MonthCell]


@dataclass(frozen=True, slots=True)
class TimedLayout:
    title: str
    slots: List[TimeSlot]
    columns: List[TimedColumn]
    start_hour: int
    interval_minutes: int


Layout = Union[MonthLayout, TimedLayout]


def _failure(title: str, description: str) -> Notification:
    return Notification(title=title, description=description, variant=NotificationVariant.DESTRUCTIVE)


class CalendarController:
    """Owns the event collection and view state for one interactive session.

    Writes are never applied optimistically: the collection changes only
    after the store confirms, so a failed write leaves the layout as it was.
    """

    def __init__(
        self,
        store: AsyncEventStore,
        owner_id: str,
        settings: CalendarSettings,
        *,
        state: Optional[ViewState] = None,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.owner_id = owner_id
        self.settings = settings
        self.clock = clock
        self.state = state or ViewState(
            anchor_date=clock(),
            view_mode=settings.default_view,
            week_start=settings.week_start,
        )
        self.notify: Notifier = notifier or log_notifier
        self.events = EventCollection()
        self._pending: set[str] = set()

    # -- loading -------------------------------------------------------

    async def load(self) -> bool:
        try:
            events = await self.store.list(self.owner_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Failed to load events for %s", self.owner_id)
            self.events.clear()
            self.notify(_failure("Error", f"Could not load events: {exc}"))
            return False
        self.events.hydrate(events)
        logger.info("Loaded %d events for %s", len(self.events), self.owner_id)
        return True

    # -- view state ----------------------------------------------------

    def go_previous(self) -> ViewState:
        self.state = previous_period(self.state)
        return self.state

    def go_next(self) -> ViewState:
        self.state = next_period(self.state)
        return self.state

    def go_today(self) -> ViewState:
        self.state = today_state(self.state, self.clock())
        return self.state

    def go_to(self, anchor: Any) -> ViewState:
        self.state = self.state.with_anchor(resolve_target_day(anchor))
        return self.state

    def switch_view(self, view_mode: Union[ViewMode, str]) -> ViewState:
        self.state = self.state.with_view(ViewMode(view_mode))
        return self.state

    def set_filter(self, term: str) -> ViewState:
        self.state = self.state.with_filter(term)
        return self.state

    def set_week_start(self, week_start: Union[WeekStart, str, int]) -> ViewState:
        self.state = self.state.with_week_start(WeekStart.parse(week_start))
        return self.state

    # -- layout --------------------------------------------------------

    def visible_events(self) -> List[CalendarEvent]:
        return filter_events(self.events, self.state.filter_term)

    def events_on(self, day: Any) -> List[CalendarEvent]:
        target = resolve_target_day(day)
        matching = filter_events(self.events.events_for_day(target), self.state.filter_term)
        return sorted(matching, key=lambda event: event.start)

    def layout(self) -> Layout:
        if self.state.view_mode is ViewMode.MONTH:
            return self.month_layout()
        if self.state.view_mode is ViewMode.WEEK:
            return self.week_layout()
        return self.day_layout()

    def month_layout(self) -> MonthLayout:
        weeks = build_month_grid(self.state.anchor_date, self.state.week_start, today=self.clock())
        cells = place_for_month(self.visible_events(), weeks, self.settings.max_events_per_cell)
        return MonthLayout(title=period_title(self.state.with_view(ViewMode.MONTH)), weeks=weeks, cells=cells)

    def week_layout(self) -> TimedLayout:
        days = build_week_days(self.state.anchor_date, self.state.week_start, today=self.clock())
        return self._timed_layout(days, period_title(self.state.with_view(ViewMode.WEEK)))

    def day_layout(self) -> TimedLayout:
        anchor = self.state.anchor_date
        days = [CalendarDay(date=anchor, in_month=True, is_today=anchor == self.clock())]
        return self._timed_layout(days, period_title(self.state.with_view(ViewMode.DAY)))

    def _timed_layout(self, days: List[CalendarDay], title: str) -> TimedLayout:
        start_hour = self.settings.start_hour
        interval = self.settings.slot_interval_minutes
        return TimedLayout(
            title=title,
            slots=build_time_slots(start_hour, self.settings.end_hour, interval),
            columns=place_for_week(self.visible_events(), days, start_hour, interval),
            start_hour=start_hour,
            interval_minutes=interval,
        )

    # -- gestures ------------------------------------------------------

    def is_pending(self, event_id: str) -> bool:
        return event_id in self._pending

    def _claim(self, event_id: str) -> None:
        if event_id in self._pending:
            raise EventBusyError(f"Event {event_id} has a pending change.")
        self._pending.add(event_id)

    async def move_event(self, event_id: str, target_day: Any) -> Optional[CalendarEvent]:
        """Drag-to-move: reschedule ``event_id`` onto ``target_day`` and persist it."""

        event = self.events.get(event_id)
        if event is None:
            self.notify(_failure("Error updating", f"Event {event_id} is not loaded."))
            return None
        try:
            new_range = reschedule(event, target_day)
        except InvalidTargetError as exc:
            logger.warning("Rejected move of %s: %s", event_id, exc)
            self.notify(_failure("Error updating", str(exc)))
            return None
        updated = await self._write(
            event_id,
            {"start": new_range.start, "end": new_range.end},
            failure_title="Error updating",
            failure_description="Could not change the event's date.",
        )
        if updated is not None:
            self.notify(Notification("Event updated", f"Moved to {updated.start.date().isoformat()}."))
        return updated

    async def resize_event(self, event_id: str, new_start: Any, new_end: Any) -> Optional[CalendarEvent]:
        """Resize: snap the new range to whole days and persist it."""

        if event_id not in self.events:
            self.notify(_failure("Error resizing", f"Event {event_id} is not loaded."))
            return None
        try:
            new_range = resize(new_start, new_end)
        except InvalidTargetError as exc:
            logger.warning("Rejected resize of %s: %s", event_id, exc)
            self.notify(_failure("Error resizing", str(exc)))
            return None
        updated = await self._write(
            event_id,
            {"start": new_range.start, "end": new_range.end},
            failure_title="Error resizing",
            failure_description="Could not update the event's duration.",
        )
        if updated is not None:
            self.notify(Notification("Event resized", "The event's duration has been updated."))
        return updated

    async def _write(
        self,
        event_id: str,
        patch: Dict[str, Any],
        *,
        failure_title: str,
        failure_description: str,
    ) -> Optional[CalendarEvent]:
        try:
            self._claim(event_id)
        except EventBusyError as exc:
            logger.warning("%s", exc)
            self.notify(_failure(failure_title, str(exc)))
            return None
        try:
            updated = await self.store.update(self.owner_id, event_id, patch)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to update event %s", event_id)
            self.notify(_failure(failure_title, failure_description))
            return None
        finally:
            self._pending.discard(event_id)
        self.events.upsert(updated)
        return updated

    # -- edit dialog ---------------------------------------------------

    async def save_event(self, draft: Union[EventDraft, Mapping[str, Any]]) -> Optional[CalendarEvent]:
        """Create or update from an edit-dialog payload, snapping it to whole days."""

        try:
            payload = draft if isinstance(draft, EventDraft) else EventDraft.model_validate(dict(draft))
        except ValidationError as exc:
            logger.warning("Rejected event payload: %s", exc)
            self.notify(_failure("Error saving", "The event data is not valid."))
            return None

        fields = payload.event_fields()
        fields["start"] = start_of_day(payload.start)
        fields["end"] = end_of_day(payload.end)

        if payload.id is None:
            try:
                created = await self.store.create(self.owner_id, fields)
            except Exception:  # noqa: BLE001
                logger.exception("Failed to create event %r", payload.title)
                self.notify(_failure("Error saving", "Could not save the event."))
                return None
            self.events.upsert(created)
            self.notify(Notification("Event created", f'"{created.title}" has been added.'))
            return created

        if payload.id not in self.events:
            self.notify(_failure("Error saving", f"Event {payload.id} is not loaded."))
            return None
        updated = await self._write(
            payload.id,
            fields,
            failure_title="Error saving",
            failure_description="Could not save the event.",
        )
        if updated is not None:
            self.notify(Notification("Event updated", f'"{updated.title}" has been updated.'))
        return updated

    async def delete_event(self, event_id: str) -> bool:
        event = self.events.get(event_id)
        if event is None:
            self.notify(_failure("Error deleting", f"Event {event_id} is not loaded."))
            return False
        try:
            self._claim(event_id)
        except EventBusyError as exc:
            self.notify(_failure("Error deleting", str(exc)))
            return False
        try:
            await self.store.delete(self.owner_id, event_id)
        except Exception:  # noqa: BLE001
            logger.exception("Failed to delete event %s", event_id)
            self.notify(_failure("Error deleting", "Could not delete the event."))
            return False
        finally:
            self._pending.discard(event_id)
        self.events.remove(event_id)
        self.notify(Notification("Event deleted", f'"{event.title}" has been deleted.'))
        return True
