"""Seven-day availability: one event fetch, grouped by weekday, resolved day by day."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable

from . import store, timemask
from .events import Event
from .resolver import resolve_day

logger = logging.getLogger(__name__)

DAYS_AHEAD = 7
AVAILABILITY_WINDOW = timedelta(days=DAYS_AHEAD)


@dataclass
class AvailabilityDay:
    """Free 30-minute slots ('H:MM' labels, earliest first) on one date."""
    date: date
    slots: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "slots": list(self.slots)}


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def window_upper_bound(start_date: date) -> datetime:
    """Inclusive fetch bound: the end of start_date plus the whole window."""
    return datetime.combine(start_date, time.max) + AVAILABILITY_WINDOW


def group_by_weekday(events: Iterable[Event]) -> dict[int, list[Event]]:
    groups: dict[int, list[Event]] = defaultdict(list)
    for event in events:
        groups[event.weekday_key].append(event)
    return dict(groups)


def availabilities(
    start_date: date | datetime | str,
    fetch_events: store.EventSource | None = None,
) -> list[AvailabilityDay]:
    """
    Free slots for the DAYS_AHEAD consecutive days starting at start_date.

    Events are read once for the whole window (recurring openings created
    earlier included) and bucketed by weekday, so every day is resolved
    against the same fetched events. Always returns DAYS_AHEAD records in date order; days with
    nothing open get an empty slot list.
    """
    start_date = _as_date(start_date)
    fetch_events = fetch_events or store.fetch_events_up_to
    until = window_upper_bound(start_date)
    grouped = group_by_weekday(fetch_events(until))
    logger.debug("Resolving %s..%s against %d weekday buckets", start_date, until.date(), len(grouped))

    start_key = start_date.weekday()
    days: list[AvailabilityDay] = []
    for day_index in range(DAYS_AHEAD):
        current_date = start_date + timedelta(days=day_index)
        bucket = grouped.get((start_key + day_index) % 7)
        slots = timemask.decode(resolve_day(current_date, bucket))
        logger.debug("%s: %d free slots", current_date, len(slots))
        days.append(AvailabilityDay(date=current_date, slots=slots))
    return days
