"""Resolve one calendar date's free slots from the events that may apply to it."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from .events import Event


def opening_events_for(day: date, events: Iterable[Event]) -> list[Event]:
    """Recurring openings plus openings on this exact date."""
    return [e for e in events if e.is_opening and e.applies_on(day)]


def appointment_events_for(day: date, events: Iterable[Event]) -> list[Event]:
    return [e for e in events if e.is_appointment and e.applies_on(day)]


def combine(events: Iterable[Event]) -> int:
    """OR every event's mask together; 0 when there are none."""
    mask = 0
    for event in events:
        mask |= event.mask()
    return mask


def resolve_day(day: date, events: Iterable[Event] | None) -> int:
    """
    Mask of the open, unbooked slots on `day`.

    `events` is the weekday bucket for `day` (or None when the bucket is
    empty). Without an applicable opening the day has no availability and
    appointments are not looked at.
    """
    events = list(events or [])
    openings = opening_events_for(day, events)
    if not openings:
        return 0
    opening_mask = combine(openings)
    appointment_mask = combine(appointment_events_for(day, events))
    # AND drops booked bits outside the openings, XOR then clears the booked ones.
    return (opening_mask & appointment_mask) ^ opening_mask
