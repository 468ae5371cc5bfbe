"""Shared fixtures: in-memory stand-in for the event store."""

from __future__ import annotations

from datetime import datetime

import pytest

from weekly_slots.events import Event, EventKind


class FakeEventStore:
    """Holds events in a list and answers fetch_events_up_to like the real store."""

    def __init__(self) -> None:
        self.events: list[Event] = []
        self.fetches: list[datetime] = []

    def add(self, kind: str, starts_at: str, ends_at: str, weekly_recurring: bool = False) -> Event:
        event = Event(
            kind=EventKind(kind),
            starts_at=datetime.fromisoformat(starts_at),
            ends_at=datetime.fromisoformat(ends_at),
            weekly_recurring=weekly_recurring,
        )
        self.events.append(event)
        return event

    def replace(self, old: Event, new: Event) -> None:
        self.events[self.events.index(old)] = new

    def __call__(self, until: datetime) -> list[Event]:
        self.fetches.append(until)
        return [e for e in self.events if e.starts_at <= until]


@pytest.fixture
def event_store() -> FakeEventStore:
    return FakeEventStore()


@pytest.fixture
def seeded_store(event_store: FakeEventStore) -> FakeEventStore:
    """Weekly opening on Mondays 9:30-12:30 from 2014-08-04, one booking on 2014-08-11 10:30-11:30."""
    event_store.add("opening", "2014-08-04 09:30", "2014-08-04 12:30", weekly_recurring=True)
    event_store.add("appointment", "2014-08-11 10:30", "2014-08-11 11:30")
    return event_store
