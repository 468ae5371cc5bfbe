"""Opening and appointment events, as read from the event store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping

from . import timemask


class EventKind(str, Enum):
    OPENING = "opening"
    APPOINTMENT = "appointment"


class MalformedEventError(ValueError):
    """A stored event is missing an attribute or has an unknown kind."""


def _to_datetime(value: datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class Event:
    """
    A window of availability (opening) or a booking (appointment).

    weekly_recurring only matters for openings: a recurring opening repeats
    on the same weekday and clock time every week, with no end date.
    Appointments never recur.
    """
    kind: EventKind
    starts_at: datetime
    ends_at: datetime
    weekly_recurring: bool = False

    @property
    def weekday_key(self) -> int:
        """Days since the start of the week (Monday = 0); the grouping key."""
        return self.starts_at.weekday()

    @property
    def calendar_date(self) -> date:
        return self.starts_at.date()

    @property
    def is_opening(self) -> bool:
        return self.kind == EventKind.OPENING

    @property
    def is_appointment(self) -> bool:
        return self.kind == EventKind.APPOINTMENT

    def applies_on(self, day: date) -> bool:
        """
        True if the event counts towards `day`: recurring openings always do
        (callers hand in the weekday bucket), anything else only on its own date.
        """
        if self.is_opening and self.weekly_recurring:
            return True
        return self.calendar_date == day

    def mask(self) -> int:
        return timemask.encode(self.starts_at, self.ends_at)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation, timestamps as ISO-8601 strings."""
        return {
            "kind": self.kind.value,
            "starts_at": self.starts_at.isoformat(),
            "ends_at": self.ends_at.isoformat(),
            "weekly_recurring": self.weekly_recurring,
            "weekday_key": self.weekday_key,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """
        Build an event from a mapping with kind, starts_at, ends_at and an
        optional weekly_recurring flag. A stored weekday_key is ignored; it is
        always derived from starts_at.
        """
        try:
            kind = EventKind(data["kind"])
            starts_at = _to_datetime(data["starts_at"])
            ends_at = _to_datetime(data["ends_at"])
        except KeyError as e:
            raise MalformedEventError(f"Event is missing attribute {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise MalformedEventError(f"Invalid event {dict(data)!r}: {e}") from e
        weekly_recurring = data.get("weekly_recurring")
        if weekly_recurring is None:
            weekly_recurring = False
        elif not isinstance(weekly_recurring, bool):
            raise MalformedEventError(f"weekly_recurring must be a boolean, got {weekly_recurring!r}")
        return cls(
            kind=kind,
            starts_at=starts_at,
            ends_at=ends_at,
            weekly_recurring=weekly_recurring,
        )
