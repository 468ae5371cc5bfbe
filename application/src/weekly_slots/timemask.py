"""Slot masks: a day's 30-minute slots packed into one 48-bit integer.

Bit 47 is the 00:00 slot and bit 0 is the 23:30 slot, so reading a mask's
binary form left to right walks the day forward in time. Leading zero bits
are elided by Python's int, but every mask is read against the fixed
48-slot width, never against its own bit_length().
"""

from __future__ import annotations

from datetime import datetime, time, timedelta

SLOT_MINUTES = 30
SLOT_LENGTH = timedelta(minutes=SLOT_MINUTES)
SLOTS_PER_DAY = 48
FULL_DAY_MASK = (1 << SLOTS_PER_DAY) - 1


def slot_label(index: int) -> str:
    """'H:MM' label for a slot index (no leading zero on the hour)."""
    minutes = index * SLOT_MINUTES
    return f"{minutes // 60}:{minutes % 60:02d}"


def encode(starts_at: datetime, ends_at: datetime) -> int:
    """
    Mask for the half-open interval [starts_at, ends_at) within one day.

    The result is a run of one-bits (one per slot) shifted left by the number
    of slots between ends_at and midnight. Its bit_length() is therefore the
    distance from starts_at to midnight, in slots: 09:30-12:30 gives
    0b111111 followed by 23 zeros, 29 bits long.

    Both ends are expected on slot boundaries; that is not checked here.
    """
    midnight = datetime.combine(starts_at.date(), time.min, tzinfo=starts_at.tzinfo)
    slot_count = (ends_at - starts_at) // SLOT_LENGTH
    # Measured against starts_at's own day so an interval ending at 24:00 has no trailing slots.
    offset = SLOTS_PER_DAY - (ends_at - midnight) // SLOT_LENGTH
    return ((1 << slot_count) - 1) << offset


def slot_indexes(mask: int) -> list[int]:
    """Set slot indexes of a mask in ascending time order."""
    if mask == 0:
        return []
    mask &= FULL_DAY_MASK
    return [i for i in range(SLOTS_PER_DAY) if mask >> (SLOTS_PER_DAY - 1 - i) & 1]


def decode(mask: int) -> list[str]:
    """
    Slot labels for every set bit, earliest first.

    0b11001100000000000000000000000 -> ["9:30", "10:00", "11:30", "12:00"]
    """
    return [slot_label(i) for i in slot_indexes(mask)]
