"""
=============================================================================
SHIFT INTERVAL & WEEK ARITHMETIC
=============================================================================

Pure functions (no database, no I/O) that turn civil dates and times into
concrete intervals:

1. calculate_interval() - (date, start, end) -> absolute [start_at, end_at)
2. week_bounds()        - any date -> the Monday..Sunday week containing it

Overnight rule:
    An end time at or before the start time means the shift crosses
    midnight. The interval then ends on the following day:

        22:00 -> 06:00   day_offset=1, duration=480
        09:00 -> 17:00   day_offset=0, duration=480

All values are naive civil date/times; no timezone is ever attached.

=============================================================================
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import NamedTuple

from .exceptions import InvalidDuration, InvalidInput

MINUTES_IN_DAY = 24 * 60


@dataclass(frozen=True)
class ShiftInterval:
    """A concrete shift interval; end_at is exclusive."""

    start_at: datetime
    end_at: datetime
    duration_minutes: int
    day_offset: int


class WeekBounds(NamedTuple):
    """Monday (start) and Sunday (end) of a calendar week."""

    start: date
    end: date


# =============================================================================
# PARSING / NORMALIZATION
# =============================================================================


def parse_date(value: date | str | None) -> date:
    """
    Parses a civil date in YYYY-MM-DD format.
    Accepts an existing date unchanged. Raises InvalidInput otherwise.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = (value or "").strip() if isinstance(value, str) else ""
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInput("Invalid date value")


def normalize_time(value: time | str) -> str:
    """
    Normalizes a time to HH:MM.

    Hours and minutes are zero-padded; seconds are dropped (truncated, not
    rounded): "9:5:59" -> "09:05". A string without a colon is rejected.
    """
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if not isinstance(value, str) or ":" not in value:
        raise InvalidInput("Invalid time format")
    hours, minutes = value.strip().split(":")[:2]
    return f"{hours.zfill(2)}:{(minutes[:2] or '00').zfill(2)}"


def _minutes_since_midnight(value: str) -> int:
    hour_str, minute_str = value.split(":")
    try:
        hours = int(hour_str)
        minutes = int(minute_str)
    except ValueError:
        raise InvalidInput("Invalid time value")
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidInput("Invalid time value")
    return hours * 60 + minutes


def format_time(value: time | str) -> str:
    """Renders a time (or HH:MM[:SS] string) as HH:MM for responses."""
    return normalize_time(value)


def parse_time(value: time | str) -> time:
    """Parses HH:MM[:SS] into a minute-precision time object."""
    minutes = _minutes_since_midnight(normalize_time(value))
    return time(minutes // 60, minutes % 60)


# =============================================================================
# INTERVAL CALCULATOR
# =============================================================================


def calculate_interval(day: date | str, start_time: time | str, end_time: time | str) -> ShiftInterval:
    """
    Converts a shift's (date, start, end) triple into an absolute interval.

    Checks, in order:
    - both times parse (InvalidInput)
    - duration is within (0, 24h) (InvalidDuration)
    - the date parses (InvalidInput)

    Returns ShiftInterval with start_at anchored at midnight of `day`.
    """
    start_minutes = _minutes_since_midnight(normalize_time(start_time))
    end_minutes = _minutes_since_midnight(normalize_time(end_time))

    day_offset = 1 if end_minutes <= start_minutes else 0
    duration = end_minutes - start_minutes + day_offset * MINUTES_IN_DAY

    if duration <= 0:
        raise InvalidDuration("Shift duration must be greater than 0")
    if duration >= MINUTES_IN_DAY:
        raise InvalidDuration("Shift duration must be shorter than 24 hours")

    midnight = datetime.combine(parse_date(day), time.min)
    start_at = midnight + timedelta(minutes=start_minutes)
    return ShiftInterval(
        start_at=start_at,
        end_at=start_at + timedelta(minutes=duration),
        duration_minutes=duration,
        day_offset=day_offset,
    )


# =============================================================================
# WEEK RESOLVER
# =============================================================================


def week_bounds(anchor: date | str) -> WeekBounds:
    """
    Returns the (start, end) dates of the week containing anchor.
    Week starts on Monday (weekday() == 0) and ends on Sunday.
    """
    anchor = parse_date(anchor)
    start = anchor - timedelta(days=anchor.weekday())
    return WeekBounds(start, start + timedelta(days=6))
