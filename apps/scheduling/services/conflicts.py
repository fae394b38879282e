"""
=============================================================================
CONFLICT DETECTION
=============================================================================

Finds an existing shift whose interval overlaps a candidate shift.

Algorithm:
1. Compute the candidate's absolute interval (overnight aware)
2. Load every shift dated within one day either side of the candidate
   (an overnight shift from the previous day can reach into it)
3. Skip the excluded id (the shift being edited)
4. Return the first shift whose interval overlaps, in date/start order

Only step 2 touches storage, through the injected ShiftRepository.

=============================================================================
"""
from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any

from ..intervals import ShiftInterval, calculate_interval, parse_date
from ..models import Shift
from ..repositories import ShiftRepository

logger = logging.getLogger(__name__)

CLASH_WINDOW_DAYS = 1


def intervals_overlap(a: ShiftInterval, b: ShiftInterval) -> bool:
    """
    Checks if two shift intervals overlap.

    Intervals are half-open [start_at, end_at), so a shift ending at 17:00
    does not clash with one starting at 17:00:
        A_start < B_end AND B_start < A_end
    """
    return a.start_at < b.end_at and b.start_at < a.end_at


def clash_window(day: date | str) -> tuple[date, date]:
    """Returns the inclusive date range searched for clashes around day."""
    day = parse_date(day)
    delta = timedelta(days=CLASH_WINDOW_DAYS)
    return day - delta, day + delta


def _field(candidate: Any, name: str):
    if isinstance(candidate, dict):
        return candidate[name]
    return getattr(candidate, name)


def find_clash(candidate: Any, exclude_id=None, *, shifts: ShiftRepository) -> Shift | None:
    """
    Returns the first stored shift overlapping candidate, or None.

    Args:
        candidate: mapping or object with date, start_time and end_time
        exclude_id: id of a shift that never counts as a clash (edit in place)
        shifts: repository used to load the search window

    Raises InvalidInput / InvalidDuration if the candidate itself is malformed.
    """
    day = _field(candidate, "date")
    interval = calculate_interval(day, _field(candidate, "start_time"), _field(candidate, "end_time"))

    for existing in shifts.find(date_range=clash_window(day)):
        if exclude_id is not None and str(existing.pk) == str(exclude_id):
            continue
        other = calculate_interval(existing.date, existing.start_time, existing.end_time)
        if intervals_overlap(interval, other):
            logger.debug("Candidate on %s clashes with shift %s", day, existing.pk)
            return existing
    return None
