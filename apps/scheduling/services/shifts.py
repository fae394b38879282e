"""
=============================================================================
SHIFT LIFECYCLE
=============================================================================

Create / update / delete / read operations for individual shifts.

Lifecycle of a shift:

    absent --create--> active --update*--> active --delete--> absent
                          |
                    week published
                          v
                       locked   (update/delete rejected forever)

Every mutation:
1. Validates the interval (InvalidInput / InvalidDuration)
2. Resolves the owning week from the date, creating it if needed
3. Refuses to touch a published week (WeekPublished)
4. Checks for clashes unless ignore_clash is set (ShiftClash)
5. Persists and re-reads the shift with its week

Mutations run inside transaction.atomic() with the week rows locked, so a
concurrent publish of the same week cannot interleave with them. Week rows
are created before the transaction opens, so a rejected shift still leaves
its week behind. When an update touches two weeks, both rows are locked in
start_date order.

=============================================================================
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Any

from django.db import transaction

from ..exceptions import (
    InternalError,
    InvalidInput,
    NotFound,
    ShiftClash,
    UnsupportedOperation,
    WeekPublished,
)
from ..intervals import WeekBounds, calculate_interval, parse_date, parse_time, week_bounds
from ..models import Shift, Week
from ..payloads import shift_payload
from ..repositories import ShiftRepository, WeekRepository
from .conflicts import find_clash

logger = logging.getLogger(__name__)

SHIFT_FIELDS = ("name", "date", "start_time", "end_time")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _bounds_of(week: Week | None) -> WeekBounds | None:
    if week is None:
        return None
    return WeekBounds(week.start_date, week.end_date)


@dataclass(frozen=True)
class ShiftPayload:
    """
    Validated shift input.

    For updates any field may be None, meaning "keep the current value".
    Times are HH:MM[:SS] strings; seconds are dropped when stored.
    """

    name: str | None = None
    date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    ignore_clash: bool = False

    def missing_fields(self) -> list[str]:
        return [f for f in SHIFT_FIELDS if _is_blank(getattr(self, f))]

    def merged_over(self, shift: Shift) -> dict[str, Any]:
        """Returns shift's fields with every provided payload field applied on top."""
        merged = {}
        for field in SHIFT_FIELDS:
            value = getattr(self, field)
            merged[field] = getattr(shift, field) if value is None else value
        return merged


def _stored_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Converts merged/raw fields into model values (times truncated to minutes)."""
    return {
        "name": fields["name"],
        "date": parse_date(fields["date"]),
        "start_time": parse_time(fields["start_time"]),
        "end_time": parse_time(fields["end_time"]),
    }


class ShiftService:
    """Orchestrates shift mutations against injected week/shift repositories."""

    def __init__(self, shifts: ShiftRepository | None = None, weeks: WeekRepository | None = None) -> None:
        self.shifts = shifts or ShiftRepository()
        self.weeks = weeks or WeekRepository()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list(self, week_start_date: date | str | None = None) -> list[dict[str, Any]]:
        """
        Returns shift views ordered by date then start time.
        With week_start_date, only shifts inside that (resolved) week.
        """
        date_range = None
        if week_start_date:
            date_range = tuple(week_bounds(week_start_date))
        return [shift_payload(s) for s in self.shifts.find(date_range=date_range)]

    def get(self, shift_id) -> dict[str, Any]:
        return shift_payload(self._get_existing(shift_id))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(self, payload: ShiftPayload) -> dict[str, Any]:
        missing = payload.missing_fields()
        if missing:
            raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

        calculate_interval(payload.date, payload.start_time, payload.end_time)
        bounds = week_bounds(payload.date)
        # The week row outlives a rejected shift.
        self.weeks.get_or_create(bounds)

        with transaction.atomic():
            week = self.weeks.get_or_create(bounds, for_update=True)
            if week.is_published:
                raise WeekPublished("Cannot create shift in a published week")

            fields = {f: getattr(payload, f) for f in SHIFT_FIELDS}
            self._check_clash(fields, ignore_clash=payload.ignore_clash)

            created = self.shifts.create(week=week, **_stored_fields(fields))
            shift = self.shifts.find_by_id(created.pk)
            if shift is None:
                raise InternalError("Unable to load created shift")

        logger.info("Created shift %s on %s in week %s", shift.pk, shift.date, week.start_date)
        return shift_payload(shift)

    def update(self, shift_id, payload: ShiftPayload) -> dict[str, Any]:
        existing = self._get_existing(shift_id)
        if existing.week is not None and existing.week.is_published:
            raise WeekPublished("Cannot edit a published shift")

        merged = payload.merged_over(existing)
        blank = [f for f in SHIFT_FIELDS if _is_blank(merged[f])]
        if blank:
            raise InvalidInput(f"Fields may not be blank: {', '.join(blank)}")
        calculate_interval(merged["date"], merged["start_time"], merged["end_time"])

        target_bounds = week_bounds(merged["date"])
        self.weeks.get_or_create(target_bounds)
        current_bounds = _bounds_of(existing.week)

        with transaction.atomic():
            locked = self._lock_weeks(target_bounds, current_bounds)
            if current_bounds is not None and locked[current_bounds.start].is_published:
                raise WeekPublished("Cannot edit a published shift")

            target_week = locked[target_bounds.start]
            if target_week.is_published:
                raise WeekPublished("Cannot move shift into a published week")

            self._check_clash(merged, ignore_clash=payload.ignore_clash, exclude_id=existing.pk)

            shift = self.shifts.update_by_id(existing.pk, week=target_week, **_stored_fields(merged))
            if shift is None:
                raise InternalError("Unable to load updated shift")

        logger.info("Updated shift %s", shift.pk)
        return shift_payload(shift)

    def delete(self, shift_id) -> None:
        if isinstance(shift_id, (list, tuple, set)):
            raise UnsupportedOperation("Bulk delete is not supported")

        with transaction.atomic():
            existing = self._get_existing(shift_id)
            locked = self._lock_weeks(_bounds_of(existing.week))
            if any(week.is_published for week in locked.values()):
                raise WeekPublished("Cannot delete a published shift")
            self.shifts.delete_by_id(existing.pk)

        logger.info("Deleted shift %s", existing.pk)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_existing(self, shift_id) -> Shift:
        try:
            pk = shift_id if isinstance(shift_id, uuid.UUID) else uuid.UUID(str(shift_id))
        except ValueError:
            raise NotFound("Shift not found")
        shift = self.shifts.find_by_id(pk)
        if shift is None:
            raise NotFound("Shift not found")
        return shift

    def _lock_weeks(self, *bounds: WeekBounds | None) -> dict[date, Week]:
        """
        Locks the week rows for bounds, keyed by start date.

        Rows are always locked in start_date order, so two requests moving
        shifts between the same pair of weeks cannot deadlock.
        """
        locked = {}
        for week_range in sorted({b for b in bounds if b is not None}):
            locked[week_range.start] = self.weeks.get_or_create(week_range, for_update=True)
        return locked

    def _check_clash(self, fields: dict[str, Any], *, ignore_clash: bool, exclude_id=None) -> None:
        clash = find_clash(fields, exclude_id, shifts=self.shifts)
        if clash is None:
            return
        if ignore_clash:
            logger.info("Ignoring clash with shift %s", clash.pk)
            return
        logger.warning("Shift on %s clashes with shift %s", fields["date"], clash.pk)
        raise ShiftClash(shift_payload(clash))


__all__ = ["ShiftPayload", "ShiftService"]
