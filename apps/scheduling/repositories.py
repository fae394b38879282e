"""
=============================================================================
SCHEDULING REPOSITORIES (Storage Adapters)
=============================================================================

Thin ORM-backed repositories consumed by the scheduling services.

The services never touch Week.objects / Shift.objects directly; they are
handed a WeekRepository and a ShiftRepository instead, so tests (or another
storage backend) can substitute their own.

WeekRepository:
- find_by_id(), find_one(), create(), update_by_id()
- get_or_create() - idempotent fetch-or-create keyed on start_date

ShiftRepository:
- find_by_id(), find(), create(), update_by_id(), update_where(), delete_by_id()

=============================================================================
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable

from django.db import IntegrityError, transaction
from django.utils import timezone

from .intervals import WeekBounds
from .models import Shift, Week

logger = logging.getLogger(__name__)

DEFAULT_SHIFT_ORDER = ("date", "start_time")


# =============================================================================
# WEEKS
# =============================================================================


class WeekRepository:
    def find_by_id(self, week_id) -> Week | None:
        logger.debug("Find week by id %s", week_id)
        return Week.objects.filter(pk=week_id).first()

    def find_one(self, *, for_update: bool = False, **filters: Any) -> Week | None:
        logger.debug("Find week by query %s", filters)
        qs = Week.objects.select_for_update() if for_update else Week.objects.all()
        return qs.filter(**filters).first()

    def create(self, **fields: Any) -> Week:
        logger.debug("Create week %s", fields)
        return Week.objects.create(**fields)

    def update_by_id(self, week_id, **fields: Any) -> Week | None:
        logger.debug("Update week %s", week_id)
        fields.setdefault("updated_at", timezone.now())
        Week.objects.filter(pk=week_id).update(**fields)
        return self.find_by_id(week_id)

    def get_or_create(self, bounds: WeekBounds, *, for_update: bool = False) -> Week:
        """
        Fetches the week starting on bounds.start, creating it if missing.

        Relies on the unique start_date: when a concurrent request creates
        the same week first, the insert fails with IntegrityError inside its
        own savepoint and the existing row is fetched instead.

        With for_update=True the row is locked for the rest of the caller's
        transaction.
        """
        week = self.find_one(start_date=bounds.start, for_update=for_update)
        if week is not None:
            return week
        try:
            with transaction.atomic():
                week = self.create(
                    start_date=bounds.start,
                    end_date=bounds.end,
                    is_published=False,
                    published_at=None,
                )
        except IntegrityError:
            logger.info("Week %s created concurrently, fetching it", bounds.start.isoformat())
            return self.find_one(start_date=bounds.start, for_update=for_update)
        logger.info("Created week %s..%s", bounds.start.isoformat(), bounds.end.isoformat())
        return week


# =============================================================================
# SHIFTS
# =============================================================================


class ShiftRepository:
    def find_by_id(self, shift_id, *, with_week: bool = True) -> Shift | None:
        logger.debug("Find shift by id %s", shift_id)
        qs = Shift.objects.select_related("week") if with_week else Shift.objects.all()
        return qs.filter(pk=shift_id).first()

    def find(
        self,
        *,
        date_range: tuple[date, date] | None = None,
        with_week: bool = True,
        order_by: Iterable[str] = DEFAULT_SHIFT_ORDER,
    ) -> list[Shift]:
        """Returns shifts, optionally restricted to date within date_range (inclusive)."""
        logger.debug("Find shifts in range %s", date_range)
        qs = Shift.objects.all()
        if with_week:
            qs = qs.select_related("week")
        if date_range is not None:
            qs = qs.between(*date_range)
        return list(qs.order_by(*order_by))

    def exists(self, *, date_range: tuple[date, date]) -> bool:
        return Shift.objects.between(*date_range).exists()

    def create(self, **fields: Any) -> Shift:
        logger.debug("Create shift %s", fields)
        return Shift.objects.create(**fields)

    def update_where(self, filters: dict[str, Any], **fields: Any) -> int:
        logger.debug("Update shifts where %s", filters)
        fields.setdefault("updated_at", timezone.now())
        return Shift.objects.filter(**filters).update(**fields)

    def update_by_id(self, shift_id, **fields: Any) -> Shift | None:
        self.update_where({"pk": shift_id}, **fields)
        return self.find_by_id(shift_id)

    def delete_by_id(self, shift_id) -> int:
        logger.debug("Delete shift %s", shift_id)
        deleted, _ = Shift.objects.filter(pk=shift_id).delete()
        return deleted
