"""
=============================================================================
WEEK PUBLICATION
=============================================================================

Week lookup and the one-way publish transition.

- get_by_start_date() never creates a row: an untouched week is reported
  as an unsaved, unpublished view over its computed bounds.
- publish() creates the week row if needed. Then, inside one transaction,
  it locks the row, checks it is unpublished and non-empty, and flips it.
  Shifts read their publication state through the week, so nothing is
  cascaded to shift rows.

There is no unpublish.

=============================================================================
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from django.db import transaction
from django.utils import timezone

from ..exceptions import AlreadyPublished, EmptyWeek, InternalError
from ..intervals import week_bounds
from ..payloads import unsaved_week_payload, week_payload
from ..repositories import ShiftRepository, WeekRepository

logger = logging.getLogger(__name__)


class WeekService:
    def __init__(self, weeks: WeekRepository | None = None, shifts: ShiftRepository | None = None) -> None:
        self.weeks = weeks or WeekRepository()
        self.shifts = shifts or ShiftRepository()

    def get_by_start_date(self, week_start_date: date | str) -> dict[str, Any]:
        bounds = week_bounds(week_start_date)
        week = self.weeks.find_one(start_date=bounds.start)
        if week is None:
            return unsaved_week_payload(bounds)
        return week_payload(week)

    def publish(self, week_start_date: date | str) -> dict[str, Any]:
        """
        Publishes the week containing week_start_date.

        Raises:
            AlreadyPublished if the week was published before
            EmptyWeek if no shift is dated inside the week
        """
        bounds = week_bounds(week_start_date)
        # A publish request touches the week, so its row stays even when the
        # publish is refused.
        self.weeks.get_or_create(bounds)

        with transaction.atomic():
            week = self.weeks.get_or_create(bounds, for_update=True)
            if week.is_published:
                raise AlreadyPublished("Week is already published")
            if not self.shifts.exists(date_range=tuple(bounds)):
                raise EmptyWeek("Cannot publish an empty week")

            published = self.weeks.update_by_id(week.pk, is_published=True, published_at=timezone.now())
            if published is None:
                raise InternalError("Unable to load published week")

        logger.info("Published week %s..%s", bounds.start.isoformat(), bounds.end.isoformat())
        return week_payload(published)
