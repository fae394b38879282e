"""
=============================================================================
SCHEDULING MODELS
=============================================================================

Core data models for the weekly shift scheduling system:

1. Week - A Monday-Sunday period with a one-way publish flag
2. Shift - A named work interval (date + start/end time) owned by a Week

Key patterns used:
- UUID primary keys for both models
- Unique start_date per Week so lazy creation is idempotent
- Publication state lives on Week only; Shift exposes it read-through
- Custom QuerySet helpers for date-range filtering

=============================================================================
"""
from __future__ import annotations

import uuid
from datetime import date

from django.db import models


# =============================================================================
# WEEK MODEL
# =============================================================================

class Week(models.Model):
    """
    A calendar week, identified by its Monday.

    Weeks are created lazily the first time a shift (or a publish request)
    touches their date range. The only mutation after creation is the
    publish transition:
    - is_published flips False -> True exactly once
    - published_at is set at the same moment and never changed again

    There is no unpublish and no delete path.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    start_date = models.DateField(unique=True)  # Always a Monday
    end_date = models.DateField()  # start_date + 6 days

    is_published = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date"]

    def __str__(self) -> str:
        return f"Week {self.start_date.isoformat()}"


# =============================================================================
# SHIFT MODEL
# =============================================================================

class ShiftQuerySet(models.QuerySet):
    """
    QuerySet helpers for shift lookups.

    Usage:
        Shift.objects.between(start, end)  # date within [start, end]
    """
    def between(self, start: date, end: date):
        """Returns shifts whose date falls within [start, end] inclusive."""
        return self.filter(date__gte=start, date__lte=end)


class Shift(models.Model):
    """
    Represents a single scheduled work shift.

    A shift defines:
    - What: name
    - When: date + start_time/end_time (minute precision)
    - Where it belongs: week (derived from date, never chosen)

    An end_time at or before start_time means the shift runs past
    midnight into the next day.

    Publication:
    - is_published / published_at are read from the owning week
    - Once the week is published the shift is locked
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    # Schedule fields
    date = models.DateField(db_index=True)
    start_time = models.TimeField()
    end_time = models.TimeField()

    week = models.ForeignKey(
        Week,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="shifts",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ShiftQuerySet.as_manager()

    class Meta:
        ordering = ["date", "start_time"]  # Chronological by default

    def __str__(self) -> str:
        return f"{self.name} {self.date.isoformat()} {self.start_time:%H:%M}-{self.end_time:%H:%M}"

    @property
    def is_published(self) -> bool:
        return bool(self.week and self.week.is_published)

    @property
    def published_at(self):
        return self.week.published_at if self.week else None
