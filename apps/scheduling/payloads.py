"""
Public (JSON-ready) views of Week and Shift.

Shifts have no publication state of their own: isPublished/publishedAt are
read through the owning week so the Week row is the single source of truth.
"""
from __future__ import annotations

from typing import Any

from .intervals import WeekBounds, format_time
from .models import Shift, Week


def week_payload(week: Week) -> dict[str, Any]:
    return {
        "id": str(week.id),
        "startDate": week.start_date.isoformat(),
        "endDate": week.end_date.isoformat(),
        "isPublished": week.is_published,
        "publishedAt": week.published_at,
    }


def unsaved_week_payload(bounds: WeekBounds) -> dict[str, Any]:
    """View of a week that has never been touched (no row exists)."""
    return {
        "id": None,
        "startDate": bounds.start.isoformat(),
        "endDate": bounds.end.isoformat(),
        "isPublished": False,
        "publishedAt": None,
    }


def shift_payload(shift: Shift) -> dict[str, Any]:
    week = shift.week
    return {
        "id": str(shift.id),
        "name": shift.name,
        "date": shift.date.isoformat(),
        "startTime": format_time(shift.start_time),
        "endTime": format_time(shift.end_time),
        "isPublished": week.is_published if week else False,
        "publishedAt": week.published_at if week else None,
        "week": week_payload(week) if week else None,
    }
