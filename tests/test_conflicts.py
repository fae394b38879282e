"""Tests for clash search against stored shifts."""

from __future__ import annotations

from datetime import date, time

import pytest

from apps.scheduling.intervals import week_bounds
from apps.scheduling.models import Shift
from apps.scheduling.repositories import ShiftRepository, WeekRepository
from apps.scheduling.services.conflicts import clash_window, find_clash

pytestmark = pytest.mark.django_db


def _store(name, day, start, end):
    week = WeekRepository().get_or_create(week_bounds(day))
    return Shift.objects.create(
        name=name,
        date=date.fromisoformat(day),
        start_time=time.fromisoformat(start),
        end_time=time.fromisoformat(end),
        week=week,
    )


def _candidate(day, start, end):
    return {"date": day, "start_time": start, "end_time": end}


def test_clash_window_is_one_day_each_side():
    assert clash_window("2024-01-01") == (date(2023, 12, 31), date(2024, 1, 2))


def test_finds_overlapping_shift():
    existing = _store("A", "2024-01-01", "09:00", "17:00")
    clash = find_clash(_candidate("2024-01-01", "16:00", "18:00"), shifts=ShiftRepository())
    assert clash == existing


def test_adjacent_shift_is_not_a_clash():
    _store("A", "2024-01-01", "09:00", "17:00")
    assert find_clash(_candidate("2024-01-01", "17:00", "18:00"), shifts=ShiftRepository()) is None


def test_overnight_shift_from_previous_day_clashes():
    night = _store("Night", "2024-01-01", "23:00", "02:00")
    clash = find_clash(_candidate("2024-01-02", "01:00", "03:00"), shifts=ShiftRepository())
    assert clash == night


def test_candidate_overnight_reaches_next_day_shift():
    morning = _store("Morning", "2024-01-02", "01:00", "03:00")
    clash = find_clash(_candidate("2024-01-01", "23:00", "02:00"), shifts=ShiftRepository())
    assert clash == morning


def test_excluded_shift_never_clashes_with_itself():
    existing = _store("A", "2024-01-01", "09:00", "17:00")
    candidate = _candidate("2024-01-01", "10:00", "12:00")
    assert find_clash(candidate, exclude_id=existing.pk, shifts=ShiftRepository()) is None
    assert find_clash(candidate, exclude_id=str(existing.pk), shifts=ShiftRepository()) is None


def test_shifts_outside_window_are_ignored():
    _store("Far", "2024-01-03", "09:00", "17:00")
    assert find_clash(_candidate("2024-01-01", "09:00", "17:00"), shifts=ShiftRepository()) is None


def test_returns_first_in_date_and_start_order():
    _store("Late", "2024-01-01", "12:00", "14:00")
    early = _store("Early", "2024-01-01", "08:00", "11:00")
    clash = find_clash(_candidate("2024-01-01", "07:00", "13:00"), shifts=ShiftRepository())
    assert clash == early
