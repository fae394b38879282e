"""Shared fixtures for the scheduling tests.

Reference week: Mon 2024-01-01 through Sun 2024-01-07.
The following week starts Mon 2024-01-08.
"""

from __future__ import annotations

import pytest

from apps.scheduling.services import ShiftPayload, ShiftService, WeekService

WEEK_START = "2024-01-01"
NEXT_WEEK_START = "2024-01-08"


@pytest.fixture
def shift_service() -> ShiftService:
    return ShiftService()


@pytest.fixture
def week_service() -> WeekService:
    return WeekService()


@pytest.fixture
def make_shift(shift_service):
    """Creates a shift through the service and returns its public view."""

    def _make(
        name: str = "Shift",
        date: str = WEEK_START,
        start_time: str = "09:00",
        end_time: str = "17:00",
        ignore_clash: bool = False,
    ) -> dict:
        return shift_service.create(
            ShiftPayload(
                name=name,
                date=date,
                start_time=start_time,
                end_time=end_time,
                ignore_clash=ignore_clash,
            )
        )

    return _make
