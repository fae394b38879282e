"""
=============================================================================
SCHEDULING SERVICES (Business Logic Layer)
=============================================================================

Core scheduling logic, kept out of the views so it stays reusable and
testable:

├── conflicts.py - clash search between shift intervals
├── shifts.py    - ShiftService: create/update/delete/list/get
├── weeks.py     - WeekService: week lookup and publish

Services receive their repositories through the constructor; with no
arguments they use the ORM-backed ones.

All business-rule failures raise apps.scheduling.exceptions errors.

=============================================================================
"""
from .conflicts import clash_window, find_clash, intervals_overlap
from .shifts import ShiftPayload, ShiftService
from .weeks import WeekService

__all__ = [
    "clash_window",
    "find_clash",
    "intervals_overlap",
    "ShiftPayload",
    "ShiftService",
    "WeekService",
]
