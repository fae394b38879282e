"""
=============================================================================
SCHEDULING VIEWS - MODULAR STRUCTURE
=============================================================================

This package contains all HTTP view functions for the scheduling app,
organized into logical modules:

├── __init__.py - This file (exports all public views)
├── helpers.py  - Private helpers (JSON parsing, response envelopes, errors)
├── shifts.py   - Shift CRUD endpoints
├── weeks.py    - Week lookup and publish endpoints

Import Pattern:
    from apps.scheduling.views import shifts_collection, publish_week, ...

=============================================================================
"""

# Shift views
from .shifts import shift_detail, shifts_collection

# Week views
from .weeks import publish_week, week_detail

__all__ = [
    # Shifts
    "shifts_collection",
    "shift_detail",
    # Weeks
    "week_detail",
    "publish_week",
]
