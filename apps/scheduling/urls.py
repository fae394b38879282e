"""
=============================================================================
SCHEDULING URL CONFIGURATION
=============================================================================

URL routing for the scheduling JSON API (mounted under /api/v1/).

Organization by prefix:
- /shifts/                          → list, create (bulk delete rejected)
- /shifts/<id>/                     → get, update, delete one shift
- /weeks/<weekStartDate>/           → week publishing metadata
- /weeks/<weekStartDate>/publish/   → publish the week

Naming conventions:
- shift_* for shift endpoints
- week_* for week endpoints
=============================================================================
"""
from django.urls import path

from . import views


urlpatterns = [
    # -------------------------------------------------------------------------
    # SHIFTS
    # -------------------------------------------------------------------------
    path("shifts/", views.shifts_collection, name="shift_list"),
    path("shifts/<uuid:shift_id>/", views.shift_detail, name="shift_detail"),

    # -------------------------------------------------------------------------
    # WEEKS
    # -------------------------------------------------------------------------
    path("weeks/<str:week_start_date>/", views.week_detail, name="week_detail"),
    path("weeks/<str:week_start_date>/publish/", views.publish_week, name="week_publish"),
]
