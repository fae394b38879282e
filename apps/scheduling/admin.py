"""
=============================================================================
SCHEDULING ADMIN CONFIGURATION
=============================================================================

Django admin registration for scheduling models.

Provides admin interface for:
- Week: publishing state per Monday-Sunday period
- Shift: individual scheduled shifts

Publication is read-only here; weeks are published through the API so the
empty-week and already-published rules always apply.
=============================================================================
"""
from django.contrib import admin

from .models import Shift, Week


@admin.register(Week)
class WeekAdmin(admin.ModelAdmin):
    """Admin for Week model; publication fields are read-only."""
    list_display = ("start_date", "end_date", "is_published", "published_at")
    list_filter = ("is_published",)
    readonly_fields = ("is_published", "published_at", "created_at", "updated_at")


@admin.register(Shift)
class ShiftAdmin(admin.ModelAdmin):
    """
    Admin for Shift model.

    Useful for debugging and bulk data inspection.
    Shows key fields and allows filtering by week and date.
    """
    list_display = ("name", "date", "start_time", "end_time", "week")
    list_filter = ("date",)
    search_fields = ("name",)
    list_select_related = ("week",)
