"""
=============================================================================
WEEK VIEWS
=============================================================================

JSON endpoints for week publishing metadata:
- week_detail()  - GET the week containing weekStartDate
- publish_week() - POST publish that week (irreversible)

=============================================================================
"""
from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from ..forms import WeekStartForm
from ..services import WeekService
from .helpers import _form_error, _success, scheduling_endpoint


@require_http_methods(["GET"])
@scheduling_endpoint
def week_detail(request: HttpRequest, week_start_date: str) -> HttpResponse:
    """Week view; an untouched week is returned unsaved (id null) without creating it."""
    form = WeekStartForm({"week_start_date": week_start_date})
    if not form.is_valid():
        return _form_error(form)
    return _success(WeekService().get_by_start_date(form.cleaned_data["week_start_date"]), "Get week successful")


@csrf_exempt
@require_http_methods(["POST"])
@scheduling_endpoint
def publish_week(request: HttpRequest, week_start_date: str) -> HttpResponse:
    """Publishes the week; fails if already published or empty."""
    form = WeekStartForm({"week_start_date": week_start_date})
    if not form.is_valid():
        return _form_error(form)
    return _success(WeekService().publish(form.cleaned_data["week_start_date"]), "Publish week successful")
