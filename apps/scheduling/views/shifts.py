"""
=============================================================================
SHIFT VIEWS
=============================================================================

JSON endpoints for shift CRUD:
- shifts_collection() - GET list / POST create / DELETE bulk (rejected)
- shift_detail()      - GET / PATCH / DELETE a single shift

=============================================================================
"""
from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from ..forms import ShiftCreateForm, ShiftUpdateForm, WeekStartForm
from ..services import ShiftService
from .helpers import (
    _form_error,
    _read_json_body,
    _shift_form_data,
    _success,
    scheduling_endpoint,
)


@csrf_exempt
@require_http_methods(["GET", "POST", "DELETE"])
@scheduling_endpoint
def shifts_collection(request: HttpRequest) -> HttpResponse:
    """
    GET:    list shifts, optionally ?weekStartDate=YYYY-MM-DD
    POST:   create a shift from {name, date, startTime, endTime, ignoreClash?}
    DELETE: bulk delete by {"ids": [...]}, which is not supported
    """
    service = ShiftService()

    if request.method == "POST":
        form = ShiftCreateForm(_shift_form_data(_read_json_body(request)))
        if not form.is_valid():
            return _form_error(form)
        return _success(service.create(form.to_payload()), "Create shift successful", status=201)

    if request.method == "DELETE":
        ids = _read_json_body(request).get("ids") or []
        service.delete(list(ids))
        return _success(None, "Delete shifts successful")

    week_start = None
    if "weekStartDate" in request.GET:
        form = WeekStartForm({"week_start_date": request.GET["weekStartDate"]})
        if not form.is_valid():
            return _form_error(form)
        week_start = form.cleaned_data["week_start_date"]
    return _success(service.list(week_start), "Get shifts successful")


@csrf_exempt
@require_http_methods(["GET", "PATCH", "DELETE"])
@scheduling_endpoint
def shift_detail(request: HttpRequest, shift_id) -> HttpResponse:
    """
    GET:    the shift's public view
    PATCH:  partial update; absent fields keep their value
    DELETE: remove the shift while its week is unpublished
    """
    service = ShiftService()

    if request.method == "PATCH":
        form = ShiftUpdateForm(_shift_form_data(_read_json_body(request)))
        if not form.is_valid():
            return _form_error(form)
        return _success(service.update(shift_id, form.to_payload()), "Update shift successful")

    if request.method == "DELETE":
        service.delete(shift_id)
        return _success(None, "Delete shift successful")

    return _success(service.get(shift_id), "Get shift successful")
