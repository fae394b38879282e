"""
=============================================================================
HELPER FUNCTIONS
=============================================================================

Private helpers shared by the scheduling JSON views:
- JSON body parsing
- camelCase request keys -> form field names
- Success / error response envelopes
- scheduling_endpoint: translates SchedulingError into its HTTP status

Response envelopes:
    success: {"statusCode": 200, "message": "...", "results": ...}
    error:   {"statusCode": 409, "error": "ShiftClash", "message": "...", "data": {...}}

Note: These functions are prefixed with underscore (_) where they are
private to this package.
=============================================================================
"""
from __future__ import annotations

import json
import logging
from functools import wraps
from typing import Any, Callable

from django import forms
from django.http import HttpRequest, HttpResponse, JsonResponse

from ..exceptions import InvalidInput, SchedulingError

logger = logging.getLogger(__name__)

# JSON request key -> form field name
SHIFT_FIELD_MAP = {
    "name": "name",
    "date": "date",
    "startTime": "start_time",
    "endTime": "end_time",
    "ignoreClash": "ignore_clash",
}


# =============================================================================
# REQUEST PARSING
# =============================================================================


def _read_json_body(request: HttpRequest) -> dict[str, Any]:
    """
    Decodes the request body as a JSON object.
    An empty body is treated as {}. Raises InvalidInput otherwise.
    """
    if not request.body:
        return {}
    try:
        body = json.loads(request.body)
    except (TypeError, ValueError):
        raise InvalidInput("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise InvalidInput("Request body must be a JSON object")
    return body


def _shift_form_data(body: dict[str, Any]) -> dict[str, Any]:
    """Maps the camelCase keys present in body onto shift form field names."""
    return {field: body[key] for key, field in SHIFT_FIELD_MAP.items() if key in body}


# =============================================================================
# RESPONSES
# =============================================================================


def _success(results: Any, message: str, status: int = 200) -> JsonResponse:
    return JsonResponse(
        {"statusCode": status, "message": message, "results": results},
        status=status,
        safe=False,
    )


def _form_error(form: forms.Form) -> JsonResponse:
    """400 response listing the field errors of an invalid form."""
    return JsonResponse(
        {
            "statusCode": 400,
            "error": InvalidInput.__name__,
            "message": "Request validation failed",
            "errors": {
                field: [error["message"] for error in errors]
                for field, errors in form.errors.get_json_data().items()
            },
        },
        status=400,
    )


def scheduling_endpoint(view_func: Callable[..., HttpResponse]) -> Callable[..., HttpResponse]:
    """
    Wraps a view so scheduling errors become their JSON error response.

    Each SchedulingError maps 1:1 onto its status_code; nothing is retried.
    Anything else propagates to Django's regular 500 handling.
    """
    @wraps(view_func)
    def _wrapped(request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        try:
            return view_func(request, *args, **kwargs)
        except SchedulingError as exc:
            if exc.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.path, exc.message)
            else:
                logger.warning("%s %s rejected: %s", request.method, request.path, exc.message)
            return JsonResponse(exc.as_dict(), status=exc.status_code)

    return _wrapped
