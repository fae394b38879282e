"""
=============================================================================
SCHEDULING ERRORS
=============================================================================

Domain errors raised by the scheduling services.

Each error class maps to exactly one HTTP status. The view layer translates
them 1:1 without retrying: they are business-rule failures, so repeating the
call would only repeat the failure.

    SchedulingError
    ├── InvalidInput           400  malformed date/time
    ├── InvalidDuration        400  duration <= 0 or >= 24h
    ├── WeekPublished          400  mutation against a published week
    ├── AlreadyPublished       400  publish called twice
    ├── EmptyWeek              400  publish with no shifts
    ├── UnsupportedOperation   400  bulk delete
    ├── ShiftClash             409  overlapping shift (carries it)
    ├── NotFound               404  unknown shift id
    └── InternalError          500  post-write re-read came back empty

=============================================================================
"""
from __future__ import annotations

from typing import Any


class SchedulingError(Exception):
    """Base class for all scheduling errors."""

    status_code = 400
    default_message = "Scheduling error"

    def __init__(self, message: str | None = None, *, data: dict[str, Any] | None = None) -> None:
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__

    def as_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "statusCode": self.status_code,
            "error": self.code,
            "message": self.message,
        }
        if self.data is not None:
            body["data"] = self.data
        return body


class InvalidInput(SchedulingError):
    default_message = "Invalid input"


class InvalidDuration(SchedulingError):
    default_message = "Invalid shift duration"


class WeekPublished(SchedulingError):
    default_message = "Week is published"


class AlreadyPublished(SchedulingError):
    default_message = "Week is already published"


class EmptyWeek(SchedulingError):
    default_message = "Cannot publish an empty week"


class UnsupportedOperation(SchedulingError):
    default_message = "Operation is not supported"


class ShiftClash(SchedulingError):
    """Raised when a shift overlaps an existing one; carries the clashing shift's view."""

    status_code = 409
    default_message = "Shift clash detected"

    def __init__(self, clashing_shift: dict[str, Any], message: str | None = None) -> None:
        super().__init__(message, data={"clashingShift": clashing_shift})
        self.clashing_shift = clashing_shift


class NotFound(SchedulingError):
    status_code = 404
    default_message = "Not found"


class InternalError(SchedulingError):
    status_code = 500
    default_message = "Internal error"
