"""
=============================================================================
SCHEDULING FORMS
=============================================================================

Django Forms validating JSON request bodies and query parameters before
they reach the services.

Forms defined here:
- ShiftCreateForm: all shift fields required
- ShiftUpdateForm: every field optional, but non-blank when present
- WeekStartForm: a weekStartDate path/query value

Each shift form turns its cleaned_data into a ShiftPayload via
to_payload(). Field names are snake_case; the view helpers map the
camelCase JSON keys onto them.
=============================================================================
"""
from __future__ import annotations

from django import forms

from .services import ShiftPayload

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]?\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"

DATE_ERROR = "Enter a date as YYYY-MM-DD."
TIME_ERROR = "Enter a time as HH:MM or HH:MM:SS."


def _date_field(**kwargs) -> forms.RegexField:
    return forms.RegexField(regex=DATE_PATTERN, error_messages={"invalid": DATE_ERROR}, **kwargs)


def _time_field(**kwargs) -> forms.RegexField:
    return forms.RegexField(regex=TIME_PATTERN, error_messages={"invalid": TIME_ERROR}, **kwargs)


class JsonTypedShiftFieldsMixin:
    """
    Rejects JSON values of the wrong type before Django coerces them.

    CharField would store 12345 as "12345" and BooleanField treats any
    string other than "false"/"0" as True, so the raw request values are
    checked here.
    """

    def clean_name(self):
        raw = self.data.get("name")
        if raw is not None and not isinstance(raw, str):
            raise forms.ValidationError("Must be a string.")
        return self.cleaned_data.get("name")

    def clean_ignore_clash(self):
        if "ignore_clash" in self.data and not isinstance(self.data["ignore_clash"], bool):
            raise forms.ValidationError("Must be a boolean.")
        return bool(self.cleaned_data.get("ignore_clash"))


class ShiftCreateForm(JsonTypedShiftFieldsMixin, forms.Form):
    """
    Validates a new shift.

    Fields:
    - name: non-blank shift name
    - date: YYYY-MM-DD
    - start_time, end_time: HH:MM[:SS]
    - ignore_clash: save even when the shift overlaps another one
    """
    name = forms.CharField(max_length=255)
    date = _date_field()
    start_time = _time_field()
    end_time = _time_field()
    ignore_clash = forms.BooleanField(required=False)

    def to_payload(self) -> ShiftPayload:
        data = self.cleaned_data
        return ShiftPayload(
            name=data["name"],
            date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            ignore_clash=bool(data.get("ignore_clash")),
        )


class ShiftUpdateForm(JsonTypedShiftFieldsMixin, forms.Form):
    """
    Validates a partial shift update.

    Only fields present in the request are applied; absent ones keep the
    stored value. A field that is present must not be blank.
    """
    name = forms.CharField(max_length=255, required=False)
    date = _date_field(required=False)
    start_time = _time_field(required=False)
    end_time = _time_field(required=False)
    ignore_clash = forms.BooleanField(required=False)

    def clean(self):
        cleaned = super().clean()
        for field in ("name", "date", "start_time", "end_time"):
            if field in self.data and not cleaned.get(field) and field not in self.errors:
                self.add_error(field, "This field may not be blank.")
        return cleaned

    def to_payload(self) -> ShiftPayload:
        data = self.cleaned_data
        provided = {
            field: data[field]
            for field in ("name", "date", "start_time", "end_time")
            if field in self.data
        }
        return ShiftPayload(ignore_clash=bool(data.get("ignore_clash")), **provided)


class WeekStartForm(forms.Form):
    """Validates the weekStartDate of list and week endpoints."""
    week_start_date = _date_field()
