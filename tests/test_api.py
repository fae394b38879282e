"""HTTP tests for the /api/v1/ scheduling endpoints."""

from __future__ import annotations

import json

import pytest
from django.urls import reverse

from apps.scheduling.models import Shift, Week

pytestmark = pytest.mark.django_db

SHIFT_A = {"name": "A", "date": "2024-01-01", "startTime": "09:00", "endTime": "17:00"}


def _post(client, url, body=None):
    return client.post(url, data=json.dumps(body or {}), content_type="application/json")


def _patch(client, url, body):
    return client.patch(url, data=json.dumps(body), content_type="application/json")


def _create(client, body):
    return _post(client, reverse("shift_list"), body)


class TestShiftEndpoints:
    def test_create(self, client):
        response = _create(client, SHIFT_A)

        assert response.status_code == 201
        body = response.json()
        assert body["statusCode"] == 201
        assert body["results"]["name"] == "A"
        assert body["results"]["week"]["startDate"] == "2024-01-01"
        assert body["results"]["week"]["isPublished"] is False

    def test_clash_returns_409_with_clashing_shift(self, client):
        a = _create(client, SHIFT_A).json()["results"]
        clashing = {"name": "B", "date": "2024-01-01", "startTime": "16:00", "endTime": "18:00"}

        response = _create(client, clashing)
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "ShiftClash"
        assert body["data"]["clashingShift"]["id"] == a["id"]
        assert body["data"]["clashingShift"]["startTime"] == "09:00"

        response = _create(client, {**clashing, "ignoreClash": True})
        assert response.status_code == 201

    def test_validation_errors(self, client):
        response = _create(client, {**SHIFT_A, "startTime": "9am", "name": ""})
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "start_time" in errors
        assert "name" in errors

    def test_invalid_duration(self, client):
        response = _create(client, {**SHIFT_A, "endTime": "09:00"})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidDuration"

    @pytest.mark.parametrize("value", ["no", "off", "nope", 1])
    def test_non_boolean_ignore_clash_rejected(self, client, value):
        _create(client, SHIFT_A)
        clashing = {"name": "B", "date": "2024-01-01", "startTime": "16:00", "endTime": "18:00"}

        response = _create(client, {**clashing, "ignoreClash": value})

        assert response.status_code == 400
        assert "ignore_clash" in response.json()["errors"]
        assert Shift.objects.count() == 1

    def test_non_string_name_rejected(self, client):
        response = _create(client, {**SHIFT_A, "name": 12345})
        assert response.status_code == 400
        assert "name" in response.json()["errors"]
        assert not Shift.objects.exists()

    def test_patch_rejects_wrongly_typed_fields(self, client):
        shift = _create(client, SHIFT_A).json()["results"]
        url = reverse("shift_detail", args=[shift["id"]])

        response = _patch(client, url, {"name": 12345, "ignoreClash": "yes"})

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"name", "ignore_clash"}
        assert client.get(url).json()["results"]["name"] == "A"

    def test_malformed_json(self, client):
        response = client.post(reverse("shift_list"), data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidInput"

    def test_list_by_week(self, client):
        _create(client, SHIFT_A)
        _create(client, {**SHIFT_A, "name": "Next", "date": "2024-01-08"})

        response = client.get(reverse("shift_list"), {"weekStartDate": "2024-01-01"})
        assert response.status_code == 200
        assert [s["name"] for s in response.json()["results"]] == ["A"]

        response = client.get(reverse("shift_list"))
        assert [s["name"] for s in response.json()["results"]] == ["A", "Next"]

    def test_list_rejects_bad_week(self, client):
        response = client.get(reverse("shift_list"), {"weekStartDate": "01/01/2024"})
        assert response.status_code == 400

    def test_list_rejects_empty_week(self, client):
        _create(client, SHIFT_A)
        response = client.get(reverse("shift_list"), {"weekStartDate": ""})
        assert response.status_code == 400
        assert "week_start_date" in response.json()["errors"]

    def test_get_update_delete(self, client):
        shift = _create(client, SHIFT_A).json()["results"]
        url = reverse("shift_detail", args=[shift["id"]])

        assert client.get(url).json()["results"]["id"] == shift["id"]

        response = _patch(client, url, {"name": "Renamed", "endTime": "18:00:30"})
        assert response.status_code == 200
        assert response.json()["results"]["name"] == "Renamed"
        assert response.json()["results"]["endTime"] == "18:00"

        assert client.delete(url).status_code == 200
        assert client.get(url).status_code == 404

    def test_patch_rejects_blank_name(self, client):
        shift = _create(client, SHIFT_A).json()["results"]
        response = _patch(client, reverse("shift_detail", args=[shift["id"]]), {"name": ""})
        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_unknown_shift(self, client):
        url = reverse("shift_detail", args=["00000000-0000-0000-0000-000000000000"])
        response = client.get(url)
        assert response.status_code == 404
        assert response.json()["error"] == "NotFound"

    def test_bulk_delete_rejected(self, client):
        shift = _create(client, SHIFT_A).json()["results"]
        response = client.delete(
            reverse("shift_list"),
            data=json.dumps({"ids": [shift["id"]]}),
            content_type="application/json",
        )
        assert response.status_code == 400
        assert response.json()["error"] == "UnsupportedOperation"


class TestWeekEndpoints:
    def test_untouched_week(self, client):
        response = client.get(reverse("week_detail", args=["2030-05-06"]))
        assert response.status_code == 200
        assert response.json()["results"] == {
            "id": None,
            "startDate": "2030-05-06",
            "endDate": "2030-05-12",
            "isPublished": False,
            "publishedAt": None,
        }
        assert not Week.objects.exists()

    def test_bad_week_date(self, client):
        assert client.get(reverse("week_detail", args=["next-week"])).status_code == 400

    def test_publish_flow(self, client):
        shift = _create(client, SHIFT_A).json()["results"]
        publish_url = reverse("week_publish", args=["2024-01-01"])

        response = _post(client, publish_url)
        assert response.status_code == 200
        week = response.json()["results"]
        assert week["isPublished"] is True
        assert week["publishedAt"]

        response = _post(client, publish_url)
        assert response.status_code == 400
        assert response.json()["error"] == "AlreadyPublished"

        url = reverse("shift_detail", args=[shift["id"]])
        assert client.get(url).json()["results"]["isPublished"] is True

        response = _patch(client, url, {"name": "Nope"})
        assert response.status_code == 400
        assert response.json()["error"] == "WeekPublished"

        response = client.delete(url)
        assert response.status_code == 400
        assert response.json()["error"] == "WeekPublished"

    def test_publish_empty_week(self, client):
        response = _post(client, reverse("week_publish", args=["2024-01-01"]))
        assert response.status_code == 400
        assert response.json()["error"] == "EmptyWeek"

        week = client.get(reverse("week_detail", args=["2024-01-01"])).json()["results"]
        assert week["id"] is not None
        assert week["isPublished"] is False
