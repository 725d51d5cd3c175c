"""
Tests for the stateless bed map endpoints.
"""
from fastapi import status

from bedboard.services.filter_service import EMPTY_RESULT_MESSAGE


def _statuses(body):
    return {
        bed["status"]
        for floor in body["floors"]
        for ward in floor["wards"]
        for bed in ward["beds"]
    }


class TestBedMap:
    """Tests for GET /api/bed-map."""

    def test_default_map(self, client, seeded):
        response = client.get("/api/bed-map")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body["tabs"]) == 5
        assert body["stats"]["reserved"] == 0
        assert _statuses(body) <= {"available", "occupied"}
        assert not body["empty"]

    def test_floor_filter(self, client, seeded):
        response = client.get("/api/bed-map", params={"floor": "F3"})

        body = response.json()
        assert [f["id"] for f in body["floors"]] == ["F3"]
        assert body["stats"] == {"total": 14, "available": 9, "occupied": 5, "reserved": 0}

    def test_ward_filter(self, client, seeded):
        response = client.get("/api/bed-map", params={"floor": "F3", "ward": "WARD-B"})

        body = response.json()
        wards = body["floors"][0]["wards"]
        assert [w["name"] for w in wards] == ["General Ward B"]
        assert body["stats"]["total"] == 6

    def test_search_by_patient(self, client, seeded):
        response = client.get("/api/bed-map", params={"q": "harish"})

        body = response.json()
        assert body["stats"]["total"] == 1
        bed = body["floors"][0]["wards"][0]["beds"][0]
        assert bed["bed_number"] == "WA-101-2"
        assert bed["occupant"]["name"] == "Harish Kalyan"

    def test_tabs_disabled_outside_result(self, client, seeded):
        response = client.get("/api/bed-map", params={"floor": "F3"})

        tabs = {t["id"]: t for t in response.json()["tabs"]}
        assert not tabs["F3"]["disabled"]
        assert tabs["F1"]["disabled"]

    def test_no_match(self, client, seeded):
        response = client.get("/api/bed-map", params={"q": "zzz"})

        body = response.json()
        assert body["empty"]
        assert body["empty_message"] == EMPTY_RESULT_MESSAGE
        assert body["floors"] == []
        assert all(t["disabled"] for t in body["tabs"])

    def test_unknown_status(self, client, seeded):
        response = client.get("/api/bed-map", params={"status": "bogus"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_bed_type(self, client, seeded):
        response = client.get("/api/bed-map", params={"type": "Spaceship"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestBedLookup:
    """Tests for GET /api/bed-map/beds/{bed_id}."""

    def test_get_bed(self, client, seeded):
        response = client.get("/api/bed-map/beds/F3-WARD-A-WA-102-1")

        assert response.status_code == status.HTTP_200_OK
        bed = response.json()
        assert bed["price_per_day"] == 3500
        assert bed["status"] == "available"
        assert bed["occupant"] is None

    def test_bed_not_found(self, client, seeded):
        response = client.get("/api/bed-map/beds/F9-NOPE-1")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReasonsAndHealth:
    def test_reasons(self, client):
        response = client.get("/api/bed-map/reasons")

        assert response.status_code == status.HTTP_200_OK
        reasons = response.json()
        assert len(reasons) == 8
        assert {"value": "step_down_care", "label": "Step-down Care"} in reasons

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"

    def test_readiness_counts_beds(self, client, seeded):
        response = client.get("/api/health/readiness")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "ready"
        beds = body["components"]["database"]["beds"]
        assert set(beds) == {"available", "occupied", "reserved", "maintenance"}
        assert beds["reserved"] >= 2
        assert beds["maintenance"] >= 2
