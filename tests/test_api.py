"""Tests for the roofwind JSON API."""

import pytest
from fastapi.testclient import TestClient

from app.application import app

client = TestClient(app)

SAMPLE_PAYLOAD = {
    "building_height": 15.0,
    "building_length": 100.0,
    "building_width": 80.0,
    "wind_speed_mph": 120.0,
    "exposure_category": "C",
    "openings": [{"area": 20.0, "location": "leeward", "type": "door"}],
    "project_name": "Test Project",
}


def test_root_endpoint():
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "/api/calculate" in data["endpoints"]


def test_health_endpoint():
    """Test health check endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestCalculateEndpoint:
    def test_valid_request(self):
        response = client.post("/api/calculate", json=SAMPLE_PAYLOAD)
        assert response.status_code == 200

        data = response.json()
        assert data["project_name"] == "Test Project"
        assert data["controlling_zone"] == "corner"
        assert data["velocity_pressure"] == pytest.approx(31.29, abs=0.01)
        assert data["enclosure"]["type"] == "enclosed"
        assert data["pe_ready"] is True
        assert [zp["name"] for zp in data["zone_pressures"]] == ["field", "perimeter", "corner"]

    def test_lowercase_exposure_and_mwfrs_alias(self):
        payload = {**SAMPLE_PAYLOAD, "exposure_category": "c", "calculation_method": "MWFRS"}
        response = client.post("/api/calculate", json=payload)
        assert response.status_code == 200
        assert response.json()["calculation_method"] == "main_force"

    def test_wind_speed_default_from_settings(self, monkeypatch):
        from roofwind.settings import get_settings

        monkeypatch.setenv("ROOFWIND_DEFAULT_WIND_SPEED_MPH", "140")
        get_settings.cache_clear()
        payload = {k: v for k, v in SAMPLE_PAYLOAD.items() if k != "wind_speed_mph"}
        response = client.post("/api/calculate", json=payload)
        assert response.status_code == 200
        assert response.json()["wind_speed_mph"] == 140.0

    def test_negative_height_is_rejected(self):
        payload = {**SAMPLE_PAYLOAD, "building_height": -1.0}
        response = client.post("/api/calculate", json=payload)
        assert response.status_code == 422

    def test_unknown_exposure_is_rejected(self):
        payload = {**SAMPLE_PAYLOAD, "exposure_category": "E"}
        response = client.post("/api/calculate", json=payload)
        assert response.status_code == 422

    def test_negative_opening_is_rejected(self):
        payload = {**SAMPLE_PAYLOAD, "openings": [{"area": -5.0, "location": "windward"}]}
        response = client.post("/api/calculate", json=payload)
        assert response.status_code == 422


class TestEnclosureEndpoint:
    def test_partially_enclosed(self):
        payload = {
            "wall_area": 8000.0,
            "openings": [
                {"area": 200.0, "location": "windward"},
                {"area": 80.0, "location": "leeward"},
            ],
        }
        response = client.post("/api/enclosure", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "partially_enclosed"
        assert data["gcpi_positive"] == 0.55

    def test_failure_scenario_toggle(self):
        openings = [
            {"area": 30.0, "location": "windward", "is_glazed": True, "can_fail": True},
            {"area": 40.0, "location": "leeward"},
        ]
        with_failures = client.post(
            "/api/enclosure", json={"wall_area": 10000.0, "openings": openings}
        ).json()
        without = client.post(
            "/api/enclosure",
            json={"wall_area": 10000.0, "openings": openings, "consider_failures": False},
        ).json()
        assert with_failures["type"] == "partially_enclosed"
        assert without["type"] == "enclosed"

    def test_zero_wall_area_rejected(self):
        response = client.post("/api/enclosure", json={"wall_area": 0.0, "openings": []})
        assert response.status_code == 422


class TestZone1PrimeEndpoint:
    def test_elongated_building(self):
        payload = {
            "building_length": 300.0,
            "building_width": 100.0,
            "building_height": 30.0,
            "exposure_category": "C",
        }
        response = client.post("/api/zone1-prime", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["is_required"] is True
        assert data["pressure_increase"] == 35
        assert len(data["recommended_zones"]) == 2

    def test_without_exposure(self):
        payload = {"building_length": 100.0, "building_width": 100.0, "building_height": 20.0}
        response = client.post("/api/zone1-prime", json=payload)
        assert response.status_code == 200
        assert response.json()["is_required"] is False


class TestKzEndpoint:
    def test_kz(self):
        response = client.get("/api/kz", params={"height": 15, "exposure": "C"})
        assert response.status_code == 200
        data = response.json()
        assert data["kz"] == pytest.approx(0.849, abs=0.001)
        assert data["warnings"] == []
        assert "velocity_pressure" not in data

    def test_kz_with_wind_speed(self):
        response = client.get(
            "/api/kz", params={"height": 15, "exposure": "C", "wind_speed_mph": 120}
        )
        assert response.json()["velocity_pressure"] == pytest.approx(31.29, abs=0.01)

    def test_clamped_height_warns(self):
        response = client.get("/api/kz", params={"height": 5, "exposure": "C"})
        data = response.json()
        assert data["height_used"] == 15.0
        assert len(data["warnings"]) == 1

    def test_invalid_exposure_is_400(self):
        response = client.get("/api/kz", params={"height": 15, "exposure": "X"})
        assert response.status_code == 400
        assert "Kz error" in response.json()["detail"]

    def test_zero_height_is_400(self):
        response = client.get("/api/kz", params={"height": 0, "exposure": "C"})
        assert response.status_code == 400
