"""Shared fixtures and sample buildings."""

import os

import pytest

from roofwind.schemas import BuildingOpening, OpeningLocation, OpeningType, WindPressureRequest
from roofwind.settings import get_settings

# 100 ft × 80 ft, 15 ft mean roof height, Exposure C, 120 mph.
# Gross wall area 2 × (100 + 80) × 15 = 5400 sq ft; a single 20 sq ft
# leeward door keeps the building enclosed with no warnings.
SAMPLE_BUILDING = {
    "building_height": 15.0,
    "building_length": 100.0,
    "building_width": 80.0,
    "wind_speed_mph": 120.0,
    "exposure_category": "C",
    "openings": [{"area": 20.0, "location": "leeward", "type": "door"}],
    "project_name": "Test Warehouse",
}

# 300 ft × 100 ft (3:1), 30 ft high: Zone 1' corner and perimeter apply.
ELONGATED_BUILDING = {
    "building_height": 30.0,
    "building_length": 300.0,
    "building_width": 100.0,
    "wind_speed_mph": 120.0,
    "exposure_category": "C",
    "openings": [{"area": 20.0, "location": "leeward", "type": "door"}],
}


@pytest.fixture
def sample_request() -> WindPressureRequest:
    return WindPressureRequest(**SAMPLE_BUILDING)


@pytest.fixture
def elongated_request() -> WindPressureRequest:
    return WindPressureRequest(**ELONGATED_BUILDING)


@pytest.fixture
def mostly_leeward_openings() -> list[BuildingOpening]:
    """80 sq ft total, mostly leeward and side."""
    return [
        BuildingOpening(area=10.0, location=OpeningLocation.WINDWARD, type=OpeningType.WINDOW),
        BuildingOpening(area=40.0, location=OpeningLocation.LEEWARD, type=OpeningType.DOOR),
        BuildingOpening(area=30.0, location=OpeningLocation.SIDE, type=OpeningType.WINDOW),
    ]


@pytest.fixture
def breakable_windward_glazing() -> list[BuildingOpening]:
    """Enclosed-qualifying set (90 sq ft on 10000) with failable windward glazing."""
    return [
        BuildingOpening(
            area=30.0,
            location=OpeningLocation.WINDWARD,
            type=OpeningType.WINDOW,
            is_glazed=True,
            can_fail=True,
        ),
        BuildingOpening(area=40.0, location=OpeningLocation.LEEWARD, type=OpeningType.DOOR),
        BuildingOpening(area=20.0, location=OpeningLocation.SIDE, type=OpeningType.VENT),
    ]


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate tests from ROOFWIND_* variables in the environment."""
    for name in list(os.environ):
        if name.startswith("ROOFWIND_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_request():
    """Factory for the sample building with field overrides."""

    def _make(**overrides) -> WindPressureRequest:
        return WindPressureRequest(**{**SAMPLE_BUILDING, **overrides})

    return _make
