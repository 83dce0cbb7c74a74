"""Tests for building aspect analysis."""

import pytest

from roofwind.aspect import (
    BuildingType,
    OverallRisk,
    Severity,
    analyze_building_aspect,
    classify_building,
)
from roofwind.errors import InvalidInputError


class TestClassifyBuilding:
    @pytest.mark.parametrize(
        "aspect, height_ratio, height, expected",
        [
            (1.2, 0.2, 20.0, BuildingType.COMPACT),
            (2.0, 0.2, 20.0, BuildingType.ELONGATED),
            (4.0, 0.2, 20.0, BuildingType.HIGHLY_ELONGATED),
            (1.0, 5.0, 250.0, BuildingType.TOWER),
            (1.0, 1.0, 300.0, BuildingType.TOWER),
        ],
    )
    def test_classification(self, aspect, height_ratio, height, expected):
        assert classify_building(aspect, height_ratio, height) == expected


class TestAnalyzeBuildingAspect:
    def test_compact_low_rise(self):
        analysis = analyze_building_aspect(100.0, 80.0, 15.0, "C")
        assert analysis.building_type == BuildingType.COMPACT
        assert analysis.overall_risk == OverallRisk.LOW
        assert analysis.risk_factors == ()
        assert not analysis.additional_analysis_required
        assert analysis.confidence == 95
        assert analysis.warnings == ()
        assert analysis.plan_area == 8000.0
        assert analysis.perimeter == 360.0

    def test_moderately_elongated_exposure_b(self):
        analysis = analyze_building_aspect(200.0, 100.0, 20.0, "B")
        assert analysis.building_type == BuildingType.ELONGATED
        assert [f.severity for f in analysis.risk_factors] == [Severity.MODERATE]
        assert analysis.overall_risk == OverallRisk.MODERATE
        assert not analysis.additional_analysis_required

    def test_three_to_one_in_open_terrain(self):
        # High aspect factor + open terrain factor -> HIGH risk
        analysis = analyze_building_aspect(300.0, 100.0, 30.0, "C")
        factors = {f.factor: f.severity for f in analysis.risk_factors}
        assert factors == {
            "High Aspect Ratio": Severity.HIGH,
            "Open Terrain Exposure": Severity.MODERATE,
        }
        assert analysis.overall_risk == OverallRisk.HIGH
        assert analysis.additional_analysis_required
        # 95 - 10 (aspect >= 3)
        assert analysis.confidence == 85

    def test_extreme_aspect_ratio(self):
        analysis = analyze_building_aspect(400.0, 100.0, 20.0, "D")
        assert analysis.building_type == BuildingType.HIGHLY_ELONGATED
        assert analysis.overall_risk == OverallRisk.EXTREME
        assert analysis.warnings[0].startswith("CRITICAL")
        # 95 - 15 (aspect >= 4) - 5 (Exposure D, aspect >= 3)
        assert analysis.confidence == 75

    def test_tower(self):
        analysis = analyze_building_aspect(50.0, 50.0, 300.0)
        assert analysis.building_type == BuildingType.TOWER
        assert analysis.additional_analysis_required
        assert any("dynamic analysis" in w for w in analysis.warnings)

    def test_confidence_floor(self):
        # 95 - 20 - 15 - 5 = 55, floored at 70
        analysis = analyze_building_aspect(600.0, 100.0, 400.0, "D")
        assert analysis.confidence == 70

    def test_orientation_does_not_matter(self):
        a = analyze_building_aspect(300.0, 100.0, 30.0)
        b = analyze_building_aspect(100.0, 300.0, 30.0)
        assert a == b

    def test_non_positive_dimension_raises(self):
        with pytest.raises(InvalidInputError):
            analyze_building_aspect(100.0, 0.0, 20.0)
