"""Tests for the full roof wind pressure calculation.

Hand calculation for the sample building (100 × 80 × 15 ft, Exposure C,
V = 120 mph, Kzt = Kd = 1.0, 10 sq ft component):

    Kz = 2.01 × (15/900)^(2/9.5)        = 0.8489
    qz = 0.00256 × 0.8489 × 120²        = 31.29 psf
    corner: GCp = -2.5, GCpi = ±0.18
        p = 31.29 × (-2.5 - 0.18)       = -83.87 psf
"""

import pytest

from roofwind.engine import calculate_wind_pressure
from roofwind.errors import InvalidInputError
from roofwind.schemas import (
    CalculationMethod,
    EnclosureType,
    SecondLeg,
    WindPressureRequest,
    Zone,
)


class TestVelocityPressure:
    def test_kz_and_qz(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        assert result.kz.kz == pytest.approx(0.8489, abs=1e-4)
        assert result.velocity_pressure == pytest.approx(31.29, abs=0.01)

    def test_directionality_factor_applied(self, make_request):
        base = calculate_wind_pressure(make_request())
        reduced = calculate_wind_pressure(make_request(directionality_factor=0.85))
        assert reduced.velocity_pressure == pytest.approx(0.85 * base.velocity_pressure)

    def test_default_wind_speed(self):
        request = WindPressureRequest(
            building_height=15.0, building_length=100.0, building_width=80.0
        )
        assert calculate_wind_pressure(request).wind_speed_mph == 120.0


class TestZonePressures:
    def test_standard_zones_present(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        assert [zp.name for zp in result.zone_pressures] == ["field", "perimeter", "corner"]

    def test_corner_controls(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        corner = result.pressure_for("corner")
        qz = result.velocity_pressure
        assert corner.gcp == -2.5
        assert corner.external_pressure == pytest.approx(-2.5 * qz)
        assert corner.net_negative == pytest.approx(-2.68 * qz)
        assert corner.controlling == pytest.approx(83.87, abs=0.01)
        assert result.controlling_zone == "corner"
        assert result.max_pressure == corner.controlling

    def test_ordering_corner_perimeter_field(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        field = result.pressure_for("field").controlling
        perimeter = result.pressure_for("perimeter").controlling
        corner = result.pressure_for("corner").controlling
        assert corner > perimeter > field

    def test_large_component_field_pressure(self, make_request):
        # 20 × 10 = 200 sq ft: field GCp = -0.8, external = -0.8 × 31.29 = -25.03 psf
        result = calculate_wind_pressure(make_request(component_length=20.0, component_width=10.0))
        field = result.pressure_for("field")
        assert result.effective_wind_area == 200.0
        assert field.external_pressure == pytest.approx(-25.03, abs=0.01)
        assert field.controlling > 25.0

    def test_small_component_uses_minimum_area(self, make_request):
        result = calculate_wind_pressure(make_request(component_length=2.0, component_width=2.0))
        assert result.effective_wind_area == 10.0

    def test_mwfrs_method(self, make_request):
        result = calculate_wind_pressure(make_request(calculation_method="mwfrs"))
        assert result.calculation_method == CalculationMethod.MAIN_FORCE
        assert result.pressure_for("field").gcp == -0.7
        assert result.pressure_for("corner").gcp == -1.8

    def test_without_worst_case(self, make_request):
        result = calculate_wind_pressure(make_request(use_worst_case=False))
        corner = result.pressure_for("corner")
        assert corner.controlling == pytest.approx(2.32 * result.velocity_pressure)

    def test_unknown_zone_name(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        with pytest.raises(KeyError):
            result.pressure_for("corner_1_prime")


class TestZone1PrimeInPipeline:
    def test_enhanced_zones_added(self, elongated_request):
        result = calculate_wind_pressure(elongated_request)
        names = [zp.name for zp in result.zone_pressures]
        assert names == ["field", "perimeter", "corner", "corner_1_prime", "perimeter_1_prime"]
        corner_prime = result.pressure_for("corner_1_prime")
        assert corner_prime.zone == Zone.CORNER
        assert corner_prime.is_zone1_prime
        assert corner_prime.gcp == -3.4

    def test_enhanced_corner_controls(self, elongated_request):
        result = calculate_wind_pressure(elongated_request)
        assert result.controlling_zone == "corner_1_prime"
        assert result.max_pressure == pytest.approx(3.58 * result.velocity_pressure)

    def test_zone1_prime_warnings_block_professional_accuracy(self, elongated_request):
        result = calculate_wind_pressure(elongated_request)
        assert result.zone1_prime.is_required
        assert not result.professional_accuracy
        assert not result.pe_ready
        assert not result.requires_special_analysis

    def test_mwfrs_has_no_enhanced_zones(self, elongated_request):
        request = elongated_request.model_copy(
            update={"calculation_method": CalculationMethod.MAIN_FORCE}
        )
        result = calculate_wind_pressure(request)
        assert all(not zp.is_zone1_prime for zp in result.zone_pressures)

    def test_near_threshold_requires_special_analysis(self, make_request):
        result = calculate_wind_pressure(make_request(building_length=190.0, building_width=100.0))
        assert result.requires_special_analysis
        assert result.uncertainty_bounds.confidence == 70


class TestReviewFlags:
    def test_clean_calculation_is_pe_ready(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        assert result.warnings == ()
        assert result.professional_accuracy
        assert result.pe_ready
        assert not result.requires_special_analysis
        assert result.simplified_method_applicable

    def test_uncertainty_bounds(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        bounds = result.uncertainty_bounds
        assert bounds.lower == pytest.approx(0.9 * result.max_pressure)
        assert bounds.upper == pytest.approx(1.1 * result.max_pressure)
        assert bounds.confidence == 85

    def test_tall_building_requires_special_analysis(self, make_request):
        result = calculate_wind_pressure(make_request(building_height=80.0))
        assert result.requires_special_analysis
        assert not result.simplified_method_applicable
        assert not result.pe_ready
        assert any("exceeds 60 ft" in w for w in result.warnings)

    def test_long_building_requires_special_analysis(self, make_request):
        result = calculate_wind_pressure(make_request(building_length=320.0, building_width=200.0))
        assert result.requires_special_analysis

    def test_declared_enclosure_needs_review(self, make_request):
        result = calculate_wind_pressure(make_request(openings=[]))
        assert result.enclosure.type == EnclosureType.ENCLOSED
        assert not result.professional_accuracy
        assert not result.pe_ready

    def test_kz_clamp_warning_is_reported(self, make_request):
        result = calculate_wind_pressure(make_request(building_height=10.0))
        assert result.kz.height_used == 15.0
        assert any("minimum 15 ft" in w for w in result.warnings)
        assert not result.professional_accuracy


class TestEnclosureInPipeline:
    def test_dominant_opening_raises_pressures(self, make_request, sample_request):
        enclosed = calculate_wind_pressure(sample_request)
        partial = calculate_wind_pressure(
            make_request(openings=[{"area": 200.0, "location": "windward"}])
        )
        assert partial.enclosure.type == EnclosureType.PARTIALLY_ENCLOSED
        assert partial.max_pressure > enclosed.max_pressure

    def test_wall_area_defaults_to_gross_wall_area(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        # 20 / 5400
        assert result.enclosure.opening_ratio == pytest.approx(20.0 / 5400.0)

    def test_explicit_wall_area(self, make_request):
        result = calculate_wind_pressure(make_request(wall_area=1000.0))
        assert result.enclosure.opening_ratio == pytest.approx(0.02)

    def test_declared_open_building(self, make_request):
        result = calculate_wind_pressure(
            make_request(openings=[], building_classification="open")
        )
        corner = result.pressure_for("corner")
        assert corner.controlling == pytest.approx(2.5 * result.velocity_pressure)


class TestSummaryAndLayout:
    def test_summary_contents(self, sample_request):
        result = calculate_wind_pressure(sample_request)
        summary = result.summary
        assert "components and cladding" in summary.methodology
        assert result.kz.formula in summary.formulas_used
        assert any("Figure 30.3-2" in ref for ref in summary.asce_references)
        assert any("120 mph" in a for a in summary.assumptions)

    def test_summary_cites_zone1_prime(self, elongated_request):
        result = calculate_wind_pressure(elongated_request)
        assert result.zone1_prime.asce_reference in result.summary.asce_references
        assert result.summary.warnings == result.warnings

    def test_edition_is_informational(self, make_request):
        a = calculate_wind_pressure(make_request(asce_edition="ASCE 7-16"))
        b = calculate_wind_pressure(make_request())
        assert a.max_pressure == b.max_pressure
        assert a.summary.asce_references[0].startswith("ASCE 7-16")

    def test_l_shaped_layout(self, make_request):
        result = calculate_wind_pressure(
            make_request(second_leg=SecondLeg(length=60.0, width=120.0))
        )
        assert any(z.name == "Re-entrant Corner" for z in result.layout.zones)

    def test_result_serializes(self, sample_request):
        data = calculate_wind_pressure(sample_request).model_dump(mode="json")
        assert data["controlling_zone"] == "corner"
        assert data["enclosure"]["type"] == "enclosed"
        assert data["kz"]["height_used"] == 15.0


class TestInvalidInput:
    def test_invalid_input_aborts_calculation(self, sample_request):
        # model_copy skips validation, so the core sees the bad height
        request = sample_request.model_copy(update={"building_height": -5.0})
        with pytest.raises(InvalidInputError):
            calculate_wind_pressure(request)


class TestLargeComponent:
    """Enclosed sample building raised to h = 30 ft with a 20 × 10 ft component.

        Kz = 2.01 × (30/900)^(2/9.5)        = 0.9823
        qz = 0.00256 × 0.9823 × 120²        = 36.21 psf
        field: GCp = -0.8 (A = 200 sq ft)
            external = -0.8 × 36.21         = -28.97 psf
            p = 36.21 × (-0.8 - 0.18)       = -35.49 psf
    """

    def test_field_pressure_at_30_ft(self, make_request):
        result = calculate_wind_pressure(
            make_request(building_height=30.0, component_length=20.0, component_width=10.0)
        )
        field = result.pressure_for("field")
        assert result.enclosure.type == EnclosureType.ENCLOSED
        assert result.kz.kz == pytest.approx(0.9823, abs=1e-4)
        assert result.velocity_pressure == pytest.approx(36.21, abs=0.01)
        assert field.gcp == -0.8
        assert field.external_pressure == pytest.approx(-28.97, abs=0.01)
        assert field.controlling == pytest.approx(35.49, abs=0.01)
        assert field.controlling > abs(field.external_pressure) > 25.0

    def test_zone1_prime_uses_component_area(self, elongated_request):
        request = elongated_request.model_copy(
            update={"component_length": 20.0, "component_width": 10.0}
        )
        result = calculate_wind_pressure(request)
        recommended = {z.type: z.pressure_coefficient for z in result.zone1_prime.recommended_zones}
        assert recommended["corner_1_prime"] == result.pressure_for("corner_1_prime").gcp
        assert recommended["corner_1_prime"] == -3.0
        assert recommended["perimeter_1_prime"] == result.pressure_for("perimeter_1_prime").gcp

    def test_zone1_prime_component_trigger_and_confidence(self, elongated_request):
        request = elongated_request.model_copy(
            update={"component_length": 20.0, "component_width": 10.0}
        )
        analysis = calculate_wind_pressure(request).zone1_prime
        size = next(t for t in analysis.triggers if t.type == "component_size")
        assert not size.triggered
        assert size.value == 200.0
        baseline = calculate_wind_pressure(elongated_request).zone1_prime
        assert analysis.confidence == baseline.confidence - 5


class TestOpeningScreening:
    def test_opening_larger_than_wall_is_reported(self, make_request):
        result = calculate_wind_pressure(
            make_request(wall_area=100.0, openings=[{"area": 150.0, "location": "windward"}])
        )
        assert "Opening area cannot exceed total wall area" in result.warnings
        assert not result.pe_ready

    def test_very_high_opening_ratio_warns(self, make_request):
        result = calculate_wind_pressure(
            make_request(wall_area=100.0, openings=[{"area": 90.0, "location": "leeward"}])
        )
        assert any("90.0% is very high for leeward wall" in w for w in result.warnings)

    def test_ordinary_openings_add_no_warnings(self, sample_request):
        assert calculate_wind_pressure(sample_request).warnings == ()
