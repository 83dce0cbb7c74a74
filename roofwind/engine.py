"""Wind pressure calculation engine.

Runs the full ASCE 7 procedure for a low-slope roof and assembles the
zoned design pressures into a single result:

    geometry + exposure  -> Kz -> qz
    openings             -> enclosure -> GCpi
    component size       -> effective area -> GCp per zone
    aspect ratios        -> Zone 1' detection -> enhanced zones
    p = qz * [(GCp) - (GCpi)] per zone
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from roofwind.asce7 import ExposureCategory, KzResult, calculate_kz, compute_qz
from roofwind.aspect import AspectAnalysis, analyze_building_aspect
from roofwind.coefficients import (
    PressureCoefficientResult,
    calculate_effective_wind_area,
    interpolate_pressure_coefficient,
    zone1_prime_pressure_coefficient,
)
from roofwind.enclosure import (
    EnclosureClassification,
    classify_building_enclosure,
    enclosure_for_type,
)
from roofwind.layout import ZoneLayout, calculate_zone_layout
from roofwind.pressure import calculate_net_pressure
from roofwind.schemas import CalculationMethod, WindPressureRequest, Zone
from roofwind.validation import (
    merge_validations,
    validate_opening_schedule,
    validate_wind_load_inputs,
)
from roofwind.zone1prime import Zone1PrimeAnalysis, analyze_zone1_prime

logger = logging.getLogger(__name__)

# Simplified-procedure limits
SPECIAL_ANALYSIS_HEIGHT_FT = 60.0
SPECIAL_ANALYSIS_PLAN_DIMENSION_FT = 300.0

UNCERTAINTY_FRACTION = 0.10
STANDARD_CONFIDENCE = 85
SPECIAL_ANALYSIS_CONFIDENCE = 70

_METHODOLOGY: dict[CalculationMethod, str] = {
    CalculationMethod.COMPONENT_CLADDING: (
        "ASCE 7 Chapter 30 components and cladding, low-slope roof, "
        "area-dependent external pressure coefficients"
    ),
    CalculationMethod.MAIN_FORCE: (
        "ASCE 7 Chapter 27 main wind force resisting system, low-slope roof"
    ),
}


class ZonePressure(BaseModel):
    """Design pressures for one roof zone (psf, suction negative)."""

    model_config = ConfigDict(frozen=True)

    zone: Zone
    name: str = Field(..., description="field, perimeter, corner or a *_1_prime variant")
    gcp: float = Field(..., description="External pressure coefficient GCp")
    effective_area: float = Field(..., description="Effective wind area in sq ft")
    external_pressure: float = Field(..., description="qz * GCp in psf")
    net_positive: float = Field(..., description="Net pressure with negative GCpi in psf")
    net_negative: float = Field(..., description="Net pressure with positive GCpi in psf")
    controlling: float = Field(..., description="Controlling net pressure magnitude in psf")
    is_zone1_prime: bool = False
    source: str


class UncertaintyBounds(BaseModel):
    model_config = ConfigDict(frozen=True)

    lower: float
    upper: float
    confidence: int


class CalculationSummary(BaseModel):
    """Documentation block for reports and reviewers."""

    model_config = ConfigDict(frozen=True)

    methodology: str
    asce_references: tuple[str, ...] = ()
    assumptions: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    formulas_used: tuple[str, ...] = ()


class WindPressureResult(BaseModel):
    """Zoned design wind pressures for a low-slope roof."""

    model_config = ConfigDict(frozen=True)

    project_name: Optional[str] = None
    asce_edition: str
    calculation_method: CalculationMethod
    exposure_category: ExposureCategory
    wind_speed_mph: float = Field(..., description="Basic wind speed V in mph")
    topographic_factor: float
    directionality_factor: float

    kz: KzResult
    velocity_pressure: float = Field(..., description="qz in psf")
    enclosure: EnclosureClassification
    effective_wind_area: float = Field(..., description="Component effective wind area in sq ft")
    zone1_prime: Zone1PrimeAnalysis
    aspect: AspectAnalysis
    layout: ZoneLayout

    zone_pressures: tuple[ZonePressure, ...]
    max_pressure: float = Field(..., description="Largest controlling net pressure in psf")
    controlling_zone: str
    uncertainty_bounds: UncertaintyBounds

    warnings: tuple[str, ...] = ()
    professional_accuracy: bool
    pe_ready: bool
    requires_special_analysis: bool
    simplified_method_applicable: bool
    summary: CalculationSummary

    def pressure_for(self, name: str) -> ZonePressure:
        """Zone pressure by name (``"field"``, ``"corner_1_prime"``, ...)."""
        for zone_pressure in self.zone_pressures:
            if zone_pressure.name == name:
                return zone_pressure
        raise KeyError(name)


def _resolve_enclosure(request: WindPressureRequest) -> EnclosureClassification:
    if request.openings:
        return classify_building_enclosure(
            request.gross_wall_area,
            request.openings,
            consider_failures=request.consider_failures,
        )
    return enclosure_for_type(request.building_classification)


def _zone_pressure(
    zone: Zone,
    name: str,
    coefficient: PressureCoefficientResult,
    effective_area: float,
    qz: float,
    enclosure: EnclosureClassification,
    use_worst_case: bool,
) -> ZonePressure:
    net = calculate_net_pressure(coefficient.gcp, enclosure, use_worst_case).scaled(qz)
    return ZonePressure(
        zone=zone,
        name=name,
        gcp=coefficient.gcp,
        effective_area=effective_area,
        external_pressure=qz * coefficient.gcp,
        net_positive=net.positive,
        net_negative=net.negative,
        controlling=net.controlling,
        is_zone1_prime=coefficient.is_zone1_prime,
        source=coefficient.source,
    )


def _special_analysis_reasons(
    request: WindPressureRequest, zone1_prime: Zone1PrimeAnalysis
) -> list[str]:
    reasons: list[str] = []
    if request.building_height > SPECIAL_ANALYSIS_HEIGHT_FT:
        reasons.append(
            f"Mean roof height {request.building_height:g} ft exceeds "
            f"{SPECIAL_ANALYSIS_HEIGHT_FT:g} ft - simplified low-rise procedure does not apply"
        )
    largest = max(request.building_length, request.building_width)
    if largest > SPECIAL_ANALYSIS_PLAN_DIMENSION_FT:
        reasons.append(
            f"Plan dimension {largest:g} ft exceeds {SPECIAL_ANALYSIS_PLAN_DIMENSION_FT:g} ft "
            "- special analysis required"
        )
    if zone1_prime.requires_professional_analysis:
        reasons.append("Zone 1' determination requires professional analysis")
    return reasons


def _unique(messages: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(messages))


def generate_calculation_summary(
    request: WindPressureRequest,
    kz: KzResult,
    qz: float,
    enclosure: EnclosureClassification,
    zone1_prime: Zone1PrimeAnalysis,
    warnings: tuple[str, ...],
) -> CalculationSummary:
    """Methodology, citations, assumptions and formulas for a calculation."""
    edition = request.asce_edition
    references = [
        f"{edition} Section 26.10 - Velocity pressure",
        f"{edition} Table 26.10-1 - Velocity pressure exposure coefficients",
        f"{edition} Section 26.2 - Enclosure classification",
        f"{edition} Table 26.13-1 - Internal pressure coefficients",
    ]
    if request.calculation_method == CalculationMethod.COMPONENT_CLADDING:
        references.append(f"{edition} Figure 30.3-2 - Low-slope roof GCp")
    else:
        references.append(f"{edition} Section 27.3 - MWFRS roof pressures")
    if zone1_prime.is_required:
        references.append(zone1_prime.asce_reference)

    assumptions = [
        f"Basic wind speed V = {request.wind_speed_mph:g} mph (3-second gust at 33 ft)",
        f"Exposure Category {request.exposure_category.value}",
        f"Topographic factor Kzt = {request.topographic_factor:g}",
        f"Directionality factor Kd = {request.directionality_factor:g}",
        "Low-slope roof (θ ≤ 7°)",
        f"Building classified as {enclosure.type.value.replace('_', ' ')} "
        f"(GCpi = ±{enclosure.gcpi_positive:g})",
        f"Component {request.component_length:g} ft × {request.component_width:g} ft",
    ]
    if request.openings:
        assumptions.append(
            f"Opening schedule: {len(request.openings)} openings, "
            f"{enclosure.percent_open_area:.2f}% of {request.gross_wall_area:g} sq ft wall area"
        )
    if enclosure.failure_scenario_considered:
        assumptions.append("Windward glazing failure scenario considered")

    formulas = [
        kz.formula,
        f"qz = 0.00256 × Kz × Kzt × Kd × V² = {qz:.2f} psf",
        "p = qz × [(GCp) - (GCpi)]",
    ]

    return CalculationSummary(
        methodology=_METHODOLOGY[request.calculation_method],
        asce_references=tuple(references),
        assumptions=tuple(assumptions),
        warnings=warnings,
        formulas_used=tuple(formulas),
    )


def calculate_wind_pressure(request: WindPressureRequest) -> WindPressureResult:
    """Zoned roof design pressures for *request*.

    Raises
    ------
    InvalidInputError
        If any sub-calculation rejects its input. No partial result is
        returned.
    """
    length = request.building_length
    width = request.building_width
    height = request.building_height
    exposure = request.exposure_category
    method = request.calculation_method

    screening = validate_wind_load_inputs(
        height=height,
        wind_speed=request.wind_speed_mph,
        exposure_category=exposure,
        building_length=length,
        building_width=width,
        effective_area=request.component_length * request.component_width,
    )
    if request.openings:
        screening = merge_validations(
            screening,
            validate_opening_schedule(request.openings, request.gross_wall_area),
        )

    kz = calculate_kz(height, exposure)
    qz = compute_qz(
        request.wind_speed_mph,
        kz.kz,
        kzt=request.topographic_factor,
        kd=request.directionality_factor,
    )
    logger.debug(
        "Kz=%.4f (h=%.1f ft, exposure %s), qz=%.3f psf",
        kz.kz,
        kz.height_used,
        exposure.value,
        qz,
    )

    enclosure = _resolve_enclosure(request)
    logger.debug(
        "Enclosure %s, GCpi=±%.2f, opening ratio %.4f",
        enclosure.type.value,
        enclosure.gcpi_positive,
        enclosure.opening_ratio,
    )

    # Floored at the ASCE minimum; identical for every zone.
    effective_area = calculate_effective_wind_area(
        request.component_length, request.component_width, Zone.FIELD
    ).area

    zone1_prime = analyze_zone1_prime(
        length, width, height, exposure, effective_wind_area=effective_area
    )
    aspect = analyze_building_aspect(length, width, height, exposure)
    layout = calculate_zone_layout(length, width, height, request.second_leg)

    zone_pressures: list[ZonePressure] = []
    for zone in Zone:
        coefficient = interpolate_pressure_coefficient(effective_area, zone, method)
        zone_pressures.append(
            _zone_pressure(
                zone, zone.value, coefficient, effective_area, qz, enclosure, request.use_worst_case
            )
        )

    # Enhanced corners are a components and cladding provision.
    if zone1_prime.is_required and method == CalculationMethod.COMPONENT_CLADDING:
        for rec in zone1_prime.recommended_zones:
            zone = Zone.CORNER if rec.type == "corner_1_prime" else Zone.PERIMETER
            coefficient = zone1_prime_pressure_coefficient(
                zone1_prime.aspect_ratio, zone1_prime.height_ratio, effective_area, zone
            )
            zone_pressures.append(
                _zone_pressure(
                    zone,
                    rec.type,
                    coefficient,
                    effective_area,
                    qz,
                    enclosure,
                    request.use_worst_case,
                )
            )

    controlling = max(zone_pressures, key=lambda zp: zp.controlling)
    max_pressure = controlling.controlling

    special_reasons = _special_analysis_reasons(request, zone1_prime)
    requires_special_analysis = bool(special_reasons)
    simplified_method_applicable = (
        height <= SPECIAL_ANALYSIS_HEIGHT_FT
        and max(length, width) <= SPECIAL_ANALYSIS_PLAN_DIMENSION_FT
    )

    warnings = _unique(
        [
            *screening.errors,
            *screening.warnings,
            *kz.warnings,
            *enclosure.warnings,
            *zone1_prime.warnings,
            *aspect.warnings,
            *special_reasons,
        ]
    )
    professional_accuracy = not warnings
    pe_ready = professional_accuracy and not requires_special_analysis

    bounds = UncertaintyBounds(
        lower=max_pressure * (1.0 - UNCERTAINTY_FRACTION),
        upper=max_pressure * (1.0 + UNCERTAINTY_FRACTION),
        confidence=(
            SPECIAL_ANALYSIS_CONFIDENCE if requires_special_analysis else STANDARD_CONFIDENCE
        ),
    )

    logger.info(
        "Roof wind pressure: %s zone controls at %.2f psf (%d zones, %d warnings)",
        controlling.name,
        max_pressure,
        len(zone_pressures),
        len(warnings),
    )

    return WindPressureResult(
        project_name=request.project_name,
        asce_edition=request.asce_edition,
        calculation_method=method,
        exposure_category=exposure,
        wind_speed_mph=request.wind_speed_mph,
        topographic_factor=request.topographic_factor,
        directionality_factor=request.directionality_factor,
        kz=kz,
        velocity_pressure=qz,
        enclosure=enclosure,
        effective_wind_area=effective_area,
        zone1_prime=zone1_prime,
        aspect=aspect,
        layout=layout,
        zone_pressures=tuple(zone_pressures),
        max_pressure=max_pressure,
        controlling_zone=controlling.name,
        uncertainty_bounds=bounds,
        warnings=warnings,
        professional_accuracy=professional_accuracy,
        pe_ready=pe_ready,
        requires_special_analysis=requires_special_analysis,
        simplified_method_applicable=simplified_method_applicable,
        summary=generate_calculation_summary(request, kz, qz, enclosure, zone1_prime, warnings),
    )


__all__ = [
    "CalculationSummary",
    "UncertaintyBounds",
    "WindPressureResult",
    "ZonePressure",
    "calculate_wind_pressure",
    "generate_calculation_summary",
]
