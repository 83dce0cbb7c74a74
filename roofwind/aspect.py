"""Building aspect analysis: geometry classification and wind vulnerability.

Classifies the building as compact, elongated, highly elongated or a
tower from its plan aspect ratio and height ratio, rates the wind
vulnerability those proportions imply, and lists the professional
warnings a reviewer should see.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from roofwind.asce7 import ExposureCategory, parse_exposure
from roofwind.errors import require_positive

logger = logging.getLogger(__name__)

TOWER_HEIGHT_RATIO = 5.0
TOWER_HEIGHT_FT = 300.0
HIGHLY_ELONGATED_ASPECT = 4.0
ELONGATED_ASPECT = 2.0

MIN_CONFIDENCE = 70


class BuildingType(str, Enum):
    COMPACT = "compact"
    ELONGATED = "elongated"
    HIGHLY_ELONGATED = "highly_elongated"
    TOWER = "tower"


class Severity(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"


class OverallRisk(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"


_DESCRIPTIONS: dict[BuildingType, str] = {
    BuildingType.TOWER: "High-rise tower building",
    BuildingType.HIGHLY_ELONGATED: "Highly elongated low-rise building",
    BuildingType.ELONGATED: "Elongated low-rise building",
    BuildingType.COMPACT: "Compact rectangular building",
}


@dataclass(frozen=True)
class RiskFactor:
    factor: str
    severity: Severity
    description: str
    mitigation: str


@dataclass(frozen=True)
class AspectAnalysis:
    """Geometry classification and wind vulnerability of a building."""

    building_type: BuildingType
    description: str
    aspect_ratio: float
    height_ratio: float
    plan_area: float
    perimeter: float
    overall_risk: OverallRisk
    risk_factors: tuple[RiskFactor, ...]
    additional_analysis_required: bool
    confidence: int
    warnings: tuple[str, ...] = ()


def classify_building(aspect_ratio: float, height_ratio: float, height: float) -> BuildingType:
    if height_ratio >= TOWER_HEIGHT_RATIO or height >= TOWER_HEIGHT_FT:
        return BuildingType.TOWER
    if aspect_ratio >= HIGHLY_ELONGATED_ASPECT:
        return BuildingType.HIGHLY_ELONGATED
    if aspect_ratio >= ELONGATED_ASPECT:
        return BuildingType.ELONGATED
    return BuildingType.COMPACT


def _risk_factors(
    aspect_ratio: float, height_ratio: float, exposure: ExposureCategory | None
) -> list[RiskFactor]:
    factors: list[RiskFactor] = []
    longer = f"Building is {aspect_ratio:.1f} times longer than wide"

    if aspect_ratio >= 4.0:
        factors.append(
            RiskFactor(
                "Extreme Aspect Ratio",
                Severity.CRITICAL,
                longer,
                "Wind tunnel testing, enhanced fastening, structural analysis",
            )
        )
    elif aspect_ratio >= 2.5:
        factors.append(
            RiskFactor(
                "High Aspect Ratio",
                Severity.HIGH,
                longer,
                "Apply Zone 1' pressure coefficients and enhanced corner design",
            )
        )
    elif aspect_ratio >= 2.0:
        factors.append(
            RiskFactor(
                "Moderate Aspect Ratio",
                Severity.MODERATE,
                longer,
                "Evaluate Zone 1' requirements case by case",
            )
        )

    if height_ratio >= 2.0:
        factors.append(
            RiskFactor(
                "High Height-to-Width Ratio",
                Severity.HIGH,
                f"Building height is {height_ratio:.1f} times the across-wind dimension",
                "Consider dynamic analysis and enhanced design factors",
            )
        )
    elif height_ratio >= 1.0:
        factors.append(
            RiskFactor(
                "Moderate Height-to-Width Ratio",
                Severity.MODERATE,
                "Building height equals or exceeds across-wind dimension",
                "Apply enhanced pressure coefficients",
            )
        )

    if exposure in (ExposureCategory.C, ExposureCategory.D) and aspect_ratio >= 2.0:
        factors.append(
            RiskFactor(
                "Open Terrain Exposure",
                Severity.MODERATE,
                f"Exposure Category {exposure.value} amplifies elongated building effects",
                "Apply exposure-enhanced pressure coefficients",
            )
        )
    return factors


def _overall_risk(factors: list[RiskFactor]) -> OverallRisk:
    counts = {severity: 0 for severity in Severity}
    for factor in factors:
        counts[factor.severity] += 1

    if counts[Severity.CRITICAL] or counts[Severity.HIGH] >= 2:
        return OverallRisk.EXTREME
    if counts[Severity.HIGH] or counts[Severity.MODERATE] >= 2:
        return OverallRisk.HIGH
    if counts[Severity.MODERATE]:
        return OverallRisk.MODERATE
    return OverallRisk.LOW


def _confidence(
    aspect_ratio: float, height_ratio: float, exposure: ExposureCategory | None
) -> int:
    confidence = 95
    if aspect_ratio >= 5.0:
        confidence -= 20
    elif aspect_ratio >= 4.0:
        confidence -= 15
    elif aspect_ratio >= 3.0:
        confidence -= 10

    if height_ratio >= 3.0:
        confidence -= 15
    elif height_ratio >= 2.0:
        confidence -= 10

    if exposure == ExposureCategory.D and aspect_ratio >= 3.0:
        confidence -= 5
    return max(confidence, MIN_CONFIDENCE)


def analyze_building_aspect(
    length: float,
    width: float,
    height: float,
    exposure: ExposureCategory | str | None = None,
) -> AspectAnalysis:
    """Classify building proportions and rate their wind vulnerability."""
    require_positive(length, "Building length")
    require_positive(width, "Building width")
    require_positive(height, "Building height")
    exposure = parse_exposure(exposure) if exposure is not None else None

    aspect_ratio = max(length / width, width / length)
    height_ratio = height / min(length, width)
    building_type = classify_building(aspect_ratio, height_ratio, height)

    factors = _risk_factors(aspect_ratio, height_ratio, exposure)
    overall_risk = _overall_risk(factors)
    additional_analysis_required = (
        overall_risk == OverallRisk.EXTREME
        or (overall_risk == OverallRisk.HIGH and aspect_ratio >= 3.0)
        or height_ratio >= 2.0
    )

    warnings: list[str] = []
    if overall_risk == OverallRisk.EXTREME:
        warnings.append(
            "CRITICAL: Building geometry creates extreme wind vulnerability "
            "- specialist consultation required"
        )
    if aspect_ratio >= HIGHLY_ELONGATED_ASPECT:
        warnings.append(
            "WARNING: Aspect ratio exceeds typical design guidance - wind tunnel testing recommended"
        )
    if height_ratio >= 2.0:
        warnings.append("WARNING: High height-to-width ratio may require dynamic analysis")
    if additional_analysis_required:
        warnings.append(
            "NOTICE: Additional wind analysis beyond ASCE 7 simplified procedures may be required"
        )

    logger.debug(
        "Aspect analysis: type=%s aspect=%.2f height_ratio=%.2f risk=%s",
        building_type.value,
        aspect_ratio,
        height_ratio,
        overall_risk.value,
    )

    return AspectAnalysis(
        building_type=building_type,
        description=_DESCRIPTIONS[building_type],
        aspect_ratio=aspect_ratio,
        height_ratio=height_ratio,
        plan_area=length * width,
        perimeter=2.0 * (length + width),
        overall_risk=overall_risk,
        risk_factors=tuple(factors),
        additional_analysis_required=additional_analysis_required,
        confidence=_confidence(aspect_ratio, height_ratio, exposure),
        warnings=tuple(warnings),
    )


__all__ = [
    "AspectAnalysis",
    "BuildingType",
    "OverallRisk",
    "RiskFactor",
    "Severity",
    "analyze_building_aspect",
    "classify_building",
]
