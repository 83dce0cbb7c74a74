"""Zone 1' (enhanced corner) detection for elongated and tall buildings.

A building whose plan aspect ratio reaches 2:1, or whose height reaches
its least plan dimension while the plan is at least 1.5:1, sees wind
acceleration around its corners strong enough to warrant enhanced
corner (and, past 3:1, enhanced perimeter) pressures.

Geometry within 10% of either threshold is reported with reduced
confidence and flagged for professional review, since small dimension
changes flip the result.
"""

from __future__ import annotations

from dataclasses import dataclass

from roofwind.asce7 import ExposureCategory, parse_exposure
from roofwind.coefficients import (
    MIN_EFFECTIVE_AREA,
    ZONE1_PRIME_ASPECT_RATIO,
    ZONE1_PRIME_HEIGHT_RATIO,
    qualifies_for_zone1_prime,
    zone1_prime_pressure_coefficient,
)
from roofwind.errors import require_positive
from roofwind.schemas import Zone

ASCE_REFERENCE = "ASCE 7-16/7-22 Figure 26.11-1A, Section 26.11.1"

# Relative band around each threshold where the classification is ambiguous.
UNCERTAINTY_BAND = 0.10

BASE_CONFIDENCE = 95
BOUNDARY_CONFIDENCE = 75
LARGE_AREA_CONFIDENCE_PENALTY = 5

#   (min aspect ratio, pressure increase %), highest first
_PRESSURE_INCREASE_BANDS: tuple[tuple[float, int], ...] = (
    (3.0, 30),
    (2.5, 25),
    (2.0, 20),
)
HEIGHT_ONLY_PRESSURE_INCREASE = 15
EXPOSURE_PRESSURE_BONUS = 5
PERIMETER_PRIME_ASPECT_RATIO = 3.0


@dataclass(frozen=True)
class Zone1PrimeTrigger:
    """One geometric condition checked by the Zone 1' analysis."""

    type: str
    triggered: bool
    value: float
    threshold: float
    description: str
    impact: str


@dataclass(frozen=True)
class Zone1PrimeZone:
    """An enhanced zone recommended by the analysis."""

    type: str
    location: str
    pressure_coefficient: float
    affected_area: float
    description: str


@dataclass(frozen=True)
class Zone1PrimeAnalysis:
    is_required: bool
    aspect_ratio: float
    height_ratio: float
    pressure_increase: int
    confidence: int
    explanation: str
    triggers: tuple[Zone1PrimeTrigger, ...] = ()
    recommended_zones: tuple[Zone1PrimeZone, ...] = ()
    requires_professional_analysis: bool = False
    asce_reference: str = ASCE_REFERENCE
    warnings: tuple[str, ...] = ()


def _near(value: float, threshold: float) -> bool:
    return abs(value - threshold) <= UNCERTAINTY_BAND * threshold


def _pressure_increase(
    is_required: bool, aspect_ratio: float, height_ratio: float, exposure_triggered: bool
) -> int:
    if not is_required:
        return 0
    increase = 0
    for min_aspect, percent in _PRESSURE_INCREASE_BANDS:
        if aspect_ratio >= min_aspect:
            increase = percent
            break
    else:
        if height_ratio >= ZONE1_PRIME_HEIGHT_RATIO:
            increase = HEIGHT_ONLY_PRESSURE_INCREASE
    if exposure_triggered:
        increase += EXPOSURE_PRESSURE_BONUS
    return increase


def _explanation(
    length: float,
    width: float,
    aspect_ratio: float,
    height_ratio: float,
    pressure_increase: int,
    is_required: bool,
) -> str:
    if not is_required:
        return (
            f"This {length:g}' × {width:g}' building has a {aspect_ratio:.1f}:1 aspect "
            "ratio, which creates standard wind flow patterns. Zone 1' enhanced "
            "pressures are not required."
        )

    parts = [
        f"This {length:g}' × {width:g}' building requires Zone 1' enhanced pressures "
        f"because it is {aspect_ratio:.1f} times longer than wide."
    ]
    if aspect_ratio >= 3.0:
        parts.append("Highly elongated buildings create significant wind acceleration around corners,")
    elif aspect_ratio >= 2.5:
        parts.append("Elongated buildings cause wind to accelerate around corners,")
    else:
        parts.append("The building geometry causes enhanced wind effects at corners,")
    parts.append(f"resulting in {pressure_increase}% higher loads than standard calculations.")
    if height_ratio >= ZONE1_PRIME_HEIGHT_RATIO:
        parts.append(
            f"The building's height ({height_ratio:.1f}× the width) further amplifies these effects."
        )
    parts.append(
        "These enhanced zones affect corner areas and require stronger fastening patterns."
    )
    return " ".join(parts)


def analyze_zone1_prime(
    length: float,
    width: float,
    height: float,
    exposure: ExposureCategory | str | None = None,
    effective_wind_area: float = MIN_EFFECTIVE_AREA,
) -> Zone1PrimeAnalysis:
    """Decide whether Zone 1' enhanced pressures apply, and by how much.

    Parameters
    ----------
    length, width : float
        Plan dimensions in feet (either order).
    height : float
        Mean roof height in feet.
    exposure : ExposureCategory, str or None
        Exposure category. Open terrain (C or D) adds to the pressure
        increase of an elongated building; ``None`` skips that check.
    effective_wind_area : float
        Effective wind area of the component being designed (sq ft).

    Returns
    -------
    Zone1PrimeAnalysis

    Raises
    ------
    InvalidInputError
        If a dimension is not positive or *exposure* is not B, C, or D.
    """
    require_positive(length, "Building length")
    require_positive(width, "Building width")
    require_positive(height, "Building height")
    require_positive(effective_wind_area, "Effective wind area")
    exposure = parse_exposure(exposure) if exposure is not None else None

    aspect_ratio = max(length / width, width / length)
    least_dimension = min(length, width)
    height_ratio = height / least_dimension

    aspect_triggered = aspect_ratio >= ZONE1_PRIME_ASPECT_RATIO
    height_triggered = height_ratio >= ZONE1_PRIME_HEIGHT_RATIO
    exposure_triggered = (
        exposure in (ExposureCategory.C, ExposureCategory.D) and aspect_triggered
    )
    small_component = effective_wind_area <= MIN_EFFECTIVE_AREA

    triggers = (
        Zone1PrimeTrigger(
            type="aspect_ratio",
            triggered=aspect_triggered,
            value=aspect_ratio,
            threshold=ZONE1_PRIME_ASPECT_RATIO,
            description="Building aspect ratio (L/W or W/L)",
            impact=(
                f"{aspect_ratio:.1f}:1 ratio creates wind acceleration at corners"
                if aspect_triggered
                else "Standard wind flow patterns"
            ),
        ),
        Zone1PrimeTrigger(
            type="height_ratio",
            triggered=height_triggered,
            value=height_ratio,
            threshold=ZONE1_PRIME_HEIGHT_RATIO,
            description="Height to across-wind dimension ratio (h/D)",
            impact=(
                "Tall building enhances corner wind effects"
                if height_triggered
                else "Low-profile building"
            ),
        ),
        Zone1PrimeTrigger(
            type="exposure_effect",
            triggered=exposure_triggered,
            value=aspect_ratio,
            threshold=ZONE1_PRIME_ASPECT_RATIO,
            description="Exposure category enhancement",
            impact=(
                "Open terrain amplifies elongated building effects"
                if exposure_triggered
                else "Sheltered or standard conditions"
            ),
        ),
        Zone1PrimeTrigger(
            type="component_size",
            triggered=small_component,
            value=effective_wind_area,
            threshold=MIN_EFFECTIVE_AREA,
            description="Small component tributary area",
            impact=(
                "Small elements see higher localized pressures"
                if small_component
                else "Large tributary areas"
            ),
        ),
    )

    is_required = qualifies_for_zone1_prime(aspect_ratio, height_ratio)
    pressure_increase = _pressure_increase(
        is_required, aspect_ratio, height_ratio, exposure_triggered
    )

    zones: list[Zone1PrimeZone] = []
    if is_required:
        corner_size = min(0.1 * length, 0.1 * width, 0.5 * height)
        corner = zone1_prime_pressure_coefficient(
            aspect_ratio, height_ratio, effective_wind_area, Zone.CORNER
        )
        zones.append(
            Zone1PrimeZone(
                type="corner_1_prime",
                location="Windward corners",
                pressure_coefficient=corner.gcp,
                affected_area=corner_size * corner_size * 4,
                description=f"Enhanced corner zones: {corner_size:.0f}' × {corner_size:.0f}'",
            )
        )
        if aspect_ratio >= PERIMETER_PRIME_ASPECT_RATIO:
            perimeter = zone1_prime_pressure_coefficient(
                aspect_ratio, height_ratio, effective_wind_area, Zone.PERIMETER
            )
            zones.append(
                Zone1PrimeZone(
                    type="perimeter_1_prime",
                    location="Leading edge perimeter",
                    pressure_coefficient=perimeter.gcp,
                    affected_area=least_dimension * height * 0.1,
                    description="Enhanced perimeter zones along leading edge",
                )
            )

    near_aspect = _near(aspect_ratio, ZONE1_PRIME_ASPECT_RATIO)
    near_height = _near(height_ratio, ZONE1_PRIME_HEIGHT_RATIO)
    requires_professional_analysis = near_aspect or near_height

    confidence = BOUNDARY_CONFIDENCE if requires_professional_analysis else BASE_CONFIDENCE
    if effective_wind_area > 100:
        confidence -= LARGE_AREA_CONFIDENCE_PENALTY

    warnings: list[str] = []
    if near_aspect:
        warnings.append(
            f"Aspect ratio {aspect_ratio:.2f}:1 is within {UNCERTAINTY_BAND:.0%} of the "
            f"{ZONE1_PRIME_ASPECT_RATIO:g}:1 Zone 1' threshold - professional analysis required"
        )
    if near_height:
        warnings.append(
            f"Height ratio {height_ratio:.2f} is within {UNCERTAINTY_BAND:.0%} of the "
            f"{ZONE1_PRIME_HEIGHT_RATIO:g} Zone 1' threshold - professional analysis required"
        )
    if is_required and pressure_increase > 25:
        warnings.append(
            "High pressure increase detected - requires professional engineering review"
        )
    if aspect_ratio >= 4.0:
        warnings.append("Extremely elongated building - consider wind tunnel testing")
    if height_ratio >= 2.0:
        warnings.append("Very tall building - additional analysis may be required")

    return Zone1PrimeAnalysis(
        is_required=is_required,
        aspect_ratio=aspect_ratio,
        height_ratio=height_ratio,
        pressure_increase=pressure_increase,
        confidence=confidence,
        explanation=_explanation(
            length, width, aspect_ratio, height_ratio, pressure_increase, is_required
        ),
        triggers=triggers,
        recommended_zones=tuple(zones),
        requires_professional_analysis=requires_professional_analysis,
        warnings=tuple(warnings),
    )


__all__ = [
    "ASCE_REFERENCE",
    "UNCERTAINTY_BAND",
    "Zone1PrimeAnalysis",
    "Zone1PrimeTrigger",
    "Zone1PrimeZone",
    "analyze_zone1_prime",
]
