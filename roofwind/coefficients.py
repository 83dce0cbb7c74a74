"""External pressure coefficients (GCp) for low-slope roofs.

Component and cladding values follow the three-tier step form of ASCE
7-22 Figure 30.3-2 (effective wind area <= 10, <= 100, > 100 sq ft).
The figure's sloped segment between 10 and 100 sq ft is represented by
the middle tier rather than by interpolation; results in that band are
flagged ``interpolated`` so reports can call it out.

Main wind force resisting system values are single roof coefficients
per zone with no area dependency.
"""

from __future__ import annotations

from dataclasses import dataclass

from roofwind.errors import coerce_enum, require_positive
from roofwind.schemas import CalculationMethod, Zone

# ASCE minimum effective wind area for components and cladding (sq ft).
MIN_EFFECTIVE_AREA = 10.0
TIER_BREAKPOINTS = (10.0, 100.0)

# ── Component & cladding GCp tiers: (<=10, <=100, >100 sq ft) ───────
_CC_GCP: dict[Zone, tuple[float, float, float]] = {
    Zone.FIELD: (-1.0, -0.9, -0.8),
    Zone.PERIMETER: (-1.5, -1.4, -1.2),
    Zone.CORNER: (-2.5, -2.4, -2.0),
}

# ── MWFRS roof GCp per zone ─────────────────────────────────────────
_MWFRS_GCP: dict[Zone, float] = {
    Zone.FIELD: -0.7,
    Zone.PERIMETER: -1.2,
    Zone.CORNER: -1.8,
}

_SOURCES: dict[CalculationMethod, str] = {
    CalculationMethod.COMPONENT_CLADDING: "ASCE 7-22 Figure 26.11-1",
    CalculationMethod.MAIN_FORCE: "ASCE 7-22 Figure 26.5-2",
}

# ── Zone 1' thresholds and enhanced coefficients ────────────────────
ZONE1_PRIME_ASPECT_RATIO = 2.0
ZONE1_PRIME_HEIGHT_RATIO = 1.0
ZONE1_PRIME_MIN_ASPECT_WITH_HEIGHT = 1.5
ZONE1_PRIME_SOURCE = "ASCE 7-22 Figure 26.11-1A (Zone 1')"

#   (min aspect ratio, GCp for area <= 10, GCp for area > 10), highest first
_ZONE1_PRIME_GCP: dict[Zone, tuple[tuple[float, float, float], ...]] = {
    Zone.CORNER: ((3.0, -3.4, -3.0), (2.5, -3.2, -2.8), (0.0, -2.8, -2.5)),
    Zone.PERIMETER: ((3.0, -2.2, -1.8), (0.0, -2.0, -1.6)),
    Zone.FIELD: ((0.0, -1.0, -0.8),),
}


@dataclass(frozen=True)
class EffectiveWindArea:
    """Effective wind area of a roof component."""

    area: float
    length: float
    width: float
    zone: Zone
    description: str


@dataclass(frozen=True)
class PressureCoefficientResult:
    """External pressure coefficient with its citation."""

    gcp: float
    source: str
    interpolated: bool
    is_zone1_prime: bool = False


def calculate_effective_wind_area(
    length: float,
    width: float,
    zone: Zone | str,
    description: str | None = None,
) -> EffectiveWindArea:
    """Effective wind area for a component, floored at 10 sq ft.

    Raises
    ------
    InvalidInputError
        If a dimension is not positive or *zone* is unknown.
    """
    require_positive(length, "Component length")
    require_positive(width, "Component width")
    zone = coerce_enum(Zone, zone, "zone")
    return EffectiveWindArea(
        area=max(length * width, MIN_EFFECTIVE_AREA),
        length=length,
        width=width,
        zone=zone,
        description=description or f"{zone.value} zone component",
    )


def _tier_index(effective_area: float) -> int:
    low, high = TIER_BREAKPOINTS
    if effective_area <= low:
        return 0
    if effective_area <= high:
        return 1
    return 2


def interpolate_pressure_coefficient(
    effective_area: float,
    zone: Zone | str,
    method: CalculationMethod | str = CalculationMethod.COMPONENT_CLADDING,
) -> PressureCoefficientResult:
    """GCp for a roof zone and effective wind area.

    Parameters
    ----------
    effective_area : float
        Effective wind area in sq ft.
    zone : Zone or str
        ``"field"``, ``"perimeter"`` or ``"corner"``.
    method : CalculationMethod or str
        ``"component_cladding"`` (area tiers) or ``"main_force"``.

    Returns
    -------
    PressureCoefficientResult
        ``interpolated`` is true only for 10 < area < 100 sq ft.
    """
    require_positive(effective_area, "Effective wind area")
    zone = coerce_enum(Zone, zone, "zone")
    method = coerce_enum(CalculationMethod, method, "calculation method")

    if method == CalculationMethod.COMPONENT_CLADDING:
        gcp = _CC_GCP[zone][_tier_index(effective_area)]
    else:
        gcp = _MWFRS_GCP[zone]

    low, high = TIER_BREAKPOINTS
    return PressureCoefficientResult(
        gcp=gcp,
        source=_SOURCES[method],
        interpolated=low < effective_area < high,
    )


def qualifies_for_zone1_prime(aspect_ratio: float, height_ratio: float) -> bool:
    """True when the geometry calls for Zone 1' enhanced pressures."""
    return aspect_ratio >= ZONE1_PRIME_ASPECT_RATIO or (
        height_ratio >= ZONE1_PRIME_HEIGHT_RATIO
        and aspect_ratio >= ZONE1_PRIME_MIN_ASPECT_WITH_HEIGHT
    )


def zone1_prime_pressure_coefficient(
    aspect_ratio: float,
    height_ratio: float,
    effective_area: float,
    zone: Zone | str,
) -> PressureCoefficientResult:
    """Zone 1' GCp, or the standard C&C value when the geometry does not qualify."""
    zone = coerce_enum(Zone, zone, "zone")
    if not qualifies_for_zone1_prime(aspect_ratio, height_ratio):
        return interpolate_pressure_coefficient(effective_area, zone)

    require_positive(effective_area, "Effective wind area")
    for min_aspect, small_area_gcp, large_area_gcp in _ZONE1_PRIME_GCP[zone]:
        if aspect_ratio >= min_aspect:
            gcp = small_area_gcp if effective_area <= MIN_EFFECTIVE_AREA else large_area_gcp
            break
    return PressureCoefficientResult(
        gcp=gcp,
        source=ZONE1_PRIME_SOURCE,
        interpolated=False,
        is_zone1_prime=True,
    )


__all__ = [
    "MIN_EFFECTIVE_AREA",
    "TIER_BREAKPOINTS",
    "ZONE1_PRIME_ASPECT_RATIO",
    "ZONE1_PRIME_HEIGHT_RATIO",
    "ZONE1_PRIME_MIN_ASPECT_WITH_HEIGHT",
    "ZONE1_PRIME_SOURCE",
    "EffectiveWindArea",
    "PressureCoefficientResult",
    "calculate_effective_wind_area",
    "interpolate_pressure_coefficient",
    "qualifies_for_zone1_prime",
    "zone1_prime_pressure_coefficient",
]
