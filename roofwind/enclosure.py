"""Building enclosure classification per ASCE 7-22 Section 26.2.

Classifies a building as enclosed, partially enclosed or open from its
gross wall area and opening schedule, and returns the matching internal
pressure coefficients GCpi (Table 26.13-1).

A glazing-failure scenario can be considered: a large windward glazed
opening that may be breached by windborne debris is treated as open,
which forces the partially enclosed classification.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from roofwind.errors import InvalidInputError, coerce_enum, require_positive
from roofwind.schemas import BuildingOpening, EnclosureType, OpeningLocation

# ── Internal pressure coefficients (ASCE 7-22 Table 26.13-1) ────────
GCPI: dict[EnclosureType, float] = {
    EnclosureType.ENCLOSED: 0.18,
    EnclosureType.PARTIALLY_ENCLOSED: 0.55,
    EnclosureType.OPEN: 0.0,
}

# ── Section 26.2 thresholds ─────────────────────────────────────────
ENCLOSED_MAX_OPENING_RATIO = 0.01
PARTIALLY_ENCLOSED_MAX_OPENING_RATIO = 0.20
DOMINANT_OPENING_FACTOR = 1.1

# A windward glazed opening counts as "large" for the failure scenario
# when it exceeds the lesser of 4 sq ft or 1% of the wall area, the
# opening size that makes a wall partially enclosed under Section 26.2.
LARGE_OPENING_MIN_AREA = 4.0
LARGE_OPENING_WALL_FRACTION = 0.01


@dataclass(frozen=True)
class EnclosureClassification:
    """Result of an enclosure classification."""

    type: EnclosureType
    gcpi_positive: float
    gcpi_negative: float
    opening_ratio: float
    has_dominant_opening: bool
    failure_scenario_considered: bool
    windward_opening_area: float
    total_opening_area: float
    warnings: tuple[str, ...] = ()

    @property
    def percent_open_area(self) -> float:
        return self.opening_ratio * 100.0


def large_opening_threshold(wall_area: float) -> float:
    """Smallest opening area (sq ft) treated as a large opening."""
    return min(LARGE_OPENING_MIN_AREA, LARGE_OPENING_WALL_FRACTION * wall_area)


def is_large_opening(opening: BuildingOpening, wall_area: float) -> bool:
    return opening.area > large_opening_threshold(wall_area)


def _classification(
    enclosure_type: EnclosureType,
    *,
    opening_ratio: float,
    has_dominant_opening: bool,
    failure_scenario_considered: bool,
    windward_opening_area: float,
    total_opening_area: float,
    warnings: Iterable[str],
) -> EnclosureClassification:
    gcpi = GCPI[enclosure_type]
    return EnclosureClassification(
        type=enclosure_type,
        gcpi_positive=gcpi,
        gcpi_negative=-gcpi if gcpi else 0.0,
        opening_ratio=opening_ratio,
        has_dominant_opening=has_dominant_opening,
        failure_scenario_considered=failure_scenario_considered,
        windward_opening_area=windward_opening_area,
        total_opening_area=total_opening_area,
        warnings=tuple(warnings),
    )


def classify_building_enclosure(
    wall_area: float,
    openings: Iterable[BuildingOpening],
    consider_failures: bool = True,
) -> EnclosureClassification:
    """Classify building enclosure per ASCE 7-22 Section 26.2.

    Parameters
    ----------
    wall_area : float
        Gross wall area in square feet.
    openings : iterable of BuildingOpening
        Opening schedule. Each opening belongs to exactly one wall.
    consider_failures : bool
        When true, a large windward glazed opening that can fail forces
        the partially enclosed classification.

    Returns
    -------
    EnclosureClassification

    Raises
    ------
    InvalidInputError
        If *wall_area* is not positive or an opening area is negative.
    """
    require_positive(wall_area, "Wall area")
    openings = tuple(openings)
    for opening in openings:
        if opening.area < 0:
            raise InvalidInputError(f"Opening area cannot be negative (got {opening.area})")

    warnings: list[str] = []

    windward = [o for o in openings if o.location == OpeningLocation.WINDWARD]
    total_opening_area = sum(o.area for o in openings)
    windward_opening_area = sum(o.area for o in windward)
    other_opening_area = total_opening_area - windward_opening_area

    opening_ratio = total_opening_area / wall_area
    has_dominant_opening = windward_opening_area > DOMINANT_OPENING_FACTOR * other_opening_area

    common = dict(
        opening_ratio=opening_ratio,
        windward_opening_area=windward_opening_area,
        total_opening_area=total_opening_area,
    )

    if consider_failures:
        failable = [
            o for o in windward if o.is_glazed and o.can_fail and is_large_opening(o, wall_area)
        ]
        if failable:
            largest = max(o.area for o in failable)
            warnings.append(
                "Failure scenario: large glazed windward opening "
                f"({largest:g} sq ft) may fail, creating partially enclosed condition"
            )
            return _classification(
                EnclosureType.PARTIALLY_ENCLOSED,
                has_dominant_opening=True,
                failure_scenario_considered=True,
                warnings=warnings,
                **common,
            )

    if opening_ratio <= ENCLOSED_MAX_OPENING_RATIO and not has_dominant_opening:
        enclosure_type = EnclosureType.ENCLOSED
    elif opening_ratio <= PARTIALLY_ENCLOSED_MAX_OPENING_RATIO and has_dominant_opening:
        enclosure_type = EnclosureType.PARTIALLY_ENCLOSED
        warnings.append("Building has dominant opening - classified as partially enclosed")
    else:
        enclosure_type = EnclosureType.OPEN
        if opening_ratio > PARTIALLY_ENCLOSED_MAX_OPENING_RATIO:
            warnings.append(
                f"Building opening ratio ({opening_ratio * 100:.1f}%) exceeds 20% "
                "- classified as open"
            )
        else:
            warnings.append(
                f"Building opening ratio ({opening_ratio * 100:.1f}%) exceeds 1% "
                "without a dominant windward opening - classified as open"
            )

    return _classification(
        enclosure_type,
        has_dominant_opening=has_dominant_opening,
        failure_scenario_considered=False,
        warnings=warnings,
        **common,
    )


def enclosure_for_type(enclosure_type: EnclosureType | str) -> EnclosureClassification:
    """Classification for a declared enclosure type with no opening schedule."""
    enclosure_type = coerce_enum(EnclosureType, enclosure_type, "building classification")
    return _classification(
        enclosure_type,
        opening_ratio=0.0,
        has_dominant_opening=enclosure_type == EnclosureType.PARTIALLY_ENCLOSED,
        failure_scenario_considered=False,
        windward_opening_area=0.0,
        total_opening_area=0.0,
        warnings=(
            f"Enclosure declared as {enclosure_type.value} - "
            "verify against the building's opening schedule",
        ),
    )


__all__ = [
    "DOMINANT_OPENING_FACTOR",
    "ENCLOSED_MAX_OPENING_RATIO",
    "GCPI",
    "LARGE_OPENING_MIN_AREA",
    "LARGE_OPENING_WALL_FRACTION",
    "PARTIALLY_ENCLOSED_MAX_OPENING_RATIO",
    "EnclosureClassification",
    "classify_building_enclosure",
    "enclosure_for_type",
    "is_large_opening",
    "large_opening_threshold",
]
