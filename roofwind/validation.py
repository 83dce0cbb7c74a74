"""Input validation and regression checks for wind load calculations.

Two kinds of check live here:

- Input screening (:func:`validate_wind_load_inputs`) compares the
  calculation inputs against absolute limits (errors) and typical
  engineering ranges (warnings) before anything is computed.
- Regression checks (:func:`validate_calculation`, :func:`grade_accuracy`)
  compare computed values against known reference values for self-test
  tooling.

Accuracy grades
---------------
- PE-GRADE:     max error <= 5%
- ENGINEERING:  max error <= 15%
- PRELIMINARY:  max error <= 25%
- FAILED:       anything worse
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from roofwind.asce7 import ExposureCategory, parse_exposure
from roofwind.errors import InvalidInputError
from roofwind.schemas import BuildingOpening

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 0.05


@dataclass(frozen=True)
class ValidationRange:
    min: float
    max: float
    typical_min: float
    typical_max: float
    unit: str


VALIDATION_RANGES: dict[str, ValidationRange] = {
    "height": ValidationRange(5, 2000, 15, 500, "feet"),
    "wind_speed": ValidationRange(50, 300, 85, 250, "mph"),
    "building_length": ValidationRange(5, 10000, 10, 1000, "feet"),
    "building_width": ValidationRange(5, 10000, 10, 1000, "feet"),
    "effective_area": ValidationRange(1, 100000, 10, 10000, "sq ft"),
}


class AccuracyGrade(str, Enum):
    PE_GRADE = "PE-GRADE"
    ENGINEERING = "ENGINEERING"
    PRELIMINARY = "PRELIMINARY"
    FAILED = "FAILED"


# (max percent error, grade), tightest first
_GRADE_THRESHOLDS: tuple[tuple[float, AccuracyGrade], ...] = (
    (5.0, AccuracyGrade.PE_GRADE),
    (15.0, AccuracyGrade.ENGINEERING),
    (25.0, AccuracyGrade.PRELIMINARY),
)


@dataclass(frozen=True)
class InputValidation:
    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationMismatch:
    """Comparison of a computed value against a reference value."""

    is_valid: bool
    calculated: float
    expected: float
    percent_difference: float
    tolerance: float
    message: str


def merge_validations(*results: InputValidation) -> InputValidation:
    """Combine several screening results into one."""
    errors: list[str] = []
    warnings: list[str] = []
    for result in results:
        errors.extend(result.errors)
        warnings.extend(result.warnings)
    return InputValidation(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_parameter(value: float, name: str, label: str) -> InputValidation:
    """Check *value* against the absolute and typical range named *name*."""
    try:
        limits = VALIDATION_RANGES[name]
    except KeyError:
        raise InvalidInputError(f"No validation range defined for {name!r}") from None

    errors: list[str] = []
    warnings: list[str] = []
    if value < limits.min:
        errors.append(f"{label} must be at least {limits.min:g} {limits.unit}")
    elif value > limits.max:
        errors.append(f"{label} cannot exceed {limits.max:g} {limits.unit}")
    elif value < limits.typical_min or value > limits.typical_max:
        side = "below" if value < limits.typical_min else "above"
        warnings.append(
            f"{label} of {value:g} {limits.unit} is {side} typical range "
            f"({limits.typical_min:g}-{limits.typical_max:g} {limits.unit}). "
            "Consider manual verification."
        )
    return InputValidation(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_building_geometry(length: float, width: float, height: float) -> InputValidation:
    """Flag unusual building proportions. Never produces errors."""
    least = min(length, width)
    warnings: list[str] = []

    aspect_ratio = max(length, width) / least
    if aspect_ratio > 5:
        warnings.append(
            f"Building aspect ratio of {aspect_ratio:.1f}:1 is unusual. "
            "Verify wind directionality effects."
        )
    height_ratio = height / least
    if height_ratio > 5:
        warnings.append(
            f"Building height-to-width ratio of {height_ratio:.1f}:1 may require "
            "special consideration for dynamic effects."
        )
    if least < 10:
        warnings.append(
            "Very small building dimensions may not be suitable for ASCE 7 "
            "main wind force procedures."
        )
    return InputValidation(is_valid=True, warnings=tuple(warnings))


def validate_exposure_category(exposure: ExposureCategory, height: float) -> InputValidation:
    warnings: list[str] = []
    if exposure == ExposureCategory.B and height > 30:
        warnings.append(
            "Exposure B is rarely applicable for buildings over 30 feet. "
            "Verify terrain conditions within 2600 feet."
        )
    if exposure == ExposureCategory.D and height < 15:
        warnings.append(
            "Exposure D for low buildings should be verified - consider if the "
            "building is actually in a coastal area."
        )
    return InputValidation(is_valid=True, warnings=tuple(warnings))


def validate_parameter_consistency(
    height: float, wind_speed: float, exposure: ExposureCategory
) -> InputValidation:
    warnings: list[str] = []
    if wind_speed > 200:
        warnings.append(
            "Wind speeds above 200 mph require special consideration and may "
            "exceed typical structural capabilities."
        )
    if height < 20 and exposure == ExposureCategory.D:
        warnings.append(
            "Low buildings in Exposure D are uncommon. Verify coastal/open terrain conditions."
        )
    if height > 160:
        warnings.append(
            "Buildings over 160 feet may require dynamic analysis per ASCE 7 Section 26.11."
        )
    return InputValidation(is_valid=True, warnings=tuple(warnings))


def validate_wind_load_inputs(
    height: float,
    wind_speed: float,
    exposure_category: ExposureCategory | str,
    building_length: float,
    building_width: float,
    effective_area: float | None = None,
) -> InputValidation:
    """Screen calculation inputs against engineering ranges.

    Out-of-limit values are errors; values outside the typical range and
    unusual combinations are warnings. Unknown exposure categories raise
    :class:`~roofwind.errors.InvalidInputError` as everywhere else.
    """
    exposure = parse_exposure(exposure_category)
    checks = [
        validate_parameter(height, "height", "Building height"),
        validate_parameter(wind_speed, "wind_speed", "Wind speed"),
        validate_parameter(building_length, "building_length", "Building length"),
        validate_parameter(building_width, "building_width", "Building width"),
    ]
    if effective_area is not None:
        checks.append(validate_parameter(effective_area, "effective_area", "Effective wind area"))

    # Ratios are meaningless for non-physical dimensions; the range checks
    # above already reported them.
    if min(height, building_length, building_width) > 0:
        checks.append(validate_building_geometry(building_length, building_width, height))
    checks.append(validate_exposure_category(exposure, height))
    checks.append(validate_parameter_consistency(height, wind_speed, exposure))

    result = merge_validations(*checks)
    if not result.is_valid:
        logger.info("Input validation failed: %s", "; ".join(result.errors))
    return result


def validate_opening_area(
    opening_area: float, total_wall_area: float, location: str
) -> InputValidation:
    errors: list[str] = []
    warnings: list[str] = []
    if opening_area < 0:
        errors.append("Opening area cannot be negative")
    if opening_area > total_wall_area:
        errors.append("Opening area cannot exceed total wall area")
    if total_wall_area > 0 and opening_area / total_wall_area > 0.8:
        warnings.append(
            f"Opening ratio of {opening_area / total_wall_area:.1%} is very high for "
            f"{location} wall. Verify structural adequacy."
        )
    return InputValidation(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_opening_schedule(
    openings: Iterable[BuildingOpening], total_wall_area: float
) -> InputValidation:
    """Screen every opening against the gross wall area."""
    return merge_validations(
        *(
            validate_opening_area(opening.area, total_wall_area, opening.location.value)
            for opening in openings
        )
    )


def validate_calculation(
    calculated: float,
    expected: float,
    tolerance: float = DEFAULT_TOLERANCE,
) -> ValidationMismatch:
    """Compare *calculated* against a reference value.

    Parameters
    ----------
    calculated, expected : float
        Computed and reference values, in the same units.
    tolerance : float
        Allowed relative difference (0.05 = 5%).

    Raises
    ------
    InvalidInputError
        If *expected* is zero (relative difference undefined) or
        *tolerance* is negative.
    """
    if expected == 0:
        raise InvalidInputError("Expected value must be non-zero for a relative comparison")
    if tolerance < 0:
        raise InvalidInputError(f"Tolerance must not be negative (got {tolerance!r})")

    difference = abs(calculated - expected) / abs(expected)
    is_valid = difference <= tolerance
    verdict = "within" if is_valid else "exceeds"
    message = (
        f"Calculated {calculated:.3f} vs expected {expected:.3f}: "
        f"{difference * 100:.2f}% difference {verdict} {tolerance * 100:.1f}% tolerance"
    )
    if not is_valid:
        logger.warning(message)
    return ValidationMismatch(
        is_valid=is_valid,
        calculated=calculated,
        expected=expected,
        percent_difference=difference * 100.0,
        tolerance=tolerance,
        message=message,
    )


def grade_accuracy(max_percent_error: float) -> AccuracyGrade:
    """Grade a benchmark run by its largest percent error."""
    for limit, grade in _GRADE_THRESHOLDS:
        if max_percent_error <= limit:
            return grade
    return AccuracyGrade.FAILED


__all__ = [
    "DEFAULT_TOLERANCE",
    "VALIDATION_RANGES",
    "AccuracyGrade",
    "InputValidation",
    "ValidationMismatch",
    "ValidationRange",
    "grade_accuracy",
    "validate_building_geometry",
    "validate_calculation",
    "validate_exposure_category",
    "merge_validations",
    "validate_opening_area",
    "validate_opening_schedule",
    "validate_parameter",
    "validate_parameter_consistency",
    "validate_wind_load_inputs",
]
