"""ASCE 7-22 velocity pressure for low-slope roof design.

Implements the velocity pressure exposure coefficient (Table 26.10-1,
Eq. 26.10-1) and the velocity pressure qz used by every roof zone.

References
----------
ASCE/SEI 7-22, *Minimum Design Loads and Associated Criteria
for Buildings and Other Structures*.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from roofwind.errors import InvalidInputError, coerce_enum, require_positive

# ── ASCE 7-22 Edition Tag ────────────────────────────────────────────
ASCE7_EDITION = "ASCE 7-22"

# ── Eq. 26.10-1 constants ───────────────────────────────────────────
KZ_COEFFICIENT = 2.01
VELOCITY_PRESSURE_COEFFICIENT = 0.00256

# Heights above this are outside the range the low-rise procedure is
# normally applied to; the calculation still proceeds.
TYPICAL_MAX_HEIGHT_FT = 500.0

# ── Default factors (explicit request parameters) ───────────────────
DEFAULT_KZT = 1.0
DEFAULT_KD = 1.0


class ExposureCategory(str, Enum):
    """Surface roughness exposure category (ASCE 7-22 Section 26.7)."""

    B = "B"
    C = "C"
    D = "D"


@dataclass(frozen=True)
class ExposureParams:
    """Terrain exposure constants for one exposure category."""

    gradient_height: float  # zg, ft
    power_law_exponent: float  # alpha
    min_height: float  # zmin, ft
    max_height: float  # Kz power law holds up to zg


# ── Exposure parameters (ASCE 7-22 Table 26.11-1) ───────────────────
EXPOSURE_PARAMS: dict[ExposureCategory, ExposureParams] = {
    ExposureCategory.B: ExposureParams(
        gradient_height=1200.0, power_law_exponent=7.0, min_height=30.0, max_height=1200.0
    ),
    ExposureCategory.C: ExposureParams(
        gradient_height=900.0, power_law_exponent=9.5, min_height=15.0, max_height=900.0
    ),
    ExposureCategory.D: ExposureParams(
        gradient_height=700.0, power_law_exponent=11.5, min_height=15.0, max_height=700.0
    ),
}


@dataclass(frozen=True)
class KzResult:
    """Kz with the height actually used and any clamping notes."""

    kz: float
    height_used: float
    formula: str
    warnings: tuple[str, ...] = ()


def parse_exposure(exposure: ExposureCategory | str) -> ExposureCategory:
    """Return *exposure* as an :class:`ExposureCategory`.

    Raises
    ------
    InvalidInputError
        If *exposure* is not B, C, or D.
    """
    return coerce_enum(ExposureCategory, exposure, "exposure category")


def calculate_kz(height: float, exposure_category: ExposureCategory | str) -> KzResult:
    """Velocity pressure exposure coefficient Kz.

    Per ASCE 7-22 Table 26.10-1::

        Kz = 2.01 * (z / zg) ^ (2 / alpha)    for zmin <= z <= zg

    Heights outside ``[zmin, zg]`` are clamped and a warning is recorded.

    Parameters
    ----------
    height : float
        Mean roof height above ground level in feet.
    exposure_category : ExposureCategory or str
        Exposure category: ``"B"``, ``"C"``, or ``"D"``.

    Returns
    -------
    KzResult
        Kz, the height used, the formula as evaluated, and warnings.

    Raises
    ------
    InvalidInputError
        If *exposure_category* is not B, C, or D, or *height* is not positive.
    """
    exposure = parse_exposure(exposure_category)
    require_positive(height, "Building height")
    params = EXPOSURE_PARAMS[exposure]

    warnings: list[str] = []
    height_used = float(height)

    if height < params.min_height:
        height_used = params.min_height
        warnings.append(
            f"Height increased from {height:g} ft to minimum {params.min_height:g} ft "
            f"for Exposure {exposure.value}"
        )
    elif height > params.max_height:
        height_used = params.max_height
        warnings.append(
            f"Height reduced from {height:g} ft to maximum {params.max_height:g} ft "
            f"(gradient height) for Exposure {exposure.value}"
        )

    if height > TYPICAL_MAX_HEIGHT_FT:
        warnings.append(
            f"Height exceeds typical design range ({TYPICAL_MAX_HEIGHT_FT:g} ft) "
            "- verify calculation method"
        )

    kz = KZ_COEFFICIENT * (height_used / params.gradient_height) ** (
        2.0 / params.power_law_exponent
    )

    return KzResult(
        kz=kz,
        height_used=height_used,
        formula=(
            f"Kz = 2.01 × ({height_used:g}/{params.gradient_height:g})"
            f"^(2/{params.power_law_exponent:g}) = {kz:.3f}"
        ),
        warnings=tuple(warnings),
    )


def compute_qz(
    wind_speed_mph: float,
    kz: float,
    kzt: float = DEFAULT_KZT,
    kd: float = DEFAULT_KD,
) -> float:
    """Velocity pressure qz in pounds per square foot (psf).

    Per ASCE 7-22 Eq. 26.10-1::

        qz = 0.00256 * Kz * Kzt * Kd * V^2

    Parameters
    ----------
    wind_speed_mph : float
        Basic wind speed V in mph (3-second gust at 33 ft).
    kz : float
        Velocity pressure exposure coefficient.
    kzt : float
        Topographic factor. 1.0 for flat terrain (default).
    kd : float
        Wind directionality factor (default 1.0, i.e. unreduced).

    Returns
    -------
    float
        Velocity pressure in psf.
    """
    require_positive(wind_speed_mph, "Wind speed")
    require_positive(kz, "Kz")
    require_positive(kzt, "Topographic factor Kzt")
    if not 0 < kd <= 1.0:
        raise InvalidInputError(f"Directionality factor Kd must be in (0, 1] (got {kd!r})")
    return VELOCITY_PRESSURE_COEFFICIENT * kz * kzt * kd * wind_speed_mph**2


__all__ = [
    "ASCE7_EDITION",
    "DEFAULT_KD",
    "DEFAULT_KZT",
    "EXPOSURE_PARAMS",
    "KZ_COEFFICIENT",
    "TYPICAL_MAX_HEIGHT_FT",
    "VELOCITY_PRESSURE_COEFFICIENT",
    "ExposureCategory",
    "ExposureParams",
    "KzResult",
    "calculate_kz",
    "compute_qz",
    "parse_exposure",
]
