"""Roofwind - ASCE 7 wind pressure calculator for low-slope roofs."""

__version__ = "0.1.0"

from roofwind.asce7 import (  # noqa: E402
    EXPOSURE_PARAMS,
    ExposureCategory,
    ExposureParams,
    KzResult,
    calculate_kz,
    compute_qz,
)
from roofwind.aspect import AspectAnalysis, analyze_building_aspect  # noqa: E402
from roofwind.coefficients import (  # noqa: E402
    EffectiveWindArea,
    PressureCoefficientResult,
    calculate_effective_wind_area,
    interpolate_pressure_coefficient,
    zone1_prime_pressure_coefficient,
)
from roofwind.enclosure import (  # noqa: E402
    EnclosureClassification,
    classify_building_enclosure,
    enclosure_for_type,
)
from roofwind.engine import (  # noqa: E402
    CalculationSummary,
    UncertaintyBounds,
    WindPressureResult,
    ZonePressure,
    calculate_wind_pressure,
)
from roofwind.errors import InvalidInputError  # noqa: E402
from roofwind.layout import ZoneLayout, calculate_zone_layout  # noqa: E402
from roofwind.pressure import NetPressure, calculate_net_pressure  # noqa: E402
from roofwind.schemas import (  # noqa: E402
    BuildingOpening,
    CalculationMethod,
    EnclosureType,
    OpeningLocation,
    OpeningType,
    SecondLeg,
    WindPressureRequest,
    Zone,
)
from roofwind.validation import (  # noqa: E402
    AccuracyGrade,
    InputValidation,
    ValidationMismatch,
    grade_accuracy,
    validate_calculation,
    validate_wind_load_inputs,
)
from roofwind.zone1prime import Zone1PrimeAnalysis, analyze_zone1_prime  # noqa: E402

__all__ = [
    "__version__",
    "EXPOSURE_PARAMS",
    "AccuracyGrade",
    "AspectAnalysis",
    "BuildingOpening",
    "CalculationMethod",
    "CalculationSummary",
    "EffectiveWindArea",
    "EnclosureClassification",
    "EnclosureType",
    "ExposureCategory",
    "ExposureParams",
    "InputValidation",
    "InvalidInputError",
    "KzResult",
    "NetPressure",
    "OpeningLocation",
    "OpeningType",
    "PressureCoefficientResult",
    "SecondLeg",
    "UncertaintyBounds",
    "ValidationMismatch",
    "WindPressureRequest",
    "WindPressureResult",
    "Zone",
    "Zone1PrimeAnalysis",
    "ZoneLayout",
    "ZonePressure",
    "analyze_building_aspect",
    "analyze_zone1_prime",
    "calculate_effective_wind_area",
    "calculate_kz",
    "calculate_net_pressure",
    "calculate_wind_pressure",
    "calculate_zone_layout",
    "classify_building_enclosure",
    "compute_qz",
    "enclosure_for_type",
    "grade_accuracy",
    "interpolate_pressure_coefficient",
    "validate_calculation",
    "validate_wind_load_inputs",
    "zone1_prime_pressure_coefficient",
]
