"""Pydantic schemas and closed enumerations for roofwind inputs."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from roofwind.asce7 import ASCE7_EDITION, DEFAULT_KD, DEFAULT_KZT, ExposureCategory

# Fallback basic wind speed when the caller's location lookup misses.
DEFAULT_WIND_SPEED_MPH = 120.0


class OpeningLocation(str, Enum):
    """Wall an opening sits in, relative to the design wind direction."""

    WINDWARD = "windward"
    LEEWARD = "leeward"
    SIDE = "side"


class OpeningType(str, Enum):
    DOOR = "door"
    WINDOW = "window"
    VENT = "vent"
    GARAGE = "garage"
    OTHER = "other"


class EnclosureType(str, Enum):
    """Building enclosure classification (ASCE 7-22 Section 26.2)."""

    ENCLOSED = "enclosed"
    PARTIALLY_ENCLOSED = "partially_enclosed"
    OPEN = "open"


class Zone(str, Enum):
    """Low-slope roof pressure zone."""

    FIELD = "field"
    PERIMETER = "perimeter"
    CORNER = "corner"


class CalculationMethod(str, Enum):
    """Pressure coefficient methodology."""

    COMPONENT_CLADDING = "component_cladding"
    MAIN_FORCE = "main_force"


class BuildingOpening(BaseModel):
    """A wall opening considered for enclosure classification."""

    model_config = ConfigDict(frozen=True)

    area: float = Field(..., ge=0, description="Opening area in square feet")
    location: OpeningLocation = Field(..., description="windward, leeward or side")
    type: OpeningType = Field(default=OpeningType.OTHER, description="Kind of opening")
    is_glazed: bool = Field(default=False, description="Opening is glazed")
    can_fail: bool = Field(
        default=False, description="Glazing may be breached during the design storm"
    )


class SecondLeg(BaseModel):
    """Second rectangular wing of an L-shaped roof."""

    model_config = ConfigDict(frozen=True)

    length: float = Field(..., gt=0, description="Leg length in feet")
    width: float = Field(..., gt=0, description="Leg width in feet")


class WindPressureRequest(BaseModel):
    """Inputs for a full zoned roof wind pressure calculation."""

    model_config = ConfigDict(frozen=True)

    building_height: float = Field(..., gt=0, description="Mean roof height in feet")
    building_length: float = Field(..., gt=0, description="Building length in feet")
    building_width: float = Field(..., gt=0, description="Building width in feet")
    second_leg: Optional[SecondLeg] = Field(
        None, description="Optional second leg for L-shaped roofs"
    )

    wind_speed_mph: float = Field(
        default=DEFAULT_WIND_SPEED_MPH, gt=0, description="Basic wind speed V in mph"
    )
    exposure_category: ExposureCategory = Field(
        default=ExposureCategory.C, description="Exposure category (B, C, or D)"
    )
    asce_edition: str = Field(
        default=ASCE7_EDITION, description="ASCE 7 edition (informational)"
    )
    calculation_method: CalculationMethod = Field(
        default=CalculationMethod.COMPONENT_CLADDING,
        description="component_cladding or main_force",
    )
    topographic_factor: float = Field(default=DEFAULT_KZT, gt=0, description="Kzt")
    directionality_factor: float = Field(
        default=DEFAULT_KD, gt=0, le=1.0, description="Kd"
    )

    component_length: float = Field(
        default=10.0, gt=0, description="Roof component length in feet"
    )
    component_width: float = Field(
        default=1.0, gt=0, description="Roof component width in feet"
    )

    building_classification: EnclosureType = Field(
        default=EnclosureType.ENCLOSED,
        description="Declared enclosure type, used when no openings are given",
    )
    openings: List[BuildingOpening] = Field(default_factory=list)
    wall_area: Optional[float] = Field(
        None, gt=0, description="Gross wall area in sq ft (defaults to 2(L+W)h)"
    )
    consider_failures: bool = Field(
        default=True, description="Treat breakable windward glazing as open"
    )
    use_worst_case: bool = Field(
        default=True, description="Combine with both internal pressure signs"
    )
    project_name: Optional[str] = Field(None, description="Optional project identifier")

    @field_validator("exposure_category", mode="before")
    @classmethod
    def _upper_exposure(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("calculation_method", mode="before")
    @classmethod
    def _method_alias(cls, value):
        # The MWFRS shorthand is common on drawings and in older requests.
        if isinstance(value, str) and value.strip().lower() == "mwfrs":
            return CalculationMethod.MAIN_FORCE
        return value

    @computed_field
    @property
    def gross_wall_area(self) -> float:
        """Wall area used for enclosure classification."""

        if self.wall_area is not None:
            return self.wall_area
        return 2.0 * (self.building_length + self.building_width) * self.building_height


class EnclosureRequest(BaseModel):
    """Inputs for a stand-alone enclosure classification."""

    wall_area: float = Field(..., gt=0, description="Gross wall area in sq ft")
    openings: List[BuildingOpening] = Field(default_factory=list)
    consider_failures: bool = True


class Zone1PrimeRequest(BaseModel):
    """Inputs for a stand-alone Zone 1' check."""

    building_length: float = Field(..., gt=0)
    building_width: float = Field(..., gt=0)
    building_height: float = Field(..., gt=0)
    exposure_category: Optional[ExposureCategory] = None
    effective_wind_area: float = Field(default=10.0, gt=0)

    @field_validator("exposure_category", mode="before")
    @classmethod
    def _upper_exposure(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


__all__ = [
    "DEFAULT_WIND_SPEED_MPH",
    "BuildingOpening",
    "CalculationMethod",
    "EnclosureRequest",
    "EnclosureType",
    "OpeningLocation",
    "OpeningType",
    "SecondLeg",
    "WindPressureRequest",
    "Zone",
    "Zone1PrimeRequest",
]
