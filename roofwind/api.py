"""JSON API router for roofwind."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from roofwind import __version__
from roofwind.asce7 import calculate_kz, compute_qz
from roofwind.enclosure import EnclosureClassification, classify_building_enclosure
from roofwind.engine import WindPressureResult, calculate_wind_pressure
from roofwind.schemas import EnclosureRequest, WindPressureRequest, Zone1PrimeRequest
from roofwind.settings import get_settings
from roofwind.zone1prime import Zone1PrimeAnalysis, analyze_zone1_prime

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def _apply_settings_defaults(request: WindPressureRequest) -> WindPressureRequest:
    """Fill fields the caller left out from the configured defaults."""
    settings = get_settings()
    updates = {}
    if "wind_speed_mph" not in request.model_fields_set:
        updates["wind_speed_mph"] = settings.default_wind_speed_mph
    if "asce_edition" not in request.model_fields_set:
        updates["asce_edition"] = settings.default_asce_edition
    return request.model_copy(update=updates) if updates else request


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@router.post("/calculate", response_model=WindPressureResult)
async def calculate(request: WindPressureRequest):
    """
    Calculate zoned design wind pressures for a low-slope roof.

    Args:
        request: WindPressureRequest with building geometry, wind and openings

    Returns:
        WindPressureResult with per-zone pressures and review flags

    Raises:
        HTTPException: 400 for invalid input, 500 for unexpected errors
    """
    try:
        return calculate_wind_pressure(_apply_settings_defaults(request))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Calculation error: {str(e)}")
    except Exception:
        logger.exception("Unexpected error during wind pressure calculation")
        raise HTTPException(
            status_code=500, detail="An unexpected error occurred during calculation"
        )


@router.post("/enclosure", response_model=EnclosureClassification)
async def enclosure(request: EnclosureRequest):
    """Classify building enclosure from an opening schedule."""
    try:
        return classify_building_enclosure(
            request.wall_area, request.openings, request.consider_failures
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Classification error: {str(e)}")


@router.post("/zone1-prime", response_model=Zone1PrimeAnalysis)
async def zone1_prime(request: Zone1PrimeRequest):
    """Check whether Zone 1' enhanced pressures apply."""
    try:
        return analyze_zone1_prime(
            request.building_length,
            request.building_width,
            request.building_height,
            exposure=request.exposure_category,
            effective_wind_area=request.effective_wind_area,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Zone 1' analysis error: {str(e)}")


@router.get("/kz")
async def kz(
    height: float = Query(..., description="Mean roof height in feet"),
    exposure: str = Query("C", description="Exposure category (B, C, or D)"),
    wind_speed_mph: Optional[float] = Query(
        None, description="Basic wind speed; adds qz to the response when given"
    ),
):
    """Velocity pressure exposure coefficient Kz (and optionally qz)."""
    try:
        result = calculate_kz(height, exposure)
        payload = {
            "kz": result.kz,
            "height_used": result.height_used,
            "formula": result.formula,
            "warnings": list(result.warnings),
        }
        if wind_speed_mph is not None:
            payload["velocity_pressure"] = compute_qz(wind_speed_mph, result.kz)
        return payload
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Kz error: {str(e)}")
