"""FastAPI application.

Single entry point that mounts the JSON API.
Run with: uvicorn app.application:app --reload
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roofwind import __version__
from roofwind.api import router as api_router
from roofwind.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Roofwind Calculator",
    description=(
        "ASCE 7 wind pressure calculator for low-slope roofs. "
        "Zoned design pressures, enclosure classification and Zone 1' checks."
    ),
    version=__version__,
)

# CORS - configurable via ROOFWIND_CORS_ORIGINS env var
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)  # /api/health, /api/calculate, /api/enclosure, ...


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Roofwind API",
        "version": __version__,
        "endpoints": [
            "/api/health",
            "/api/calculate",
            "/api/enclosure",
            "/api/zone1-prime",
            "/api/kz",
        ],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
