"""Health Probe — database connectivity check for load balancers and orchestrators.

Invariants:
    - GET /health never mutates state
    - 200 + status "healthy" when SELECT 1 succeeds within the configured timeout
    - 503 + status "unhealthy" + error text otherwise (no partial data)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from pokedex_api import __version__
from pokedex_api.config import get_settings
from pokedex_api.infrastructure import database
from pokedex_api.infrastructure.observability import uptime_seconds, utc_timestamp

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Readiness probe — includes database connectivity."""
    settings = get_settings()
    if database.db_manager is None:
        ok, error = False, "Database not initialized"
    else:
        ok, error = await database.db_manager.health_check(
            settings.health_check_timeout_seconds,
        )
    if not ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "timestamp": utc_timestamp(),
                "database": "disconnected",
                "error": error,
            },
        )
    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "uptime": uptime_seconds(),
        "database": "connected",
        "version": __version__,
        "environment": settings.environment,
    }
