"""Health Probe - liveness endpoint.

Invariants:
    - GET /health/ always returns 200 if the process is up
"""

from fastapi import APIRouter, status

from think_engine.config import get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": "think-engine",
        "version": get_settings().engine_version,
    }
