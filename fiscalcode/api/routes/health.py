"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET {prefix}/health/ always returns 200 if process is up (liveness)

Design Decisions:
    - No readiness probe: the service has no backing store to check
"""

import logging
from fastapi import APIRouter, status

from fiscalcode.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }
