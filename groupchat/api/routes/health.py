"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - Neither probe requires the identity header
"""

import logging

from fastapi import APIRouter, Depends, status

from groupchat.api.dependencies import AppServices, get_services
from groupchat.api.responses import json_response

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return json_response(status.HTTP_200_OK, {
        "status": "healthy",
        "service": "groupchat-api",
        "version": "1.0.0",
    })


@router.get("/ready")
async def readiness_check(services: AppServices = Depends(get_services)):
    """Readiness probe — includes database connectivity."""
    if not await services.db.health_check():
        return json_response(status.HTTP_503_SERVICE_UNAVAILABLE, {
            "status": "not_ready",
            "reason": "database_unavailable",
        })
    return json_response(
        status.HTTP_200_OK, {"status": "ready", "checks": {"database": "healthy"}},
    )
