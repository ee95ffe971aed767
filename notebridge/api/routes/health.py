"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the Availability Gate is closed (readiness)
    - Neither probe touches the network: remote reachability is /remote/connection

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notebridge.api.dependencies import get_remote_config
from notebridge.config import RemoteApiConfig
from notebridge.core.enforce_availability import check_availability

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "notebridge-api",
        "version": "0.1.0",
    }


@router.get("/ready")
async def readiness_check(config: RemoteApiConfig = Depends(get_remote_config)):
    """Readiness probe — includes the remote integration configuration."""
    reason = check_availability(config)
    if reason:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "local_rest_api_unavailable",
                "detail": reason,
            },
        )
    return {"status": "ready", "checks": {"local_rest_api": "configured"}}
