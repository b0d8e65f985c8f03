"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the transfer store is not initialized (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from transfer_orders.config import get_settings
from transfer_orders.infrastructure import transfer_store as store_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "transfer-orders-api",
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes store availability."""
    store = store_module.transfer_store
    if store is None:
        logger.warning("Readiness check failed: store not initialized")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"store": "healthy"},
        "transfers": len(store),
    }
