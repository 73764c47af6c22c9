"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the user store is unreachable (readiness)

Design Decisions:
    - Readiness goes through the UserStore protocol (ping), so it checks the
      same dependency the user routes use
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_registry.api.dependencies import get_user_store
from user_registry.core.errors import UserRegistryError
from user_registry.core.repository_protocols import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "user-registry-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: UserStore = Depends(get_user_store)):
    """Readiness probe — includes store connectivity."""
    try:
        store_ok = await store.ping()
    except UserRegistryError as e:
        logger.error(f"Store readiness check failed: {e.detail or e.message}")
        store_ok = False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_unavailable",
            },
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
