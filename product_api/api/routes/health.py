"""Liveness & Readiness Probes.

Invariants:
    - GET /api always returns 200 {"msg": "Desde API"} if the process is up (liveness)
    - GET /api/ready returns 503 if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def liveness():
    """Basic liveness probe."""
    return {"msg": "Desde API"}


@router.get("/ready")
async def readiness(request: Request):
    """Readiness probe — includes database connectivity."""
    manager = getattr(request.app.state, "db_manager", None)
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
