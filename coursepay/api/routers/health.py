"""
Health endpoints for orchestrators.

- /health, /health/live: process is up, no dependencies touched
- /health/db: store answers `SELECT 1`
- /health/ready: store reachable and the gateway circuit not open
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from coursepay.api.deps import get_db_session
from coursepay.config import Settings, get_settings
from coursepay.infrastructure.circuit_breaker import midtrans_breaker

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "course-payments-api"


async def _database_reachable(session: AsyncSession) -> bool:
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
    except Exception as exc:  # noqa: BLE001
        logger.error("Database health check failed", exc_info=exc)
        return False
    return True


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias of /health for liveness probes."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession = Depends(get_db_session)):
    if await _database_reachable(session):
        return {"status": "healthy", "component": "database"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "unhealthy",
            "component": "database",
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """
    Readiness probe.

    Not ready while the database is unreachable or the Midtrans circuit is
    open. A missing server key is reported but does not block traffic, since
    payment creation against the in-memory gateway still works.
    """
    database_ok = await _database_reachable(session)
    gateway_state = midtrans_breaker.current_state
    checks = {
        "database": "healthy" if database_ok else "unhealthy",
        "midtrans_circuit": gateway_state,
        "midtrans_server_key": "configured" if settings.midtrans_server_key else "missing",
    }
    if not database_ok or gateway_state == "open":
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
