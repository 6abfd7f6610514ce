"""
Health Check Endpoints.

Provides liveness and readiness checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

import asyncio
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from notepad.core.database import get_database
from notepad.core.logging import get_logger
from notepad.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)

READY_TIMEOUT_SECONDS = 5


async def check_database(request: Request) -> dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict with status, latency, and optional error message
    """
    start = utc_now()
    try:
        async with asyncio.timeout(READY_TIMEOUT_SECONDS):
            await get_database(request).ping()
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {"status": "unhealthy", "error": str(e)}

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {"status": "healthy", "latency_ms": latency_ms}


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "ok"}


@router.get("/health/ready", response_model=None)
async def readiness_check(request: Request) -> dict[str, Any] | JSONResponse:
    """
    Readiness check.

    Returns 200 if the database answers, 503 otherwise.
    """
    checks = {"database": await check_database(request)}
    body = {"checks": checks, "timestamp": utc_now().isoformat()}

    if checks["database"]["status"] != "healthy":
        logger.warning("Readiness check failed", extra={"checks": checks})
        return JSONResponse(status_code=503, content={"status": "unhealthy", **body})

    return {"status": "ok", **body}
