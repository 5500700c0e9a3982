"""
Portfolio Backend — Liveness and Health Routes
================================================

What:  GET / answers with a static message and the server time.
       GET /health additionally pings MongoDB.
Who:   GET / is what the portfolio frontend and uptime monitors already hit;
       /health is for container health checks.

Status levels (/health):
    - healthy:   MongoDB answers ping
    - unhealthy: MongoDB unreachable (still HTTP 200; the body carries the verdict)
"""

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from portfolio import __version__
from portfolio.database import MongoContext, get_mongo
from portfolio.schemas.common import HealthResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_model=StatusResponse, summary="Server status message")
async def root() -> StatusResponse:
    return StatusResponse(
        message="Portfolio server is running smoothly",
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(mongo: MongoContext = Depends(get_mongo)) -> HealthResponse:
    """
    Reports database connectivity and uptime.

    Uses the `ping` admin command, which costs the server next to nothing.
    """
    db_ok = await mongo.ping()
    if not db_ok:
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status="healthy" if db_ok else "unhealthy",
        version=__version__,
        database="connected" if db_ok else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
