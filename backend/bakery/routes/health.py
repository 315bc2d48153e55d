"""
Bev's Bakery Backend - Health Check Route
==========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   With the database backend, runs SELECT 1; with the memory backend
       there is nothing external to check.

Status levels:
    - healthy:   order storage is usable (HTTP 200)
    - unhealthy: the database cannot be reached (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bakery import __version__
from bakery.config import settings
from bakery.database import engine
from bakery.schemas.order import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    db_status = "not_used"
    overall = "healthy"

    if settings.uses_database:
        db_status = "connected"
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: database unreachable: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        storage=settings.storage_backend,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    status_code = 200 if overall == "healthy" else 503
    return JSONResponse(status_code=status_code, content=body.model_dump())
