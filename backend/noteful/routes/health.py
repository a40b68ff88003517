"""
Noteful Backend: Health Check Route
====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs `SELECT 1` against the application's database.
Who:   Called by container health checks, load balancers, and monitoring.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Response
from sqlalchemy.exc import SQLAlchemyError

from noteful import __version__
from noteful.database import Database
from noteful.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

_start_time = time.time()


def create_router(database: Database) -> APIRouter:
    router = APIRouter(tags=["Health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        responses={503: {"description": "Database unreachable", "model": HealthResponse}},
        summary="Service health check",
    )
    async def health_check(response: Response) -> HealthResponse:
        """
        Check the service and its database.

        Returns:
            HealthResponse with database status and uptime.
        """
        db_status = "connected"
        overall = "healthy"

        try:
            await database.ping()
        except (SQLAlchemyError, OSError) as e:
            db_status = "disconnected"
            overall = "unhealthy"
            response.status_code = 503
            logger.warning("Health check: database unreachable: %s", str(e))

        return HealthResponse(
            status=overall,
            version=__version__,
            database=db_status,
            uptime_seconds=round(time.time() - _start_time, 2),
        )

    return router
