"""
Notes API — Health Check Route
================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   Load balancers and Docker health checks need to know whether this
       instance can store notes.
How:   Reports the storage backend status and uptime. With the database
       backend, runs SELECT 1; an unreachable database makes the service
       unhealthy (HTTP 503).
"""

import logging
import time

from fastapi import APIRouter, Response

from notes_api import __version__
from notes_api.config import settings
from notes_api.database import check_connection
from notes_api.dependencies import memory_repository
from notes_api.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Storage unavailable", "model": HealthResponse}},
    summary="Service health check",
    description=(
        "Returns the health status of the backend service and its storage. "
        "Used by Docker health checks and load balancers."
    ),
)
async def health_check(response: Response) -> HealthResponse:
    """
    Check the health of the service and its storage backend.

    Storage values:
        memory:        in-memory backend (always available)
        connected:     database answered SELECT 1
        disconnected:  database unreachable → HTTP 503
    """
    overall = "healthy"
    notes_in_memory = None

    if settings.storage_backend == "memory":
        storage = "memory"
        notes_in_memory = memory_repository.count()
    elif await check_connection():
        storage = "connected"
    else:
        storage = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage,
        notes_in_memory=notes_in_memory,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
