"""
Notes Service — Health Check Route
====================================

What:  Health check endpoint for monitoring and process supervisors.
Why:   The service is only useful if its storage directory is writable.
How:   Asks the NoteStore whether it can accept writes.

Status levels:
    - healthy:   Storage writable
    - unhealthy: Storage missing or read-only (still HTTP 200; the body says why)
"""

import logging
import time

from fastapi import APIRouter, Depends

from notes_service import __version__
from notes_service.dependencies import get_note_store
from notes_service.schemas.note import HealthResponse
from notes_service.services.storage_base import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Why module-level: Initialized once when the module loads; doesn't change
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Reports whether the notes storage directory is writable.",
)
async def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    storage_status = "writable"
    overall = "healthy"

    try:
        if not await store.health_check():
            storage_status = "unavailable"
            overall = "unhealthy"
    except OSError as e:
        storage_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: storage unreachable: %s", str(e))

    if overall != "healthy":
        logger.warning("Health check: storage %s", storage_status)

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
