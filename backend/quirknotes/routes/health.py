"""
QuirkNotes Backend — Health Route
===================================

GET /health answers 200 in every case so monitors can always read the body.
A reachable store reports `healthy` together with the number of stored
notes; an unreachable one reports `unhealthy` and no count.
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter
from sqlalchemy import func, select

from quirknotes import __version__
from quirknotes import database
from quirknotes.models.note import Note
from quirknotes.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_started_at = time.monotonic()


async def _count_notes() -> Optional[int]:
    """Note count, or None when the store cannot be reached."""
    try:
        async with database.engine.connect() as conn:
            return (await conn.execute(select(func.count(Note.id)))).scalar_one()
    except Exception as e:
        logger.warning("Health check: note store unreachable: %s", str(e))
        return None


@router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    note_count = await _count_notes()
    reachable = note_count is not None

    return HealthResponse(
        status="healthy" if reachable else "unhealthy",
        version=__version__,
        database="connected" if reachable else "disconnected",
        notes=note_count,
        uptime_seconds=round(time.monotonic() - _started_at, 2),
    )
