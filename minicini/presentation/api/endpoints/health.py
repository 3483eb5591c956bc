"""Health check endpoint — probes the store and reports why it failed."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from minicini.application.schemas import HealthErrorResponse, HealthResponse
from minicini.infrastructure.database import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={500: {"model": HealthErrorResponse}},
)
async def health_check(database: Database = Depends(get_database)):
    """Runs ``SELECT 1`` against the store.

    Unlike the other endpoints, a failure here echoes the driver's message
    back to the caller.
    """
    try:
        db_ok = await database.ping()
    except Exception as exc:
        logger.exception("Health check failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": str(exc)},
        )
    return HealthResponse(status="ok", db=db_ok, timestamp=datetime.now(timezone.utc))
