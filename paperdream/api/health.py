"""
Health check endpoints.

Liveness and readiness probes. Readiness checks the database and that the
upload directory can be written to, since card images land there.
"""

import os
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.config import settings
from paperdream.db.database import get_session

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    database: str | None = None
    uploads: str | None = None


def _uploads_writable() -> bool:
    upload_dir = Path(settings.upload_dir)
    return upload_dir.is_dir() and os.access(upload_dir, os.W_OK)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Does not check dependencies."""
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 if the database is unreachable or uploads cannot be stored.
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError:
        database = "disconnected"

    uploads = "writable" if _uploads_writable() else "unavailable"

    if database == "connected" and uploads == "writable":
        return HealthResponse(status="ready", database=database, uploads=uploads)

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="not ready", database=database, uploads=uploads)
