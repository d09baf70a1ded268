"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from iconbake import __version__
from iconbake.engine.registry import get_registry
from iconbake.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        commands_registered=get_registry().count,
    )
