"""Master API router. Mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from iconbake.api import flatten, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(flatten.router)
