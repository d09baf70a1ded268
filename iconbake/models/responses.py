"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    commands_registered: int = 0


class SubpathModel(BaseModel):
    points: list[tuple[float, float]] = Field(default_factory=list)
    closed: bool = False
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    # 1 = CCW, -1 = CW, 0 = open or degenerate
    winding: int = 0


class FlattenResponse(BaseModel):
    subpaths: list[SubpathModel] = Field(default_factory=list)
    width: float = 0.0
    height: float = 0.0
    point_count: int = 0
    warnings: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0


class EmitResponse(BaseModel):
    symbol: str
    source: str
    subpath_count: int = 0
    warnings: list[str] = Field(default_factory=list)
