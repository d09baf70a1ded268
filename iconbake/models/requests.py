"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FlattenRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    flatness: float | None = Field(
        default=None,
        ge=0,
        description="Curve flattening tolerance in source units (server default if omitted)",
    )
    size: int | None = Field(
        default=None,
        ge=0,
        description="Normalize the larger viewBox extent to this size (0 = keep viewBox)",
    )
    upscale: int | None = Field(default=None, ge=1, description="Pre-rounding up-scale factor")


class EmitRequest(FlattenRequest):
    name: str = Field(default="icon", description="Icon name used for the C symbol")
    prefix: str | None = Field(default=None, description="C symbol prefix (server default if omitted)")
    group: bool = Field(
        default=False,
        description="Emit all subpaths as one shape with segment breaks",
    )
