"""POST /api/flatten and /api/emit: one SVG document in, flattened geometry out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from iconbake.config import Settings
from iconbake.dependencies import get_settings
from iconbake.engine.builder import build_geometry
from iconbake.engine.context import GeometryResult
from iconbake.models.requests import EmitRequest, FlattenRequest
from iconbake.models.responses import EmitResponse, FlattenResponse, SubpathModel
from iconbake.svg.emitter import auto_group, emit_c, sanitize_ident
from iconbake.svg.parser import parse_svg
from iconbake.utils.geometry import as_array, bbox, winding_direction

logger = logging.getLogger(__name__)

router = APIRouter()


def _build(req: FlattenRequest, cfg: Settings) -> GeometryResult:
    try:
        doc = parse_svg(req.svg)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return build_geometry(
        doc,
        size=cfg.iconbake_size if req.size is None else req.size,
        flatness=cfg.iconbake_flatness if req.flatness is None else req.flatness,
        upscale=cfg.iconbake_upscale if req.upscale is None else req.upscale,
    )


@router.post("/flatten", response_model=FlattenResponse)
async def flatten(req: FlattenRequest, cfg: Settings = Depends(get_settings)) -> FlattenResponse:
    start = time.perf_counter()
    geometry = _build(req, cfg)

    subpaths = []
    for sp in geometry.subpaths:
        pts = as_array(sp.points)
        subpaths.append(
            SubpathModel(
                points=sp.points,
                closed=sp.closed,
                bbox=bbox(pts),
                winding=winding_direction(pts) if sp.closed else 0,
            )
        )

    elapsed = (time.perf_counter() - start) * 1000
    return FlattenResponse(
        subpaths=subpaths,
        width=geometry.width,
        height=geometry.height,
        point_count=geometry.point_count,
        warnings=geometry.warnings,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/emit", response_model=EmitResponse)
async def emit(req: EmitRequest, cfg: Settings = Depends(get_settings)) -> EmitResponse:
    geometry = _build(req, cfg)
    prefix = cfg.iconbake_prefix if req.prefix is None else req.prefix
    upscale = cfg.iconbake_upscale if req.upscale is None else req.upscale
    source = emit_c(
        req.name,
        prefix,
        geometry.subpaths,
        int(geometry.width),
        int(geometry.height),
        geometry.warnings,
        upscale,
        auto_group(prefix, req.group),
    )
    logger.info("Emitted %s: %d subpaths", req.name, len(geometry.subpaths))
    return EmitResponse(
        symbol=prefix + sanitize_ident(req.name),
        source=source,
        subpath_count=len(geometry.subpaths),
        warnings=geometry.warnings,
    )
