"""Geometry builder. Runs the engine over every record of one SVG document."""

from __future__ import annotations

import logging
import time

from iconbake.engine.circle import approximate_circle
from iconbake.engine.context import GeometryResult
from iconbake.engine.interpreter import parse_path_data
from iconbake.engine.transform import ViewBoxTransform, parse_viewbox
from iconbake.svg.parser import SvgDocument

logger = logging.getLogger(__name__)


def build_geometry(
    doc: SvgDocument,
    size: int = 0,
    flatness: float = 0.25,
    upscale: int = 1,
) -> GeometryResult:
    """Flatten all paths, then all circles, of ``doc`` under its viewBox transform.

    ``size`` > 0 normalizes the larger viewBox extent to ``size`` units;
    ``upscale`` multiplies every coordinate before later integer quantization.
    """
    start = time.perf_counter()
    xf = ViewBoxTransform(parse_viewbox(doc.viewbox), size=size, upscale=upscale)
    width, height = xf.output_size
    result = GeometryResult(width=width, height=height)

    for d in doc.paths:
        subpaths, warnings = parse_path_data(d, flatness, xf)
        result.subpaths.extend(subpaths)
        result.warnings.extend(warnings)
        for w in warnings:
            logger.warning("Path data: %s", w)

    for record in doc.circles:
        parsed = record.parsed()
        if parsed is None:
            logger.debug("Skipping circle with radius %r", record.r)
            continue
        cx, cy, r = parsed
        result.subpaths.append(approximate_circle(cx, cy, r, flatness, xf, xf.factor))

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Built geometry: %d subpaths, %d points, %.0fx%.0f in %.1fms",
        len(result.subpaths),
        result.point_count,
        result.width,
        result.height,
        elapsed,
    )
    return result
