"""Circle approximation as a closed regular polygon."""

from __future__ import annotations

import math

from iconbake.engine.context import Subpath
from iconbake.engine.transform import PointTransform, identity

MIN_CIRCLE_SEGMENTS = 8
# Used when the step angle degenerates (zero tolerance).
FALLBACK_CIRCLE_SEGMENTS = 16


def circle_segment_count(radius: float, tolerance: float, scaled_radius: float | None = None) -> int:
    """Polygon side count for a circle at the given flatness.

    ``scaled_radius`` is the radius in output units; the tolerance-vs-radius
    cutoff compares against it while the step angle uses the source radius.
    """
    if scaled_radius is None:
        scaled_radius = radius
    if scaled_radius <= 0:
        return MIN_CIRCLE_SEGMENTS
    if tolerance >= scaled_radius:
        return MIN_CIRCLE_SEGMENTS
    cos_arg = 1 - tolerance / radius
    theta = 2 * math.acos(max(-1.0, min(1.0, cos_arg)))
    if theta <= 0:
        segs = FALLBACK_CIRCLE_SEGMENTS
    else:
        segs = math.ceil(2 * math.pi / theta)
    return max(segs, MIN_CIRCLE_SEGMENTS)


def approximate_circle(
    cx: float,
    cy: float,
    radius: float,
    tolerance: float,
    transform: PointTransform = identity,
    scale: float = 1.0,
) -> Subpath:
    """Closed polygon through ``transform`` with the first vertex repeated at the end.

    ``scale`` is the transform's uniform factor, used for the segment cutoff.
    """
    segs = circle_segment_count(radius, tolerance, radius * scale)
    sp = Subpath(closed=True)
    for i in range(segs):
        ang = (i / segs) * 2 * math.pi
        sp.points.append(transform(cx + radius * math.cos(ang), cy + radius * math.sin(ang)))
    sp.points.append(sp.points[0])
    return sp
