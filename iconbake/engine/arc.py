"""Elliptical arc solver.

Converts the SVG endpoint parameterization (start, end, radii, x-axis
rotation, large-arc and sweep flags) to center form, following the SVG
arc implementation notes (F.6.5 / F.6.6), and samples it at equal angular
steps.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from iconbake.engine.context import Point

# Segment count used when the tolerance gives no usable step angle.
FALLBACK_ARC_SEGMENTS = 16


@dataclass(frozen=True)
class ArcCenter:
    """Center parameterization: arc(t) = center + R(phi) @ (rx cos t, ry sin t)."""

    cx: float
    cy: float
    rx: float
    ry: float
    phi: float
    theta1: float
    delta: float

    def point_at(self, theta: float) -> Point:
        cos_phi = math.cos(self.phi)
        sin_phi = math.sin(self.phi)
        x = self.cx + self.rx * math.cos(theta) * cos_phi - self.ry * math.sin(theta) * sin_phi
        y = self.cy + self.rx * math.cos(theta) * sin_phi + self.ry * math.sin(theta) * cos_phi
        return (x, y)


def vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from u to v."""
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def endpoint_to_center(
    p0: Point,
    p1: Point,
    rx: float,
    ry: float,
    phi: float,
    large_arc: bool,
    sweep: bool,
) -> ArcCenter | None:
    """Solve the center form of an endpoint arc.

    ``phi`` is in radians. Radii must be non-zero; radii too small to span the
    endpoints are scaled up uniformly. Returns None when the endpoints are too
    close for the center to be solved in floating point.
    """
    rx = abs(rx)
    ry = abs(ry)
    cos_phi = math.cos(phi)
    sin_phi = math.sin(phi)

    # Step 1: endpoints into the ellipse's local frame
    dx2 = (p0[0] - p1[0]) / 2.0
    dy2 = (p0[1] - p1[1]) / 2.0
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    # Radius correction
    if rx * rx == 0 or ry * ry == 0:
        return None
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        s = math.sqrt(lam)
        rx *= s
        ry *= s

    # Step 2: center in the local frame
    sign = -1.0 if large_arc == sweep else 1.0
    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    if num < 0:
        num = 0.0
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    if den == 0 or not math.isfinite(den) or not math.isfinite(num):
        return None
    coef = sign * math.sqrt(num / den)
    cxp = coef * (rx * y1p) / ry
    cyp = coef * (-ry * x1p) / rx

    # Step 3: back to the user frame
    cx = cos_phi * cxp - sin_phi * cyp + (p0[0] + p1[0]) / 2.0
    cy = sin_phi * cxp + cos_phi * cyp + (p0[1] + p1[1]) / 2.0

    # Step 4: start angle and sweep
    ux = (x1p - cxp) / rx
    uy = (y1p - cyp) / ry
    vx = (-x1p - cxp) / rx
    vy = (-y1p - cyp) / ry
    theta1 = vector_angle(1.0, 0.0, ux, uy)
    delta = vector_angle(ux, uy, vx, vy)
    if not sweep and delta > 0:
        delta -= 2 * math.pi
    elif sweep and delta < 0:
        delta += 2 * math.pi

    return ArcCenter(cx=cx, cy=cy, rx=rx, ry=ry, phi=phi, theta1=theta1, delta=delta)


def arc_segment_count(delta: float, rx: float, ry: float, tolerance: float) -> int:
    """Number of chords so each stays within ``tolerance`` of the ellipse."""
    cos_arg = 1 - tolerance / (max(rx, ry) + 1e-9)
    theta_max = 2 * math.acos(max(-1.0, min(1.0, cos_arg)))
    if theta_max <= 0:
        return FALLBACK_ARC_SEGMENTS
    segs = math.ceil(abs(delta) / theta_max)
    return max(segs, 1)


def flatten_arc(
    p0: Point,
    p1: Point,
    rx: float,
    ry: float,
    phi: float,
    large_arc: bool,
    sweep: bool,
    tolerance: float,
) -> list[Point]:
    """Polyline approximation of an endpoint arc, starting with p0.

    A zero radius, or endpoints too close to solve, degrade to the straight
    segment; coincident endpoints produce no arc at all.
    """
    if rx == 0 or ry == 0:
        return [p0, p1]
    if p0 == p1:
        return [p0]
    arc = endpoint_to_center(p0, p1, rx, ry, phi, large_arc, sweep)
    if arc is None:
        return [p0, p1]
    segs = arc_segment_count(arc.delta, arc.rx, arc.ry, tolerance)
    step = arc.delta / segs
    pts = [p0]
    for i in range(1, segs + 1):
        pts.append(arc.point_at(arc.theta1 + step * i))
    return pts
