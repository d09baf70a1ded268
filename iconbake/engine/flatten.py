"""Bezier flattening.

Cubic curves are bisected with de Casteljau until both interior control
points sit within the flatness tolerance of the chord. Quadratics are
elevated to the equivalent cubic so every curve type shares one tolerance
semantic.
"""

from __future__ import annotations

import math

from iconbake.engine.context import Point

# Subdivision stops below this depth even if the control net is not flat.
MAX_DEPTH = 12


def midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def dist2_point_line(p: Point, a: Point, b: Point) -> float:
    """Squared perpendicular distance from p to the line through a and b.

    A zero-length chord yields 0.
    """
    x1, y1 = a
    x2, y2 = b
    num = abs((y2 - y1) * p[0] - (x2 - x1) * p[1] + x2 * y1 - y2 * x1)
    den = math.hypot(y2 - y1, x2 - x1)
    if den == 0:
        return 0.0
    d = num / den
    return d * d


def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, tolerance: float) -> list[Point]:
    """Polyline approximation of a cubic Bezier, starting with p0."""
    out: list[Point] = [p0]
    tol2 = tolerance * tolerance

    def subdivide(a: Point, b: Point, c: Point, d: Point, depth: int) -> None:
        if (dist2_point_line(b, a, d) <= tol2 and dist2_point_line(c, a, d) <= tol2) or depth > MAX_DEPTH:
            out.append(d)
            return
        ab = midpoint(a, b)
        bc = midpoint(b, c)
        cd = midpoint(c, d)
        abc = midpoint(ab, bc)
        bcd = midpoint(bc, cd)
        abcd = midpoint(abc, bcd)
        subdivide(a, ab, abc, abcd, depth + 1)
        subdivide(abcd, bcd, cd, d, depth + 1)

    subdivide(p0, p1, p2, p3, 0)
    return out


def elevate_quadratic(p0: Point, p1: Point, p2: Point) -> tuple[Point, Point, Point, Point]:
    """Degree-elevate a quadratic Bezier to the identical cubic."""
    c1 = (p0[0] + 2.0 / 3.0 * (p1[0] - p0[0]), p0[1] + 2.0 / 3.0 * (p1[1] - p0[1]))
    c2 = (p2[0] + 2.0 / 3.0 * (p1[0] - p2[0]), p2[1] + 2.0 / 3.0 * (p1[1] - p2[1]))
    return p0, c1, c2, p2


def flatten_quadratic(p0: Point, p1: Point, p2: Point, tolerance: float) -> list[Point]:
    return flatten_cubic(*elevate_quadratic(p0, p1, p2), tolerance)
