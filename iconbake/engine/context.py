"""Core data model: points, subpaths, cursor state and the builder result.

Everything here is transient: created and consumed within one conversion call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]

# Absolute per-axis epsilon for "same point" comparisons.
POINT_EPSILON = 1e-6


def same_point(a: Point, b: Point) -> bool:
    """True when both coordinates differ by less than POINT_EPSILON."""
    return abs(a[0] - b[0]) < POINT_EPSILON and abs(a[1] - b[1]) < POINT_EPSILON


@dataclass
class Subpath:
    """One flattened polyline, handed to the caller once finalized."""

    points: list[Point] = field(default_factory=list)
    # True only when an explicit close-path command was seen
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class CursorState:
    """Interpreter cursor: current point, subpath start and reflection points."""

    current: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)
    # Mirrored second control point of the last C/S command
    cubic_reflection: Point | None = None
    # Mirrored control point of the last Q/T command
    quad_reflection: Point | None = None


@dataclass
class GeometryResult:
    """Flattened geometry of one document plus its effective output size."""

    subpaths: list[Subpath] = field(default_factory=list)
    width: float = 24.0
    height: float = 24.0
    warnings: list[str] = field(default_factory=list)

    @property
    def point_count(self) -> int:
        return sum(len(sp.points) for sp in self.subpaths)
