"""ViewBox coordinate transform.

Maps source coordinates into output space: translate by the viewBox origin,
apply the uniform normalization scale, then the integer pre-rounding upscale.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from iconbake.engine.context import Point

PointTransform = Callable[[float, float], Point]

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class ViewBox:
    min_x: float = 0.0
    min_y: float = 0.0
    width: float = 24.0
    height: float = 24.0


DEFAULT_VIEWBOX = ViewBox()


def parse_viewbox(text: str | None) -> ViewBox:
    """Parse ``"min-x min-y width height"``; malformed or absent gives 0 0 24 24."""
    if not text:
        return DEFAULT_VIEWBOX
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(text.strip()) if p]
    if len(parts) != 4:
        return DEFAULT_VIEWBOX
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        return DEFAULT_VIEWBOX
    return ViewBox(min_x, min_y, width, height)


def identity(x: float, y: float) -> Point:
    return (x, y)


class ViewBoxTransform:
    """Callable ``(x, y) -> (x', y')`` for one document's viewBox."""

    def __init__(self, viewbox: ViewBox = DEFAULT_VIEWBOX, size: int = 0, upscale: int = 1) -> None:
        self.viewbox = viewbox
        self.scale = 1.0
        if size > 0 and viewbox.width > 0 and viewbox.height > 0:
            self.scale = float(size) / max(viewbox.width, viewbox.height)
        self.upscale = max(int(upscale), 1)

    @property
    def factor(self) -> float:
        """Total uniform multiplier applied after translation."""
        return self.scale * float(self.upscale)

    @property
    def output_size(self) -> tuple[float, float]:
        return (self.viewbox.width * self.factor, self.viewbox.height * self.factor)

    def __call__(self, x: float, y: float) -> Point:
        return (
            (x - self.viewbox.min_x) * self.scale * float(self.upscale),
            (y - self.viewbox.min_y) * self.scale * float(self.upscale),
        )

    def __repr__(self) -> str:
        return f"ViewBoxTransform({self.viewbox!r}, scale={self.scale:.4g}, upscale={self.upscale})"
