"""SVG container parser, a regex facade over the few elements iconbake reads.

Extracts the root viewBox, every ``<path d>`` string and every ``<circle>``
record. Nothing is interpreted here; geometry is left to the engine.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_SVG_TAG_RE = re.compile(r"<svg(?=[\s>/])[^>]*>", re.IGNORECASE)
_PATH_TAG_RE = re.compile(r"<path(?=[\s>/])[^>]*>", re.IGNORECASE)
_CIRCLE_TAG_RE = re.compile(r"<circle(?=[\s>/])[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")


@dataclass
class CircleRecord:
    # Raw attribute strings; empty when the attribute is missing
    cx: str = ""
    cy: str = ""
    r: str = ""

    def parsed(self) -> tuple[float, float, float] | None:
        """(cx, cy, r) as floats, or None when the radius is missing or non-positive.

        Unparsable centre coordinates count as 0.
        """
        if not self.r:
            return None
        try:
            r = float(self.r)
        except ValueError:
            return None
        if r <= 0:
            return None
        return (_float_or_zero(self.cx), _float_or_zero(self.cy), r)


@dataclass
class SvgDocument:
    viewbox: str = ""
    paths: list[str] = field(default_factory=list)
    circles: list[CircleRecord] = field(default_factory=list)


def _float_or_zero(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG text into an SvgDocument.

    Raises ValueError when there is no ``<svg>`` root element.
    """
    text = _COMMENT_RE.sub("", svg_text)
    root = _SVG_TAG_RE.search(text)
    if root is None:
        raise ValueError("no <svg> root element")

    doc = SvgDocument(viewbox=_extract_attrs(root.group(0)).get("viewBox", ""))
    body = text[root.end():]

    for match in _PATH_TAG_RE.finditer(body):
        d = _extract_attrs(match.group(0)).get("d")
        if d:
            doc.paths.append(d)

    for match in _CIRCLE_TAG_RE.finditer(body):
        attrs = _extract_attrs(match.group(0))
        doc.circles.append(CircleRecord(cx=attrs.get("cx", ""), cy=attrs.get("cy", ""), r=attrs.get("r", "")))

    logger.info(
        "Parsed SVG: %d paths, %d circles, viewBox %r",
        len(doc.paths),
        len(doc.circles),
        doc.viewbox,
    )
    return doc
