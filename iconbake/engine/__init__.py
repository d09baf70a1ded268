"""iconbake path interpretation and curve flattening engine."""

from iconbake.engine.context import CursorState, GeometryResult, Subpath
from iconbake.engine.interpreter import parse_path_data
from iconbake.engine.registry import command, get_registry
from iconbake.engine.transform import ViewBox, ViewBoxTransform, parse_viewbox

__all__ = [
    "command",
    "get_registry",
    "CursorState",
    "GeometryResult",
    "Subpath",
    "parse_path_data",
    "ViewBox",
    "ViewBoxTransform",
    "parse_viewbox",
]
