"""Path-data interpreter. Drives the command handlers over one ``d`` string.

Converts path data to a list of flattened subpaths. Every vertex goes through
the caller's transform when appended. Problems are reported as warning
strings; only a malformed moveto stops interpretation early.
"""

from __future__ import annotations

import logging

from iconbake.engine import commands as _commands  # noqa: F401  (registers handlers)
from iconbake.engine.context import POINT_EPSILON, CursorState, Point, Subpath, same_point
from iconbake.engine.lexer import PathLexer
from iconbake.engine.registry import CommandRegistry, get_registry
from iconbake.engine.transform import PointTransform, identity

logger = logging.getLogger(__name__)


class SubpathBuilder:
    """Owns the subpath under construction.

    Duplicate suppression compares source (pre-transform) coordinates.
    """

    def __init__(self, transform: PointTransform = identity) -> None:
        self.transform = transform
        self.subpaths: list[Subpath] = []
        self._open: Subpath | None = None
        self._first_raw: Point | None = None
        self._last_raw: Point | None = None

    @property
    def is_open(self) -> bool:
        return self._open is not None

    def begin(self, raw: Point) -> None:
        """Finalize any open subpath (left open) and start a new one at ``raw``."""
        self._open = Subpath()
        self.subpaths.append(self._open)
        self._first_raw = raw
        self._last_raw = None
        self.append(raw)

    def append(self, raw: Point) -> None:
        if self._open is None:
            self.begin(raw)
            return
        if self._last_raw is not None and same_point(self._last_raw, raw):
            return
        self._open.points.append(self.transform(raw[0], raw[1]))
        self._last_raw = raw

    def extend(self, raws: list[Point]) -> None:
        """Append vertices; with no open subpath the first one starts a new subpath."""
        for raw in raws:
            self.append(raw)

    def close(self) -> None:
        sp = self._open
        if sp is not None and len(sp.points) > 1:
            first, last = self._first_raw, self._last_raw
            if abs(first[0] - last[0]) > POINT_EPSILON or abs(first[1] - last[1]) > POINT_EPSILON:
                sp.points.append(sp.points[0])
            sp.closed = True
        self.finish()

    def finish(self) -> None:
        self._open = None
        self._first_raw = None
        self._last_raw = None


def parse_path_data(
    data: str,
    tolerance: float,
    transform: PointTransform = identity,
    registry: CommandRegistry | None = None,
) -> tuple[list[Subpath], list[str]]:
    """Interpret one path-data string.

    Returns the subpaths in document order and the warnings collected along
    the way.
    """
    registry = registry or get_registry()
    lexer = PathLexer(data)
    builder = SubpathBuilder(transform)
    state = CursorState()
    warnings: list[str] = []
    previous = ""

    while True:
        lexer.skip_separators()
        if lexer.at_end():
            break

        implicit = lexer.at_number()
        if implicit:
            letter = previous
        else:
            letter = lexer.next_char()
            previous = letter

        spec = registry.get(letter) if letter else None
        if implicit and (spec is None or spec.arity == 0):
            # Nothing to repeat: drop the number so the lexer moves on
            lexer.next_number()
            warnings.append("stray operand")
            continue
        if spec is None:
            warnings.append(f"unsupported cmd {letter}")
            continue

        operands = lexer.next_numbers(spec.arity)
        if operands is None:
            if spec.letter == "m":
                warnings.append("bad moveto")
                logger.debug("Aborting path data at offset %d: bad moveto", lexer.pos)
                break
            warnings.append(spec.warning)
            continue

        absolute = letter.isupper()
        result = spec.fn(state, operands, absolute, tolerance)
        if result.begin_subpath:
            builder.begin(result.points[0])
            # Bare coordinate pairs after a moveto are linetos of the same case
            previous = "L" if absolute else "l"
        elif result.close_subpath:
            builder.close()
        else:
            builder.extend(result.points)
        state = result.state

    builder.finish()
    logger.debug(
        "Path data: %d subpaths, %d points, %d warnings",
        len(builder.subpaths),
        sum(len(sp.points) for sp in builder.subpaths),
        len(warnings),
    )
    return builder.subpaths, warnings
