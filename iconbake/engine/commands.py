"""Handlers for the SVG path commands M L H V Z C S Q T A.

Each handler resolves relative operands against the cursor, flattens curves
in source coordinates and returns the new cursor state. Reflection points are
kept only by the smooth-curve family that consumes them.
"""

from __future__ import annotations

import math

from iconbake.engine.arc import flatten_arc
from iconbake.engine.context import CursorState, Point
from iconbake.engine.flatten import flatten_cubic, flatten_quadratic
from iconbake.engine.registry import CommandResult, command


def _resolve(x: float, y: float, state: CursorState, absolute: bool) -> Point:
    if absolute:
        return (x, y)
    return (x + state.current[0], y + state.current[1])


def _mirror(p: Point, about: Point) -> Point:
    return (2 * about[0] - p[0], 2 * about[1] - p[1])


def _line_to(state: CursorState, p: Point) -> CommandResult:
    return CommandResult(state=CursorState(current=p, start=state.start), points=[p])


@command(letter="m", arity=2, name="moveto", description="Start a new subpath", warning="bad moveto")
def moveto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    p = _resolve(operands[0], operands[1], state, absolute)
    return CommandResult(state=CursorState(current=p, start=p), points=[p], begin_subpath=True)


@command(letter="l", arity=2, name="lineto", warning="bad lineto")
def lineto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    return _line_to(state, _resolve(operands[0], operands[1], state, absolute))


@command(letter="h", arity=1, name="horizontal lineto")
def horizontal_lineto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    x = operands[0] if absolute else operands[0] + state.current[0]
    return _line_to(state, (x, state.current[1]))


@command(letter="v", arity=1, name="vertical lineto")
def vertical_lineto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    y = operands[0] if absolute else operands[0] + state.current[1]
    return _line_to(state, (state.current[0], y))


@command(letter="z", arity=0, name="closepath")
def closepath(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    return CommandResult(state=CursorState(current=state.start, start=state.start), close_subpath=True)


def _cubic(state: CursorState, c1: Point, c2: Point, end: Point, tolerance: float) -> CommandResult:
    pts = flatten_cubic(state.current, c1, c2, end, tolerance)
    return CommandResult(
        state=CursorState(current=end, start=state.start, cubic_reflection=_mirror(c2, end)),
        points=pts[1:],
    )


@command(letter="c", arity=6, name="curveto")
def curveto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    c1 = _resolve(operands[0], operands[1], state, absolute)
    c2 = _resolve(operands[2], operands[3], state, absolute)
    end = _resolve(operands[4], operands[5], state, absolute)
    return _cubic(state, c1, c2, end, tolerance)


@command(letter="s", arity=4, name="smooth curveto")
def smooth_curveto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    c1 = state.cubic_reflection if state.cubic_reflection is not None else state.current
    c2 = _resolve(operands[0], operands[1], state, absolute)
    end = _resolve(operands[2], operands[3], state, absolute)
    return _cubic(state, c1, c2, end, tolerance)


def _quadratic(state: CursorState, ctrl: Point, end: Point, tolerance: float) -> CommandResult:
    pts = flatten_quadratic(state.current, ctrl, end, tolerance)
    return CommandResult(
        state=CursorState(current=end, start=state.start, quad_reflection=_mirror(ctrl, end)),
        points=pts[1:],
    )


@command(letter="q", arity=4, name="quadratic curveto")
def quadratic_curveto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    ctrl = _resolve(operands[0], operands[1], state, absolute)
    end = _resolve(operands[2], operands[3], state, absolute)
    return _quadratic(state, ctrl, end, tolerance)


@command(letter="t", arity=2, name="smooth quadratic curveto")
def smooth_quadratic_curveto(
    state: CursorState, operands: list[float], absolute: bool, tolerance: float
) -> CommandResult:
    ctrl = state.quad_reflection if state.quad_reflection is not None else state.current
    end = _resolve(operands[0], operands[1], state, absolute)
    return _quadratic(state, ctrl, end, tolerance)


@command(letter="a", arity=7, name="arc")
def arc(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
    rx, ry, rotation, large_arc, sweep = operands[:5]
    end = _resolve(operands[5], operands[6], state, absolute)
    pts = flatten_arc(
        state.current,
        end,
        rx,
        ry,
        rotation * math.pi / 180.0,
        large_arc != 0,
        sweep != 0,
        tolerance,
    )
    return CommandResult(state=CursorState(current=end, start=state.start), points=pts[1:])
