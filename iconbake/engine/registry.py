"""Path command registry. Every command handler is a pure function registered via decorator.

Usage:
    @command(letter="l", arity=2, name="lineto")
    def lineto(state: CursorState, operands: list[float], absolute: bool, tolerance: float) -> CommandResult:
        ...

A handler receives the cursor state and its operand group and returns the
new state plus the (pre-transform) vertices to append. Subpath bookkeeping
stays in the interpreter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from iconbake.engine.context import CursorState, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    state: CursorState
    # Vertices to append, excluding the one already at the cursor
    points: list[Point] = field(default_factory=list)
    # moveto: finalize the open subpath and start a new one at points[0]
    begin_subpath: bool = False
    # close-path: close the open subpath
    close_subpath: bool = False


CommandFn = Callable[[CursorState, list[float], bool, float], CommandResult]


@dataclass
class CommandSpec:
    letter: str
    arity: int
    fn: CommandFn
    name: str = ""
    description: str = ""
    # Recorded when the operand group is malformed
    warning: str = ""

    def __post_init__(self) -> None:
        if not self.warning:
            self.warning = f"bad {self.letter}"


class CommandRegistry:
    """Lookup of command handlers by lower-case letter."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.letter in self._commands:
            raise ValueError(f"Duplicate path command: {spec.letter}")
        self._commands[spec.letter] = spec
        logger.debug("Registered path command %s (%s)", spec.letter, spec.name)

    def get(self, letter: str) -> CommandSpec | None:
        return self._commands.get(letter.lower())

    def all(self) -> list[CommandSpec]:
        return sorted(self._commands.values(), key=lambda s: s.letter)

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(*, letter: str, arity: int, name: str = "", description: str = "", warning: str = ""):
    """Decorator to register a path command handler."""

    def decorator(fn: CommandFn) -> CommandFn:
        _registry.register(
            CommandSpec(
                letter=letter.lower(),
                arity=arity,
                fn=fn,
                name=name or fn.__name__,
                description=description,
                warning=warning,
            )
        )
        return fn

    return decorator
