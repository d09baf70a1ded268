"""Tests for the path command registry."""

import pytest

import iconbake.engine.commands  # noqa: F401
from iconbake.engine.context import CursorState
from iconbake.engine.interpreter import parse_path_data
from iconbake.engine.registry import CommandRegistry, CommandResult, CommandSpec, get_registry


def _noop(state, operands, absolute, tolerance):
    return CommandResult(state=state)


def test_register_and_get():
    reg = CommandRegistry()
    spec = CommandSpec(letter="x", arity=1, fn=_noop)
    reg.register(spec)
    assert reg.get("x") is spec
    assert reg.get("X") is spec
    assert reg.get("y") is None
    assert reg.count == 1


def test_duplicate_letter_rejected():
    reg = CommandRegistry()
    reg.register(CommandSpec(letter="x", arity=1, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(CommandSpec(letter="x", arity=2, fn=_noop))


def test_all_commands_registered():
    reg = get_registry()
    assert reg.count == 10
    assert [s.letter for s in reg.all()] == sorted("mlhvzcsqta")


@pytest.mark.parametrize(
    "letter, arity",
    [("m", 2), ("l", 2), ("h", 1), ("v", 1), ("z", 0), ("c", 6), ("s", 4), ("q", 4), ("t", 2), ("a", 7)],
)
def test_command_arity(letter, arity):
    assert get_registry().get(letter).arity == arity


def test_handlers_are_pure():
    state = CursorState(current=(1.0, 1.0), start=(0.0, 0.0), cubic_reflection=(3.0, 3.0))
    lineto = get_registry().get("l").fn
    result = lineto(state, [2.0, 0.0], False, 0.25)
    assert result.points == [(3.0, 1.0)]
    assert result.state.current == (3.0, 1.0)
    assert result.state.cubic_reflection is None
    # input state untouched
    assert state.current == (1.0, 1.0)
    assert state.cubic_reflection == (3.0, 3.0)


def test_closepath_returns_to_start():
    state = CursorState(current=(5.0, 5.0), start=(1.0, 2.0), quad_reflection=(0.0, 0.0))
    result = get_registry().get("z").fn(state, [], True, 0.25)
    assert result.close_subpath
    assert result.state.current == (1.0, 2.0)
    assert result.state.quad_reflection is None


def test_custom_registry():
    reg = CommandRegistry()
    reg.register(get_registry().get("m"))
    subpaths, warnings = parse_path_data("M0 0 L1 1", 0.25, registry=reg)
    assert [sp.points for sp in subpaths] == [[(0, 0)]]
    assert warnings == ["unsupported cmd L", "stray operand", "stray operand"]


def test_malformed_operand_warning_text():
    assert CommandSpec(letter="x", arity=1, fn=_noop).warning == "bad x"
    reg = get_registry()
    assert reg.get("m").warning == "bad moveto"
    assert reg.get("l").warning == "bad lineto"
    assert [reg.get(c).warning for c in "hvcsqta"] == [f"bad {c}" for c in "hvcsqta"]
