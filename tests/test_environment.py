import pytest

from tailscheme.errors import SchemeError, SchemeArityError, SchemeUnboundSymbol
from tailscheme.types.environment import Environment, Frame
from tailscheme.types.symbol import Symbol

x = Symbol("x")
y = Symbol("y")


def test_empty_environment_has_no_bindings():
    env = Environment.empty()
    assert env.depth() == 0
    with pytest.raises(SchemeUnboundSymbol):
        env.lookup(x)


def test_innermost_binding_wins():
    env = Environment.empty().extend([x], [1]).extend([x], [2])
    assert env.lookup(x) == 2
    assert env.depth() == 2


def test_lookup_falls_through_to_outer_frames():
    env = Environment.empty().extend([x], [1]).extend([y], [2])
    assert env.lookup(x) == 1
    assert env.lookup(y) == 2


def test_first_name_in_frame_wins():
    env = Environment.empty().extend([x, x], [1, 2])
    assert env.lookup(x) == 1


def test_extend_does_not_modify_original():
    base = Environment.empty().extend([x], [1])
    base.extend([x], [2])
    assert base.lookup(x) == 1


def test_extend_rejects_unequal_lengths():
    with pytest.raises(SchemeArityError):
        Environment.empty().extend([x, y], [1])


def test_open_frame_is_empty_until_closed():
    outer = Environment.empty().extend([x], ["outer"])
    frame = Frame.open()
    env = outer.extend_frame(frame)
    # An open frame binds nothing, so lookup continues outwards
    assert env.lookup(x) == "outer"
    with pytest.raises(SchemeUnboundSymbol):
        env.lookup(y)
    assert "<open>" in repr(env)


def test_close_is_visible_through_captured_environments():
    frame = Frame.open()
    captured = Environment.empty().extend_frame(frame)
    inner = captured.extend([y], [2])
    frame.close([x], [1])
    assert captured.lookup(x) == 1
    assert inner.lookup(x) == 1
    assert frame.closed


def test_frame_closes_only_once():
    frame = Frame.open()
    frame.close([x], [1])
    with pytest.raises(SchemeError):
        frame.close([y], [2])
    with pytest.raises(SchemeError):
        Frame([x], [1]).close([x], [2])


def test_close_rejects_unequal_lengths():
    with pytest.raises(SchemeArityError):
        Frame.open().close([x], [])


def test_str_lists_names_only():
    env = Environment.empty().extend([x], [1]).extend([y], [2])
    assert str(env) == "{y} -> ..."
    assert repr(env) == "<Environment chain: {y} -> {x} -> {}>"
