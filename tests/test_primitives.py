import pytest
from hypothesis import given, strategies as st

from tailscheme.builtin import env_builtin
from tailscheme.builtin.env_builtin import PRIMITIVES, T, primitive_environment, same_value
from tailscheme.config import INT_MIN, INT_MAX, wrap_int
from tailscheme.errors import (
    SchemeArityError,
    SchemeOverflowError,
    SchemeTypeError,
    SchemeZeroDivisionError,
)
from tailscheme.printer import render
from tailscheme.types.nil import Nil
from tailscheme.types.pair import Pair, from_list
from tailscheme.types.symbol import Symbol


def test_car_and_cdr():
    lst = from_list([1, 2, 3])
    assert env_builtin.car([lst]) == 1
    assert render(env_builtin.cdr([lst])) == "(2 3)"
    assert env_builtin.cdr([from_list([1])]) is Nil


@pytest.mark.parametrize("fn", [env_builtin.car, env_builtin.cdr])
@pytest.mark.parametrize("arg", [Nil, 1, Symbol("a")])
def test_car_cdr_of_non_pair(fn, arg):
    with pytest.raises(SchemeTypeError):
        fn([arg])


def test_cons_builds_pair():
    pair = env_builtin.cons([1, Nil])
    assert isinstance(pair, Pair)
    assert render(pair) == "(1)"
    assert render(env_builtin.cons([1, 2])) == "(1 . 2)"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Symbol("a"), T),
        (0, T),
        (Nil, T),
        (PRIMITIVES["car"], T),
        (from_list([1]), Nil),
    ]
)
def test_atom(value, expected):
    assert env_builtin.atom([value]) is expected


@pytest.mark.parametrize("fn", [env_builtin.null, env_builtin.not_])
def test_null_and_not(fn):
    assert fn([Nil]) is T
    assert fn([0]) is Nil
    assert fn([from_list([1])]) is Nil


def test_and_or_return_operand_values():
    assert env_builtin.and_([Nil, 1]) is Nil
    assert env_builtin.and_([1, 2]) == 2
    assert env_builtin.or_([Nil, 3]) == 3
    assert env_builtin.or_([1, 2]) == 1
    assert env_builtin.or_([Nil, Nil]) is Nil


def test_same_value():
    assert same_value(5, 5)
    assert not same_value(5, 6)
    assert same_value(Symbol("a"), Symbol("a"))
    assert not same_value(Symbol("a"), Symbol("A"))
    assert same_value(Nil, Nil)
    assert not same_value(Symbol("1"), 1)
    assert not same_value(Nil, Symbol("a"))
    assert same_value(PRIMITIVES["car"], PRIMITIVES["car"])


def test_pairs_are_never_same_value():
    a = from_list([1, 2])
    b = from_list([1, 2])
    assert not same_value(a, b)
    # not even a pair with itself
    assert not same_value(a, a)


def test_eq_primitive_returns_t_or_nil():
    assert env_builtin.eq([3, 3]) is T
    assert env_builtin.eq([3, 4]) is Nil


@pytest.mark.parametrize(
    "fn, a, b, expected",
    [
        (env_builtin.add, 2, 3, 5),
        (env_builtin.sub, 2, 3, -1),
        (env_builtin.mul, -4, 3, -12),
        (env_builtin.div, 7, 2, 3),
        (env_builtin.div, -7, 2, -3),
        (env_builtin.div, 7, -2, -3),
        (env_builtin.div, -7, -2, 3),
        (env_builtin.add, INT_MAX, 1, INT_MIN),
        (env_builtin.sub, INT_MIN, 1, INT_MAX),
        (env_builtin.mul, 65536, 65536, 0),
    ]
)
def test_arithmetic(fn, a, b, expected):
    assert fn([a, b]) == expected


def test_division_by_zero():
    with pytest.raises(SchemeZeroDivisionError):
        env_builtin.div([1, 0])


def test_division_overflow_is_a_fault():
    with pytest.raises(SchemeOverflowError):
        env_builtin.div([INT_MIN, -1])
    assert env_builtin.div([INT_MIN, 1]) == INT_MIN
    assert env_builtin.div([INT_MIN + 1, -1]) == INT_MAX


@pytest.mark.parametrize("name", ["+", "-", "*", "/", "<", ">"])
def test_integer_primitives_check_types_and_arity(name):
    prim = PRIMITIVES[name]
    with pytest.raises(SchemeTypeError):
        prim([1, Symbol("a")])
    with pytest.raises(SchemeTypeError):
        prim([Nil, 1])
    with pytest.raises(SchemeArityError):
        prim([1])
    with pytest.raises(SchemeArityError):
        prim([1, 2, 3])


def test_comparisons():
    assert env_builtin.less([1, 2]) is T
    assert env_builtin.less([2, 1]) is Nil
    assert env_builtin.greater([2, 1]) is T
    assert env_builtin.greater([2, 2]) is Nil


@pytest.mark.parametrize("name", ["car", "cdr", "atom", "null", "not", "print"])
def test_unary_primitives_check_arity(name):
    with pytest.raises(SchemeArityError):
        PRIMITIVES[name]([])
    with pytest.raises(SchemeArityError):
        PRIMITIVES[name]([Nil, Nil])


def test_print_writes_and_returns_argument(capsys):
    lst = from_list([1, from_list([Symbol("a")])])
    assert env_builtin.print_([lst]) is lst
    assert capsys.readouterr().out == "(1 (a))\n"


def test_primitive_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["foo"] = PRIMITIVES["car"]


def test_primitive_environment_binds_every_surface_token():
    env = primitive_environment()
    assert env.depth() == 1
    assert env.lookup(Symbol("t")) == T
    assert env.lookup(Symbol("nil")) is Nil
    for name, prim in PRIMITIVES.items():
        assert env.lookup(Symbol(name)) is prim
    assert set(PRIMITIVES) == {
        "car", "cdr", "cons", "atom", "null", "+", "-", "*", "/",
        "==", ">", "<", "not", "and", "or", "print",
    }


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX), st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_add_wraps_like_32_bit_hardware(a, b):
    result = env_builtin.add([a, b])
    assert INT_MIN <= result <= INT_MAX
    assert result == wrap_int(a + b)
    assert (result - (a + b)) % (1 << 32) == 0
