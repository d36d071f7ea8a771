"""Built-in primitives for the tailscheme runtime environment.

Each primitive takes the list of already-evaluated arguments and checks its own
arity and argument kinds. The table is built once at import time and never
changes; `primitive_environment` binds every surface token in a single frame,
so user bindings of the same name shadow them like any other identifier.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from tailscheme import LispValue
from tailscheme.config import INT_MIN, TRUE_NAME, wrap_int
from tailscheme.errors import (
    SchemeArityError,
    SchemeOverflowError,
    SchemeTypeError,
    SchemeZeroDivisionError,
)
from tailscheme.printer import render
from tailscheme.runtime_context import get_output
from tailscheme.types.closure import Closure
from tailscheme.types.environment import Environment
from tailscheme.types.nil import Nil, NilType
from tailscheme.types.pair import Pair, head, tail
from tailscheme.types.primitive import Primitive, PrimitiveFn
from tailscheme.types.symbol import Symbol

T = Symbol(TRUE_NAME)


def _truth(flag: bool) -> LispValue:
    return T if flag else Nil


def _expect(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise SchemeArityError(f"{name} expects {count} argument(s), got {len(args)}")


def _integers(name: str, args: list[LispValue]) -> tuple[int, int]:
    _expect(name, args, 2)
    a, b = args
    for x in (a, b):
        # bool is an int subclass; it is never a Lisp value but keep it out anyway
        if not isinstance(x, int) or isinstance(x, bool):
            raise SchemeTypeError(f"{name} expects integers, got {render(x)}")
    return a, b


def is_atom(value: LispValue) -> bool:
    """Symbols, integers, nil and primitives are atoms; pairs and closures are not."""
    return isinstance(value, (Symbol, int, NilType, Primitive))


def same_value(a: LispValue, b: LispValue) -> bool:
    """Equality of atoms. Pairs and closures are never equal, not even to themselves."""
    if isinstance(a, (Pair, Closure)) or isinstance(b, (Pair, Closure)):
        return False
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a.name == b.name
    if isinstance(a, int) and isinstance(b, int):
        return a == b
    if isinstance(a, Primitive) and isinstance(b, Primitive):
        return a.name == b.name
    return a is Nil and b is Nil


# -------------------------------
# Lists
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    _expect("car", args, 1)
    return head(args[0])


def cdr(args: list[LispValue]) -> LispValue:
    _expect("cdr", args, 1)
    return tail(args[0])


def cons(args: list[LispValue]) -> LispValue:
    _expect("cons", args, 2)
    return Pair(args[0], args[1])


# -------------------------------
# Predicates and logic
# -------------------------------
def atom(args: list[LispValue]) -> LispValue:
    _expect("atom", args, 1)
    return _truth(is_atom(args[0]))


def null(args: list[LispValue]) -> LispValue:
    _expect("null", args, 1)
    return _truth(args[0] is Nil)


def not_(args: list[LispValue]) -> LispValue:
    _expect("not", args, 1)
    return _truth(args[0] is Nil)


def and_(args: list[LispValue]) -> LispValue:
    """Both operands were evaluated by the caller; returns the first if false, else the second."""
    _expect("and", args, 2)
    return args[0] if args[0] is Nil else args[1]


def or_(args: list[LispValue]) -> LispValue:
    """Both operands were evaluated by the caller; returns the first if true, else the second."""
    _expect("or", args, 2)
    return args[0] if args[0] is not Nil else args[1]


def eq(args: list[LispValue]) -> LispValue:
    _expect("==", args, 2)
    return _truth(same_value(args[0], args[1]))


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    a, b = _integers("+", args)
    return wrap_int(a + b)


def sub(args: list[LispValue]) -> LispValue:
    a, b = _integers("-", args)
    return wrap_int(a - b)


def mul(args: list[LispValue]) -> LispValue:
    a, b = _integers("*", args)
    return wrap_int(a * b)


def div(args: list[LispValue]) -> LispValue:
    """Integer division truncating toward zero."""
    a, b = _integers("/", args)
    if b == 0:
        raise SchemeZeroDivisionError(f"Division by zero: (/ {a} {b})")
    if a == INT_MIN and b == -1:
        raise SchemeOverflowError(f"Integer overflow: (/ {a} {b})")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def less(args: list[LispValue]) -> LispValue:
    a, b = _integers("<", args)
    return _truth(a < b)


def greater(args: list[LispValue]) -> LispValue:
    a, b = _integers(">", args)
    return _truth(a > b)


# -------------------------------
# Output
# -------------------------------
def print_(args: list[LispValue]) -> LispValue:
    """Write the rendered argument and a newline, then return the argument."""
    _expect("print", args, 1)
    out = get_output()
    out.write(render(args[0]))
    out.write("\n")
    return args[0]


_BUILTINS: dict[str, PrimitiveFn] = {
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "atom": atom,
    "null": null,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "==": eq,
    ">": greater,
    "<": less,
    "not": not_,
    "and": and_,
    "or": or_,
    "print": print_,
}

PRIMITIVES: Mapping[str, Primitive] = MappingProxyType(
    {name: Primitive(name, fn) for name, fn in _BUILTINS.items()}
)

# Constants bound ahead of the primitives in the outermost frame
CONSTANTS: Mapping[str, LispValue] = MappingProxyType({TRUE_NAME: T, "nil": Nil})


def primitive_environment() -> Environment:
    """A one-frame environment binding the constants and every primitive."""
    names = [Symbol(n) for n in CONSTANTS] + [Symbol(n) for n in PRIMITIVES]
    values = list(CONSTANTS.values()) + list(PRIMITIVES.values())
    return Environment.empty().extend(names, values)
