"""Cons cells and list accessors.

Pairs are immutable after construction. Accessors fault with SchemeTypeError
on anything that is not a Pair, so `(car nil)` and a malformed special form
such as `(if)` both surface as type faults.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from tailscheme import SExpression
from tailscheme.errors import SchemeTypeError
from tailscheme.types.nil import Nil


class Pair:
    """A cons cell. Two distinct pairs are never `==`-equal in the Lisp sense."""

    __slots__ = ("head", "tail")

    def __init__(self, head: SExpression, tail: SExpression):
        self.head = head
        self.tail = tail

    def __iter__(self) -> Iterator[SExpression]:
        """Iterate over the elements of a proper list."""
        cell: SExpression = self
        while isinstance(cell, Pair):
            yield cell.head
            cell = cell.tail
        if cell is not Nil:
            raise SchemeTypeError(f"Improper list: {self}")

    def __str__(self) -> str:
        from tailscheme.printer import render
        return render(self)

    def __repr__(self) -> str:
        return f"Pair({self})"


def head(expr: SExpression) -> SExpression:
    if not isinstance(expr, Pair):
        raise SchemeTypeError(f"Cannot take the head of {_show(expr)}")
    return expr.head


def tail(expr: SExpression) -> SExpression:
    if not isinstance(expr, Pair):
        raise SchemeTypeError(f"Cannot take the tail of {_show(expr)}")
    return expr.tail


def second(expr: SExpression) -> SExpression:
    return head(tail(expr))


def third(expr: SExpression) -> SExpression:
    return head(tail(tail(expr)))


def fourth(expr: SExpression) -> SExpression:
    return head(tail(tail(tail(expr))))


def from_list(items: Iterable[SExpression], last: SExpression = Nil) -> SExpression:
    """Build a list of `items` ending in `last` (Nil for a proper list)."""
    result = last
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(expr: SExpression) -> list[SExpression]:
    """Return the elements of a proper list; Nil gives []."""
    if expr is Nil:
        return []
    if not isinstance(expr, Pair):
        raise SchemeTypeError(f"Expected a list, got {_show(expr)}")
    return list(expr)


def _show(expr: SExpression) -> str:
    from tailscheme.printer import render
    return render(expr)
