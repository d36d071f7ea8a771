from __future__ import annotations

from typing import Callable

from tailscheme import LispValue

PrimitiveFn = Callable[[list[LispValue]], LispValue]


class Primitive:
    """A built-in operation bound in the outermost frame under its surface token."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
