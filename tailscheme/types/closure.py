"""Closure representation for tailscheme."""

from __future__ import annotations

from io import StringIO
from typing import Sequence

from tailscheme import SExpression, LispValue
from tailscheme.errors import SchemeArityError
from tailscheme.types.environment import Environment
from tailscheme.types.symbol import Symbol


class Closure:
    """A first-class function: formal parameters, a body, and the environment it was made in.

    The environment is held by reference, so a closure built inside a letrec
    sees the letrec frame once it has been closed.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: Sequence[Symbol], body: SExpression, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from tailscheme.printer import render
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(render(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_env(self, args: Sequence[LispValue]) -> Environment:
        """Bind the argument values to the formals in a new frame over the captured environment."""
        if len(args) != len(self.formals):
            raise SchemeArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        return self.env.extend(self.formals, args)
