"""Render expressions back to text.

Proper lists print as `(e1 e2 ... en)`, atoms as their bare token. An improper
tail prints after a dot, `(1 . 2)`; the reader has no dotted syntax, so such
output cannot be read back.
"""

from io import StringIO

from tailscheme import SExpression
from tailscheme.types.nil import Nil
from tailscheme.types.pair import Pair


def render(expr: SExpression) -> str:
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()


def _write(expr: SExpression, buffer: StringIO) -> None:
    if not isinstance(expr, Pair):
        # Symbol, int, Nil, Closure and Primitive all know their own token
        buffer.write(str(expr))
        return
    buffer.write("(")
    _write(expr.head, buffer)
    cell = expr.tail
    # Walk the spine iteratively; only nesting depth recurses
    while isinstance(cell, Pair):
        buffer.write(" ")
        _write(cell.head, buffer)
        cell = cell.tail
    if cell is not Nil:
        buffer.write(" . ")
        _write(cell, buffer)
    buffer.write(")")
