"""
  Reader: lexer and parser

- Streaming, lazy parsing over a regex lexer
- Grammar:   expr := '(' list | atom     list := ')' | expr list
- Tokens are maximal runs of [A-Za-z0-9<=>?_*/+-]; whitespace is space, \\n, \\r, \\t.
  No strings, comments, quote shorthand or dotted pairs.
- Emits:
    - nil             -> Nil
    - [+-]?digits     -> int, when it fits the configured integer width
    - any other token -> Symbol
    - lists           -> Pair chains terminated by Nil
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from tailscheme import SExpression
from tailscheme.config import TOKEN_CHARS, WHITESPACE, INT_MIN, INT_MAX
from tailscheme.errors import SchemeSyntaxError
from tailscheme.types.nil import Nil
from tailscheme.types.pair import from_list
from tailscheme.types.symbol import Symbol


TOKEN_RE = re.compile(
    rf"[{re.escape(WHITESPACE)}]*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    rf"|(?P<atom>[{TOKEN_CHARS}]+)"
    r")"
)

SKIP_RE = re.compile(rf"[{re.escape(WHITESPACE)}]*")

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while True:
        pos = SKIP_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise SchemeSyntaxError(f"Unexpected character at {pos}: {source[pos]!r}")
        for nm in ("lparen", "rparen", "atom"):
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


def parse_atom(token: str) -> SExpression:
    if token == "nil":
        return Nil
    if INTEGER_RE.fullmatch(token):
        value = int(token)
        if INT_MIN <= value <= INT_MAX:
            return value
    # Out-of-range digit strings stay symbols
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression | None:
        """Parse one expression, or return None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "atom":
            return parse_atom(tok_val)

        if tok_type == "rparen":
            raise SchemeSyntaxError("Unexpected ')'")

        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                raise SchemeSyntaxError("Unmatched '('")
            if tok_type == "rparen":
                self.advance()
                return from_list(items)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read the first expression in `source`; anything after it is ignored."""
    expr = TokenStream(lex(source)).parse_expr()
    if expr is None:
        raise SchemeSyntaxError("No expression in input")
    return expr


def read_all(source: str) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())
