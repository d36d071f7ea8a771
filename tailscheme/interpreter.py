from __future__ import annotations

from tailscheme import SExpression, LispValue
from tailscheme.builtin.env_builtin import primitive_environment
from tailscheme.evaluation.evaluator import evaluate
from tailscheme.reader.parser import lex, TokenStream
from tailscheme.types.environment import Environment
from tailscheme.types.nil import Nil


class Interpreter:
    """
    Reads and evaluates tailscheme source. There are no top-level definitions,
    so every expression is evaluated in a fresh primitive environment.
    """

    def __init__(self, env_factory=primitive_environment):
        self.env_factory = env_factory

    def new_env(self) -> Environment:
        return self.env_factory()

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.new_env())

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` and return the last result (nil if none)."""
        stream = TokenStream(iter(lex(code)))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not None:
            result = self.eval_expr(expr)
        return result
