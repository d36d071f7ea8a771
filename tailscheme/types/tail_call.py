from tailscheme import SExpression
from tailscheme.types.environment import Environment


class TailCall:
    """Request to the trampoline: continue by evaluating `expr` in `env`."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
