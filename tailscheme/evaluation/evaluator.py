"""Core evaluator and trampoline for tailscheme.

`evaluate0` performs one step: it either produces a value or a TailCall naming
the expression and environment to continue with. `evaluate` loops on those
TailCalls, so the tail positions (the branches of `if`, the second operand of
`prog2`, the body of `letrec`, and the body of an applied closure) reuse the
same Python frame. Everything else (the test of an `if`, the first operand of
`prog2`, letrec right-hand sides, the operator and operands of an application)
is a nested call to `evaluate`, bounded by how deeply the source is nested
rather than by how deeply the program recurses.
"""

from __future__ import annotations

from tailscheme import SExpression, LispValue
from tailscheme.builtin.env_builtin import primitive_environment
from tailscheme.evaluation.apply import apply
from tailscheme.evaluation.special_forms import SPECIAL_FORMS
from tailscheme.types.environment import Environment
from tailscheme.types.pair import Pair, to_list
from tailscheme.types.symbol import Symbol
from tailscheme.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment | None = None) -> LispValue:
    """
    Trampoline evaluator: evaluate `expr` in `env` (the primitive environment if omitted).
    """
    if env is None:
        env = primitive_environment()

    result = evaluate0(expr, env)
    while isinstance(result, TailCall):
        result = evaluate0(result.expr, result.env)
    return result


def evaluate0(expr: SExpression, env: Environment) -> LispValue | TailCall:
    """
    Single evaluation step. Returns either a value or a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(head=Symbol() as head) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](to_list(expr.tail), env, evaluate)

        case Pair():
            # Operator first, then operands left to right
            values = [evaluate(e, env) for e in to_list(expr)]
            return apply(values[0], values[1:])

    # --- Integers, nil, closures and primitives evaluate to themselves ---
    return expr
