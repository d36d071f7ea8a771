from tailscheme import SExpression, EvaluatorFn
from tailscheme.errors import SchemeArityError
from tailscheme.types.environment import Environment
from tailscheme.types.tail_call import TailCall


def prog2_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    if len(tail) != 2:
        raise SchemeArityError("prog2 expects exactly 2 arguments")
    evaluate_fn(tail[0], env)
    return TailCall(tail[1], env)
