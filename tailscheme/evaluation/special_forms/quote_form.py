from tailscheme import SExpression, LispValue, EvaluatorFn
from tailscheme.errors import SchemeArityError
from tailscheme.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise SchemeArityError("quote expects exactly 1 argument")
    return tail[0]
