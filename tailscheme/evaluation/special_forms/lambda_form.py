from tailscheme import SExpression, LispValue, EvaluatorFn
from tailscheme.errors import SchemeArityError, SchemeTypeError
from tailscheme.types.closure import Closure
from tailscheme.types.environment import Environment
from tailscheme.types.pair import to_list
from tailscheme.types.symbol import Symbol


def lambda_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(lambda (formals...) body): capture the current environment by reference."""
    if len(tail) != 2:
        raise SchemeArityError("lambda expects a parameter list and a single body")

    formals = to_list(tail[0])
    for f in formals:
        if not isinstance(f, Symbol):
            raise SchemeTypeError(f"lambda parameter must be a symbol, got {f}")

    return Closure(formals, tail[1], env)
