from tailscheme import SExpression, LispValue, EvaluatorFn
from tailscheme.types.environment import Environment
from tailscheme.types.pair import from_list


def list_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(list e1 ... en): evaluate left to right and collect the results."""
    return from_list([evaluate_fn(e, env) for e in tail])
