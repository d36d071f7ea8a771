from tailscheme import SExpression, EvaluatorFn
from tailscheme.errors import SchemeArityError
from tailscheme.types.environment import Environment
from tailscheme.types.nil import Nil
from tailscheme.types.tail_call import TailCall


def if_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    if len(tail) != 3:
        raise SchemeArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    # Only nil is false; 0 is true
    return TailCall(tail[2] if cond is Nil else tail[1], env)
