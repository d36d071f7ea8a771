import logging

from tailscheme import SExpression, EvaluatorFn
from tailscheme.errors import SchemeArityError, SchemeTypeError
from tailscheme.types.environment import Environment, Frame
from tailscheme.types.pair import to_list
from tailscheme.types.symbol import Symbol
from tailscheme.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def letrec_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> TailCall:
    """(letrec ((name expr) ...) body)

    Every expr is evaluated in the new environment while its frame is still
    open, so lambdas capture the frame itself. Closing the frame afterwards
    makes the whole group visible to each of them.
    """
    if len(tail) != 2:
        raise SchemeArityError("letrec expects a binding list and a single body")

    frame = Frame.open()
    new_env = env.extend_frame(frame)

    names: list[Symbol] = []
    values = []
    for binding in to_list(tail[0]):
        parts = to_list(binding)
        if len(parts) != 2:
            raise SchemeArityError(f"letrec binding must be (name expr), got {binding}")
        name, value_expr = parts
        if not isinstance(name, Symbol):
            raise SchemeTypeError(f"letrec can only bind symbols, got {name}")
        names.append(name)
        values.append(evaluate_fn(value_expr, new_env))

    # Bound in reverse source order: the last duplicate name wins
    frame.close(names[::-1], values[::-1])
    logger.debug("letrec frame closed: %s", " ".join(str(n) for n in names))
    return TailCall(tail[1], new_env)
