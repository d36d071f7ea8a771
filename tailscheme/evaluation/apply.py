"""Application engine for tailscheme.

- Closures do not run here: binding the arguments produces a TailCall to the
  body, which the trampoline in the evaluator continues without growing the
  Python stack.
- Primitives run to completion and return a value.
- A Symbol in function position is looked up by name in the primitive table.
"""

import logging

from tailscheme import LispValue
from tailscheme.builtin.env_builtin import PRIMITIVES
from tailscheme.errors import SchemeTypeError, SchemeUnknownPrimitive
from tailscheme.printer import render
from tailscheme.types.closure import Closure
from tailscheme.types.primitive import Primitive
from tailscheme.types.symbol import Symbol
from tailscheme.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue]) -> TailCall:
    """Bind the arguments in a new frame over the captured environment and continue with the body."""
    new_env = fn.extend_env(args)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("apply closure (%s) depth=%d", " ".join(map(str, fn.formals)), new_env.depth())
    return TailCall(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue]) -> LispValue | TailCall:
    """Apply a Closure, a Primitive, or a Symbol naming a primitive."""
    if isinstance(head, Closure):
        return apply_closure(head, args)
    if isinstance(head, Primitive):
        return head(args)
    if isinstance(head, Symbol):
        prim = PRIMITIVES.get(head.name)
        if prim is None:
            raise SchemeUnknownPrimitive(f"Unknown primitive {head}")
        return prim(args)
    raise SchemeTypeError(f"Cannot apply non-function {render(head)}")
