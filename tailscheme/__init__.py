# Core type aliases for the tailscheme data model.
# Atoms are Symbol, plain Python int (kept within the configured width) and the
# Nil singleton. Lists are built from Pair cells terminated by Nil. Evaluation
# adds two more value kinds: Closure and Primitive.
#
# Naming guidance:
# - SExpression: use in reader/printer code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
