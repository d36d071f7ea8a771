"""Registry of special forms for the tailscheme evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before any environment lookup, so these
keywords cannot be shadowed.

A handler receives the operands as a Python list, the current environment and
the full evaluator (for operands that are not in tail position). It returns
either a final value or a TailCall for the trampoline to continue with.
"""

from tailscheme.types.symbol import Symbol
from tailscheme.evaluation.special_forms.quote_form import quote_form
from tailscheme.evaluation.special_forms.list_form import list_form
from tailscheme.evaluation.special_forms.prog2_form import prog2_form
from tailscheme.evaluation.special_forms.if_form import if_form
from tailscheme.evaluation.special_forms.lambda_form import lambda_form
from tailscheme.evaluation.special_forms.letrec_form import letrec_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("list"): list_form,
    Symbol("prog2"): prog2_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("letrec"): letrec_form,
}
