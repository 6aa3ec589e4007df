"""Registry of special forms for the skeme evaluator.

Special forms are native procedures that need their arguments unevaluated:
binding, control flow and quoting. They are installed into every root
environment alongside the ordinary builtins from skeme.builtins.
"""

from types import MappingProxyType

from skeme.evaluation.special_forms.define_form import define_form
from skeme.evaluation.special_forms.set_form import set_form
from skeme.evaluation.special_forms.lambda_form import lambda_form
from skeme.evaluation.special_forms.if_form import if_form
from skeme.evaluation.special_forms.logic_forms import and_form, or_form
from skeme.evaluation.special_forms.quote_forms import quote_form, quasiquote_form
from skeme.evaluation.special_forms.error_form import error_form

SPECIAL_FORMS = MappingProxyType({
    "define": define_form,
    "set!": set_form,
    "lambda": lambda_form,
    "λ": lambda_form,
    "if": if_form,
    "and": and_form,
    "or": or_form,
    "quote": quote_form,
    "quasiquote": quasiquote_form,
    "error": error_form,
})
