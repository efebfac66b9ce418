"""Registry of special forms for the risp evaluator.

Special forms are ordinary builtins from the evaluator's point of view: they
are registered in the procedure map and receive their arguments unevaluated.
They differ only in choosing not to evaluate some of them.
"""

from risp.evaluation.special_forms.if_form import if_form
from risp.evaluation.special_forms.let_form import let_form
from risp.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    "if": if_form,
    "let": let_form,
    "fn": fn_form,
}
