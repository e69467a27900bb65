"""Registry of special forms for the Malt evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application. Each
handler receives the unevaluated tail of the form, the active environment and
the evaluator to recurse with.
"""

from malt.types.symbol import Symbol
from malt.evaluation.special_forms.def_form import def_form
from malt.evaluation.special_forms.let_form import let_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("let*"): let_form,
}
