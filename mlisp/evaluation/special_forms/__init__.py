"""Registry of built-in forms for the mlisp evaluator.

Maps Symbols to handler functions `(tail, env, evaluate_fn) -> Outcome`.
The evaluator consults this table before looking at user bindings, so a
user binding can never shadow one of these names in head position.
"""

from mlisp.types.symbol import Symbol
from mlisp.evaluation.special_forms.arithmetic_forms import add_form, sub_form, mul_form, div_form
from mlisp.evaluation.special_forms.logic_forms import and_form, or_form, not_form
from mlisp.evaluation.special_forms.equality_forms import eq_form, neq_form
from mlisp.evaluation.special_forms.let_form import let_form
from mlisp.evaluation.special_forms.fn_form import fn_form
from mlisp.evaluation.special_forms.print_form import print_form
from mlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("+"): add_form,
    Symbol("-"): sub_form,
    Symbol("*"): mul_form,
    Symbol("/"): div_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("not"): not_form,
    Symbol("="): eq_form,
    Symbol("!="): neq_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("print"): print_form,
    Symbol("if"): if_form,
}
