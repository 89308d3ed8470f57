"""Registry of special forms for the Schemy evaluator.

Maps Symbols to handler functions that control the evaluation of their own
operands. The evaluator consults this table before builtin procedures and
before ordinary application. The table is built once and is read-only.
"""

from types import MappingProxyType

from schemy.types.symbol import Symbol
from schemy.evaluation.special_forms.quote_forms import quote_form
from schemy.evaluation.special_forms.if_form import if_form
from schemy.evaluation.special_forms.logic_forms import and_form, or_form
from schemy.evaluation.special_forms.lambda_form import lambda_form
from schemy.evaluation.special_forms.define_form import define_form
from schemy.evaluation.special_forms.set_form import set_form, set_car_form, set_cdr_form

SPECIAL_FORMS = MappingProxyType({
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("set-car!"): set_car_form,
    Symbol("set-cdr!"): set_cdr_form,
})
