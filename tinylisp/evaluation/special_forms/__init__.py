"""Registry of special forms for the tinylisp evaluator.

Maps head Symbols to handlers that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
"""

from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.quote_form import quote_form
from tinylisp.evaluation.special_forms.if_form import if_form
from tinylisp.evaluation.special_forms.set_form import set_form
from tinylisp.evaluation.special_forms.define_form import define_form
from tinylisp.evaluation.special_forms.lambda_form import lambda_form
from tinylisp.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
}
