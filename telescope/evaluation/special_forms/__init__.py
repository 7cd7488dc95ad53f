"""Registry of special forms for the Telescope evaluator.

Maps Symbols to handlers that control evaluation of their own operands.
The evaluator consults this table before ordinary procedure application.
"""

from telescope.types.symbol import Symbol
from telescope.evaluation.special_forms.lambda_form import lambda_form
from telescope.evaluation.special_forms.define_form import define_form
from telescope.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
}
