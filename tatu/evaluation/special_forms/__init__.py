"""Registry of special forms for the Tatu evaluator.

Maps head symbol names to handler functions that control the evaluation of
their own operands. The evaluator consults this table before treating a list
as a function call.
"""

from tatu.evaluation.special_forms.begin_form import begin_form
from tatu.evaluation.special_forms.collection_forms import map_form, vector_form
from tatu.evaluation.special_forms.if_form import if_form
from tatu.evaluation.special_forms.include_form import include_form
from tatu.evaluation.special_forms.lambda_form import lambda_form
from tatu.evaluation.special_forms.logic_forms import and_form, or_form
from tatu.evaluation.special_forms.recur_form import recur_form
from tatu.evaluation.special_forms.set_form import set_form
from tatu.evaluation.special_forms.var_form import var_form
from tatu.evaluation.special_forms.while_form import while_form

SPECIAL_FORMS = {
    "begin": begin_form,
    "var": var_form,
    "set": set_form,
    "if": if_form,
    "while": while_form,
    "lambda": lambda_form,
    "recur": recur_form,
    "vector": vector_form,
    "map": map_form,
    "and": and_form,
    "or": or_form,
    "include": include_form,
}
