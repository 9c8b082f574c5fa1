from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError
from tatu.evaluation.special_forms.if_form import eval_condition
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment
from tatu.types.nil import Nil


def while_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> Value:
    """
    (while cond body)
    Returns the value of the last body evaluation, or nil if the body never ran.
    The body is never in tail position, so `recur` inside it is an error.
    """
    if len(form) != 3:
        raise TatuArityError("`while` expects a condition and a body", form.location)
    cond, body = form.tail

    result: Value = Nil
    while eval_condition(cond, env, natives, evaluate_fn):
        result = evaluate_fn(body, env, natives)
    return result
