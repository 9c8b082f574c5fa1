from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuNameError
from tatu.evaluation.special_forms.var_form import binding_target
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment


def set_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> Value:
    name = binding_target(form)
    value = evaluate_fn(form.items[2], env, natives)
    if not env.assign(name.name, value):
        raise TatuNameError(f"undefined variable `{name.name}`", name.location)
    return value
