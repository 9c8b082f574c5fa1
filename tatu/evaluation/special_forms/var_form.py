from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError, TatuNameError, TatuSyntaxError
from tatu.reader.ast import ListExpr, SymbolExpr
from tatu.types.environment import Environment


def binding_target(form: ListExpr) -> SymbolExpr:
    """Shape check shared by `var` and `set`: (op name expr)."""
    op = form.head_name()
    if len(form) != 3:
        raise TatuArityError(f"`{op}` expects a name and an expression", form.location)
    name = form.items[1]
    if not isinstance(name, SymbolExpr):
        raise TatuSyntaxError(f"`{op}` expects an identifier", name.location)
    return name


def var_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> Value:
    """
    (var name expr)
    Defines name in the current scope; tail position does not propagate into expr.
    """
    name = binding_target(form)
    value = evaluate_fn(form.items[2], env, natives)
    try:
        return env.define(name.name, value)
    except TatuNameError as e:
        raise e.with_location(name.location)
