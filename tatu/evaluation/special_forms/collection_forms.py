from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError, TatuTypeError
from tatu.reader.ast import Expr, ListExpr, SymbolExpr
from tatu.types.environment import Environment
from tatu.types.value import type_of


def vector_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> list[Value]:
    return [evaluate_fn(e, env, natives) for e in form.tail]


def _map_key(
    key_expr: Expr, env: Environment, natives: NativeRegistry, evaluate_fn: EvaluatorFn
) -> str:
    # A bare symbol names the key literally: (map name "tatu")
    if isinstance(key_expr, SymbolExpr):
        return key_expr.name
    key = evaluate_fn(key_expr, env, natives)
    if not isinstance(key, str):
        raise TatuTypeError(f"map keys must be STRING, found {type_of(key)}", key_expr.location)
    return key


def map_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> dict[str, Value]:
    """(map k1 v1 ... kn vn); duplicate keys keep the last value."""
    tail = form.tail
    if len(tail) % 2 != 0:
        raise TatuArityError("`map` expects key/value pairs", form.location)

    result: dict[str, Value] = {}
    for i in range(0, len(tail), 2):
        key = _map_key(tail[i], env, natives, evaluate_fn)
        result[key] = evaluate_fn(tail[i + 1], env, natives)
    return result
