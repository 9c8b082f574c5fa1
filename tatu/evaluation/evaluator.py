"""Core evaluator for the Tatu interpreter.

`evaluate0` is a single dispatcher with two modes:

- strict (is_tail_call=False): the result must be a concrete value, so a
  RecurMarker reaching this point is an error;
- tail (is_tail_call=True): a RecurMarker is passed through untouched to the
  nearest function-call trampoline (see tatu.evaluation.apply).

Special forms receive the tail flag and decide which of their operands
inherit it.
"""

from __future__ import annotations

from tatu import Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuError, TatuRecurError, TatuTypeError, TatuUnboundSymbol
from tatu.evaluation.apply import apply
from tatu.evaluation.special_forms import SPECIAL_FORMS
from tatu.reader.ast import BoolExpr, Expr, ListExpr, NilExpr, NumberExpr, StringExpr, SymbolExpr
from tatu.types.environment import Environment
from tatu.types.nil import Nil
from tatu.types.recur import RecurMarker
from tatu.types.value import is_callable


def evaluate(expr: Expr, env: Environment, natives: NativeRegistry) -> Value:
    """Evaluate `expr` strictly."""
    return evaluate0(expr, env, natives, False)


def evaluate0(
    expr: Expr,
    env: Environment,
    natives: NativeRegistry,
    is_tail_call: bool = False,
) -> Value:
    """
    Core evaluator: one expression, strict or tail mode.
    Errors leaving this frame carry the innermost failing location.
    """
    try:
        result = _dispatch(expr, env, natives, is_tail_call)
    except TatuError as e:
        raise e.with_location(getattr(expr, "location", None))

    if not is_tail_call and isinstance(result, RecurMarker):
        raise TatuRecurError(
            "recur can only be used in tail position of a function", expr.location
        )
    return result


def resolve_symbol(expr: SymbolExpr, env: Environment, natives: NativeRegistry) -> Value:
    """Lexical chain first, then the native registry."""
    value, found = env.lookup(expr.name)
    if found:
        return value
    native = natives.get(expr.name)
    if native is not None:
        return native
    raise TatuUnboundSymbol(f"unknown symbol `{expr.name}`", expr.location)


def _dispatch(expr: Expr, env: Environment, natives: NativeRegistry, is_tail_call: bool) -> Value:
    match expr:
        case NumberExpr() | StringExpr() | BoolExpr():
            return expr.value
        case NilExpr():
            return Nil
        case SymbolExpr():
            return resolve_symbol(expr, env, natives)
        case ListExpr(items=[]):
            return Nil
        case ListExpr():
            name = expr.head_name()
            if name is not None and name in SPECIAL_FORMS:
                return SPECIAL_FORMS[name](expr, env, natives, evaluate0, is_tail_call)
            return _call(expr, env, natives)
    raise TatuTypeError(f"cannot evaluate {expr!r}")


def _call(expr: ListExpr, env: Environment, natives: NativeRegistry) -> Value:
    callee = expr.head
    head = evaluate0(callee, env, natives)
    if not is_callable(head):
        raise TatuTypeError("expression is not a function", callee.location)

    # left to right; natives with side effects rely on it
    args = [evaluate0(arg, env, natives) for arg in expr.tail]
    return apply(head, args, natives, evaluate0, expr.location)
