from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError, TatuTypeError
from tatu.reader.ast import Expr, ListExpr
from tatu.types.environment import Environment
from tatu.types.nil import Nil
from tatu.types.value import type_of


def eval_condition(
    cond: Expr, env: Environment, natives: NativeRegistry, evaluate_fn: EvaluatorFn
) -> bool:
    """Strictly evaluate a condition; only Bool is accepted, there is no truthiness."""
    value = evaluate_fn(cond, env, natives)
    if not isinstance(value, bool):
        raise TatuTypeError(f"expected BOOL, found {type_of(value)}", cond.location)
    return value


def if_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> Value:
    tail = form.tail
    if len(tail) not in (2, 3):
        raise TatuArityError(
            "`if` expects a condition, a then-expression and an optional else-expression",
            form.location,
        )

    if eval_condition(tail[0], env, natives, evaluate_fn):
        return evaluate_fn(tail[1], env, natives, is_tail_call)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, natives, is_tail_call)
    else:
        return Nil
