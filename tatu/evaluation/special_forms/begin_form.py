from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment


def begin_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> Value:
    """(begin e1 ... en) in a fresh child scope; en is in tail position."""
    tail = form.tail
    if not tail:
        raise TatuArityError("`begin` expects at least 1 expression", form.location)

    scope = Environment(outer=env)
    for e in tail[:-1]:
        evaluate_fn(e, scope, natives)
    return evaluate_fn(tail[-1], scope, natives, is_tail_call)
