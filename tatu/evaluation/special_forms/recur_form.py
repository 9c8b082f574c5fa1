from tatu import EvaluatorFn
from tatu.builtin.registry import NativeRegistry
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment
from tatu.types.recur import RecurMarker


def recur_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> RecurMarker:
    """
    (recur a1 ... an)
    Arguments are evaluated strictly; the marker is only legal where the
    evaluator is in tail mode and is rejected everywhere else.
    """
    return RecurMarker([evaluate_fn(arg, env, natives) for arg in form.tail])
