from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError
from tatu.evaluation.special_forms.if_form import eval_condition
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment


def _check_operands(form: ListExpr) -> None:
    if len(form) < 3:
        raise TatuArityError(
            f"`{form.head_name()}` expects at least 2 argument(s), got {len(form) - 1}",
            form.location,
        )


def and_form(form: ListExpr, env: Environment, natives: NativeRegistry, evaluate_fn, is_tail_call: bool = False) -> bool:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right; every operand must be
    a Bool. Stops at the first false and returns false, otherwise true.
    """
    _check_operands(form)
    for expr in form.tail:
        if not eval_condition(expr, env, natives, evaluate_fn):
            return False
    return True


def or_form(form: ListExpr, env: Environment, natives: NativeRegistry, evaluate_fn, is_tail_call: bool = False) -> bool:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right; every operand must be
    a Bool. Stops at the first true and returns true, otherwise false.
    """
    _check_operands(form)
    for expr in form.tail:
        if eval_condition(expr, env, natives, evaluate_fn):
            return True
    return False
