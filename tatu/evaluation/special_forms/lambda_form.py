from tatu import EvaluatorFn
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError, TatuSyntaxError
from tatu.reader.ast import ListExpr, SymbolExpr
from tatu.types.environment import Environment
from tatu.types.function import Function


def lambda_form(
    form: ListExpr,
    env: Environment,
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> Function:
    """(lambda (p1 ... pn) body) closes over env by reference."""
    if len(form) != 3:
        raise TatuArityError("`lambda` expects a parameter list and a body", form.location)
    params, body = form.tail
    if not isinstance(params, ListExpr):
        raise TatuSyntaxError("`lambda` expects a list of parameters", params.location)

    names: list[str] = []
    for p in params.items:
        if not isinstance(p, SymbolExpr):
            raise TatuSyntaxError("parameters must be identifiers", p.location)
        if p.name in names:
            raise TatuSyntaxError(f"duplicate parameter `{p.name}`", p.location)
        names.append(p.name)

    return Function(names, body, env)
