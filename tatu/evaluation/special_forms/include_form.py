from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuSyntaxError
from tatu.reader.ast import ListExpr
from tatu.types.environment import Environment


def include_form(form: ListExpr, env: Environment, natives: NativeRegistry, evaluate_fn, _: bool = False):
    """Includes are flattened by the program builder, at top level only.

    One that survives to evaluation was nested inside another form.
    """
    raise TatuSyntaxError("include not resolved: only top-level includes are supported", form.location)
