"""Application engine for Tatu.

Calls either a native function (directly, with the evaluated arguments) or a
closure. Closures run inside a trampoline: the body is evaluated in tail mode
and a RecurMarker result rebinds the parameters and loops instead of
recursing, so `recur` runs in constant Python stack.
"""

from __future__ import annotations

from typing import Optional

from tatu import EvaluatorFn, Value
from tatu.builtin.registry import NativeRegistry
from tatu.errors import TatuArityError, TatuError, TatuTypeError
from tatu.reader.location import Location
from tatu.types.function import Function
from tatu.types.native import NativeFunction
from tatu.types.recur import RecurMarker


def _check_arity(fn: Function, args: list[Value], location: Optional[Location]) -> None:
    if len(args) != fn.arity:
        raise TatuArityError(
            f"function expects {fn.arity} argument(s), got {len(args)}", location
        )


def apply_function(
    fn: Function,
    args: list[Value],
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    location: Optional[Location] = None,
) -> Value:
    """Run a closure to completion.

    Each iteration builds a fresh activation env whose parent is the closure
    env. The argument count is checked on entry and on every `recur`.
    """
    current = args
    while True:
        _check_arity(fn, current, location)
        result = evaluate_fn(fn.body, fn.bind(current), natives, True)
        if isinstance(result, RecurMarker):
            current = result.args
            continue
        return result


def apply_native(fn: NativeFunction, args: list[Value], location: Optional[Location] = None) -> Value:
    try:
        return fn(*args)
    except TatuError as e:
        raise e.with_location(location)


def apply(
    head: Value,
    args: list[Value],
    natives: NativeRegistry,
    evaluate_fn: EvaluatorFn,
    location: Optional[Location] = None,
) -> Value:
    """Apply either a closure or a native function; anything else is a type error."""
    if isinstance(head, Function):
        return apply_function(head, args, natives, evaluate_fn, location)
    elif isinstance(head, NativeFunction):
        return apply_native(head, args, location)
    else:
        raise TatuTypeError("expression is not a function", location)
