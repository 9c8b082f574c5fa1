"""Type predicates and conversions."""

from __future__ import annotations

from typing import Callable

from tatu import Value
from tatu.builtin.expects import expect_args
from tatu.errors import TatuRuntimeError, TatuTypeError
from tatu.types.native import native_table
from tatu.types.value import ValueType, format_number, is_number, type_of


def _predicate(name: str, *types: ValueType) -> Callable[..., bool]:
    def check(*args: Value) -> bool:
        expect_args(name, 1, args)
        return type_of(args[0]) in types

    check.__doc__ = f"({name} x) is true when x is {' or '.join(str(t) for t in types)}."
    return check


def is_int(*args: Value) -> bool:
    """(is-int x) is true for NUMBERs without a fractional part."""
    expect_args("is-int", 1, args)
    return is_number(args[0]) and float(args[0]).is_integer()


def to_string(*args: Value) -> str:
    """(to-string x) converts a NUMBER, STRING, BOOL or NIL to a STRING."""
    expect_args("to-string", 1, args)
    x = args[0]
    match type_of(x):
        case ValueType.STRING:
            return x
        case ValueType.NUMBER:
            return format_number(x)
        case ValueType.BOOL:
            return "true" if x else "false"
        case ValueType.NIL:
            return "<nil>"
        case t:
            raise TatuTypeError(f"`to-string` cannot convert {t} to STRING")


def to_number(*args: Value) -> float:
    """(to-number x) parses STRINGs; true is 1, false and nil are 0."""
    expect_args("to-number", 1, args)
    x = args[0]
    match type_of(x):
        case ValueType.NUMBER:
            return float(x)
        case ValueType.STRING:
            try:
                return float(x)
            except ValueError:
                raise TatuRuntimeError(f"`to-number` cannot parse STRING '{x}' to NUMBER")
        case ValueType.BOOL:
            return 1.0 if x else 0.0
        case ValueType.NIL:
            return 0.0
        case t:
            raise TatuTypeError(f"`to-number` cannot convert {t} to NUMBER")


def to_bool(*args: Value) -> bool:
    """(to-bool x): non-zero NUMBERs and non-empty STRINGs are true, nil is false."""
    expect_args("to-bool", 1, args)
    x = args[0]
    match type_of(x):
        case ValueType.BOOL:
            return x
        case ValueType.NUMBER:
            return x != 0
        case ValueType.STRING:
            return x != ""
        case ValueType.NIL:
            return False
        case t:
            raise TatuTypeError(f"`to-bool` cannot convert {t} to BOOL")


def register(natives: dict) -> None:
    """Register type predicates and conversions."""
    natives.update(
        native_table(
            {
                "is-bool": _predicate("is-bool", ValueType.BOOL),
                "is-number": _predicate("is-number", ValueType.NUMBER),
                "is-int": is_int,
                "is-string": _predicate("is-string", ValueType.STRING),
                "is-vector": _predicate("is-vector", ValueType.VECTOR),
                "is-map": _predicate("is-map", ValueType.MAP),
                "is-nil": _predicate("is-nil", ValueType.NIL),
                "is-function": _predicate("is-function", ValueType.FUNC, ValueType.NATIVE_FUNC),
                "to-string": to_string,
                "to-number": to_number,
                "to-bool": to_bool,
            }
        )
    )
