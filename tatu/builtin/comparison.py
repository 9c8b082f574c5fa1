"""Comparison and logical-negation natives."""

from __future__ import annotations

import operator
from typing import Callable

from tatu import Value
from tatu.builtin.expects import expect_args, expect_bool
from tatu.errors import TatuTypeError
from tatu.types.native import native_table
from tatu.types.value import ValueType, type_of, values_equal


def equals(*args: Value) -> bool:
    """(= a b) for two values of the same type: NUMBER, STRING, BOOL or NIL."""
    expect_args("=", 2, args)
    return values_equal(args[0], args[1])


def _ordering(name: str, op: Callable[[Value, Value], bool]) -> Callable[..., bool]:
    def compare(*args: Value) -> bool:
        expect_args(name, 2, args)
        left, right = args
        tl, tr = type_of(left), type_of(right)
        if tl != tr:
            raise TatuTypeError(f"cannot apply `{name}` operator for {tl} and {tr} expressions")
        if tl not in (ValueType.NUMBER, ValueType.STRING):
            raise TatuTypeError(f"invalid type {tl} for `{name}`")
        return op(left, right)

    compare.__name__ = compare.__qualname__ = {"<": "lt", "<=": "lte", ">": "gt", ">=": "gte"}[name]
    compare.__doc__ = f"({name} a b) orders two NUMBERs or two STRINGs."
    return compare


lt = _ordering("<", operator.lt)
lte = _ordering("<=", operator.le)
gt = _ordering(">", operator.gt)
gte = _ordering(">=", operator.ge)


def logical_not(*args: Value) -> bool:
    """(not b) negates a single BOOL."""
    expect_args("not", 1, args)
    return not expect_bool("not", 0, args[0])


def register(natives: dict) -> None:
    """Register comparison operators and `not`."""
    natives.update(
        native_table(
            {
                "=": equals,
                "<": lt,
                "<=": lte,
                ">": gt,
                ">=": gte,
                "not": logical_not,
            }
        )
    )
