"""Argument validation shared by every native function.

Argument indexes are 0-based here and reported 1-based in messages.
"""

from __future__ import annotations

from typing import Sequence

from tatu import Value
from tatu.errors import TatuArityError, TatuTypeError
from tatu.types.value import ValueType, is_number, type_of


def expect_args(name: str, expected: int, args: Sequence[Value]) -> None:
    if len(args) != expected:
        raise TatuArityError(f"`{name}` expects {expected} argument(s), got {len(args)}")


def expect_min_args(name: str, minimum: int, args: Sequence[Value]) -> None:
    if len(args) < minimum:
        raise TatuArityError(f"`{name}` expects at least {minimum} argument(s), got {len(args)}")


def expect_args_between(name: str, low: int, high: int, args: Sequence[Value]) -> None:
    if not low <= len(args) <= high:
        raise TatuArityError(
            f"`{name}` expects between {low} and {high} argument(s), got {len(args)}"
        )


def _expect(name: str, index: int, arg: Value, expected: ValueType) -> None:
    actual = type_of(arg)
    if actual != expected:
        raise TatuTypeError(f"`{name}` expects {expected} at argument {index + 1}, got {actual}")


def expect_number(name: str, index: int, arg: Value) -> float:
    _expect(name, index, arg, ValueType.NUMBER)
    return float(arg)


def expect_integer(name: str, index: int, arg: Value) -> int:
    num = expect_number(name, index, arg)
    if not num.is_integer():
        raise TatuTypeError(f"`{name}` expects integer NUMBER at argument {index + 1}, got {num:f}")
    return int(num)


def expect_string(name: str, index: int, arg: Value) -> str:
    _expect(name, index, arg, ValueType.STRING)
    return arg


def expect_bool(name: str, index: int, arg: Value) -> bool:
    _expect(name, index, arg, ValueType.BOOL)
    return arg


def expect_vector(name: str, index: int, arg: Value) -> list[Value]:
    _expect(name, index, arg, ValueType.VECTOR)
    return arg


def expect_map(name: str, index: int, arg: Value) -> dict[str, Value]:
    _expect(name, index, arg, ValueType.MAP)
    return arg


def expect_numbers(name: str, args: Sequence[Value]) -> list[float]:
    for i, arg in enumerate(args):
        if not is_number(arg):
            raise TatuTypeError(f"`{name}` invalid type {type_of(arg)} at argument {i + 1}")
    return [float(a) for a in args]
