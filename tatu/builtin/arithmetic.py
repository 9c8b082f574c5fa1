"""Arithmetic operators exposed as native functions."""

from __future__ import annotations

import math

from tatu import Value
from tatu.builtin.expects import expect_args, expect_min_args, expect_numbers
from tatu.errors import TatuRuntimeError, TatuTypeError
from tatu.types.native import native_table
from tatu.types.value import ValueType, to_display, type_of


def add(*args: Value) -> Value:
    """(+ a b ...) sums numbers; any string operand turns it into concatenation."""
    expect_min_args("+", 2, args)
    has_string = False
    for i, arg in enumerate(args):
        t = type_of(arg)
        if t not in (ValueType.NUMBER, ValueType.STRING):
            raise TatuTypeError(f"`+` invalid type {t} at argument {i + 1}")
        has_string = has_string or t == ValueType.STRING

    if has_string:
        return "".join(to_display(arg) for arg in args)
    total = 0.0
    for x in args:
        total += x
    return total


def sub(*args: Value) -> float:
    """(- a) negates; (- a b ...) subtracts left to right."""
    expect_min_args("-", 1, args)
    nums = expect_numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    total = nums[0]
    for x in nums[1:]:
        total -= x
    return total


def mul(*args: Value) -> float:
    """(* a b ...) multiplies left to right."""
    expect_min_args("*", 2, args)
    total = 1.0
    for x in expect_numbers("*", args):
        total *= x
    return total


def div(*args: Value) -> float:
    """(/ a b ...) divides left to right; any zero divisor is an error."""
    expect_min_args("/", 2, args)
    nums = expect_numbers("/", args)
    total = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise TatuRuntimeError("`/` division by zero")
        total /= x
    return total


def mod(*args: Value) -> float:
    """(% a b) is the remainder with the sign of a."""
    expect_args("%", 2, args)
    left, right = expect_numbers("%", args)
    if right == 0:
        raise TatuRuntimeError("`%` modulo by zero")
    return math.fmod(left, right)


def register(natives: dict) -> None:
    """Register the arithmetic operators."""
    natives.update(
        native_table(
            {
                "+": add,
                "-": sub,
                "*": mul,
                "/": div,
                "%": mod,
            }
        )
    )
