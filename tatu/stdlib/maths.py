"""`math:` natives."""

from __future__ import annotations

import math
import random
from typing import Callable

from tatu import Value
from tatu.builtin.expects import expect_args, expect_number
from tatu.errors import TatuRuntimeError
from tatu.types.native import native_table


def _constant(name: str, value: float) -> Callable[..., float]:
    def constant(*args: Value) -> float:
        expect_args(name, 0, args)
        return value

    constant.__doc__ = f"({name}) => {value}"
    return constant


def _unary(name: str, fn: Callable[[float], float], doc: str) -> Callable[..., float]:
    def unary(*args: Value) -> float:
        expect_args(name, 1, args)
        x = expect_number(name, 0, args[0])
        try:
            return float(fn(x))
        except OverflowError:
            # floor/ceil of an infinity
            return x
        except ValueError:
            return math.nan

    unary.__doc__ = doc
    return unary


def _round_half_away(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def math_min(*args: Value) -> float:
    """(math:min a b)"""
    expect_args("math:min", 2, args)
    return min(expect_number("math:min", 0, args[0]), expect_number("math:min", 1, args[1]))


def math_max(*args: Value) -> float:
    """(math:max a b)"""
    expect_args("math:max", 2, args)
    return max(expect_number("math:max", 0, args[0]), expect_number("math:max", 1, args[1]))


def math_sqrt(*args: Value) -> float:
    """(math:sqrt x) for x >= 0"""
    expect_args("math:sqrt", 1, args)
    x = expect_number("math:sqrt", 0, args[0])
    if x < 0:
        raise TatuRuntimeError("`math:sqrt` cannot compute a negative number")
    return math.sqrt(x)


def math_pow(*args: Value) -> float:
    """(math:pow base exponent)"""
    expect_args("math:pow", 2, args)
    base = expect_number("math:pow", 0, args[0])
    exponent = expect_number("math:pow", 1, args[1])
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def math_log(*args: Value) -> float:
    """(math:log x) natural logarithm, x > 0"""
    expect_args("math:log", 1, args)
    x = expect_number("math:log", 0, args[0])
    if x <= 0:
        raise TatuRuntimeError("`math:log` requires a positive number")
    return math.log(x)


def math_exp(*args: Value) -> float:
    """(math:exp x)"""
    expect_args("math:exp", 1, args)
    x = expect_number("math:exp", 0, args[0])
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def math_between(*args: Value) -> bool:
    """(math:between x min max) is true when min <= x <= max"""
    expect_args("math:between", 3, args)
    x = expect_number("math:between", 0, args[0])
    low = expect_number("math:between", 1, args[1])
    high = expect_number("math:between", 2, args[2])
    return low <= x <= high


def math_rand(*args: Value) -> float:
    """(math:rand min max) random integer in [min, max]"""
    expect_args("math:rand", 2, args)
    bounds = [expect_number("math:rand", i, arg) for i, arg in enumerate(args)]
    if not all(math.isfinite(b) for b in bounds):
        raise TatuRuntimeError("`math:rand` bounds must be finite")
    low, high = (math.floor(b) for b in bounds)
    if low > high:
        raise TatuRuntimeError(f"`math:rand` min ({low}) cannot be greater than max ({high})")
    return float(random.randint(low, high))


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "math:pi": _constant("math:pi", math.pi),
                "math:e": _constant("math:e", math.e),
                "math:abs": _unary("math:abs", abs, "(math:abs x)"),
                "math:floor": _unary("math:floor", math.floor, "(math:floor x)"),
                "math:ceil": _unary("math:ceil", math.ceil, "(math:ceil x)"),
                "math:round": _unary("math:round", _round_half_away, "(math:round x) half away from zero"),
                "math:sin": _unary("math:sin", math.sin, "(math:sin radians)"),
                "math:cos": _unary("math:cos", math.cos, "(math:cos radians)"),
                "math:tan": _unary("math:tan", math.tan, "(math:tan radians)"),
                "math:min": math_min,
                "math:max": math_max,
                "math:sqrt": math_sqrt,
                "math:pow": math_pow,
                "math:log": math_log,
                "math:exp": math_exp,
                "math:between": math_between,
                "math:rand": math_rand,
            }
        )
    )
