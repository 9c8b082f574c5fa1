"""Value tags, canonical rendering and equality for Tatu runtime values.

Values are plain Python objects:

- Number -> float (int accepted; bool never counts as a number)
- String -> str
- Bool   -> bool
- Nil    -> tatu.types.nil.Nil
- Vector -> list, shared by reference
- Map    -> dict[str, value], shared by reference
- Function, NativeFunction, RecurMarker -> classes under tatu.types
"""

from __future__ import annotations

import enum
import math
from decimal import Decimal

from tatu import Value
from tatu.errors import TatuTypeError
from tatu.types.function import Function
from tatu.types.native import NativeFunction
from tatu.types.nil import NilType
from tatu.types.recur import RecurMarker


class ValueType(str, enum.Enum):
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOL = "BOOL"
    NIL = "NIL"
    VECTOR = "VECTOR"
    MAP = "MAP"
    FUNC = "FUNCTION"
    NATIVE_FUNC = "NATIVE_FUNCTION"
    RECUR = "RECUR"

    def __str__(self) -> str:
        return self.value


def type_of(value: Value) -> ValueType:
    # bool is checked before numbers: True is an int in Python
    if isinstance(value, bool):
        return ValueType.BOOL
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, NilType):
        return ValueType.NIL
    if isinstance(value, list):
        return ValueType.VECTOR
    if isinstance(value, dict):
        return ValueType.MAP
    if isinstance(value, Function):
        return ValueType.FUNC
    if isinstance(value, NativeFunction):
        return ValueType.NATIVE_FUNC
    if isinstance(value, RecurMarker):
        return ValueType.RECUR
    raise TatuTypeError(f"unknown value {value!r}")


def is_number(value: Value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_callable(value: Value) -> bool:
    return isinstance(value, (Function, NativeFunction))


# ----------------- Rendering -----------------
def _shortest_g(x: float) -> str:
    """Shortest round-trip %g: exponent form below 1e-4 or from 1e6 up."""
    d = Decimal(repr(x)).normalize()
    sign, digits, exponent = d.as_tuple()
    ds = "".join(str(digit) for digit in digits)
    sci = len(ds) + exponent - 1
    prefix = "-" if sign else ""
    if sci < -4 or sci >= 6:
        mantissa = ds[0] + ("." + ds[1:] if len(ds) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if sci < 0 else '+'}{abs(sci):02d}"
    return format(d, "f")


def format_number(n: float) -> str:
    """Canonical number rendering.

    Integral values print without a decimal point. Other values are rounded
    to ten decimals first so binary noise such as 0.30000000000000004 prints
    as 0.3.
    """
    n = float(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "+Inf" if n > 0 else "-Inf"
    if n == 0:
        return "0"
    if n.is_integer():
        return "%.0f" % n
    rounded = float("%.10f" % n)
    if rounded == 0:
        return "0"
    return _shortest_g(rounded)


def to_display(value: Value) -> str:
    """The canonical string form used by print, to-string and `+` concatenation."""
    match type_of(value):
        case ValueType.NUMBER:
            return format_number(value)
        case ValueType.STRING:
            return value
        case ValueType.BOOL:
            return "true" if value else "false"
        case ValueType.NIL:
            return "<nil>"
        case ValueType.VECTOR:
            return "(" + " ".join(to_display(v) for v in value) + ")"
        case ValueType.MAP:
            return "[" + " ".join(f"{k} {to_display(v)}" for k, v in value.items()) + "]"
        case _:
            return str(value)


# ----------------- Equality -----------------
COMPARABLE_TYPES = (ValueType.NUMBER, ValueType.STRING, ValueType.BOOL, ValueType.NIL)


def values_equal(a: Value, b: Value) -> bool:
    """Equality over Number, String, Bool and Nil.

    Raises TatuTypeError for mismatched tags or for values that have no
    defined equality (vectors, maps, functions).
    """
    ta, tb = type_of(a), type_of(b)
    if ta != tb:
        raise TatuTypeError(f"cannot compare {ta} with {tb}")
    if ta not in COMPARABLE_TYPES:
        raise TatuTypeError(f"cannot compare values of type {ta}")
    if ta == ValueType.NIL:
        return True
    return a == b


def loosely_equal(a: Value, b: Value) -> bool:
    """Like values_equal, but incomparable pairs are simply not equal."""
    try:
        return values_equal(a, b)
    except TatuTypeError:
        return False
