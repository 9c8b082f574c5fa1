"""`json:` natives."""

from __future__ import annotations

import json
import math

from tatu import Value
from tatu.builtin.expects import expect_args, expect_string
from tatu.errors import TatuRuntimeError, TatuTypeError
from tatu.types.native import native_table
from tatu.types.nil import Nil
from tatu.types.value import ValueType, type_of


def to_json(value: Value):
    """Convert a Tatu value to plain JSON-ready Python data."""
    match type_of(value):
        case ValueType.NIL:
            return None
        case ValueType.BOOL | ValueType.STRING:
            return value
        case ValueType.NUMBER:
            x = float(value)
            if not math.isfinite(x):
                raise TatuRuntimeError(f"cannot encode {x} as JSON")
            # whole numbers encode without a fraction: 1, not 1.0
            return int(x) if x.is_integer() else x
        case ValueType.VECTOR:
            return [to_json(v) for v in value]
        case ValueType.MAP:
            return {k: to_json(v) for k, v in value.items()}
        case t:
            raise TatuTypeError(f"cannot convert {t} to JSON")


def from_json(data) -> Value:
    if data is None:
        return Nil
    if isinstance(data, bool) or isinstance(data, str):
        return data
    if isinstance(data, (int, float)):
        return float(data)
    if isinstance(data, list):
        return [from_json(v) for v in data]
    if isinstance(data, dict):
        return {k: from_json(v) for k, v in data.items()}
    raise TatuTypeError(f"unsupported JSON type: {type(data).__name__}")


def json_encode(*args: Value) -> str:
    """(json:encode value) compact JSON with sorted keys"""
    expect_args("json:encode", 1, args)
    try:
        data = to_json(args[0])
    except TatuTypeError as e:
        raise TatuTypeError(f"`json:encode` unsupported type: {e.message}")
    except TatuRuntimeError as e:
        raise TatuRuntimeError(f"`json:encode` failed to encode: {e.message}")
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def json_decode(*args: Value) -> Value:
    """(json:decode text)"""
    expect_args("json:decode", 1, args)
    text = expect_string("json:decode", 0, args[0])
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TatuRuntimeError(f"`json:decode` failed to decode: {e}")
    return from_json(data)


def register(natives: dict) -> None:
    natives.update(native_table({"json:encode": json_encode, "json:decode": json_decode}))
