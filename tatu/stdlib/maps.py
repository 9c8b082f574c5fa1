"""`map:` natives. Maps are dicts shared by reference and mutated in place."""

from __future__ import annotations

from tatu import Value
from tatu.builtin.expects import expect_args, expect_map, expect_string, expect_vector
from tatu.errors import TatuTypeError
from tatu.types.native import native_table
from tatu.types.nil import Nil
from tatu.types.value import format_number, is_number, type_of


def map_len(*args: Value) -> float:
    """(map:len m)"""
    expect_args("map:len", 1, args)
    return float(len(expect_map("map:len", 0, args[0])))


def map_get(*args: Value) -> Value:
    """(map:get m key) value for key, or nil"""
    expect_args("map:get", 2, args)
    m = expect_map("map:get", 0, args[0])
    return m.get(expect_string("map:get", 1, args[1]), Nil)


def map_get_in(*args: Value) -> Value:
    """(map:get-in m path) walks STRING keys and NUMBER indexes; nil when a step is missing"""
    name = "map:get-in"
    expect_args(name, 2, args)
    path = expect_vector(name, 1, args[1])
    current = args[0]
    for i, key in enumerate(path):
        if isinstance(key, str):
            if not isinstance(current, dict) or key not in current:
                return Nil
            current = current[key]
        elif is_number(key):
            if not float(key).is_integer():
                raise TatuTypeError(
                    f"`{name}` expects integer index at path position {i}, got {format_number(key)}"
                )
            index = int(key)
            if not isinstance(current, list) or not 0 <= index < len(current):
                return Nil
            current = current[index]
        else:
            raise TatuTypeError(
                f"`{name}` expects STRING or NUMBER in path at position {i}, got {type_of(key)}"
            )
    return current


def map_set(*args: Value) -> dict[str, Value]:
    """(map:set m key value)"""
    expect_args("map:set", 3, args)
    m = expect_map("map:set", 0, args[0])
    m[expect_string("map:set", 1, args[1])] = args[2]
    return m


def map_delete(*args: Value) -> dict[str, Value]:
    """(map:delete m key); a missing key is not an error"""
    expect_args("map:delete", 2, args)
    m = expect_map("map:delete", 0, args[0])
    m.pop(expect_string("map:delete", 1, args[1]), None)
    return m


def map_keys(*args: Value) -> list[Value]:
    """(map:keys m) in insertion order"""
    expect_args("map:keys", 1, args)
    return list(expect_map("map:keys", 0, args[0]).keys())


def map_values(*args: Value) -> list[Value]:
    """(map:values m) in insertion order"""
    expect_args("map:values", 1, args)
    return list(expect_map("map:values", 0, args[0]).values())


def map_merge(*args: Value) -> dict[str, Value]:
    """(map:merge m other) copies other's entries into m"""
    expect_args("map:merge", 2, args)
    m = expect_map("map:merge", 0, args[0])
    m.update(expect_map("map:merge", 1, args[1]))
    return m


def map_has(*args: Value) -> bool:
    """(map:has m key)"""
    expect_args("map:has", 2, args)
    return expect_string("map:has", 1, args[1]) in expect_map("map:has", 0, args[0])


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "map:len": map_len,
                "map:get": map_get,
                "map:get-in": map_get_in,
                "map:set": map_set,
                "map:delete": map_delete,
                "map:keys": map_keys,
                "map:values": map_values,
                "map:merge": map_merge,
                "map:has": map_has,
            }
        )
    )
