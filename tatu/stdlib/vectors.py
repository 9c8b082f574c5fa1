"""`vec:` natives.

Vectors are Python lists shared by reference: every mutating native changes
the list in place and returns that same list. `vec:slice` is the only copy.
"""

from __future__ import annotations

from tatu import Value
from tatu.builtin.expects import expect_args, expect_integer, expect_vector
from tatu.errors import TatuRuntimeError, TatuTypeError
from tatu.types.native import native_table
from tatu.types.nil import Nil
from tatu.types.value import ValueType, loosely_equal, type_of


def _vector_index(name: str, args: tuple[Value, ...]) -> tuple[list[Value], int]:
    vec = expect_vector(name, 0, args[0])
    index = expect_integer(name, 1, args[1])
    if not 0 <= index < len(vec):
        raise TatuRuntimeError(f"`{name}` index out of bounds: {index} (vector length: {len(vec)})")
    return vec, index


def vec_len(*args: Value) -> float:
    """(vec:len v)"""
    expect_args("vec:len", 1, args)
    return float(len(expect_vector("vec:len", 0, args[0])))


def vec_get(*args: Value) -> Value:
    """(vec:get v index)"""
    expect_args("vec:get", 2, args)
    vec, index = _vector_index("vec:get", args)
    return vec[index]


def vec_set(*args: Value) -> list[Value]:
    """(vec:set v index value) replaces in place"""
    expect_args("vec:set", 3, args)
    vec, index = _vector_index("vec:set", args)
    vec[index] = args[2]
    return vec


def vec_delete(*args: Value) -> list[Value]:
    """(vec:delete v index) removes in place"""
    expect_args("vec:delete", 2, args)
    vec, index = _vector_index("vec:delete", args)
    del vec[index]
    return vec


def vec_push(*args: Value) -> list[Value]:
    """(vec:push v value) appends in place"""
    expect_args("vec:push", 2, args)
    vec = expect_vector("vec:push", 0, args[0])
    vec.append(args[1])
    return vec


def vec_pop(*args: Value) -> list[Value]:
    """(vec:pop v) drops the last element in place"""
    expect_args("vec:pop", 1, args)
    vec = expect_vector("vec:pop", 0, args[0])
    if not vec:
        raise TatuRuntimeError("`vec:pop` cannot pop from empty vector")
    vec.pop()
    return vec


def vec_slice(*args: Value) -> list[Value]:
    """(vec:slice v start end) new vector with elements in [start, end)"""
    name = "vec:slice"
    expect_args(name, 3, args)
    vec = expect_vector(name, 0, args[0])
    start = expect_integer(name, 1, args[1])
    end = expect_integer(name, 2, args[2])
    if not 0 <= start <= len(vec):
        raise TatuRuntimeError(f"`{name}` start index out of bounds: {start} (vector length: {len(vec)})")
    if not 0 <= end <= len(vec):
        raise TatuRuntimeError(f"`{name}` end index out of bounds: {end} (vector length: {len(vec)})")
    if start > end:
        raise TatuRuntimeError(f"`{name}` start index ({start}) cannot be greater than end index ({end})")
    return vec[start:end]


def vec_concat(*args: Value) -> list[Value]:
    """(vec:concat v other) appends other's elements to v in place"""
    expect_args("vec:concat", 2, args)
    vec = expect_vector("vec:concat", 0, args[0])
    other = expect_vector("vec:concat", 1, args[1])
    vec.extend(list(other))
    return vec


def vec_contains(*args: Value) -> bool:
    """(vec:contains v value)"""
    expect_args("vec:contains", 2, args)
    vec = expect_vector("vec:contains", 0, args[0])
    return any(loosely_equal(elem, args[1]) for elem in vec)


def vec_find(*args: Value) -> Value:
    """(vec:find v value) first index of value, or nil"""
    expect_args("vec:find", 2, args)
    vec = expect_vector("vec:find", 0, args[0])
    for i, elem in enumerate(vec):
        if loosely_equal(elem, args[1]):
            return float(i)
    return Nil


def vec_reverse(*args: Value) -> list[Value]:
    """(vec:reverse v) reverses in place"""
    expect_args("vec:reverse", 1, args)
    vec = expect_vector("vec:reverse", 0, args[0])
    vec.reverse()
    return vec


SORTABLE = (ValueType.NUMBER, ValueType.STRING, ValueType.BOOL)


def vec_sort(*args: Value) -> list[Value]:
    """(vec:sort v) sorts NUMBERs, STRINGs or BOOLs (false first) in place"""
    expect_args("vec:sort", 1, args)
    vec = expect_vector("vec:sort", 0, args[0])
    if not vec:
        return vec
    first = type_of(vec[0])
    for i, elem in enumerate(vec):
        t = type_of(elem)
        if t != first or t not in SORTABLE:
            raise TatuTypeError(f"`vec:sort` cannot sort {t} at index {i} in a vector of {first}")
    vec.sort()
    return vec


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "vec:len": vec_len,
                "vec:get": vec_get,
                "vec:set": vec_set,
                "vec:delete": vec_delete,
                "vec:push": vec_push,
                "vec:pop": vec_pop,
                "vec:slice": vec_slice,
                "vec:concat": vec_concat,
                "vec:contains": vec_contains,
                "vec:find": vec_find,
                "vec:reverse": vec_reverse,
                "vec:sort": vec_sort,
            }
        )
    )
