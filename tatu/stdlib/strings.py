"""`str:` natives. Lengths and indexes count code points."""

from __future__ import annotations

from tatu import Value
from tatu.builtin.expects import expect_args, expect_integer, expect_string, expect_vector
from tatu.errors import TatuRuntimeError, TatuTypeError
from tatu.types.native import native_table
from tatu.types.value import type_of


def str_len(*args: Value) -> float:
    """(str:len s)"""
    expect_args("str:len", 1, args)
    return float(len(expect_string("str:len", 0, args[0])))


def str_contains(*args: Value) -> bool:
    """(str:contains s sub)"""
    expect_args("str:contains", 2, args)
    return expect_string("str:contains", 1, args[1]) in expect_string("str:contains", 0, args[0])


def str_index(*args: Value) -> float:
    """(str:index s sub) first index of sub, or -1"""
    expect_args("str:index", 2, args)
    s = expect_string("str:index", 0, args[0])
    return float(s.find(expect_string("str:index", 1, args[1])))


def str_upper(*args: Value) -> str:
    """(str:upper s)"""
    expect_args("str:upper", 1, args)
    return expect_string("str:upper", 0, args[0]).upper()


def str_lower(*args: Value) -> str:
    """(str:lower s)"""
    expect_args("str:lower", 1, args)
    return expect_string("str:lower", 0, args[0]).lower()


def str_trim(*args: Value) -> str:
    """(str:trim s) strips surrounding whitespace"""
    expect_args("str:trim", 1, args)
    return expect_string("str:trim", 0, args[0]).strip()


def str_slice(*args: Value) -> str:
    """(str:slice s start end) characters in [start, end)"""
    name = "str:slice"
    expect_args(name, 3, args)
    s = expect_string(name, 0, args[0])
    start = expect_integer(name, 1, args[1])
    end = expect_integer(name, 2, args[2])
    if not 0 <= start <= len(s):
        raise TatuRuntimeError(f"`{name}` start index out of bounds: {start} (string length: {len(s)})")
    if not 0 <= end <= len(s):
        raise TatuRuntimeError(f"`{name}` end index out of bounds: {end} (string length: {len(s)})")
    if start > end:
        raise TatuRuntimeError(f"`{name}` start index ({start}) cannot be greater than end index ({end})")
    return s[start:end]


def str_split(*args: Value) -> list[Value]:
    """(str:split s sep) => vector of strings; an empty sep splits into characters"""
    expect_args("str:split", 2, args)
    s = expect_string("str:split", 0, args[0])
    sep = expect_string("str:split", 1, args[1])
    if sep == "":
        return list(s)
    return s.split(sep)


def str_join(*args: Value) -> str:
    """(str:join vec sep) joins a vector of strings"""
    name = "str:join"
    expect_args(name, 2, args)
    vec = expect_vector(name, 0, args[0])
    sep = expect_string(name, 1, args[1])
    for i, elem in enumerate(vec):
        if not isinstance(elem, str):
            raise TatuTypeError(f"`{name}` expects vector of strings, got {type_of(elem)} at index {i}")
    return sep.join(vec)


def str_replace(*args: Value) -> str:
    """(str:replace s old new) replaces every occurrence"""
    expect_args("str:replace", 3, args)
    s = expect_string("str:replace", 0, args[0])
    old = expect_string("str:replace", 1, args[1])
    new = expect_string("str:replace", 2, args[2])
    return s.replace(old, new)


def str_starts(*args: Value) -> bool:
    """(str:starts s prefix)"""
    expect_args("str:starts", 2, args)
    return expect_string("str:starts", 0, args[0]).startswith(expect_string("str:starts", 1, args[1]))


def str_ends(*args: Value) -> bool:
    """(str:ends s suffix)"""
    expect_args("str:ends", 2, args)
    return expect_string("str:ends", 0, args[0]).endswith(expect_string("str:ends", 1, args[1]))


def str_reverse(*args: Value) -> str:
    """(str:reverse s)"""
    expect_args("str:reverse", 1, args)
    return expect_string("str:reverse", 0, args[0])[::-1]


def str_repeat(*args: Value) -> str:
    """(str:repeat s count)"""
    expect_args("str:repeat", 2, args)
    s = expect_string("str:repeat", 0, args[0])
    count = expect_integer("str:repeat", 1, args[1])
    if count < 0:
        raise TatuRuntimeError(f"`str:repeat` count cannot be negative: {count}")
    return s * count


def str_concat(*args: Value) -> str:
    """(str:concat s ...) joins any number of strings"""
    return "".join(expect_string("str:concat", i, arg) for i, arg in enumerate(args))


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "str:len": str_len,
                "str:contains": str_contains,
                "str:index": str_index,
                "str:upper": str_upper,
                "str:lower": str_lower,
                "str:trim": str_trim,
                "str:slice": str_slice,
                "str:split": str_split,
                "str:join": str_join,
                "str:replace": str_replace,
                "str:starts": str_starts,
                "str:ends": str_ends,
                "str:reverse": str_reverse,
                "str:repeat": str_repeat,
                "str:concat": str_concat,
            }
        )
    )
