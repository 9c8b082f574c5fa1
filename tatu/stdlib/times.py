"""`time:` natives over Unix timestamps in seconds, always UTC.

Layouts use readable tokens translated to strftime directives:

    YYYY YY  MMMM MMM MM  DD  HH hh  mm  ss  SSS  A  dddd ddd
"""

from __future__ import annotations

import calendar
import math
import re
import time
from datetime import datetime, timezone

from tatu import Value
from tatu.builtin.expects import expect_args, expect_integer, expect_number, expect_string
from tatu.errors import TatuRuntimeError
from tatu.types.native import native_table
from tatu.types.value import format_number

LAYOUT_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "hh": "%I",
    "mm": "%M",
    "SSS": "000",
    "ss": "%S",
    "A": "%p",
    "dddd": "%A",
    "ddd": "%a",
}

# Longest tokens first so "MMMM" never reads as "MM" "MM"
_LAYOUT_RE = re.compile("|".join(sorted(map(re.escape, LAYOUT_TOKENS), key=len, reverse=True)) + "|%")


def translate_layout(layout: str) -> str:
    """Translate a Tatu layout to a strftime/strptime format in one pass."""
    return _LAYOUT_RE.sub(lambda m: "%%" if m.group(0) == "%" else LAYOUT_TOKENS[m.group(0)], layout)


def _seconds(name: str, index: int, arg: Value) -> int:
    x = expect_number(name, index, arg)
    if not math.isfinite(x):
        raise TatuRuntimeError(f"`{name}` expects a finite NUMBER at argument {index + 1}, got {format_number(x)}")
    return int(x)


def _utc(name: str, index: int, arg: Value) -> datetime:
    seconds = _seconds(name, index, arg)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise TatuRuntimeError(f"`{name}` timestamp out of range: {seconds}")


def _field(name: str, attr: str):
    def field(*args: Value) -> float:
        expect_args(name, 1, args)
        return float(getattr(_utc(name, 0, args[0]), attr))

    field.__doc__ = f"({name} timestamp) UTC {attr}"
    return field


def time_now(*args: Value) -> float:
    """(time:now) current Unix timestamp in seconds"""
    expect_args("time:now", 0, args)
    return float(int(time.time()))


def time_unix(*args: Value) -> float:
    """(time:unix timestamp) => the same timestamp truncated to whole seconds"""
    expect_args("time:unix", 1, args)
    return float(_seconds("time:unix", 0, args[0]))


def time_format(*args: Value) -> str:
    """(time:format timestamp layout)"""
    expect_args("time:format", 2, args)
    t = _utc("time:format", 0, args[0])
    layout = expect_string("time:format", 1, args[1])
    return t.strftime(translate_layout(layout))


def time_parse(*args: Value) -> float:
    """(time:parse text layout) => Unix timestamp, text read as UTC"""
    expect_args("time:parse", 2, args)
    text = expect_string("time:parse", 0, args[0])
    layout = expect_string("time:parse", 1, args[1])
    try:
        parsed = datetime.strptime(text, translate_layout(layout))
    except ValueError as e:
        raise TatuRuntimeError(f"`time:parse` failed to parse: {e}")
    return float(calendar.timegm(parsed.utctimetuple()))


def time_add(*args: Value) -> float:
    """(time:add timestamp seconds)"""
    expect_args("time:add", 2, args)
    t = _seconds("time:add", 0, args[0])
    return float(t + _seconds("time:add", 1, args[1]))


def time_sub(*args: Value) -> float:
    """(time:sub timestamp seconds)"""
    expect_args("time:sub", 2, args)
    t = _seconds("time:sub", 0, args[0])
    return float(t - _seconds("time:sub", 1, args[1]))


def time_diff(*args: Value) -> float:
    """(time:diff t1 t2) seconds from t2 to t1"""
    expect_args("time:diff", 2, args)
    t1 = _seconds("time:diff", 0, args[0])
    t2 = _seconds("time:diff", 1, args[1])
    return float(t1 - t2)


def time_is_leap(*args: Value) -> bool:
    """(time:is-leap year)"""
    expect_args("time:is-leap", 1, args)
    return calendar.isleap(expect_integer("time:is-leap", 0, args[0]))


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "time:now": time_now,
                "time:unix": time_unix,
                "time:year": _field("time:year", "year"),
                "time:month": _field("time:month", "month"),
                "time:day": _field("time:day", "day"),
                "time:hour": _field("time:hour", "hour"),
                "time:minute": _field("time:minute", "minute"),
                "time:second": _field("time:second", "second"),
                "time:format": time_format,
                "time:parse": time_parse,
                "time:add": time_add,
                "time:sub": time_sub,
                "time:diff": time_diff,
                "time:is-leap": time_is_leap,
            }
        )
    )
