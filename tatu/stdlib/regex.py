"""`regex:` natives.

Replacement templates use `$1`, `${1}`, `${name}` and `$$` for a literal
dollar; a reference to a group that does not exist expands to nothing.
"""

from __future__ import annotations

import re

from tatu import Value
from tatu.builtin.expects import expect_args, expect_string
from tatu.errors import TatuRuntimeError
from tatu.types.native import native_table

_TEMPLATE_RE = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


def _compile(name: str, pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise TatuRuntimeError(f"`{name}` invalid regex pattern: {e}")


def expand_template(match: re.Match, template: str) -> str:
    def group(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        key = ref.group(2) or ref.group(3)
        if key.isdigit():
            index = int(key)
            value = match.group(index) if index <= match.re.groups else None
        else:
            value = match.groupdict().get(key)
        return value or ""

    return _TEMPLATE_RE.sub(group, template)


def regex_matches(*args: Value) -> bool:
    """(regex:matches text pattern) true if pattern matches anywhere in text"""
    expect_args("regex:matches", 2, args)
    text = expect_string("regex:matches", 0, args[0])
    pattern = _compile("regex:matches", expect_string("regex:matches", 1, args[1]))
    return pattern.search(text) is not None


def regex_find(*args: Value) -> str:
    """(regex:find text pattern) leftmost match, or an empty string"""
    expect_args("regex:find", 2, args)
    text = expect_string("regex:find", 0, args[0])
    pattern = _compile("regex:find", expect_string("regex:find", 1, args[1]))
    m = pattern.search(text)
    return m.group(0) if m else ""


def regex_replace(*args: Value) -> str:
    """(regex:replace text pattern replacement) replaces every match"""
    expect_args("regex:replace", 3, args)
    text = expect_string("regex:replace", 0, args[0])
    pattern = _compile("regex:replace", expect_string("regex:replace", 1, args[1]))
    template = expect_string("regex:replace", 2, args[2])
    return pattern.sub(lambda m: expand_template(m, template), text)


def register(natives: dict) -> None:
    natives.update(
        native_table(
            {
                "regex:matches": regex_matches,
                "regex:find": regex_find,
                "regex:replace": regex_replace,
            }
        )
    )
