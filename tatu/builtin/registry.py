"""Native function registry.

A flat, read-only name -> NativeFunction table built once per interpreter.
The evaluator consults it only after the lexical environment chain, so any
`var` or parameter of the same name shadows a native.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from tatu.types.native import NativeFunction

logger = logging.getLogger(__name__)

NativeRegistry = Mapping[str, NativeFunction]


def default_modules() -> list[Callable[[dict], None]]:
    from tatu.builtin import arithmetic, comparison, io_builtin, type_builtin
    from tatu.stdlib import file_system, json_codec, maps, maths, regex, strings, times, vectors

    return [
        arithmetic.register,
        comparison.register,
        io_builtin.register,
        type_builtin.register,
        maths.register,
        strings.register,
        vectors.register,
        maps.register,
        times.register,
        json_codec.register,
        regex.register,
        file_system.register,
    ]


def create_natives(
    extra: Mapping[str, NativeFunction] | None = None,
    modules: Iterable[Callable[[dict], None]] | None = None,
) -> NativeRegistry:
    """Build the registry from each module's `register(natives)`.

    `extra` entries are added last and win on name clashes; embedders use it
    to expose their own host functions.
    """
    natives: dict[str, NativeFunction] = {}
    for register in modules if modules is not None else default_modules():
        register(natives)
    if extra:
        natives.update(extra)
    logger.debug("registered %d native functions", len(natives))
    return MappingProxyType(natives)
