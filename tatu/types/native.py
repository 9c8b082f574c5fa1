"""Host-implemented functions exposed to Tatu code."""

from __future__ import annotations

from typing import Callable

from tatu import Value


class NativeFunction:
    """A named Python callable taking evaluated values positionally.

    Natives never see the environment: they receive values and return a
    value, raising a TatuError subclass on failure.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[..., Value]):
        self.name = name
        self.fn = fn

    def __call__(self, *args: Value) -> Value:
        return self.fn(*args)

    @property
    def doc(self) -> str:
        return (self.fn.__doc__ or "").strip()

    def __str__(self) -> str:
        return f"NativeFunction({self.name})"

    def __repr__(self) -> str:
        return f"<NativeFunction {self.name}>"


def native_table(table: dict[str, Callable[..., Value]]) -> dict[str, NativeFunction]:
    """Wrap a name -> callable table for bulk registration."""
    return {name: NativeFunction(name, fn) for name, fn in table.items()}
