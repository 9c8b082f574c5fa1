"""Closure representation for Tatu functions."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from tatu.types.environment import Environment

if TYPE_CHECKING:
    from tatu.reader.ast import Expr


class Function:
    """A first-class closure: parameter names, body, and the defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[str], body: Expr, env: Environment):
        self.params: list[str] = params
        self.body: Expr = body
        # Captured by reference; later definitions in env stay visible
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list) -> Environment:
        """Return a fresh activation env binding params positionally to args."""
        activation = Environment(outer=self.env)
        for name, value in zip(self.params, args, strict=True):
            activation.vars[name] = value
        return activation

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("Function(")
            buffer.write(" ".join(self.params))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<{self}>"
