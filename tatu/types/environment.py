"""Runtime environment for Tatu.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. A new Environment is created for every
`begin` block and every function activation.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tatu import Value
from tatu.errors import TatuNameError


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Value) -> Value:
        """Bind `name` in this frame and return `value`.

        Raises TatuNameError if `name` is already bound in this frame; outer
        bindings of the same name are shadowed, not touched.
        """
        if name in self.vars:
            raise TatuNameError(f"symbol `{name}` already defined")
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: str, value: Value) -> bool:
        """Update the nearest existing binding for `name`.

        Returns False, binding nothing, when the name is unbound in the chain.
        """
        env = self.find(name)
        if env is None:
            return False
        env.vars[name] = value
        return True

    def lookup(self, name: str) -> tuple[Value, bool]:
        """Return `(value, True)` for the nearest binding, else `(None, False)`."""
        env = self.find(name)
        if env is None:
            return None, False
        return env.vars[name], True

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first."""
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                frames.append(buffer.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(frames) + ">"
