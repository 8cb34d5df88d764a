"""Runtime environment for Lispy.

The Environment stores bindings of names to values and supports nested
scopes via an `outer` link. Values are copied on the way in and on the way
out, so a binding can only change by being replaced.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from lispy.diagnostics import make_error, UNBOUND_SYMBOL
from lispy.types.symbol import Symbol
from lispy.types.values import Value, copy_value


class Environment:
    """Hierarchical mapping from names to Lispy values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    @staticmethod
    def _key(name: Symbol | str) -> str:
        return name.name if isinstance(name, Symbol) else name

    def root(self) -> Environment:
        """Return the outermost environment of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = self._key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> Value:
        """Return a copy of the value bound to `name`.

        Searches this frame then each enclosing one. An unbound name yields an
        Error value rather than raising.
        """
        key = self._key(name)
        env = self.find(key)
        if env is None:
            return make_error(UNBOUND_SYMBOL, key)
        return copy_value(env.vars[key])

    def put(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` in this frame, replacing any existing local binding."""
        self.vars[self._key(name)] = copy_value(value)

    def put_global(self, name: Symbol | str, value: Value) -> None:
        """Bind `name` in the outermost frame of the chain."""
        self.root().put(name, value)

    def update(self, bindings: Iterable[tuple[str, Value]]) -> None:
        """Bulk-define name/value pairs in the current frame."""
        for k, v in bindings:
            self.put(k, v)

    def __contains__(self, name: Symbol | str) -> bool:
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
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
