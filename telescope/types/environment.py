"""Runtime environment for Telescope.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups walk the chain; definitions only
ever touch the local frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from telescope import LispValue
from telescope.types.errors import TelescopeTypeError
from telescope.types.symbol import Symbol


def _key(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise TelescopeTypeError(f"Cannot bind {name!r}: not a symbol")


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Mapping[Symbol | str, LispValue] | None = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if bindings:
            self.update(bindings)

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[_key(name)] = value

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue | None:
        """Return the value bound to `name`, or None when nothing binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[_key(name)]

    def __contains__(self, name: Symbol | str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for the parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
