"""Builtin procedure representation."""

from __future__ import annotations

from typing import Callable

from telescope import LispValue
from telescope.types.environment import Environment

BuiltinFn = Callable[[Environment, list[LispValue]], LispValue]


class Builtin:
    """A primitive procedure exposed under a fixed symbol name.

    The name only feeds diagnostics and display; calls are dispatched through
    whatever environment binding holds this object.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"#[builtin {self.name}]"

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
