from __future__ import annotations
import sys


class Symbol:
    """A bare name in source text: an identifier or an operator like `+`.

    Symbols only exist as syntax; evaluating one looks it up in the
    environment.
    """

    __slots__ = ("id",)
    __match_args__ = ("id",)

    def __init__(self, name: str):
        # Interned so equality and hashing stay cheap in environment lookups
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
