"""Lexical units produced by the Telescope lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EQ = "="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @classmethod
    def parse(cls, text: str) -> Optional[Operator]:
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """One token: its kind, source text, decoded atom value and offset.

    Kinds: lparen, rparen, lbracket, rbracket, op, bool, nil, int, float,
    string, symbol.
    """

    kind: str
    text: str
    value: Any
    pos: int

    def __str__(self) -> str:
        return self.text
