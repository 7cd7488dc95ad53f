"""Textual rendering of Telescope values.

`display` produces text the reader accepts back (for every value the reader
can produce), so `parse(display(v)) == v`. `to_text` is the form `print`
writes: identical, except that a top-level string comes out unquoted.
"""

from __future__ import annotations

import math

from telescope import LispValue
from telescope.types.nil import NilType
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector
from telescope.types.builtin_fn import Builtin
from telescope.types.lambda_fn import Lambda

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def _display_float(x: float) -> str:
    if math.isnan(x):
        return "nan"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = repr(x)
    # Float literals need a decimal point: 1e-05 -> 1.0e-05
    if "." not in text:
        mantissa, _, exponent = text.partition("e")
        text = f"{mantissa}.0e{exponent}" if exponent else f"{mantissa}.0"
    return text


def _display_str(s: str) -> str:
    return '"' + "".join(_ESCAPES.get(c, c) for c in s) + '"'


def display(value: LispValue) -> str:
    match value:
        case NilType():
            return "nil"
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return _display_float(value)
        case str():
            return _display_str(value)
        case Symbol():
            return value.id
        case Vector():
            return "[" + " ".join(display(v) for v in value) + "]"
        case list():
            return "(" + " ".join(display(v) for v in value) + ")"
        case Builtin() | Lambda():
            return str(value)
    return repr(value)


def to_text(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    return display(value)
