"""
  Telescope Reader: Lexer and Parser

Emits plain Python values:

    - nil -> Nil
    - true/false -> bool
    - integers -> int (signed 64-bit)
    - floats -> float (a decimal point is required)
    - strings -> str
    - operators and bare symbols -> Symbol
    - ( ... ) -> list
    - [ ... ] -> Vector
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from telescope import SExpression
from telescope.reader.token import Operator, Token
from telescope.types.errors import TelescopeEOF, TelescopeSyntaxError
from telescope.types.nil import Nil
from telescope.types.symbol import Symbol
from telescope.types.vector import Vector

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

WHITESPACE_RE = re.compile(r"\s*")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote with no closing partner
    r'|(?P<word>[^\s()\[\]";]+)',  # numbers, operators, symbols
    re.DOTALL,
)

INT_RE = re.compile(r"[-+]?\d+\Z")
FLOAT_RE = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?\Z")
SYMBOL_RE = re.compile(r"[A-Za-z_!?*/<>=+\-][A-Za-z0-9_!?*/<>=+\-]*\Z")

STRING_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
STRING_ESCAPES: dict[str, str] = {"n": "\n", "t": "\t", '"': '"', "\\": "\\"}

CLOSERS = {"lparen": "rparen", "lbracket": "rbracket"}


def _unescape(body: str) -> str:
    return STRING_ESCAPE_RE.sub(lambda m: STRING_ESCAPES.get(m.group(1), m.group(1)), body)


def _classify(word: str, pos: int) -> Token:
    if (op := Operator.parse(word)) is not None:
        return Token("op", word, op, pos)
    if INT_RE.match(word):
        value = int(word)
        if not INT_MIN <= value <= INT_MAX:
            raise TelescopeSyntaxError(f"Integer literal out of range: {word}", pos, word)
        return Token("int", word, value, pos)
    if FLOAT_RE.match(word):
        return Token("float", word, float(word), pos)
    if word in ("true", "false"):
        return Token("bool", word, word == "true", pos)
    if word == "nil":
        return Token("nil", word, Nil, pos)
    if SYMBOL_RE.match(word):
        return Token("symbol", word, Symbol(word), pos)
    raise TelescopeSyntaxError(f"Unrecognized token {word!r}", pos, word)


def lex(source: str) -> Iterator[Token]:
    """Token generator over `source`."""
    pos = 0
    n = len(source)
    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "comment":
            pass
        elif kind == "unterminated":
            raise TelescopeSyntaxError("Unterminated string", pos, text)
        elif kind == "string":
            yield Token("string", text, _unescape(text[1:-1]), pos)
        elif kind == "word":
            yield _classify(text, pos)
        else:
            yield Token(kind, text, None, pos)
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise TelescopeSyntaxError("Unexpected end of input")

        if tok.kind in CLOSERS:
            closer = CLOSERS[tok.kind]
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise TelescopeSyntaxError(f"Unmatched '{tok.text}'", tok.pos, tok.text)
                if nxt.kind == closer:
                    self.advance()
                    break
                if nxt.kind in ("rparen", "rbracket"):
                    raise TelescopeSyntaxError(f"Mismatched '{nxt.text}'", nxt.pos, nxt.text)
                items.append(self.parse_expr())
            return Vector(items) if tok.kind == "lbracket" else items

        if tok.kind in ("rparen", "rbracket"):
            raise TelescopeSyntaxError(f"Unexpected '{tok.text}'", tok.pos, tok.text)

        if tok.kind == "op":
            return Symbol(tok.text)

        # Atoms carry their decoded value
        return tok.value


def parse(source: str) -> SExpression:
    """Parse exactly one expression from `source`.

    Raises TelescopeEOF when the source holds no tokens at all, and
    TelescopeSyntaxError for malformed input or trailing tokens.
    """
    stream = TokenStream(lex(source))
    if stream.peek() is None:
        raise TelescopeEOF("Empty input")
    try:
        expr = stream.parse_expr()
    except RecursionError as e:
        raise TelescopeSyntaxError("Expression nested too deeply", 0) from e
    extra = stream.peek()
    if extra is not None:
        raise TelescopeSyntaxError(f"Unexpected trailing token {extra.text!r}", extra.pos, extra.text)
    return expr
