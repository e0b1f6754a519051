"""
  mlisp Reader: Lexer and Parser

- Parentheses are always standalone tokens, whatever surrounds them
- Any other run of non-whitespace text is a literal
- Emits Expressions:

    - literals that parse as a float -> Number
    - any other literal              -> Symbol
    - ( ... )                        -> ExprList of the children

The reader makes no semantic decisions; everything else happens in the
evaluator.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from mlisp import Expression
from mlisp.errors import MlispLexError, MlispParseError
from mlisp.types.expression import ExprList, Number
from mlisp.types.symbol import Symbol

Token = tuple[str, str]

TOKEN_RE = re.compile(
    r"[ \t\n\r\f\v]*(?:"  # ASCII whitespace only
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<literal>[^ \t\n\r\f\v()]+)"  # anything else up to whitespace or a paren
    r")",
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    if not isinstance(source, str):
        raise MlispLexError(f"Cannot tokenize {type(source).__name__}, expected str")
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only trailing whitespace is left
            break
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def tokenize(source: str) -> list[Token]:
    return list(lex(source))


def parse_literal(text: str) -> Expression:
    # float() also accepts digit separators ("1_000") and non-ASCII digits;
    # those stay symbols
    if "_" in text or not text.isascii():
        return Symbol(text)
    try:
        return Number(float(text))
    except ValueError:
        return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> Expression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise MlispParseError("unexpected end of input")

        if tok_type == "literal":
            return parse_literal(tok_val)

        if tok_type == "rparen":
            raise MlispParseError("unexpected )")

        # List
        items = []
        while True:
            next_type, _ = self.peek()
            if next_type is None:
                raise MlispParseError("unclosed delimiter")
            if next_type == "rparen":
                self.advance()
                return ExprList(items)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> Expression:
    """Parse the first expression from `tokens`; anything after it is ignored."""
    return TokenStream(tokens).parse_expr()


def read(source: str) -> Expression:
    """Tokenize and parse the first expression of `source`."""
    return parse(lex(source))
