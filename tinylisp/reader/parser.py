"""
  Lisp Lexer and Reader

Parentheses and whitespace are the only structural characters; there is no
string, comment or quote-shorthand syntax. The reader emits plain Python
values:

    - numbers -> float
    - symbols -> Symbol
    - lists -> list
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable, Iterator, Optional

from tinylisp import SExpression
from tinylisp.errors import UnexpectedEndOfInput, UnbalancedParenthesis
from tinylisp.types.symbol import Symbol


NUMBER_RE = re.compile(r"^[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?$")


def tokenize(source: str) -> list[str]:
    """Split source text into tokens, with '(' and ')' always standing alone."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def atom(token: str) -> SExpression:
    """Classify a leaf token as a number or a symbol."""
    if NUMBER_RE.match(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    """A token sequence consumed from the front by nested reads."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: deque[str] = deque(tokens)

    def peek(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> str:
        if not self.tokens:
            raise UnexpectedEndOfInput()
        return self.tokens.popleft()

    def __bool__(self) -> bool:
        return bool(self.tokens)


def read_expression(stream: TokenStream) -> SExpression:
    """Read one expression, advancing the shared stream past it."""
    token = stream.advance()
    if token == "(":
        items: list[SExpression] = []
        while True:
            nxt = stream.peek()
            if nxt is None:
                raise UnexpectedEndOfInput("unexpected end of input: missing ')'")
            if nxt == ")":
                stream.advance()
                return items
            items.append(read_expression(stream))
    if token == ")":
        raise UnbalancedParenthesis(token)
    return atom(token)


def read_all(stream: TokenStream) -> Iterator[SExpression]:
    while stream:
        yield read_expression(stream)


def parse(source: str) -> SExpression:
    """Read the first expression in `source`; anything after it is ignored."""
    return read_expression(TokenStream(tokenize(source)))


def parse_all(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`, in order."""
    return list(read_all(TokenStream(tokenize(source))))
