"""
Tokenizer for the flat-precedence expression language.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from operation_order.core.errors import make_syntax_error


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    INT = auto()

    # Operators
    PLUS = auto()
    STAR = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


_WHITESPACE = " \t\n\r"

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# ASCII digits only; str.isdigit() also accepts superscripts and other scripts
_INT_RE = re.compile(r"[0-9]+")


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        m = _INT_RE.match(source, i)
        if m is not None:
            tokens.append(Token(TokenKind.INT, m.group(0), i))
            i = m.end()
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        raise make_syntax_error(f"Unexpected character {c!r}", i)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens
