"""
Recursive descent parser for the flat-precedence expression language.

Grammar (no precedence levels; every operator binds equally):
    expression  → value term*
    term        → operation value
    value       → INT | "(" expression ")"
    operation   → "+" | "*"

``term*`` is parsed as a loop, so recursion only happens inside
parentheses, a fixed number of frames per nesting level, capped by
``max_depth``.
"""

from __future__ import annotations

import logging

from operation_order.core.errors import ExpressionNumericError, make_syntax_error
from operation_order.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from operation_order.core.ir import (
    INT64_MAX,
    Expression,
    Literal,
    Operation,
    Parenthesized,
    Term,
    Value,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100
# Largest accepted max_depth; parsing and evaluation each use two frames per level
MAX_DEPTH_LIMIT = 200

_OPERATIONS: dict[TokenKind, Operation] = {
    TokenKind.PLUS: Operation.ADD,
    TokenKind.STAR: Operation.MUL,
}


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return repr(tok.value)


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        self.tokens = tokens
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind, what: str) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise make_syntax_error(f"Expected {what}, got {_describe(tok)}", tok.pos)
        return self.advance()

    # -- Grammar rules --

    def parse_expression(self) -> Expression:
        """value (operation value)*"""
        head = self.parse_value()
        terms: list[Term] = []
        while self.current.kind in _OPERATIONS:
            op = _OPERATIONS[self.advance().kind]
            terms.append(Term(op=op, value=self.parse_value()))
        return Expression(head=head, terms=terms)

    def parse_value(self) -> Value:
        """INT | '(' expression ')'"""
        tok = self.current

        if tok.kind == TokenKind.INT:
            self.advance()
            return _parse_int(tok)

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            self.depth += 1
            if self.depth > self.max_depth:
                raise make_syntax_error(
                    f"Parentheses nested deeper than {self.max_depth} levels", tok.pos
                )
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN, f"')' matching '(' at position {tok.pos}")
            self.depth -= 1
            return Parenthesized(expr=expr)

        raise make_syntax_error(f"Expected a number or '(', got {_describe(tok)}", tok.pos)


def _parse_int(tok: Token) -> Literal:
    """Convert an INT token, rejecting values outside the signed 64-bit range."""
    # Length check first: int() refuses digit strings past sys.get_int_max_str_digits()
    digits = tok.value.lstrip("0") or "0"
    if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
        raise ExpressionNumericError(
            f"Integer literal {tok.value} at position {tok.pos} does not fit in 64 bits",
            pos=tok.pos,
        )
    return Literal(value=int(digits))


def parse_expr(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "1 + 2 * (3 + 4)")
        max_depth: Maximum parenthesis nesting accepted.

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionSyntaxError: If the expression does not match the grammar.
        ExpressionNumericError: If an integer literal exceeds 64 bits.
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT.
    """
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}")
    logger.debug("Parsing expression of %d characters", len(source))
    parser = _Parser(tokenize(source), max_depth)
    expr = parser.parse_expression()

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise make_syntax_error(
            f"Unexpected {_describe(parser.current)} after expression",
            parser.current.pos,
        )

    return expr
