"""
Expression types for the flat-precedence arithmetic language.

An expression is a leading value followed by zero or more
(operation, value) terms, combined strictly left to right:

    1 + 2 * 3        → Expression(head=1, terms=[+2, *3])   == 9
    1 + (2 * 3)      → Expression(head=1, terms=[+(2 * 3)]) == 7

The leading value is stored apart from the terms so that no operation
is ever applied to it; it seeds the running total.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# Results are signed 64-bit integers
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operation(StrEnum):
    """Binary operators. Both bind with equal strength."""

    ADD = "+"
    MUL = "*"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A non-negative integer literal."""

    value: int = Field(ge=0, le=INT64_MAX, description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class Parenthesized(BaseModel):
    """A parenthesized sub-expression, grouping against left-to-right order."""

    expr: Expression = Field(description="The grouped expression")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.expr})"


class Term(BaseModel):
    """Combine the running total with ``value`` using ``op``."""

    op: Operation
    value: Value

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op.value} {self.value}"


class Expression(BaseModel):
    """
    A leading value followed by operator/value terms, in source order.

    Examples:
        - Expression(head=Literal(value=5)) → 5
        - Expression(head=Literal(value=1), terms=[Term(op="+", value=Literal(value=2))]) → 1 + 2
    """

    head: Value = Field(description="Value that seeds the running total")
    terms: list[Term] = Field(default_factory=list, description="Following terms")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # Iterative so rendering depth is not bounded by the recursion limit
        parts: list[str] = []
        pending: list[Expression | str] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            pieces: list[Expression | str] = []
            for i, value in enumerate(item.values):
                if i:
                    pieces.append(f" {item.terms[i - 1].op.value} ")
                if isinstance(value, Parenthesized):
                    pieces.extend(["(", value.expr, ")"])
                else:
                    pieces.append(str(value))
            pending.extend(reversed(pieces))
        return "".join(parts)

    @property
    def values(self) -> Iterator[Value]:
        """Every top-level value, head first."""
        yield self.head
        for term in self.terms:
            yield term.value

    @property
    def depth(self) -> int:
        """Deepest parenthesis nesting below this expression."""
        deepest = 0
        pending = [(self, 0)]
        while pending:
            expr, level = pending.pop()
            deepest = max(deepest, level)
            pending.extend(
                (v.expr, level + 1) for v in expr.values if isinstance(v, Parenthesized)
            )
        return deepest


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Value = Literal | Parenthesized

# Rebuild models for recursive forward references
Parenthesized.model_rebuild()
Term.model_rebuild()
Expression.model_rebuild()
