"""
Expression evaluator for the flat-precedence expression language.

Folds each expression left to right: the leading value seeds the
running total and every term combines it with the next value. There is
no operator precedence; only parentheses change the grouping.

Pure evaluation with checked signed 64-bit arithmetic. Does NOT use
Python's eval().
"""

from __future__ import annotations

from operation_order.core.errors import ExpressionEvalError, ExpressionNumericError
from operation_order.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_expr
from operation_order.core.ir import (
    INT64_MAX,
    INT64_MIN,
    Expression,
    Literal,
    Operation,
    Parenthesized,
    Value,
)


def evaluate(expr: Expression) -> int:
    """Evaluate an expression tree to a signed 64-bit integer.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        ExpressionNumericError: If any intermediate result overflows 64 bits.
        ExpressionEvalError: If the tree holds an unknown node type.
    """
    acc = _interpret_value(expr.head)
    for term in expr.terms:
        acc = apply(term.op, acc, _interpret_value(term.value))
    return acc


def _interpret_value(value: Value) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(value, Literal):
        return value.value

    if isinstance(value, Parenthesized):
        return evaluate(value.expr)

    raise ExpressionEvalError(f"Unknown value type: {type(value).__name__}")


def apply(op: Operation, left: int, right: int) -> int:
    """Combine two integers with ``op``, failing instead of overflowing."""
    if op == Operation.ADD:
        result = left + right
    elif op == Operation.MUL:
        result = left * right
    else:
        raise ExpressionEvalError(f"Unknown operation: {op}")

    if not INT64_MIN <= result <= INT64_MAX:
        raise ExpressionNumericError(f"Integer overflow: {left} {op.value} {right}")
    return result


def evaluate_source(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Parse ``source`` and evaluate it.

    Raises:
        ExpressionSyntaxError: If the expression does not match the grammar.
        ExpressionNumericError: If a literal or intermediate result overflows.
    """
    return evaluate(parse_expr(source, max_depth=max_depth))
