"""
Flat-precedence arithmetic expression language.

Tokenizer, parser and evaluator for expressions built from integers,
'+', '*' and parentheses, evaluated strictly left to right.

Usage:
    from operation_order.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("1 + 2 * 3")
    result = evaluate(expr)
    # result == 9, not 7
"""

from operation_order.core.expression_lang.evaluator import evaluate, evaluate_source
from operation_order.core.expression_lang.parser import (
    DEFAULT_MAX_DEPTH,
    MAX_DEPTH_LIMIT,
    parse_expr,
)

__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_LIMIT", "evaluate", "evaluate_source", "parse_expr"]
