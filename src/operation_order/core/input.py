"""
Puzzle input reader.

Each line of an input file holds one expression. Lines are trimmed before
parsing and blank lines are skipped. A line that fails to parse raises
with the file, line and column attached; reading never stops silently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from operation_order.core.errors import (
    ErrorContext,
    ExpressionNumericError,
    InputError,
    OperationOrderError,
)
from operation_order.core.expression_lang.evaluator import apply, evaluate
from operation_order.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_expr
from operation_order.core.ir import Expression, Operation

logger = logging.getLogger(__name__)


def _read_lines(path: Path) -> list[str]:
    try:
        # Only "\n" ends a line, unlike splitlines()
        return path.read_text(encoding="utf-8").split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def iter_expressions(
    path: Path, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[tuple[int, Expression]]:
    """Yield ``(line_number, expression)`` for every non-blank line.

    Raises:
        InputError: If the file cannot be read.
        ExpressionSyntaxError: If a line is not a valid expression.
        ExpressionNumericError: If a line holds a literal beyond 64 bits.
    """
    for line_number, raw in enumerate(_read_lines(path), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            expr = parse_expr(line, max_depth=max_depth)
        except OperationOrderError as e:
            column = (e.pos or 0) + 1
            raise e.with_context(
                ErrorContext(file=path, line=line_number, column=column, snippet=line)
            ) from e
        yield line_number, expr


def evaluate_lines(
    path: Path, *, max_depth: int = DEFAULT_MAX_DEPTH
) -> Iterator[tuple[int, Expression, int]]:
    """Yield ``(line_number, expression, value)`` for every non-blank line."""
    for line_number, expr in iter_expressions(path, max_depth=max_depth):
        try:
            value = evaluate(expr)
        except ExpressionNumericError as e:
            raise e.with_context(ErrorContext(file=path, line=line_number)) from e
        yield line_number, expr, value


def sum_expressions(path: Path, *, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Sum the values of every expression in the file.

    Raises:
        ExpressionNumericError: If a line value or the running sum overflows.
    """
    total = 0
    count = 0
    for _, _, value in evaluate_lines(path, max_depth=max_depth):
        total = apply(Operation.ADD, total, value)
        count += 1
    logger.info("Summed %d expressions from %s", count, path)
    return total
