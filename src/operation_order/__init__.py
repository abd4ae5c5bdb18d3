"""
operation-order - left-to-right arithmetic without operator precedence.

Parses expressions over integers, '+', '*' and parentheses and evaluates
them strictly left to right, so "1 + 2 * 3" is 9.
"""

from ._version import __version__
from .core import ir
from .core.errors import (
    ExpressionEvalError,
    ExpressionNumericError,
    ExpressionSyntaxError,
    OperationOrderError,
)
from .core.expression_lang import evaluate, evaluate_source, parse_expr

__all__ = [
    "__version__",
    "ir",
    "evaluate",
    "evaluate_source",
    "parse_expr",
    "ExpressionEvalError",
    "ExpressionNumericError",
    "ExpressionSyntaxError",
    "OperationOrderError",
]
