"""Core functionality: IR, expression language, puzzle input, configuration."""

from . import ir
from .errors import (
    ConfigError,
    ErrorContext,
    ExpressionEvalError,
    ExpressionNumericError,
    ExpressionSyntaxError,
    InputError,
    OperationOrderError,
)

__all__ = [
    "ir",
    "ConfigError",
    "ErrorContext",
    "ExpressionEvalError",
    "ExpressionNumericError",
    "ExpressionSyntaxError",
    "InputError",
    "OperationOrderError",
]
