"""
Error types for expression parsing, evaluation, input and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Self


class OperationOrderError(Exception):
    """Base exception for all operation-order errors.

    ``pos`` is the 0-based character offset into the expression source,
    when the error can be pinned to one.
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        pos: int | None = None,
    ) -> None:
        self.message = message
        self.context = context
        self.pos = pos
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context is None:
            return self.message
        formatted = f"{self.context.location}: {self.message}"
        if self.context.snippet:
            formatted += f"\n{self.context.format_snippet()}"
        return formatted

    def with_context(self, context: ErrorContext) -> Self:
        """Return a copy of this error located by ``context``."""
        return type(self)(self.message, context=context, pos=self.pos)


class ExpressionSyntaxError(OperationOrderError):
    """
    Raised when the source text does not match the expression grammar.

    Examples:
    - Empty input
    - A value expected but an operator or ')' found
    - Unmatched '('
    - Trailing input after a complete expression ("1 2", "1 + 2)")
    - Characters outside digits, '+', '*', '(', ')' and whitespace
    - Parentheses nested deeper than the configured limit
    """


class ExpressionEvalError(OperationOrderError):
    """Raised when an expression tree cannot be evaluated."""


class ExpressionNumericError(ExpressionEvalError):
    """
    Raised when a number leaves the signed 64-bit range.

    Examples:
    - A digit run larger than 9223372036854775807
    - An intermediate sum or product that would overflow
    """


class InputError(OperationOrderError):
    """Raised when an input file cannot be read."""


class ConfigError(OperationOrderError):
    """Raised when ``operation_order.toml`` holds invalid settings."""


@dataclass(frozen=True)
class ErrorContext:
    """
    Source location for an error raised while reading an input file.

    Attributes:
        file: Path to the input file
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional text of the offending line
    """

    file: Path
    line: int
    column: int = 1
    snippet: str | None = None

    @property
    def location(self) -> str:
        """Location string like "input.txt:10:5"."""
        return f"{self.file}:{self.line}:{self.column}"

    def format_snippet(self) -> str:
        """Format the offending line with an error marker under the column."""
        if not self.snippet:
            return ""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_syntax_error(message: str, pos: int) -> ExpressionSyntaxError:
    """
    Helper to create an ExpressionSyntaxError located at ``pos``.

    Args:
        message: Error description
        pos: 0-based offset into the expression source

    Returns:
        ExpressionSyntaxError with the offset recorded
    """
    return ExpressionSyntaxError(f"{message} at position {pos}", pos=pos)
