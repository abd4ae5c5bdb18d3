"""
Property-based tests using Hypothesis.

These tests verify invariants of the expression language across
generated inputs rather than a fixed set of examples.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from operation_order.core.errors import ExpressionNumericError, OperationOrderError
from operation_order.core.expression_lang import evaluate_source, parse_expr
from operation_order.core.ir import INT64_MAX, Literal

# =============================================================================
# Strategies
# =============================================================================

literals = st.integers(min_value=0, max_value=INT64_MAX).map(str)

# Valid sources only; nesting stays far below the default max_depth
expressions = st.recursive(
    literals,
    lambda inner: st.one_of(
        inner.map(lambda e: f"({e})"),
        st.tuples(inner, st.sampled_from(["+", "*"]), inner).map(
            lambda t: f"{t[0]} {t[1]} {t[2]}"
        ),
    ),
    max_leaves=20,
)


def _outcome(source: str) -> int | str:
    """Value of ``source``, or "overflow" when the 64-bit range is left."""
    try:
        return evaluate_source(source)
    except ExpressionNumericError:
        return "overflow"


# =============================================================================
# Parser Property Tests
# =============================================================================


class TestParserProperties:
    """Property-based tests for the parser."""

    @given(st.text(alphabet="0123456789", min_size=1, max_size=18))
    @settings(max_examples=200)
    def test_digit_string_is_literal(self, digits: str) -> None:
        """Invariant: any digit run within 64 bits parses to an equal Literal."""
        expr = parse_expr(digits)
        assert expr.head == Literal(value=int(digits))
        assert expr.terms == []

    @given(expressions)
    @settings(max_examples=200)
    def test_rendering_reparses_to_same_tree(self, source: str) -> None:
        """Invariant: the canonical rendering parses back to the same tree."""
        expr = parse_expr(source)
        assert parse_expr(str(expr)) == expr

    @given(st.text(alphabet="0123456789+*() ", max_size=200))
    @settings(max_examples=500)
    def test_arbitrary_text_only_raises_typed_errors(self, source: str) -> None:
        """Invariant: malformed input raises OperationOrderError, never anything else."""
        try:
            evaluate_source(source)
        except OperationOrderError:
            pass  # Expected for invalid or overflowing input

    @given(st.text(max_size=100))
    @settings(max_examples=200)
    def test_any_text_only_raises_typed_errors(self, source: str) -> None:
        """Invariant: arbitrary unicode never crashes the tokenizer or parser."""
        try:
            parse_expr(source)
        except OperationOrderError:
            pass


# =============================================================================
# Evaluator Property Tests
# =============================================================================


class TestEvaluatorProperties:
    """Property-based tests for left-to-right evaluation."""

    @given(expressions)
    @settings(max_examples=200)
    def test_parenthesizing_does_not_change_value(self, source: str) -> None:
        """Invariant: (E) evaluates the same as E."""
        assert _outcome(f"({source})") == _outcome(source)

    @given(
        st.integers(min_value=0, max_value=10**6),
        st.integers(min_value=0, max_value=10**6),
        st.integers(min_value=0, max_value=10**6),
    )
    @settings(max_examples=200)
    def test_no_operator_precedence(self, a: int, b: int, c: int) -> None:
        """Invariant: a + b * c is (a + b) * c."""
        assert evaluate_source(f"{a} + {b} * {c}") == (a + b) * c
        assert evaluate_source(f"{a} * {b} + {c}") == a * b + c

    @given(expressions, st.sampled_from([" ", "  ", "\t", "\n"]))
    @settings(max_examples=100)
    def test_whitespace_between_tokens_is_ignored(self, source: str, gap: str) -> None:
        """Invariant: extra whitespace between tokens does not change the value."""
        spaced = source.replace(" ", gap).replace("(", f"({gap}").replace(")", f"{gap})")
        assert _outcome(spaced) == _outcome(source)
