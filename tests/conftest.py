"""Shared pytest fixtures for operation-order tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_INPUT = """1 + 2 * 3

  2 * 3 + (4 * 5)  
5 + (8 * 3 + 9 + 3 * 4 * 3)
"""


@pytest.fixture
def make_input(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing puzzle input text to a temporary file."""

    def _make(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def input_file(make_input: Callable[[str], Path]) -> Path:
    """Sample input: three expressions (9, 26, 437) around a blank line."""
    return make_input(SAMPLE_INPUT)
