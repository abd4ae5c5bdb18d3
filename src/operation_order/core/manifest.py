import tomllib
from dataclasses import dataclass
from pathlib import Path

from operation_order.core.errors import ConfigError
from operation_order.core.expression_lang.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

CONFIG_FILENAME = "operation_order.toml"


@dataclass(frozen=True)
class EvalConfig:
    """Parser and evaluator limits."""

    max_depth: int = DEFAULT_MAX_DEPTH  # deepest accepted parenthesis nesting


def load_config(path: Path) -> EvalConfig:
    """Read ``[limits]`` from a TOML file; a missing file gives the defaults."""
    if not path.exists():
        return EvalConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e

    limits = data.get("limits", {})
    max_depth = limits.get("max_depth", DEFAULT_MAX_DEPTH)

    # bool is an int subclass
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise ConfigError(f"{path}: limits.max_depth must be a positive integer")
    if max_depth > MAX_DEPTH_LIMIT:
        raise ConfigError(f"{path}: limits.max_depth must not exceed {MAX_DEPTH_LIMIT}")

    return EvalConfig(max_depth=max_depth)
