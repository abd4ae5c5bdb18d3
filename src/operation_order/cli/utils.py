"""
CLI utilities.

Shared helpers for version display, logging and configuration lookup.
"""

import logging
import platform
from pathlib import Path

import typer

from operation_order._version import get_version
from operation_order.core.errors import ConfigError
from operation_order.core.manifest import CONFIG_FILENAME, EvalConfig, load_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"operation-order {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr; DEBUG when verbose, otherwise WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def resolve_config(config: Path | None) -> EvalConfig:
    """Load ``config`` if given, else ``operation_order.toml`` in the working directory.

    An explicitly named file must exist, otherwise ConfigError is raised.
    """
    if config is not None and not config.exists():
        raise ConfigError(f"Config file not found: {config}")
    return load_config(config if config is not None else Path.cwd() / CONFIG_FILENAME)
