"""
operation-order CLI.

Commands:
- eval: evaluate one expression
- tree: show how an expression was parsed
- sum: add up every expression in a puzzle input file
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from operation_order.cli.utils import configure_logging, resolve_config, version_callback
from operation_order.core.errors import OperationOrderError
from operation_order.core.expression_lang import evaluate, parse_expr
from operation_order.core.expression_lang.evaluator import apply
from operation_order.core.input import evaluate_lines, sum_expressions
from operation_order.core.ir import Operation
from operation_order.core.manifest import EvalConfig

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="""Evaluate arithmetic left to right, without operator precedence.

'+' and '*' bind equally; only parentheses change the grouping,
so "1 + 2 * 3" is 9.
""",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _fail(error: OperationOrderError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Path to operation_order.toml (default: ./operation_order.toml)",
    ),
) -> None:
    """Global options."""
    configure_logging(verbose)
    try:
        ctx.obj = resolve_config(config)
    except OperationOrderError as e:
        raise _fail(e) from e
    logger.debug("Using max_depth=%d", ctx.obj.max_depth)


@app.command("eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help='Expression, e.g. "2 * (3 + 4)"'),
) -> None:
    """Evaluate one expression and print its value."""
    config: EvalConfig = ctx.obj
    try:
        value = evaluate(parse_expr(expression, max_depth=config.max_depth))
    except OperationOrderError as e:
        raise _fail(e) from e
    typer.echo(value)


@app.command("tree")
def tree_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Show the canonical form and nesting depth of an expression."""
    config: EvalConfig = ctx.obj
    try:
        expr = parse_expr(expression, max_depth=config.max_depth)
    except OperationOrderError as e:
        raise _fail(e) from e
    typer.echo(str(expr))
    typer.echo(f"values: {len(expr.terms) + 1}, depth: {expr.depth}")


@app.command("sum")
def sum_command(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="Puzzle input, one expression per line"),  # noqa: B008
    breakdown: bool = typer.Option(
        False, "--breakdown", "-b", help="Print the value of every line before the total"
    ),
) -> None:
    """Print the sum of every expression in INPUT_FILE."""
    config: EvalConfig = ctx.obj
    try:
        if not breakdown:
            typer.echo(sum_expressions(input_file, max_depth=config.max_depth))
            return

        table = Table(title=str(input_file))
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Expression")
        table.add_column("Value", justify="right", style="cyan")
        total = 0
        for line_number, expr, value in evaluate_lines(input_file, max_depth=config.max_depth):
            table.add_row(str(line_number), escape(str(expr)), str(value))
            total = apply(Operation.ADD, total, value)
    except OperationOrderError as e:
        raise _fail(e) from e

    console.print(table)
    typer.echo(total)


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
