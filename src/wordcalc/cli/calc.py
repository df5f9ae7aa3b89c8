"""
Expression evaluation CLI commands.

Commands for evaluating expressions, inspecting their tokens and running
an interactive session.
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.table import Table

from wordcalc.cli.utils import format_result
from wordcalc.core.calculator import Calculator
from wordcalc.core.errors import WordcalcError
from wordcalc.core.expression_lang import TokenKind

logger = logging.getLogger(__name__)

console = Console()

_EXIT_WORDS = {"quit", "exit"}


def _calculator(ctx: typer.Context) -> Calculator:
    """Build a calculator from the config loaded by the main callback."""
    config = ctx.obj.get("config") if ctx.obj else None
    return Calculator(config)


def eval_command(
    ctx: typer.Context,
    expression: list[str] = typer.Argument(
        ..., help="Expression to evaluate; multiple words are joined with spaces"
    ),
) -> None:
    """Evaluate an expression and print the result."""
    source = " ".join(expression)
    try:
        result = _calculator(ctx).evaluate(source)
    except WordcalcError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_result(result))


def tokens_command(
    ctx: typer.Context,
    expression: list[str] = typer.Argument(..., help="Expression to scan"),
) -> None:
    """Show the tokens an expression scans into."""
    source = " ".join(expression)
    try:
        tokens = _calculator(ctx).tokenize(source)
    except WordcalcError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not tokens:
        console.print("[dim]No tokens.[/dim]")
        return

    table = Table(title="Tokens")
    table.add_column("Pos", style="dim", justify="right")
    table.add_column("Kind")
    table.add_column("Value", justify="right")

    for tok in tokens:
        table.add_row(
            str(tok.pos),
            tok.kind.name,
            format_result(tok.value) if tok.kind == TokenKind.NUM else "",
        )

    console.print(table)


def repl_command(ctx: typer.Context) -> None:
    """Evaluate expressions line by line until EOF, 'quit' or 'exit'."""
    calculator = _calculator(ctx)
    interactive = sys.stdin.isatty()

    while True:
        if interactive:
            typer.echo("calc> ", nl=False)
        line = sys.stdin.readline()
        if not line:
            break

        source = line.strip()
        if not source:
            continue
        if source in _EXIT_WORDS:
            break

        try:
            typer.echo(format_result(calculator.evaluate(source)))
        except WordcalcError as e:
            logger.debug("Line %r failed: %s", source, e)
            typer.echo(f"Error: {e}")
