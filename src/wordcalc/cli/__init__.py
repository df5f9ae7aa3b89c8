"""
wordcalc CLI Package.

- calc.py: eval, tokens and repl commands
- utils.py: Shared utilities (version, logging, result formatting)
"""

import sys
from pathlib import Path

import typer

from wordcalc.cli.calc import eval_command, repl_command, tokens_command
from wordcalc.cli.utils import configure_logging, version_callback
from wordcalc.core.config import load_config
from wordcalc.core.errors import ConfigError

app = typer.Typer(
    help="""wordcalc – arithmetic in symbols or words

Examples:
  wordcalc eval "2 plus 3 mult 4"
  wordcalc eval "sqrt(16) ^ 2"
  wordcalc tokens "7 mod 2"
""",
    no_args_is_help=True,
)


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
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: ./wordcalc.toml)"
    ),
) -> None:
    """wordcalc CLI main callback for global options."""
    configure_logging(verbose)
    try:
        ctx.obj = {"config": load_config(config)}
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


# Negative literals such as -5 are expressions, not options
_EXPRESSION_SETTINGS = {"ignore_unknown_options": True}

app.command(name="eval", context_settings=_EXPRESSION_SETTINGS)(eval_command)
app.command(name="tokens", context_settings=_EXPRESSION_SETTINGS)(tokens_command)
app.command(name="repl")(repl_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
