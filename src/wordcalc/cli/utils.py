"""
wordcalc CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform

import typer

from wordcalc._version import get_version

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"wordcalc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for the CLI process.

    ``--verbose`` forces DEBUG; otherwise ``WORDCALC_LOG_LEVEL`` is used.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("WORDCALC_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def format_result(value: float) -> str:
    """Render a result the way it is printed: ``5.0``, ``nan``, ``-inf``."""
    return str(value)
