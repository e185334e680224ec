"""CLI error output."""

from __future__ import annotations

import sys
from typing import NoReturn

import click

from otelcol_launcher.exit_codes import ExitCode


def error_exit(message: str, code: ExitCode | int) -> NoReturn:
    """Print an error line to stderr and exit.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).

    Note:
        This function never returns; it always calls sys.exit().
    """
    click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))
