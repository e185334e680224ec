"""CLI entry point for the collector launcher.

Every argument is forwarded to the collector. The launcher itself only
consumes ``--config``, ``--mem-ballast-size-mib`` and ``-h``/``--help``; its
own logging is configured through SPLUNK_LAUNCHER_LOG_* variables.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from otelcol_launcher.cli.output import error_exit
from otelcol_launcher.config import (
    LauncherError,
    is_help_requested,
    resolve_runtime_config,
)
from otelcol_launcher.config.logging_factory import configure_logging_from_env
from otelcol_launcher.exit_codes import ExitCode
from otelcol_launcher.runtime import (
    SubprocessRuntime,
    build_service_settings,
    get_components,
)

logger = logging.getLogger(__name__)


def _program_name() -> str:
    """Name shown in usage hints, taken from how the launcher was invoked."""
    ctx = click.get_current_context(silent=True)
    if ctx is not None and ctx.info_name:
        return ctx.info_name
    return Path(sys.argv[0]).name or "otelcol"


def _exit_status(returncode: int) -> int:
    """Exit status for the launcher, shell style.

    A collector killed by signal N reports -N; the launcher exits 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


def _launch(collector_args: tuple[str, ...]) -> int:
    """Resolve runtime parameters and run the collector.

    Returns:
        The collector's exit code.

    Raises:
        LauncherError: Resolution failed or the collector could not start.
    """
    resolved = None
    if is_help_requested(collector_args):
        logger.debug("Help requested, skipping runtime parameter resolution")
    else:
        resolved = resolve_runtime_config(
            collector_args, os.environ, program=_program_name()
        )
        os.environ.update(resolved.env_updates)
        logger.debug(
            "Resolved memory plan: total=%d MiB ballast=%d MiB limit=%d MiB",
            resolved.memory.total_mib,
            resolved.memory.ballast_mib,
            resolved.memory.limit_mib,
        )

    settings = build_service_settings(
        get_components(), resolved, raw_args=collector_args
    )
    return SubprocessRuntime.from_env().run(settings)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "allow_interspersed_args": False,
    },
    add_help_option=False,
)
@click.argument("collector_args", nargs=-1, type=click.UNPROCESSED)
def main(collector_args: tuple[str, ...]) -> None:
    """Resolve collector runtime parameters, then start the collector."""
    try:
        configure_logging_from_env()
    except ValueError as e:
        error_exit(f"Invalid launcher logging settings: {e}", ExitCode.INVALID_VALUE)

    try:
        exit_code = _launch(collector_args)
    except LauncherError as e:
        logger.debug("Startup aborted: %s", e)
        error_exit(str(e), e.exit_code)
    except KeyboardInterrupt:
        error_exit("Interrupted", ExitCode.INTERRUPTED)

    raise SystemExit(_exit_status(exit_code))
