"""Collector runtime that runs the collector executable in the foreground."""

from __future__ import annotations

import logging
import shutil
import subprocess  # nosec B404 - subprocess is required to run the collector
import time
from pathlib import Path
from typing import Protocol

from otelcol_launcher.config.args import without_flag
from otelcol_launcher.config.defaults import (
    COLLECTOR_BIN_ENV_VAR,
    CONFIG_FLAG,
    DEFAULT_COLLECTOR_BIN,
)
from otelcol_launcher.config.env import EnvReader
from otelcol_launcher.config.errors import RuntimeNotAvailableError
from otelcol_launcher.runtime.provider import render_config
from otelcol_launcher.runtime.settings import ServiceSettings

logger = logging.getLogger(__name__)


class ServiceRuntime(Protocol):
    """Starts the collector and blocks until it exits."""

    def run(self, settings: ServiceSettings) -> int: ...


def find_collector(binary: str | Path) -> Path:
    """Locate the collector executable.

    Args:
        binary: Executable name looked up on PATH, or a path to it.

    Raises:
        RuntimeNotAvailableError: If it cannot be found.
    """
    candidate = Path(binary)
    if candidate.parent != Path(".") and candidate.is_file():
        return candidate
    which_result = shutil.which(str(binary))
    if which_result:
        return Path(which_result)
    raise RuntimeNotAvailableError(str(binary))


class SubprocessRuntime:
    """Runs the collector as a child process with the inherited environment.

    The configuration is loaded through the provider before the child is
    started, so an unreadable document fails here instead of in the collector.
    """

    def __init__(self, binary: str | Path = DEFAULT_COLLECTOR_BIN) -> None:
        self.binary = binary

    @classmethod
    def from_env(cls, reader: EnvReader | None = None) -> SubprocessRuntime:
        reader = reader or EnvReader()
        return cls(reader.get_str(COLLECTOR_BIN_ENV_VAR, DEFAULT_COLLECTOR_BIN))

    def run(self, settings: ServiceSettings) -> int:
        """Run the collector and return its exit code unchanged.

        When the settings carry a config provider, the loaded document is
        rendered to a temporary file and every ``--config`` argument is
        replaced by ``--config=<rendered file>``. The file is removed once the
        collector exits.

        Raises:
            RuntimeNotAvailableError: The executable cannot be found.
            ConfigLoadError: The configuration cannot be loaded.
        """
        executable = find_collector(self.binary)
        logger.debug(
            "Component factories available: %s",
            settings.components.counts(),
        )

        rendered: Path | None = None
        args = list(settings.args)
        try:
            if settings.config_provider is not None:
                rendered = render_config(settings.config_provider)
                args = without_flag(args, CONFIG_FLAG)
                args.append(f"{CONFIG_FLAG}={rendered}")

            command = [str(executable), *args]
            logger.info(
                "Starting %s %s: %s",
                settings.build_info.command,
                settings.build_info.version,
                " ".join(command),
            )
            start_time = time.monotonic()
            result = subprocess.run(command, check=False)  # nosec B603
            elapsed = time.monotonic() - start_time
        finally:
            if rendered is not None:
                rendered.unlink(missing_ok=True)

        logger.info(
            "Collector exited with code %d after %.1fs", result.returncode, elapsed
        )
        return result.returncode
