"""Logging configuration factory.

The launcher forwards every command-line argument to the collector, so its
own logging is configured from environment variables only:

- SPLUNK_LAUNCHER_LOG_LEVEL: debug, info, warning or error (default info)
- SPLUNK_LAUNCHER_LOG_FORMAT: text or json (default text)
- SPLUNK_LAUNCHER_LOG_FILE: rotating log file (default: stderr only)
- SPLUNK_LAUNCHER_LOG_INCLUDE_STDERR: also log to stderr when a file is set
"""

from __future__ import annotations

from otelcol_launcher.config.env import EnvReader
from otelcol_launcher.config.models import LoggingConfig

LOG_LEVEL_ENV_VAR = "SPLUNK_LAUNCHER_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "SPLUNK_LAUNCHER_LOG_FORMAT"
LOG_FILE_ENV_VAR = "SPLUNK_LAUNCHER_LOG_FILE"
LOG_INCLUDE_STDERR_ENV_VAR = "SPLUNK_LAUNCHER_LOG_INCLUDE_STDERR"


def build_logging_config(
    reader: EnvReader | None = None,
    base: LoggingConfig | None = None,
) -> LoggingConfig:
    """Build LoggingConfig by applying environment overrides to a base config.

    Args:
        reader: Environment reader (uses os.environ if None).
        base: Base configuration. Defaults to LoggingConfig().

    Returns:
        New LoggingConfig. Validation runs via LoggingConfig.__post_init__,
        so invalid values raise ValueError.
    """
    reader = reader or EnvReader()
    base = base or LoggingConfig()
    return LoggingConfig(
        level=reader.get_str(LOG_LEVEL_ENV_VAR, base.level),
        file=reader.get_path(LOG_FILE_ENV_VAR, base.file),
        format=reader.get_str(LOG_FORMAT_ENV_VAR, base.format),
        include_stderr=reader.get_bool(
            LOG_INCLUDE_STDERR_ENV_VAR, base.include_stderr
        ),
        max_bytes=base.max_bytes,
        backup_count=base.backup_count,
    )


def configure_logging_from_env(reader: EnvReader | None = None) -> None:
    """Build the logging configuration from the environment and apply it."""
    from otelcol_launcher.logging import configure_logging

    configure_logging(build_logging_config(reader))
