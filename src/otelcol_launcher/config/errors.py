"""Launcher exceptions.

Every resolution failure is terminal. The CLI turns these into a single
error line and exits with the exit code carried by the exception.
"""

from __future__ import annotations

from otelcol_launcher.exit_codes import ExitCode


class LauncherError(Exception):
    """Base exception for launcher errors."""

    exit_code: ExitCode = ExitCode.GENERAL_ERROR


class InvalidNumericValueError(LauncherError):
    """An environment variable expected to hold an integer does not."""

    exit_code = ExitCode.INVALID_VALUE

    def __init__(self, var: str, value: str) -> None:
        self.var = var
        self.value = value
        super().__init__(f"Expected a number in {var} env variable but got {value}")


class BelowThresholdError(LauncherError):
    """A numeric setting is below its minimum."""

    exit_code = ExitCode.INVALID_VALUE

    def __init__(self, var: str, value: int, minimum: int) -> None:
        self.var = var
        self.value = value
        self.minimum = minimum
        super().__init__(
            f"Expected a number greater than or equal to {minimum} "
            f"for {var} env variable but got {value}"
        )


class MissingFlagValueError(LauncherError):
    """A flag was given in ``--flag value`` form without a value."""

    exit_code = ExitCode.INVALID_VALUE

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"Flag {flag} requires a value")


class ConflictingSourcesError(LauncherError):
    """Two mutually exclusive sources were specified."""

    exit_code = ExitCode.CONFLICTING_SOURCES

    def __init__(self, first: str, second: str) -> None:
        self.first = first
        self.second = second
        super().__init__(
            f"Specifying {first} and {second} simultaneously is not allowed"
        )


class MissingConfigError(LauncherError):
    """No configuration source was given and no default file exists."""

    exit_code = ExitCode.MISSING_CONFIG

    def __init__(self, var: str, candidates: tuple[str, ...]) -> None:
        self.var = var
        self.candidates = candidates
        super().__init__(
            "Unable to find the default configuration file "
            f"(looked in {', '.join(candidates)}), "
            f"ensure {var} environment variable is set properly"
        )


class ConfigFileNotFoundError(LauncherError):
    """The configured file path does not exist or cannot be read."""

    exit_code = ExitCode.CONFIG_FILE_NOT_FOUND

    def __init__(self, path: str, var: str) -> None:
        self.path = path
        self.var = var
        super().__init__(
            f"Unable to find the configuration file ({path}) "
            f"ensure {var} environment variable is set properly"
        )


class MissingRequiredVarError(LauncherError):
    """A default configuration is used without a required variable."""

    exit_code = ExitCode.MISSING_REQUIRED_VAR

    def __init__(self, var: str, config_path: str) -> None:
        self.var = var
        self.config_path = config_path
        super().__init__(
            f"Missing required environment variable {var} "
            f"with default config path {config_path}"
        )


class BallastExceedsLimitError(LauncherError):
    """The memory limit cannot hold twice the ballast."""

    exit_code = ExitCode.MEMORY_LIMIT_ERROR

    def __init__(self, limit_mib: int, ballast_mib: int) -> None:
        self.limit_mib = limit_mib
        self.ballast_mib = ballast_mib
        super().__init__(
            f"Memory limit ({limit_mib}) is less than 2x ballast ({ballast_mib}). "
            "Increase memory limit or decrease ballast size."
        )


class ConfigLoadError(LauncherError):
    """The configuration document could not be loaded."""

    exit_code = ExitCode.CONFIG_LOAD_ERROR

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load configuration from {source}: {reason}")


class RuntimeNotAvailableError(LauncherError):
    """The collector executable could not be found."""

    exit_code = ExitCode.RUNTIME_NOT_AVAILABLE

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(
            f"Collector executable not found: {binary} "
            "(set SPLUNK_OTELCOL_BIN to its location)"
        )
