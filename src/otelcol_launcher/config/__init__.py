"""Runtime parameter resolution for the collector.

Precedence, highest to lowest:
1. Command-line flags (--config, --mem-ballast-size-mib)
2. Environment variables (SPLUNK_*)
3. Default configuration files
4. Built-in defaults
"""

from otelcol_launcher.config.args import has_flag, value_of
from otelcol_launcher.config.env import EnvReader
from otelcol_launcher.config.errors import (
    BallastExceedsLimitError,
    BelowThresholdError,
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConflictingSourcesError,
    InvalidNumericValueError,
    LauncherError,
    MissingConfigError,
    MissingFlagValueError,
    MissingRequiredVarError,
    RuntimeNotAvailableError,
)
from otelcol_launcher.config.models import (
    ConfigSourceKind,
    LoggingConfig,
    MemoryPlan,
    ResolvedConfigSource,
    ResolvedRuntimeConfig,
)
from otelcol_launcher.config.resolver import (
    is_help_requested,
    resolve_runtime_config,
)

__all__ = [
    # Argument lookups
    "has_flag",
    "value_of",
    "EnvReader",
    # Models
    "ConfigSourceKind",
    "LoggingConfig",
    "MemoryPlan",
    "ResolvedConfigSource",
    "ResolvedRuntimeConfig",
    # Resolution
    "is_help_requested",
    "resolve_runtime_config",
    # Errors
    "BallastExceedsLimitError",
    "BelowThresholdError",
    "ConfigFileNotFoundError",
    "ConfigLoadError",
    "ConflictingSourcesError",
    "InvalidNumericValueError",
    "LauncherError",
    "MissingConfigError",
    "MissingFlagValueError",
    "MissingRequiredVarError",
    "RuntimeNotAvailableError",
]
