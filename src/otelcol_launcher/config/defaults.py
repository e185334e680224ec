"""Environment variable names, built-in defaults and default config profiles."""

from __future__ import annotations

from dataclasses import dataclass

BALLAST_ENV_VAR = "SPLUNK_BALLAST_SIZE_MIB"
CONFIG_ENV_VAR = "SPLUNK_CONFIG"
CONFIG_YAML_ENV_VAR = "SPLUNK_CONFIG_YAML"
MEMORY_LIMIT_ENV_VAR = "SPLUNK_MEMORY_LIMIT_MIB"
MEMORY_TOTAL_ENV_VAR = "SPLUNK_MEMORY_TOTAL_MIB"
REALM_ENV_VAR = "SPLUNK_REALM"
TOKEN_ENV_VAR = "SPLUNK_ACCESS_TOKEN"
COLLECTOR_BIN_ENV_VAR = "SPLUNK_OTELCOL_BIN"

CONFIG_FLAG = "--config"
BALLAST_FLAG = "--mem-ballast-size-mib"
HELP_FLAGS = ("-h", "--help")

DEFAULT_MEMORY_TOTAL_MIB = 512
DEFAULT_MEMORY_BALLAST_PERCENTAGE = 33
DEFAULT_MEMORY_LIMIT_PERCENTAGE = 90
DEFAULT_MEMORY_LIMIT_MAX_MIB = 2048

# Minimum accepted values for user-supplied memory settings
MIN_MEMORY_TOTAL_MIB = 100
MIN_BALLAST_SIZE_MIB = 33

# Variables a default configuration needs to reach the backend
REQUIRED_DEFAULT_CONFIG_VARS = (REALM_ENV_VAR, TOKEN_ENV_VAR)

DEFAULT_COLLECTOR_BIN = "otelcol"


@dataclass(frozen=True)
class DefaultProfile:
    """A built-in configuration profile with its two install locations."""

    name: str
    containerized: str
    local: str


GATEWAY_PROFILE = DefaultProfile(
    name="gateway",
    containerized="/etc/otel/collector/gateway_config.yaml",
    local="cmd/otelcol/config/collector/gateway_config.yaml",
)

OTLP_PROFILE = DefaultProfile(
    name="otlp",
    containerized="/etc/otel/collector/otlp_config_linux.yaml",
    local="cmd/otelcol/config/collector/otlp_config_linux.yaml",
)

DEFAULT_PROFILES = (GATEWAY_PROFILE, OTLP_PROFILE)

# Probed in order when no config source is given; the first existing file wins.
# The local copy outranks the containerized one.
DEFAULT_CONFIG_CANDIDATES = (GATEWAY_PROFILE.local, GATEWAY_PROFILE.containerized)

KNOWN_DEFAULT_CONFIG_PATHS = frozenset(
    path
    for profile in DEFAULT_PROFILES
    for path in (profile.containerized, profile.local)
)
