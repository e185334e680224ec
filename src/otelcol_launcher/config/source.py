"""Config source resolution.

Decides which single configuration source the collector uses:

1. ``--config`` flag (highest priority)
2. SPLUNK_CONFIG_YAML inline payload, when no flag is given
3. SPLUNK_CONFIG file path
4. Default configuration files (local copy, then containerized copy)

SPLUNK_CONFIG and SPLUNK_CONFIG_YAML are mutually exclusive regardless of
the flag.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, MutableMapping, Sequence
from pathlib import Path

from otelcol_launcher.config.args import has_flag, value_of
from otelcol_launcher.config.defaults import (
    CONFIG_ENV_VAR,
    CONFIG_FLAG,
    CONFIG_YAML_ENV_VAR,
    DEFAULT_CONFIG_CANDIDATES,
    KNOWN_DEFAULT_CONFIG_PATHS,
    REALM_ENV_VAR,
    REQUIRED_DEFAULT_CONFIG_VARS,
    TOKEN_ENV_VAR,
)
from otelcol_launcher.config.env import EnvReader
from otelcol_launcher.config.errors import (
    ConfigFileNotFoundError,
    ConflictingSourcesError,
    MissingConfigError,
    MissingRequiredVarError,
)
from otelcol_launcher.config.models import ResolvedConfigSource

logger = logging.getLogger(__name__)

PathProbe = Callable[[str], bool]


def is_readable_file(path: str) -> bool:
    """Default filesystem probe: an existing regular file we can read."""
    candidate = Path(path)
    return candidate.is_file() and os.access(candidate, os.R_OK)


def find_default_config(
    path_exists: PathProbe,
    candidates: Sequence[str] = DEFAULT_CONFIG_CANDIDATES,
) -> str | None:
    """Return the first existing default config file in priority order."""
    for candidate in candidates:
        if path_exists(candidate):
            return candidate
    return None


def check_required_vars(
    config_path: str,
    env: EnvReader,
    *,
    program: str = "otelcol",
) -> None:
    """Require realm and access token when a default config is in use.

    Raises:
        MissingRequiredVarError: Naming the first missing variable.
    """
    if config_path not in KNOWN_DEFAULT_CONFIG_PATHS:
        return
    for var in REQUIRED_DEFAULT_CONFIG_VARS:
        if not env.is_set(var):
            logger.error(
                "Usage: %s=12345 %s=us0 %s", TOKEN_ENV_VAR, REALM_ENV_VAR, program
            )
            raise MissingRequiredVarError(var, config_path)


def resolve_config_source(
    args: list[str],
    env: MutableMapping[str, str],
    *,
    path_exists: PathProbe = is_readable_file,
    program: str = "otelcol",
) -> ResolvedConfigSource:
    """Resolve the collector configuration source.

    Args:
        args: Working argument vector. ``--config=<path>`` is appended when
            the resolved path did not come from the command line.
        env: Working environment. SPLUNK_CONFIG is overwritten when the
            ``--config`` flag is given.
        path_exists: Filesystem probe used for every existence check.
        program: Program name shown in the usage hint.

    Returns:
        The resolved file or inline source.

    Raises:
        ConflictingSourcesError: SPLUNK_CONFIG and SPLUNK_CONFIG_YAML both set.
        MissingConfigError: Nothing given and no default file exists.
        ConfigFileNotFoundError: The given path does not exist.
        MissingRequiredVarError: A default config is missing realm or token.
    """
    reader = EnvReader(env)
    path_flag = value_of(args, CONFIG_FLAG)
    path_var = reader.get_str(CONFIG_ENV_VAR, "")
    yaml_var = reader.get_str(CONFIG_YAML_ENV_VAR, "")

    if path_var and yaml_var:
        raise ConflictingSourcesError(CONFIG_ENV_VAR, CONFIG_YAML_ENV_VAR)

    if not path_flag and yaml_var:
        source = ResolvedConfigSource.from_inline(yaml_var)
        logger.info(
            "Configuring collector using %s from env var %s",
            source.describe(),
            CONFIG_YAML_ENV_VAR,
            extra={"var": CONFIG_YAML_ENV_VAR, "source": "env"},
        )
        return source

    origin = "env"
    if path_flag:
        if yaml_var:
            logger.info(
                "Both %s and '%s' were specified. Ignoring %r environment "
                "variable value and using configuration in %r",
                CONFIG_YAML_ENV_VAR,
                CONFIG_FLAG,
                yaml_var,
                path_flag,
                extra={"var": CONFIG_YAML_ENV_VAR, "source": "flag"},
            )
        if path_var and path_var != path_flag:
            logger.info(
                "Both %s and '%s' were specified. Overriding %r environment "
                "variable value with %r for this session",
                CONFIG_ENV_VAR,
                CONFIG_FLAG,
                path_var,
                path_flag,
                extra={"var": CONFIG_ENV_VAR, "value": path_flag, "source": "flag"},
            )
        path_var = path_flag
        env[CONFIG_ENV_VAR] = path_var
        origin = "flag"

    if not path_var:
        default_path = find_default_config(path_exists)
        if default_path is None:
            raise MissingConfigError(CONFIG_ENV_VAR, DEFAULT_CONFIG_CANDIDATES)
        path_var = default_path
        origin = "default"
    elif not path_exists(path_var):
        raise ConfigFileNotFoundError(path_var, CONFIG_ENV_VAR)

    check_required_vars(path_var, reader, program=program)

    if not has_flag(args, CONFIG_FLAG):
        args.append(f"{CONFIG_FLAG}={path_var}")
    source = ResolvedConfigSource.from_file(path_var)
    logger.info(
        "Set config to %s",
        source.describe(),
        extra={"var": CONFIG_ENV_VAR, "value": path_var, "source": origin},
    )
    return source
