"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables with type conversion and validation. It supports dependency injection
for testing by accepting an optional env mapping.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

# optional sign followed by ASCII digits only
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Empty values are treated the same as unset variables, matching how the
    collector itself reads its SPLUNK_* variables.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        total = reader.get_int("SPLUNK_MEMORY_TOTAL_MIB", 512)

        # Testing usage (inject custom env)
        reader = EnvReader(env={"SPLUNK_MEMORY_TOTAL_MIB": "1024"})
        total = reader.get_int("SPLUNK_MEMORY_TOTAL_MIB", 512)  # Returns 1024
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
                 If None, reads from os.environ. Useful for testing.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def is_set(self, var: str) -> bool:
        """Check whether a variable is set to a non-empty value."""
        return bool(self._env.get(var))

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set or empty. Defaults to None.

        Returns:
            The environment variable value, or default if not set.
        """
        value = self._env.get(var)
        if not value:
            return default
        return value

    def get_int(
        self, var: str, default: int | None = None, *, strict: bool = False
    ) -> int | None:
        """Get an integer from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set or invalid.
            strict: If True, raise ValueError on an unparseable value
                    instead of falling back to the default.

        Returns:
            Parsed integer value, or default if not set or invalid.
            Logs a warning if the value is set but cannot be parsed.

        Raises:
            ValueError: When strict=True and the value is not an integer.
        """
        value = self._env.get(var)
        if not value:
            return default
        if _INT_PATTERN.fullmatch(value):
            return int(value)
        if strict:
            raise ValueError(f"Invalid integer value for {var}: {value}")
        logger.warning("Invalid integer value for %s: %s", var, value)
        return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Get a boolean from environment variable.

        Recognizes "true", "1", "yes" and "on" (case-insensitive) as true.
        All other non-empty values are treated as false.
        """
        value = self._env.get(var)
        if not value:
            return default
        return value.lower() in ("true", "1", "yes", "on")

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Get a path from environment variable, with tilde expansion."""
        value = self._env.get(var)
        if not value:
            return default
        return Path(value).expanduser()
