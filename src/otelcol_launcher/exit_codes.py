"""Centralized exit codes for the launcher.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (values, conflicts, missing settings)
    20-29: Target/file errors
    30-39: Tool/dependency errors

The collector's own exit code is propagated unchanged once it has started,
so these codes only describe failures that happen before that point.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for launcher failures.

    Organized by category with reserved ranges for future expansion.
    """

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2  # Ctrl+C / SIGINT

    # Validation errors (10-19)
    INVALID_VALUE = 10
    CONFLICTING_SOURCES = 11
    MISSING_CONFIG = 12
    MISSING_REQUIRED_VAR = 13
    MEMORY_LIMIT_ERROR = 14
    CONFIG_LOAD_ERROR = 15

    # Target/file errors (20-29)
    CONFIG_FILE_NOT_FOUND = 20

    # Tool/dependency errors (30-39)
    RUNTIME_NOT_AVAILABLE = 30
