"""Memory ballast and memory limit resolution.

All sizes are in MiB. Total memory comes from SPLUNK_MEMORY_TOTAL_MIB or the
built-in default; ballast and limit are derived from it unless set
explicitly, and the limit must leave room for twice the ballast.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping

from otelcol_launcher.config.args import has_flag, value_of
from otelcol_launcher.config.defaults import (
    BALLAST_ENV_VAR,
    BALLAST_FLAG,
    DEFAULT_MEMORY_BALLAST_PERCENTAGE,
    DEFAULT_MEMORY_LIMIT_MAX_MIB,
    DEFAULT_MEMORY_LIMIT_PERCENTAGE,
    DEFAULT_MEMORY_TOTAL_MIB,
    MEMORY_LIMIT_ENV_VAR,
    MEMORY_TOTAL_ENV_VAR,
    MIN_BALLAST_SIZE_MIB,
    MIN_MEMORY_TOTAL_MIB,
)
from otelcol_launcher.config.env import EnvReader
from otelcol_launcher.config.errors import (
    BallastExceedsLimitError,
    BelowThresholdError,
    ConflictingSourcesError,
    InvalidNumericValueError,
)

logger = logging.getLogger(__name__)


def _parse_int(reader: EnvReader, var: str) -> int | None:
    try:
        return reader.get_int(var, strict=True)
    except ValueError:
        raise InvalidNumericValueError(var, reader.get_str(var, "")) from None


def resolve_total_memory(env: MutableMapping[str, str]) -> int:
    """Get total memory from SPLUNK_MEMORY_TOTAL_MIB or the default.

    Raises:
        InvalidNumericValueError: The variable is not an integer.
        BelowThresholdError: The variable is 99 or less.
    """
    total = _parse_int(EnvReader(env), MEMORY_TOTAL_ENV_VAR)
    origin = "env"
    if total is None:
        total, origin = DEFAULT_MEMORY_TOTAL_MIB, "default"
    elif total < MIN_MEMORY_TOTAL_MIB:
        raise BelowThresholdError(MEMORY_TOTAL_ENV_VAR, total, MIN_MEMORY_TOTAL_MIB)
    logger.debug(
        "Total memory is %d MiB",
        total,
        extra={"var": MEMORY_TOTAL_ENV_VAR, "value": total, "source": origin},
    )
    return total


def resolve_ballast(
    total_mib: int,
    args: list[str],
    env: MutableMapping[str, str],
) -> int:
    """Resolve the ballast size.

    A ``--mem-ballast-size-mib`` flag is copied into SPLUNK_BALLAST_SIZE_MIB
    and validated like the variable. Without either, the ballast is 33% of
    total memory. ``--mem-ballast-size-mib=<ballast>`` is appended when the
    flag was not given.

    Raises:
        ConflictingSourcesError: Both the flag and the variable are set.
        InvalidNumericValueError: The ballast is not an integer.
        BelowThresholdError: The ballast is below 33 MiB.
    """
    reader = EnvReader(env)
    flag_given = has_flag(args, BALLAST_FLAG)

    origin = "env"
    flag_value = value_of(args, BALLAST_FLAG)
    if flag_value:
        if reader.is_set(BALLAST_ENV_VAR):
            raise ConflictingSourcesError(BALLAST_ENV_VAR, f"'{BALLAST_FLAG}'")
        env[BALLAST_ENV_VAR] = flag_value
        origin = "flag"

    ballast = _parse_int(reader, BALLAST_ENV_VAR)
    if ballast is None:
        ballast = total_mib * DEFAULT_MEMORY_BALLAST_PERCENTAGE // 100
        env[BALLAST_ENV_VAR] = str(ballast)
        origin = "derived"
    elif ballast < MIN_BALLAST_SIZE_MIB:
        raise BelowThresholdError(BALLAST_ENV_VAR, ballast, MIN_BALLAST_SIZE_MIB)

    if not flag_given:
        args.append(f"{BALLAST_FLAG}={ballast}")
    logger.info(
        "Set ballast to %d MiB",
        ballast,
        extra={"var": BALLAST_ENV_VAR, "value": ballast, "source": origin},
    )
    return ballast


def default_memory_limit(total_mib: int) -> int:
    """90% of total memory, reserving at most 2048 MiB for everything else."""
    limit = total_mib * DEFAULT_MEMORY_LIMIT_PERCENTAGE // 100
    if total_mib - limit > DEFAULT_MEMORY_LIMIT_MAX_MIB:
        limit = DEFAULT_MEMORY_LIMIT_MAX_MIB
    return limit


def effective_ballast(args: list[str], env: MutableMapping[str, str]) -> int:
    """Ballast the collector will use, read back from the argument vector.

    Falls back to SPLUNK_BALLAST_SIZE_MIB when the flag carries no value.
    """
    text = value_of(args, BALLAST_FLAG)
    if not text:
        text = EnvReader(env).get_str(BALLAST_ENV_VAR, "")
    try:
        return int(text)
    except ValueError:
        return 0


def resolve_memory_limit(
    total_mib: int,
    args: list[str],
    env: MutableMapping[str, str],
) -> int:
    """Resolve the memory limit and check it against the ballast.

    An unparseable SPLUNK_MEMORY_LIMIT_MIB is treated as 0 (with a warning),
    which then fails the ballast check.

    Raises:
        BallastExceedsLimitError: Twice the ballast exceeds the limit.
    """
    reader = EnvReader(env)
    if reader.is_set(MEMORY_LIMIT_ENV_VAR):
        limit = reader.get_int(MEMORY_LIMIT_ENV_VAR, 0)
        origin = "env"
    else:
        limit = default_memory_limit(total_mib)
        origin = "derived"

    ballast = effective_ballast(args, env)
    if ballast * 2 > limit:
        raise BallastExceedsLimitError(limit, ballast)

    env[MEMORY_LIMIT_ENV_VAR] = str(limit)
    logger.info(
        "Set memory limit to %d MiB",
        limit,
        extra={"var": MEMORY_LIMIT_ENV_VAR, "value": limit, "source": origin},
    )
    return limit
