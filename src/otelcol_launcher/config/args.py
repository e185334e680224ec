"""Lookups over the raw collector argument vector.

Flags may be passed as ``--key value`` or ``--key=value``. The argument
vector never includes the program name.
"""

from __future__ import annotations

from collections.abc import Sequence

from otelcol_launcher.config.errors import MissingFlagValueError


def has_flag(args: Sequence[str], name: str) -> bool:
    """Check whether a flag is present in either form.

    Args:
        args: Argument vector.
        name: Flag name including dashes, e.g. "--config".

    Returns:
        True if an element equals ``name`` or starts with ``name=``.
    """
    prefix = name + "="
    return any(arg == name or arg.startswith(prefix) for arg in args)


def value_of(args: Sequence[str], name: str) -> str:
    """Get the value of a flag.

    Every element is scanned and the last occurrence wins, so
    ``--config a --config=b`` yields "b".

    Args:
        args: Argument vector.
        name: Flag name including dashes.

    Returns:
        The flag value, or an empty string when the flag is absent.

    Raises:
        MissingFlagValueError: If the bare flag is the last element.
    """
    prefix = name + "="
    value = ""
    for i, arg in enumerate(args):
        if arg.startswith(prefix):
            value = arg[len(prefix) :]
        elif arg == name:
            if i + 1 >= len(args):
                raise MissingFlagValueError(name)
            value = args[i + 1]
    return value


def without_flag(args: Sequence[str], name: str) -> list[str]:
    """Copy the argument vector without any occurrence of a flag.

    Both forms are dropped; for the bare form the following element (its
    value) goes too.
    """
    prefix = name + "="
    result: list[str] = []
    skip_value = False
    for arg in args:
        if skip_value:
            skip_value = False
            continue
        if arg == name:
            skip_value = True
            continue
        if arg.startswith(prefix):
            continue
        result.append(arg)
    return result
