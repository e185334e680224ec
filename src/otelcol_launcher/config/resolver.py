"""Runtime parameter resolution pipeline.

Resolution is a pure function of its inputs: the argument vector, an
environment snapshot and a filesystem probe. Steps run in a fixed order over
a working copy of the arguments and environment; the first step that raises
stops the pipeline and nothing is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from otelcol_launcher.config.args import has_flag
from otelcol_launcher.config.defaults import HELP_FLAGS
from otelcol_launcher.config.memory import (
    effective_ballast,
    resolve_ballast,
    resolve_memory_limit,
    resolve_total_memory,
)
from otelcol_launcher.config.models import (
    MemoryPlan,
    ResolvedConfigSource,
    ResolvedRuntimeConfig,
)
from otelcol_launcher.config.source import (
    PathProbe,
    is_readable_file,
    resolve_config_source,
)

logger = logging.getLogger(__name__)


@dataclass
class _ResolutionState:
    """Working state shared by the resolution steps."""

    args: list[str]
    env: dict[str, str]
    path_exists: PathProbe
    program: str
    config_source: ResolvedConfigSource | None = None
    total_mib: int = 0
    ballast_mib: int = 0
    limit_mib: int = 0


def _config_source_step(state: _ResolutionState) -> None:
    state.config_source = resolve_config_source(
        state.args,
        state.env,
        path_exists=state.path_exists,
        program=state.program,
    )


def _total_memory_step(state: _ResolutionState) -> None:
    state.total_mib = resolve_total_memory(state.env)


def _ballast_step(state: _ResolutionState) -> None:
    resolve_ballast(state.total_mib, state.args, state.env)
    state.ballast_mib = effective_ballast(state.args, state.env)


def _memory_limit_step(state: _ResolutionState) -> None:
    state.limit_mib = resolve_memory_limit(state.total_mib, state.args, state.env)


RESOLUTION_STEPS: tuple[Callable[[_ResolutionState], None], ...] = (
    _config_source_step,
    _total_memory_step,
    _ballast_step,
    _memory_limit_step,
)


def is_help_requested(args: Sequence[str]) -> bool:
    """Check for ``-h``/``--help``, which bypasses resolution entirely."""
    return any(has_flag(args, flag) for flag in HELP_FLAGS)


def resolve_runtime_config(
    args: Sequence[str],
    env: Mapping[str, str],
    *,
    path_exists: PathProbe = is_readable_file,
    program: str = "otelcol",
) -> ResolvedRuntimeConfig:
    """Resolve config source, ballast and memory limit.

    Neither ``args`` nor ``env`` is modified. The returned value carries the
    final argument vector and the environment variables that must be set
    for the collector.

    Args:
        args: Collector arguments, without the program name.
        env: Environment snapshot.
        path_exists: Filesystem probe for config file checks.
        program: Program name shown in usage hints.

    Returns:
        The fully resolved runtime configuration.

    Raises:
        LauncherError: The first resolution failure.
    """
    state = _ResolutionState(
        args=list(args),
        env=dict(env),
        path_exists=path_exists,
        program=program,
    )
    for step in RESOLUTION_STEPS:
        logger.debug("Running resolution step %s", step.__name__)
        step(state)

    if state.config_source is None:  # pragma: no cover - set by the first step
        raise RuntimeError("config source step did not run")

    env_updates = {
        key: value for key, value in state.env.items() if env.get(key) != value
    }
    return ResolvedRuntimeConfig(
        args=tuple(state.args),
        env_updates=env_updates,
        config_source=state.config_source,
        memory=MemoryPlan(
            total_mib=state.total_mib,
            ballast_mib=state.ballast_mib,
            limit_mib=state.limit_mib,
        ),
    )
