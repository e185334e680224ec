"""Settings handed to the collector runtime."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from otelcol_launcher import __version__
from otelcol_launcher.config.models import ResolvedRuntimeConfig
from otelcol_launcher.runtime.components import ComponentRegistry
from otelcol_launcher.runtime.provider import ConfigProvider, provider_for_source

COLLECTOR_COMMAND = "otelcol"


@dataclass(frozen=True)
class BuildInfo:
    """Identity reported by the collector."""

    command: str = COLLECTOR_COMMAND
    version: str = __version__


@dataclass(frozen=True)
class ServiceSettings:
    """Everything the runtime needs to start the collector.

    ``config_provider`` is None when resolution was skipped because help was
    requested.
    """

    build_info: BuildInfo
    components: ComponentRegistry
    config_provider: ConfigProvider | None
    args: tuple[str, ...]


def build_service_settings(
    components: ComponentRegistry,
    resolved: ResolvedRuntimeConfig | None = None,
    *,
    raw_args: Sequence[str] = (),
    env: Mapping[str, str] | None = None,
) -> ServiceSettings:
    """Assemble runtime settings.

    Args:
        components: Component factories.
        resolved: Result of resolution, or None when it was skipped.
        raw_args: Arguments to pass through when ``resolved`` is None.
        env: Environment used for config expansion (os.environ if None).
    """
    if resolved is None:
        return ServiceSettings(
            build_info=BuildInfo(),
            components=components,
            config_provider=None,
            args=tuple(raw_args),
        )
    return ServiceSettings(
        build_info=BuildInfo(),
        components=components,
        config_provider=provider_for_source(resolved.config_source, env),
        args=resolved.args,
    )
