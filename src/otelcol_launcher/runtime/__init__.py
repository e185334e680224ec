"""Glue between resolved parameters and the collector runtime."""

from otelcol_launcher.runtime.components import (
    ComponentRegistry,
    get_components,
)
from otelcol_launcher.runtime.process import (
    ServiceRuntime,
    SubprocessRuntime,
    find_collector,
)
from otelcol_launcher.runtime.provider import (
    ConfigProvider,
    EnvExpandingConfigProvider,
    FileConfigProvider,
    InlineConfigProvider,
    provider_for_source,
    render_config,
)
from otelcol_launcher.runtime.settings import (
    BuildInfo,
    ServiceSettings,
    build_service_settings,
)

__all__ = [
    "BuildInfo",
    "ComponentRegistry",
    "ConfigProvider",
    "EnvExpandingConfigProvider",
    "FileConfigProvider",
    "InlineConfigProvider",
    "ServiceRuntime",
    "ServiceSettings",
    "SubprocessRuntime",
    "build_service_settings",
    "find_collector",
    "get_components",
    "provider_for_source",
    "render_config",
]
