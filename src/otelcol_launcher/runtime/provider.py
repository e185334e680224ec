"""Configuration providers handed to the collector runtime.

A provider loads the collector configuration document from the resolved
source. EnvExpandingConfigProvider layers environment variable expansion on
top of a file or inline provider. Only the document's shape (a mapping at the
root) is checked; its content is left to the collector.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

from otelcol_launcher.config.errors import ConfigLoadError
from otelcol_launcher.config.models import ConfigSourceKind, ResolvedConfigSource

logger = logging.getLogger(__name__)

# ${VAR} or ${env:VAR}; $$ escapes a literal dollar sign
_ENV_REF_PATTERN = re.compile(r"\$\$|\$\{(?:env:)?([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigProvider(Protocol):
    """Loads the collector configuration as a mapping."""

    def describe(self) -> str: ...

    def get(self) -> dict[str, Any]: ...


def _parse_document(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(source, str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            source, f"top-level YAML must be a mapping, got {type(data).__name__}"
        )
    return data


class FileConfigProvider:
    """Reads the configuration from a YAML file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def get(self) -> dict[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(self.describe(), str(e)) from e
        return _parse_document(text, self.describe())


class InlineConfigProvider:
    """Reads the configuration from an in-memory YAML payload."""

    def __init__(self, payload: str) -> None:
        self.payload = payload

    def describe(self) -> str:
        return "inline YAML"

    def get(self) -> dict[str, Any]:
        return _parse_document(self.payload, self.describe())


class EnvExpandingConfigProvider:
    """Expands ``${VAR}`` and ``${env:VAR}`` in string values of a base provider.

    Unset variables expand to an empty string. Keys are left untouched.
    """

    def __init__(
        self, base: ConfigProvider, env: Mapping[str, str] | None = None
    ) -> None:
        self.base = base
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def describe(self) -> str:
        return self.base.describe()

    def get(self) -> dict[str, Any]:
        return self._expand(self.base.get())

    def _expand(self, value: Any) -> Any:
        if isinstance(value, str):
            return _ENV_REF_PATTERN.sub(self._replace, value)
        if isinstance(value, dict):
            return {key: self._expand(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._expand(item) for item in value]
        return value

    def _replace(self, match: re.Match[str]) -> str:
        name = match.group(1)
        if name is None:
            return "$"
        if name not in self._env:
            logger.debug("Config references unset environment variable %s", name)
        return self._env.get(name, "")


def provider_for_source(
    source: ResolvedConfigSource,
    env: Mapping[str, str] | None = None,
) -> ConfigProvider:
    """Build the layered provider for a resolved config source."""
    if source.kind is ConfigSourceKind.INLINE:
        base: ConfigProvider = InlineConfigProvider(source.payload or "")
    else:
        base = FileConfigProvider(source.path or "")
    return EnvExpandingConfigProvider(base, env)


def _escape_dollars(value: Any) -> Any:
    # the collector expands references again when it reads the file
    if isinstance(value, str):
        return value.replace("$", "$$")
    if isinstance(value, dict):
        return {key: _escape_dollars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_escape_dollars(item) for item in value]
    return value


def render_config(provider: ConfigProvider) -> Path:
    """Write the provider's document to a private temporary YAML file.

    The collector is pointed at this file, so it sees the document exactly
    as loaded here: references are already expanded and any literal "$" in a
    value is written as "$$". The caller removes the file once the collector
    has exited.

    Raises:
        ConfigLoadError: The document cannot be loaded or written.
    """
    document = provider.get()
    rendered: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            prefix="otelcol-config-",
            suffix=".yaml",
            delete=False,
        ) as f:
            rendered = Path(f.name)
            yaml.safe_dump(_escape_dollars(document), f, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        if rendered is not None:
            rendered.unlink(missing_ok=True)
        raise ConfigLoadError(provider.describe(), str(e)) from e

    logger.debug(
        "Rendered configuration from %s (sections: %s) to %s",
        provider.describe(),
        ", ".join(str(key) for key in document) or "none",
        rendered,
    )
    return rendered
