"""Launcher that resolves runtime parameters for the OpenTelemetry Collector."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("otelcol-launcher")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.1.0"

__all__ = ["__version__"]
