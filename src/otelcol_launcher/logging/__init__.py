"""Logging setup for the launcher.

Provides configurable text or JSON output with optional file rotation.
"""

from otelcol_launcher.logging.config import configure_logging
from otelcol_launcher.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
