"""Collector component registry.

Component factories are contributed through the ``otelcol_launcher.components``
entry point group. Entry point names are ``<kind>.<type>``, for example
``receivers.otlp`` or ``exporters.signalfx``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

COMPONENTS_ENTRY_POINT_GROUP = "otelcol_launcher.components"

COMPONENT_KINDS = ("receivers", "processors", "exporters", "extensions")


@dataclass
class ComponentRegistry:
    """Component factories keyed by kind, then by component type."""

    receivers: dict[str, Any] = field(default_factory=dict)
    processors: dict[str, Any] = field(default_factory=dict)
    exporters: dict[str, Any] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)

    def register(self, kind: str, type_name: str, factory: Any) -> None:
        """Register a factory.

        Raises:
            ValueError: Unknown kind, or the type is already registered.
        """
        if kind not in COMPONENT_KINDS:
            raise ValueError(f"kind must be one of {COMPONENT_KINDS}, got {kind}")
        factories: dict[str, Any] = getattr(self, kind)
        if type_name in factories:
            raise ValueError(f"duplicate {kind} factory: {type_name}")
        factories[type_name] = factory

    def counts(self) -> dict[str, int]:
        return {kind: len(getattr(self, kind)) for kind in COMPONENT_KINDS}


def get_components(
    entry_point_group: str = COMPONENTS_ENTRY_POINT_GROUP,
) -> ComponentRegistry:
    """Build the registry from installed entry points.

    Entry points that fail to load or have malformed names are logged and
    skipped.
    """
    registry = ComponentRegistry()

    from importlib.metadata import entry_points

    for ep in entry_points(group=entry_point_group):
        kind, _, type_name = ep.name.partition(".")
        if not type_name:
            logger.warning("Ignoring component entry point with bad name: %s", ep.name)
            continue
        try:
            registry.register(kind, type_name, ep.load())
        except Exception as e:
            logger.warning("Failed to load component '%s': %s", ep.name, e)
            continue
        logger.debug("Registered component: %s", ep.name)

    return registry
