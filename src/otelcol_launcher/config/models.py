"""Data models for resolved launcher configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ConfigSourceKind(str, Enum):
    """Where the collector configuration comes from."""

    FILE = "file"
    INLINE = "inline"


@dataclass(frozen=True)
class ResolvedConfigSource:
    """The single effective collector configuration source.

    Exactly one of ``path`` and ``payload`` is set, depending on ``kind``.
    """

    kind: ConfigSourceKind
    path: str | None = None
    payload: str | None = None

    def __post_init__(self) -> None:
        """Validate that the fields match the kind."""
        if self.kind is ConfigSourceKind.FILE:
            if not self.path or self.payload is not None:
                raise ValueError("file config source requires a path and no payload")
        elif not self.payload or self.path is not None:
            raise ValueError("inline config source requires a payload and no path")

    @classmethod
    def from_file(cls, path: str) -> ResolvedConfigSource:
        return cls(kind=ConfigSourceKind.FILE, path=path)

    @classmethod
    def from_inline(cls, payload: str) -> ResolvedConfigSource:
        return cls(kind=ConfigSourceKind.INLINE, payload=payload)

    def describe(self) -> str:
        """Short human-readable description for log messages."""
        if self.kind is ConfigSourceKind.FILE:
            return str(self.path)
        return "inline YAML"


@dataclass(frozen=True)
class MemoryPlan:
    """Total memory, ballast and limit, all in MiB."""

    total_mib: int
    ballast_mib: int
    limit_mib: int

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("total_mib", "ballast_mib", "limit_mib"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.ballast_mib * 2 > self.limit_mib:
            raise ValueError(
                f"limit_mib ({self.limit_mib}) must be at least twice "
                f"ballast_mib ({self.ballast_mib})"
            )


@dataclass(frozen=True)
class ResolvedRuntimeConfig:
    """Everything the collector needs once resolution has succeeded.

    ``args`` is the final argument vector (original arguments followed by any
    injected flags). ``env_updates`` holds only the variables the resolver
    wrote; they are applied on top of the process environment.
    """

    args: tuple[str, ...]
    env_updates: Mapping[str, str]
    config_source: ResolvedConfigSource
    memory: MemoryPlan


@dataclass
class LoggingConfig:
    """Configuration for the launcher's own log output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
