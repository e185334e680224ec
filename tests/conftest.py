"""Shared test fixtures for the collector launcher."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

CREDENTIALS = {"SPLUNK_REALM": "us0", "SPLUNK_ACCESS_TOKEN": "12345"}


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a minimal collector config file."""
    path = tmp_path / "collector.yaml"
    path.write_text(
        "receivers:\n  otlp: {}\nexporters:\n  logging: {}\n", encoding="utf-8"
    )
    return path


@pytest.fixture
def credentials() -> dict[str, str]:
    """Realm and token required by the default configurations."""
    return dict(CREDENTIALS)


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch):
    """Remove every SPLUNK_* variable from the process environment.

    Variables the launcher writes during the test are removed afterwards.
    """
    for name in list(os.environ):
        if name.startswith("SPLUNK_"):
            monkeypatch.delenv(name)
    yield
    for name in list(os.environ):
        if name.startswith("SPLUNK_"):
            del os.environ[name]


@pytest.fixture
def probe_for():
    """Factory for filesystem probes that report only the given paths."""

    def _make(*existing: str):
        present = frozenset(existing)
        return lambda path: path in present

    return _make
