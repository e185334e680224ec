"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from otelcol_launcher.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_empty_value_counts_as_unset(self) -> None:
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == "default"


class TestEnvReaderIsSet:
    """Tests for EnvReader.is_set method."""

    def test_set_value(self) -> None:
        assert EnvReader(env={"MY_VAR": "x"}).is_set("MY_VAR")

    def test_empty_or_missing(self) -> None:
        assert not EnvReader(env={"MY_VAR": ""}).is_set("MY_VAR")
        assert not EnvReader(env={}).is_set("MY_VAR")


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_returns_value_when_set(self) -> None:
        reader = EnvReader(env={"MY_VAR": "42"})
        assert reader.get_int("MY_VAR") == 42

    def test_returns_none_when_not_set(self) -> None:
        assert EnvReader(env={}).get_int("MY_VAR") is None

    def test_returns_default_and_warns_for_invalid(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        reader = EnvReader(env={"MY_VAR": "not_a_number"})
        with caplog.at_level(logging.WARNING):
            result = reader.get_int("MY_VAR", 100)
        assert result == 100
        assert "Invalid integer value for MY_VAR: not_a_number" in caplog.text

    def test_strict_raises_on_invalid(self) -> None:
        reader = EnvReader(env={"MY_VAR": "3.14"})
        with pytest.raises(ValueError, match="Invalid integer value"):
            reader.get_int("MY_VAR", strict=True)

    def test_strict_returns_default_when_unset(self) -> None:
        assert EnvReader(env={}).get_int("MY_VAR", 7, strict=True) == 7

    @pytest.mark.parametrize("value", ["1_000", " 42 ", "42\n", "\uff14\uff12", "0x10"])
    def test_strict_rejects_non_decimal_forms(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid integer value"):
            EnvReader(env={"MY_VAR": value}).get_int("MY_VAR", strict=True)

    @pytest.mark.parametrize(("value", "expected"), [("+42", 42), ("-7", -7)])
    def test_accepts_sign(self, value: str, expected: int) -> None:
        assert EnvReader(env={"MY_VAR": value}).get_int("MY_VAR") == expected


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    @pytest.mark.parametrize("value", ["true", "1", "YES", "On"])
    def test_true_values(self, value: str) -> None:
        assert EnvReader(env={"MY_VAR": value}).get_bool("MY_VAR") is True

    def test_other_values_are_false(self) -> None:
        assert EnvReader(env={"MY_VAR": "nope"}).get_bool("MY_VAR") is False

    def test_default_when_unset(self) -> None:
        assert EnvReader(env={}).get_bool("MY_VAR", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_expands_tilde(self) -> None:
        reader = EnvReader(env={"MY_VAR": "~/launcher.log"})
        assert reader.get_path("MY_VAR") == Path.home() / "launcher.log"

    def test_default_when_unset(self) -> None:
        assert EnvReader(env={}).get_path("MY_VAR") is None


def test_reads_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAUNCHER_TEST_VAR", "from-os")
    assert EnvReader().get_str("LAUNCHER_TEST_VAR") == "from-os"
