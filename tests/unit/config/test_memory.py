"""Tests for memory ballast and memory limit resolution."""

from __future__ import annotations

import logging

import pytest

from otelcol_launcher.config.errors import (
    BallastExceedsLimitError,
    BelowThresholdError,
    ConflictingSourcesError,
    InvalidNumericValueError,
)
from otelcol_launcher.config.memory import (
    default_memory_limit,
    effective_ballast,
    resolve_ballast,
    resolve_memory_limit,
    resolve_total_memory,
)


class TestResolveTotalMemory:
    """Tests for resolve_total_memory()."""

    def test_default_total(self) -> None:
        assert resolve_total_memory({}) == 512

    def test_env_total(self) -> None:
        assert resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": "4096"}) == 4096

    def test_empty_env_total_uses_default(self) -> None:
        assert resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": ""}) == 512

    def test_non_numeric_total_raises(self) -> None:
        with pytest.raises(InvalidNumericValueError) as exc_info:
            resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": "lots"})
        assert exc_info.value.var == "SPLUNK_MEMORY_TOTAL_MIB"
        assert exc_info.value.value == "lots"

    @pytest.mark.parametrize("value", ["1_000", " 1024", "1024 "])
    def test_non_decimal_total_raises(self, value: str) -> None:
        with pytest.raises(InvalidNumericValueError):
            resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": value})

    @pytest.mark.parametrize("value", ["99", "0", "-1"])
    def test_total_at_or_below_99_raises(self, value: str) -> None:
        with pytest.raises(BelowThresholdError) as exc_info:
            resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": value})
        assert exc_info.value.value == int(value)

    def test_total_of_100_is_accepted(self) -> None:
        assert resolve_total_memory({"SPLUNK_MEMORY_TOTAL_MIB": "100"}) == 100


class TestResolveBallast:
    """Tests for resolve_ballast()."""

    def test_derived_from_default_total(self) -> None:
        args: list[str] = []
        env: dict[str, str] = {}
        assert resolve_ballast(512, args, env) == 168
        assert env["SPLUNK_BALLAST_SIZE_MIB"] == "168"
        assert args == ["--mem-ballast-size-mib=168"]

    def test_derived_uses_integer_division(self) -> None:
        assert resolve_ballast(1000, [], {}) == 330
        assert resolve_ballast(101, [], {}) == 33

    def test_env_ballast_is_used(self) -> None:
        args: list[str] = []
        assert resolve_ballast(512, args, {"SPLUNK_BALLAST_SIZE_MIB": "64"}) == 64
        assert args == ["--mem-ballast-size-mib=64"]

    def test_flag_is_copied_to_env_and_not_appended(self) -> None:
        args = ["--mem-ballast-size-mib", "100"]
        env: dict[str, str] = {}
        assert resolve_ballast(512, args, env) == 100
        assert env["SPLUNK_BALLAST_SIZE_MIB"] == "100"
        assert args == ["--mem-ballast-size-mib", "100"]

    def test_flag_and_env_conflict(self) -> None:
        with pytest.raises(ConflictingSourcesError) as exc_info:
            resolve_ballast(
                512,
                ["--mem-ballast-size-mib=100"],
                {"SPLUNK_BALLAST_SIZE_MIB": "100"},
            )
        assert exc_info.value.first == "SPLUNK_BALLAST_SIZE_MIB"

    def test_non_numeric_ballast_raises(self) -> None:
        with pytest.raises(InvalidNumericValueError):
            resolve_ballast(512, [], {"SPLUNK_BALLAST_SIZE_MIB": "big"})

    def test_non_numeric_flag_raises(self) -> None:
        with pytest.raises(InvalidNumericValueError) as exc_info:
            resolve_ballast(512, ["--mem-ballast-size-mib=big"], {})
        assert exc_info.value.var == "SPLUNK_BALLAST_SIZE_MIB"

    def test_ballast_below_33_raises(self) -> None:
        with pytest.raises(BelowThresholdError) as exc_info:
            resolve_ballast(512, [], {"SPLUNK_BALLAST_SIZE_MIB": "32"})
        assert exc_info.value.minimum == 33

    def test_ballast_of_33_is_accepted(self) -> None:
        assert resolve_ballast(512, [], {"SPLUNK_BALLAST_SIZE_MIB": "33"}) == 33

    def test_logs_ballast(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            resolve_ballast(512, [], {})
        assert "Set ballast to 168 MiB" in caplog.text

    @pytest.mark.parametrize(
        ("args", "env", "origin"),
        [
            ([], {}, "derived"),
            ([], {"SPLUNK_BALLAST_SIZE_MIB": "64"}, "env"),
            (["--mem-ballast-size-mib=64"], {}, "flag"),
        ],
    )
    def test_logs_ballast_origin(
        self, caplog: pytest.LogCaptureFixture, args, env, origin: str
    ) -> None:
        with caplog.at_level(logging.INFO):
            resolve_ballast(512, list(args), dict(env))
        (record,) = caplog.records
        assert record.var == "SPLUNK_BALLAST_SIZE_MIB"
        assert record.source == origin


class TestDefaultMemoryLimit:
    """Tests for default_memory_limit()."""

    def test_ninety_percent(self) -> None:
        assert default_memory_limit(512) == 460

    def test_reservation_at_cap_is_not_clamped(self) -> None:
        # 20480 - 18432 == 2048, which is not more than the cap
        assert default_memory_limit(20480) == 18432

    def test_large_total_clamps_to_2048(self) -> None:
        assert default_memory_limit(100000) == 2048


class TestResolveMemoryLimit:
    """Tests for resolve_memory_limit()."""

    def test_default_plan_passes(self) -> None:
        env: dict[str, str] = {}
        args = ["--mem-ballast-size-mib=168"]
        assert resolve_memory_limit(512, args, env) == 460
        assert env["SPLUNK_MEMORY_LIMIT_MIB"] == "460"

    def test_env_limit_is_used(self) -> None:
        env = {"SPLUNK_MEMORY_LIMIT_MIB": "1000"}
        assert resolve_memory_limit(512, ["--mem-ballast-size-mib=168"], env) == 1000

    def test_large_total_fails_ballast_check(self) -> None:
        args: list[str] = []
        env: dict[str, str] = {}
        ballast = resolve_ballast(100000, args, env)
        assert ballast == 33000
        with pytest.raises(BallastExceedsLimitError) as exc_info:
            resolve_memory_limit(100000, args, env)
        assert exc_info.value.limit_mib == 2048
        assert exc_info.value.ballast_mib == 33000
        assert "SPLUNK_MEMORY_LIMIT_MIB" not in env

    def test_limit_exactly_twice_ballast_passes(self) -> None:
        env = {"SPLUNK_MEMORY_LIMIT_MIB": "200"}
        assert resolve_memory_limit(512, ["--mem-ballast-size-mib=100"], env) == 200

    def test_unparseable_limit_is_treated_as_zero(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        env = {"SPLUNK_MEMORY_LIMIT_MIB": "plenty"}
        with caplog.at_level(logging.WARNING), pytest.raises(
            BallastExceedsLimitError
        ) as exc_info:
            resolve_memory_limit(512, ["--mem-ballast-size-mib=168"], env)
        assert exc_info.value.limit_mib == 0
        assert "Invalid integer value for SPLUNK_MEMORY_LIMIT_MIB" in caplog.text

    def test_uses_last_ballast_flag(self) -> None:
        args = ["--mem-ballast-size-mib=50", "--mem-ballast-size-mib", "300"]
        with pytest.raises(BallastExceedsLimitError):
            resolve_memory_limit(512, args, {})


class TestEffectiveBallast:
    """Tests for effective_ballast()."""

    def test_reads_flag(self) -> None:
        assert effective_ballast(["--mem-ballast-size-mib=70"], {}) == 70

    def test_falls_back_to_env_for_empty_flag(self) -> None:
        env = {"SPLUNK_BALLAST_SIZE_MIB": "90"}
        assert effective_ballast(["--mem-ballast-size-mib="], env) == 90

    def test_zero_when_nothing_parses(self) -> None:
        assert effective_ballast([], {}) == 0
