from __future__ import annotations

import logging

import pytest

from lib_log_context.domain.levels import LogLevel
from lib_log_context.errors import UnknownLevelError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warn", LogLevel.WARN),
        ("warning", LogLevel.WARN),
        ("error", LogLevel.ERROR),
        ("FATAL", LogLevel.FATAL),
        ("critical", LogLevel.FATAL),
        ("  info  ", LogLevel.INFO),
    ],
)
def test_from_name_accepts_case_insensitive_matches(name: str, expected: LogLevel) -> None:
    assert LogLevel.from_name(name) is expected


def test_from_name_rejects_unknown_level() -> None:
    with pytest.raises(UnknownLevelError, match="Unknown log level"):
        LogLevel.from_name("verbose")


def test_unknown_level_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        LogLevel.from_name("")


@pytest.mark.parametrize(
    "number, expected",
    [
        (10, LogLevel.DEBUG),
        (20, LogLevel.INFO),
        (30, LogLevel.WARN),
        (40, LogLevel.ERROR),
        (50, LogLevel.FATAL),
    ],
)
def test_from_numeric_maps_standard_levels(number: int, expected: LogLevel) -> None:
    assert LogLevel.from_numeric(number) is expected


@pytest.mark.parametrize("number", [-5, 5, 15, 25, 35, 45, 55])
def test_from_numeric_rejects_non_standard_levels(number: int) -> None:
    with pytest.raises(ValueError, match="Unsupported log level numeric"):
        LogLevel.from_numeric(number)


def test_levels_are_totally_ordered_by_severity() -> None:
    ordered = [LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR, LogLevel.FATAL]
    assert sorted(reversed(ordered)) == ordered
    assert LogLevel.DEBUG < LogLevel.INFO <= LogLevel.INFO < LogLevel.FATAL
    assert LogLevel.ERROR >= LogLevel.WARN
    assert not LogLevel.WARN > LogLevel.ERROR


def test_comparison_with_other_types_is_rejected() -> None:
    with pytest.raises(TypeError):
        LogLevel.INFO < 30  # noqa: B015


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.FATAL, logging.CRITICAL),
    ],
)
def test_to_python_level_returns_logging_constant(level: LogLevel, expected: int) -> None:
    assert level.to_python_level() == expected


@pytest.mark.parametrize("value", [LogLevel.WARN, "warn", 30])
def test_coerce_accepts_level_name_and_number(value: object) -> None:
    assert LogLevel.coerce(value) is LogLevel.WARN  # type: ignore[arg-type]


@pytest.mark.parametrize("level", LogLevel)
def test_env_key_and_severity_follow_name(level: LogLevel) -> None:
    assert level.env_key == f"LOG_{level.name}"
    assert level.severity == level.name.lower()
    assert level.icon
