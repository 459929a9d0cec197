from __future__ import annotations

import logging

import pytest

from lib_log_context.domain.levels import LogLevel
from lib_log_context.runtime import InterpreterFlags, LogSettings
from lib_log_context.runtime._settings import default_log_level, level_groups, verbose_output


@pytest.mark.parametrize(
    "env, flags, expected",
    [
        ({"LOG_LEVEL": "error"}, InterpreterFlags(debug=True, verbose=None), LogLevel.ERROR),
        ({"LOG_DEFAULT_LEVEL": "debug"}, InterpreterFlags(), LogLevel.DEBUG),
        ({"LOG_LEVEL": "fatal", "LOG_DEFAULT_LEVEL": "debug"}, InterpreterFlags(), LogLevel.FATAL),
        ({}, InterpreterFlags(debug=True, verbose=None), LogLevel.DEBUG),
        ({}, InterpreterFlags(verbose=None), LogLevel.WARN),
        ({}, InterpreterFlags(verbose=True), LogLevel.INFO),
        ({}, InterpreterFlags(), LogLevel.INFO),
    ],
)
def test_default_level_precedence(env: dict[str, str], flags: InterpreterFlags, expected: LogLevel) -> None:
    assert default_log_level(env, flags) is expected


def test_unknown_default_level_degrades_to_warn(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="lib_log_context.runtime._settings"):
        level = default_log_level({"LOG_LEVEL": "loud", "LOG_DEFAULT_LEVEL": "debug"}, InterpreterFlags(debug=True))
    assert level is LogLevel.WARN
    assert "LOG_LEVEL" in caplog.text


def test_level_groups_split_and_trim_names() -> None:
    groups = level_groups({"LOG_WARN": "Acorn, Banana,,", "LOG_DEBUG": "Cat", "LOG_ERROR": "", "LOG_NOISY": "Dog"})
    assert groups == {LogLevel.WARN: ("Acorn", "Banana"), LogLevel.DEBUG: ("Cat",)}


@pytest.mark.parametrize(
    "env, flags, expected",
    [
        ({}, InterpreterFlags(), True),
        ({}, InterpreterFlags(verbose=True), True),
        ({}, InterpreterFlags(verbose=None), False),
        ({"LOG_VERBOSE": "yes"}, InterpreterFlags(verbose=None), True),
        ({"LOG_VERBOSE": "0"}, InterpreterFlags(verbose=None), False),
    ],
)
def test_verbose_output(env: dict[str, str], flags: InterpreterFlags, expected: bool) -> None:
    assert verbose_output(env, flags) is expected


def test_settings_from_explicit_environment() -> None:
    settings = LogSettings.from_environment(
        {"LOG_WARN": "Acorn,Banana", "LOG_DEBUG": "Cat"},
        InterpreterFlags(),
    )
    assert settings.level is LogLevel.INFO
    assert settings.verbose is True
    assert settings.level_for("Acorn") is LogLevel.WARN
    assert settings.level_for("Cat") is LogLevel.DEBUG
    assert settings.level_for("Damson") is LogLevel.INFO


def test_settings_read_os_environ_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    monkeypatch.setenv("LOG_FATAL", "Quiet")
    settings = LogSettings.from_environment(flags=InterpreterFlags())
    assert settings.level is LogLevel.ERROR
    assert settings.level_groups == {LogLevel.FATAL: ("Quiet",)}


def test_most_severe_group_wins_for_duplicate_names() -> None:
    settings = LogSettings.from_environment({"LOG_DEBUG": "Acorn", "LOG_ERROR": "Acorn"}, InterpreterFlags())
    assert settings.level_for("Acorn") is LogLevel.ERROR


def test_interpreter_flags_from_sys_are_consistent() -> None:
    flags = InterpreterFlags.from_sys()
    assert isinstance(flags.debug, bool)
    assert flags.verbose in (True, False, None)
