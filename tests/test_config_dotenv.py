from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_context import cli as cli_module
from lib_log_context import config as log_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into os.environ."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_WARN=orchard.Acorn\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_WARN", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_WARN"] == "orchard.Acorn"

    os.environ.pop("LOG_WARN", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("LOG_LEVEL=debug\n")
    monkeypatch.setenv("LOG_LEVEL", "error")

    result = log_config.enable_dotenv(tmp_path)

    assert result == (tmp_path / ".env").resolve()
    assert os.environ["LOG_LEVEL"] == "error"


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_ERROR=orchard.First\n")
    monkeypatch.delenv("LOG_ERROR", raising=False)

    first = log_config.enable_dotenv(tmp_path)
    env_file.write_text("LOG_ERROR=orchard.Second\n")
    os.environ.pop("LOG_ERROR", None)
    second = log_config.enable_dotenv(tmp_path)

    assert first == second
    assert "LOG_ERROR" not in os.environ


def test_enable_dotenv_without_file_returns_none(tmp_path: Path) -> None:
    assert log_config.enable_dotenv(tmp_path / "empty") is None


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []
