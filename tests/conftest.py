from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_context.application.logger import Logger
from lib_log_context.domain.records import LogRecord
from lib_log_context.runtime import _state


class CollectingSink:
    """Sink double keeping every record it receives."""

    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def emit(self, record: LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self) -> list[str]:
        return [record.message for record in self.records]


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in ("LOG_LEVEL", "LOG_DEFAULT_LEVEL", "LOG_VERBOSE", "LOG_DEBUG", "LOG_INFO", "LOG_WARN", "LOG_ERROR", "LOG_FATAL"):
        monkeypatch.delenv(key, raising=False)
    _state._reset_for_testing()
    try:
        yield
    finally:
        _state._reset_for_testing()


@pytest.fixture
def sink() -> CollectingSink:
    return CollectingSink()


@pytest.fixture
def make_logger(sink: CollectingSink):
    def _make(level: str = "info") -> Logger:
        return Logger(sink, level=level)

    return _make


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)
