"""Sink port describing where accepted log records go.

Purpose
-------
Define the boundary between the filtering logger and whatever renders or
stores records, so the application layer never depends on a concrete output.

Contents
--------
* :class:`SinkPort` – runtime-checkable protocol with a single ``emit``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_context.domain.records import LogRecord


@runtime_checkable
class SinkPort(Protocol):
    """Accept a record that already passed the level filter."""

    def emit(self, record: LogRecord) -> None:
        """Render or forward ``record``."""


__all__ = ["SinkPort"]
