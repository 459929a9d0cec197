"""Rich-powered console sink implementing :class:`SinkPort`.

Purpose
-------
Default sink of :func:`lib_log_context.default_logger`: writes one line per
accepted record to stderr, letting Rich decide whether the terminal supports
colour.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleSink` - adapter constructed by the runtime.
"""

from __future__ import annotations

from typing import IO, Mapping, MutableMapping

from rich.console import Console

from lib_log_context.application.ports.sink import SinkPort
from lib_log_context.domain.levels import LogLevel
from lib_log_context.domain.records import LogRecord


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARN: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.FATAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleSink(SinkPort):
    """Render log records using Rich with optional style overrides."""

    def __init__(
        self,
        output: IO[str] | None = None,
        *,
        console: Console | None = None,
        verbose: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        elif output is not None:
            self._console = Console(file=output, no_color=no_color)
        else:
            self._console = Console(stderr=True, no_color=no_color)
        self._verbose = verbose
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            merged[LogLevel.coerce(key)] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    def emit(self, record: LogRecord) -> None:
        """Print ``record`` using Rich.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> sink = RichConsoleSink(console=console)
        >>> sink.emit(LogRecord(LogLevel.INFO, "svc", "svc", "msg"))
        >>> 'msg' in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(record.level, "")
        self._console.print(self._format_line(record, verbose=self._verbose), style=style, highlight=False, markup=False)

    @staticmethod
    def _format_line(record: LogRecord, *, verbose: bool = False) -> str:
        """Return a human-friendly console line for ``record``.

        Examples
        --------
        >>> record = LogRecord(LogLevel.WARN, "svc", "svc", "disk low", {"free": 3})
        >>> RichConsoleSink._format_line(record)
        '⚠  WARN svc: disk low'
        >>> RichConsoleSink._format_line(record, verbose=True)
        '⚠  WARN svc: disk low free=3'
        """
        label = f" {record.label}:" if record.label else ""
        line = f"{record.level.icon} {record.level.name:>5}{label} {record.message}"
        if verbose and record.fields:
            line += " " + " ".join(f"{key}={value}" for key, value in sorted(record.fields.items()))
        return line


__all__ = ["RichConsoleSink"]
