"""Level-filtering logger that forwards accepted records to a sink.

Purpose
-------
Decide, per call, whether a message about a subject is severe enough to be
emitted. The threshold is the subject's entry in the logger's
:class:`LevelOverrideStore`, or the logger's base level when none exists.

Contents
--------
* :class:`Logger` – ``debug``/``info``/``warn``/``error``/``fatal`` helpers,
  ``enable``/``clear`` for per-entity overrides, and the threshold check.

System Role
-----------
Application-layer policy object. It knows nothing about execution contexts;
:mod:`lib_log_context.runtime` decides which instance is "current".
"""

from __future__ import annotations

from typing import Any

from lib_log_context.application.ports.sink import SinkPort
from lib_log_context.domain.levels import LogLevel
from lib_log_context.domain.overrides import LevelOverrideStore
from lib_log_context.domain.records import LogRecord, subject_entity, subject_label


class Logger:
    """Filter log calls by subject and hand accepted records to ``sink``.

    Parameters
    ----------
    sink:
        Adapter implementing :class:`SinkPort`.
    level:
        Ambient threshold for subjects without an override.
    verbose:
        Passed through to sinks that render extra detail when set.
    overrides:
        Optional shared store; a private one is created otherwise.
    """

    def __init__(
        self,
        sink: SinkPort,
        *,
        level: LogLevel | str = LogLevel.INFO,
        verbose: bool = False,
        overrides: LevelOverrideStore | None = None,
    ) -> None:
        self._sink = sink
        self._level = LogLevel.coerce(level)
        self.verbose = verbose
        self._overrides = overrides if overrides is not None else LevelOverrideStore()

    def __repr__(self) -> str:
        return f"<Logger level={self._level.severity} overrides={len(self._overrides)} sink={self._sink!r}>"

    @property
    def sink(self) -> SinkPort:
        return self._sink

    @property
    def overrides(self) -> LevelOverrideStore:
        return self._overrides

    @property
    def level(self) -> LogLevel:
        """Ambient threshold applied to subjects without an override."""

        return self._level

    @level.setter
    def level(self, value: LogLevel | str) -> None:
        self._level = LogLevel.coerce(value)

    def enable(self, subject: Any, level: LogLevel | str = LogLevel.DEBUG) -> None:
        """Override the threshold for ``subject`` (its class, for instances)."""

        self._overrides.set(subject_entity(subject), LogLevel.coerce(level))

    def clear(self, subject: Any) -> None:
        """Drop the override for ``subject`` so the ambient level applies."""

        self._overrides.remove(subject_entity(subject))

    def effective_level(self, subject: Any) -> LogLevel:
        return self._overrides.effective_level(subject_entity(subject), self._level)

    def enabled(self, subject: Any, level: LogLevel) -> bool:
        """Return ``True`` when ``level`` is at least the subject's threshold."""

        return level >= self.effective_level(subject)

    def log(self, level: LogLevel | str, subject: Any, message: str, **fields: Any) -> bool:
        """Emit ``message`` about ``subject`` at ``level`` if it passes the filter.

        Returns
        -------
        bool
            ``True`` when the record was handed to the sink.
        """

        resolved = LogLevel.coerce(level)
        if not self.enabled(subject, resolved):
            return False
        record = LogRecord(
            level=resolved,
            subject=subject,
            label=subject_label(subject),
            message=str(message),
            fields=fields,
        )
        self._sink.emit(record)
        return True

    def debug(self, subject: Any, message: str, **fields: Any) -> bool:
        return self.log(LogLevel.DEBUG, subject, message, **fields)

    def info(self, subject: Any, message: str, **fields: Any) -> bool:
        return self.log(LogLevel.INFO, subject, message, **fields)

    def warn(self, subject: Any, message: str, **fields: Any) -> bool:
        return self.log(LogLevel.WARN, subject, message, **fields)

    warning = warn

    def error(self, subject: Any, message: str, **fields: Any) -> bool:
        return self.log(LogLevel.ERROR, subject, message, **fields)

    def fatal(self, subject: Any, message: str, **fields: Any) -> bool:
        return self.log(LogLevel.FATAL, subject, message, **fields)

    critical = fatal


__all__ = ["Logger"]
