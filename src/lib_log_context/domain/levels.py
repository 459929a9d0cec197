"""Severity levels recognised by the context-aware logger.

Purpose
-------
Provide the fixed, totally ordered level table consulted by the logger's
threshold checks and by the environment parser (``LOG_<LEVEL>`` keys).

Contents
--------
* :class:`LogLevel` enum with name/number conversions and ordering.
* ``_ALIASES`` mapping stdlib spellings onto the canonical names.
* ``_ICON_TABLE`` constant mapping levels to console glyphs.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering

from lib_log_context.errors import UnknownLevelError


@total_ordering
class LogLevel(Enum):
    """Enumerated logging levels ordered by severity."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name used in labels and CLI output."""

        return self.name.lower()

    @property
    def icon(self) -> str:
        """Return the unicode icon visualizing the level on colored consoles."""

        return _ICON_TABLE[self]

    @property
    def env_key(self) -> str:
        """Return the ``LOG_<LEVEL>`` variable listing names for this level."""

        return f"LOG_{self.name}"

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise UnknownLevelError(name) from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def coerce(cls, level: "str | int | LogLevel") -> "LogLevel":
        """Accept a level, its name, or its numeric value."""

        if isinstance(level, LogLevel):
            return level
        if isinstance(level, int):
            return cls.from_numeric(level)
        return cls.from_name(level)


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}

_PYTHON_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

_ICON_TABLE = {
    LogLevel.DEBUG: "🐞",
    LogLevel.INFO: "ℹ",
    LogLevel.WARN: "⚠",
    LogLevel.ERROR: "✖",
    LogLevel.FATAL: "☠",
}
# Console glyphs displayed by the Rich sink per log level.


__all__ = ["LogLevel"]
