"""Resolve logger settings from an environment mapping and explicit flags.

Purpose
-------
Turn ``LOG_*`` variables and interpreter flags into an immutable
:class:`LogSettings` before the default logger is composed. Every function
here is pure: the same mapping and flags always produce the same settings,
and malformed values degrade to defaults instead of raising.

Contents
--------
* :class:`InterpreterFlags` – explicit debug/verbose inputs.
* :func:`default_log_level` – precedence chain for the ambient level.
* :func:`level_groups` – ``LOG_<LEVEL>`` name lists.
* :func:`verbose_output` – whether sinks should render extra detail.
* :class:`LogSettings` – the bundle consumed by ``_composition``.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Mapping

from lib_log_context.domain.levels import LogLevel
from lib_log_context.errors import UnknownLevelError

logger = logging.getLogger(__name__)

LEVEL_ENV_VARS: tuple[str, ...] = ("LOG_LEVEL", "LOG_DEFAULT_LEVEL")
"""Scalar keys selecting the ambient level, highest priority first."""

VERBOSE_ENV_VAR = "LOG_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class InterpreterFlags:
    """Debug and verbose switches supplied by the host.

    ``verbose`` is tri-state: ``True`` (chatty), ``False`` (normal) and
    ``None`` (warnings silenced), which lowers the default level to ``WARN``.
    """

    debug: bool = False
    verbose: bool | None = False

    @classmethod
    def from_sys(cls) -> "InterpreterFlags":
        """Map ``python -X dev``, ``-v`` and ``-q`` onto the flags."""

        flags = sys.flags
        if flags.verbose:
            verbose: bool | None = True
        elif flags.quiet:
            verbose = None
        else:
            verbose = False
        return cls(debug=bool(flags.dev_mode), verbose=verbose)


def default_log_level(env: Mapping[str, str], flags: InterpreterFlags) -> LogLevel:
    """Return the ambient level for ``env`` and ``flags``.

    Precedence: explicit ``LOG_LEVEL``/``LOG_DEFAULT_LEVEL`` (an unknown name
    yields ``WARN``), then the debug flag, then a silenced verbose flag, then
    ``INFO``.

    Examples
    --------
    >>> default_log_level({"LOG_LEVEL": "error"}, InterpreterFlags(debug=True))
    <LogLevel.ERROR: 40>
    >>> default_log_level({}, InterpreterFlags(debug=True))
    <LogLevel.DEBUG: 10>
    >>> default_log_level({}, InterpreterFlags(verbose=None))
    <LogLevel.WARN: 30>
    >>> default_log_level({}, InterpreterFlags())
    <LogLevel.INFO: 20>
    """

    for key in LEVEL_ENV_VARS:
        raw = env.get(key)
        if raw is None:
            continue
        try:
            return LogLevel.from_name(raw)
        except UnknownLevelError:
            logger.warning("Ignoring %s=%r: unknown level, using WARN", key, raw)
            return LogLevel.WARN
    if flags.debug:
        return LogLevel.DEBUG
    if flags.verbose is None:
        return LogLevel.WARN
    return LogLevel.INFO


def level_groups(env: Mapping[str, str]) -> dict[LogLevel, tuple[str, ...]]:
    """Return the names listed under each ``LOG_<LEVEL>`` key.

    Values are comma separated; blanks are dropped and levels without names
    are left out.

    Examples
    --------
    >>> level_groups({"LOG_WARN": "Acorn, Banana", "LOG_DEBUG": "Cat", "LOG_ERROR": " , "})
    {<LogLevel.DEBUG: 10>: ('Cat',), <LogLevel.WARN: 30>: ('Acorn', 'Banana')}
    """

    groups: dict[LogLevel, tuple[str, ...]] = {}
    for level in LogLevel:
        raw = env.get(level.env_key)
        if raw is None:
            continue
        names = tuple(name.strip() for name in raw.split(",") if name.strip())
        if names:
            groups[level] = names
    return groups


def verbose_output(env: Mapping[str, str], flags: InterpreterFlags) -> bool:
    """Return ``True`` when sinks should include record fields.

    Output is verbose unless the interpreter runs silenced (``-q``);
    ``LOG_VERBOSE`` re-enables it there.

    Examples
    --------
    >>> verbose_output({}, InterpreterFlags()), verbose_output({}, InterpreterFlags(verbose=None))
    (True, False)
    """

    return flags.verbose is not None or env.get(VERBOSE_ENV_VAR, "").strip().lower() in _TRUTHY


@dataclass(slots=True, frozen=True)
class LogSettings:
    """Resolved configuration for one default-logger construction."""

    level: LogLevel = LogLevel.INFO
    verbose: bool = False
    level_groups: Mapping[LogLevel, tuple[str, ...]] = field(default_factory=dict)

    def level_for(self, name: str) -> LogLevel:
        """Return the level ``name`` ends up with once it is resolved.

        Groups are bound in severity order, so a name listed under several
        levels keeps the most severe one.

        Examples
        --------
        >>> settings = LogSettings(level_groups={LogLevel.DEBUG: ("Cat",)})
        >>> settings.level_for("Cat"), settings.level_for("Dog")
        (<LogLevel.DEBUG: 10>, <LogLevel.INFO: 20>)
        """

        resolved = self.level
        for level in sorted(self.level_groups):
            if name in self.level_groups[level]:
                resolved = level
        return resolved

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str] | None = None,
        flags: InterpreterFlags | None = None,
    ) -> "LogSettings":
        """Build settings from ``env`` (``os.environ`` by default) and ``flags``."""

        source = os.environ if env is None else env
        resolved_flags = flags if flags is not None else InterpreterFlags.from_sys()
        return cls(
            level=default_log_level(source, resolved_flags),
            verbose=verbose_output(source, resolved_flags),
            level_groups=level_groups(source),
        )


__all__ = [
    "InterpreterFlags",
    "LEVEL_ENV_VARS",
    "LogSettings",
    "VERBOSE_ENV_VAR",
    "default_log_level",
    "level_groups",
    "verbose_output",
]
