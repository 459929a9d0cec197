"""Runtime façade exposing the current logger and its collaborators.

Purpose
-------
Expose a stable entry point that host applications use instead of importing
the inner layers directly: obtain the current logger, swap it for a scope,
attach loggers to objects and announce classes to the resolver.

Contents
--------
* ``current`` / ``set_current`` / ``use`` – context-local logger slot.
* ``instance`` / ``default_logger`` – process default and its construction.
* ``logger_for`` / ``set_logger_for`` / ``Loggable`` – per-owner overrides.
* ``announce`` / ``resolver`` – host hook for deferred level bindings.
* ``inspect_runtime`` – read-only snapshot for diagnostics and the CLI.
* ``summary_info`` – metadata banner shared with the CLI.

System Role
-----------
Forms the outer shell: high-level policy lives in ``application`` and
``domain``; this package owns the process-wide state and wiring.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from lib_log_context.domain import LogLevel

from . import _state
from ._context import announce, current, default_logger, instance, resolver, set_current, use
from ._owner import Loggable, logger_for, set_logger_for
from ._settings import InterpreterFlags, LogSettings


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the process default logger and resolver."""

    initialised: bool
    level: LogLevel | None
    verbose: bool | None
    overrides: Mapping[str, LogLevel]
    pending: frozenset[str]


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot without building the default logger."""

    from lib_log_context.domain import qualified_name

    default = _state.peek_default()
    overrides: dict[str, LogLevel] = {}
    if default is not None:
        for entity, level in default.overrides.items():
            overrides[qualified_name(entity)] = level
    return RuntimeSnapshot(
        initialised=default is not None,
        level=default.level if default is not None else None,
        verbose=default.verbose if default is not None else None,
        overrides=overrides,
        pending=resolver().pending(),
    )


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Outputs
    -------
    str
        Multi-line banner ending with a newline.
    """

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "InterpreterFlags",
    "LogSettings",
    "Loggable",
    "RuntimeSnapshot",
    "announce",
    "current",
    "default_logger",
    "inspect_runtime",
    "instance",
    "logger_for",
    "resolver",
    "set_current",
    "set_logger_for",
    "summary_info",
    "use",
]
