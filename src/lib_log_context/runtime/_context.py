"""Context-local current logger with a lazily built process default.

Each thread starts with an empty slot and adopts the process default on
first read. asyncio tasks copy the spawning context, so a task sees the
logger its parent had when the task was created; reassignments made later
in either the parent or the task stay local to that side.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import replace
from typing import IO, Any, Iterator, Mapping

from lib_log_context.application.logger import Logger
from lib_log_context.application.ports.sink import SinkPort
from lib_log_context.domain.levels import LogLevel
from lib_log_context.domain.resolver import Resolver

from . import _state
from ._composition import build_logger, create_sink
from ._settings import InterpreterFlags, LogSettings


def default_logger(
    sink: SinkPort | IO[str] | None = None,
    *,
    verbose: bool | None = None,
    level: LogLevel | str | None = None,
    env: Mapping[str, str] | None = None,
    flags: InterpreterFlags | None = None,
    resolver: Resolver | None = None,
) -> Logger:
    """Build a logger from the environment and bind its level groups.

    Parameters
    ----------
    sink:
        A :class:`SinkPort`, or a text stream for the Rich console sink.
        Defaults to the console sink on stderr.
    verbose, level:
        Explicit values taking precedence over the environment.
    env, flags:
        Configuration inputs; ``os.environ`` and
        :meth:`InterpreterFlags.from_sys` when omitted.
    resolver:
        Resolver receiving the ``LOG_<LEVEL>`` bindings. Without one a fresh
        resolver matches entities that are already loaded; only the process
        default built by :func:`instance` binds into the process resolver.
    """

    settings = LogSettings.from_environment(env, flags)
    if verbose is not None:
        settings = replace(settings, verbose=verbose)
    if level is not None:
        settings = replace(settings, level=LogLevel.coerce(level))
    if sink is None or not isinstance(sink, SinkPort):
        sink = create_sink(settings, sink)
    target = resolver if resolver is not None else Resolver()
    return build_logger(settings, sink=sink, resolver=target)


def instance() -> Logger:
    """Return the process-wide default logger, creating it on first use."""

    return _state.default_instance(_process_default)


def _process_default() -> Logger:
    return default_logger(resolver=_state.process_resolver())


def current() -> Logger:
    """Return the calling context's logger, adopting the default if unset."""

    logger = _state.slot()
    if logger is None:
        logger = instance()
        _state.assign_slot(logger)
    return logger


def set_current(logger: Logger | None) -> None:
    """Assign the calling context's logger; ``None`` falls back to the default."""

    _state.assign_slot(logger)


@contextmanager
def use(logger: Logger) -> Iterator[Logger]:
    """Make ``logger`` current for the duration of the ``with`` block."""

    token = _state.assign_slot(logger)
    try:
        yield logger
    finally:
        _state.restore_slot(token)


def resolver() -> Resolver:
    return _state.process_resolver()


def announce(entity: Any, name: str | None = None) -> Any:
    """Announce ``entity`` to the process resolver; usable as a decorator."""

    return _state.process_resolver().announce(entity, name)


__all__ = ["announce", "current", "default_logger", "instance", "resolver", "set_current", "use"]
