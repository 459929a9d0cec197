"""Process-wide and context-local state behind the runtime facade."""

from __future__ import annotations

import contextvars
from threading import RLock
from typing import Callable

from lib_log_context.application.logger import Logger
from lib_log_context.domain.resolver import Resolver


_RESOLVER = Resolver()
_DEFAULT: Logger | None = None
_STATE_LOCK = RLock()
_CURRENT: contextvars.ContextVar[Logger | None] = contextvars.ContextVar("lib_log_context_current_logger", default=None)


def process_resolver() -> Resolver:
    """Return the resolver every announcement in this process goes to."""

    with _STATE_LOCK:
        return _RESOLVER


def default_instance(factory: Callable[[], Logger]) -> Logger:
    """Return the process default, building it with ``factory`` exactly once."""

    global _DEFAULT
    logger = _DEFAULT
    if logger is not None:
        return logger
    with _STATE_LOCK:
        if _DEFAULT is None:
            _DEFAULT = factory()
        return _DEFAULT


def peek_default() -> Logger | None:
    """Return the process default without creating it."""

    with _STATE_LOCK:
        return _DEFAULT


def replace_default(logger: Logger | None) -> None:
    """Install ``logger`` as the process default (``None`` rebuilds lazily)."""

    global _DEFAULT
    with _STATE_LOCK:
        _DEFAULT = logger


def slot() -> Logger | None:
    """Return the calling context's logger slot."""

    return _CURRENT.get()


def assign_slot(logger: Logger | None) -> contextvars.Token[Logger | None]:
    return _CURRENT.set(logger)


def restore_slot(token: contextvars.Token[Logger | None]) -> None:
    _CURRENT.reset(token)


def _reset_for_testing() -> None:
    """Forget the default logger, the resolver and the caller's slot."""

    global _DEFAULT, _RESOLVER
    with _STATE_LOCK:
        _DEFAULT = None
        _RESOLVER = Resolver()
    _CURRENT.set(None)


__all__ = [
    "assign_slot",
    "default_instance",
    "peek_default",
    "process_resolver",
    "replace_default",
    "restore_slot",
    "slot",
]
