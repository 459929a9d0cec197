"""Logger overrides attached to individual objects.

Purpose
-------
Let any object, class or module carry its own logger that takes priority
over the context-local one, and offer :class:`Loggable` as the mixin that
exposes this as a ``logger`` attribute.

Contents
--------
* :func:`logger_for` / :func:`set_logger_for` – read and write an override.
* :class:`Loggable` – mixin whose subclasses are announced to the process
  resolver as they are defined.
"""

from __future__ import annotations

from typing import Any

from lib_log_context.application.logger import Logger

from ._context import announce, current

_ATTRIBUTE = "_log_context_logger"


def logger_for(owner: Any) -> Logger:
    """Return ``owner``'s own logger, or the current one when it has none.

    Only the owner's own namespace is consulted: an override set on a class
    is not seen by its instances or subclasses.
    """

    try:
        namespace = vars(owner)
    except TypeError:
        namespace = {}
    logger = namespace.get(_ATTRIBUTE)
    return logger if logger is not None else current()


def set_logger_for(owner: Any, logger: Logger | None) -> None:
    """Attach ``logger`` to ``owner``; ``None`` removes the override.

    Raises
    ------
    TypeError
        When ``owner`` has no instance namespace (``__slots__`` objects,
        builtins).
    """

    setter = type.__setattr__ if isinstance(owner, type) else object.__setattr__
    try:
        if logger is not None:
            setter(owner, _ATTRIBUTE, logger)
        elif _ATTRIBUTE in vars(owner):
            deleter = type.__delattr__ if isinstance(owner, type) else object.__delattr__
            deleter(owner, _ATTRIBUTE)
    except (AttributeError, TypeError) as exc:
        raise TypeError(f"{owner!r} cannot carry a logger override") from exc


class Loggable:
    """Mixin giving instances a ``logger`` attribute.

    Subclasses are announced to the process resolver when their class
    statement finishes, so ``LOG_<LEVEL>`` entries naming them take effect
    immediately.

    Examples
    --------
    >>> class Worker(Loggable):
    ...     pass
    >>> from lib_log_context.domain import qualified_name
    >>> from lib_log_context.runtime import resolver
    >>> resolver().known(qualified_name(Worker)) is Worker
    True
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        announce(cls)

    @property
    def logger(self) -> Logger:
        return logger_for(self)

    @logger.setter
    def logger(self, value: Logger | None) -> None:
        set_logger_for(self, value)


__all__ = ["Loggable", "logger_for", "set_logger_for"]
