"""Runtime composition helpers wiring settings, sink, logger and resolver.

Purpose
-------
Translate :class:`LogSettings` into a live :class:`Logger` and attach the
``LOG_<LEVEL>`` groups to a :class:`Resolver`, so that each named class gets
its override the moment it is announced.

Contents
--------
* :func:`create_sink` – default Rich console sink.
* :func:`bind_level_groups` – one resolver binding per level group.
* :func:`build_logger` – composition root used by ``default_logger``.
"""

from __future__ import annotations

import logging
from typing import IO, Any, Callable, Mapping

from lib_log_context.adapters.console.rich_console import RichConsoleSink
from lib_log_context.application.logger import Logger
from lib_log_context.application.ports.sink import SinkPort
from lib_log_context.domain.levels import LogLevel
from lib_log_context.domain.resolver import Binding, Resolver

from ._settings import LogSettings

logger = logging.getLogger(__name__)


def create_sink(settings: LogSettings, output: IO[str] | None = None) -> SinkPort:
    """Return the Rich console sink writing to ``output`` (stderr by default)."""

    return RichConsoleSink(output, verbose=settings.verbose)


def bind_level_groups(
    target: Logger,
    groups: Mapping[LogLevel, tuple[str, ...]],
    resolver: Resolver,
) -> list[Binding]:
    """Bind every group so each resolved entity gets its level in ``target.overrides``.

    The entity itself is the override key, whatever kind of object it is.
    """

    bindings: list[Binding] = []
    for level, names in groups.items():
        bindings.append(resolver.bind(names, _enabler(target, level)))
        logger.debug("Level %s bound to %s", level.name, ", ".join(names))
    return bindings


def _enabler(target: Logger, level: LogLevel) -> Callable[[Any], None]:
    def enable(entity: Any) -> None:
        target.overrides.set(entity, level)

    return enable


def build_logger(
    settings: LogSettings,
    *,
    sink: SinkPort | None = None,
    resolver: Resolver | None = None,
) -> Logger:
    """Assemble a logger from resolved settings.

    When ``resolver`` is given, the settings' level groups are bound to it
    before the logger is returned.
    """

    resolved_sink = sink if sink is not None else create_sink(settings)
    result = Logger(resolved_sink, level=settings.level, verbose=settings.verbose)
    if resolver is not None and settings.level_groups:
        bind_level_groups(result, settings.level_groups, resolver)
    return result


__all__ = ["bind_level_groups", "build_logger", "create_sink"]
