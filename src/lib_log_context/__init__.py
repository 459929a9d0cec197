"""Public package surface for context-local loggers.

``import lib_log_context`` exposes the runtime façade: ``current`` returns the
logger of the calling thread or task, ``logger_for`` honours per-object
overrides, and ``announce``/``Loggable`` let ``LOG_<LEVEL>`` environment
entries reach classes that are defined after the logger was configured.
"""

from __future__ import annotations

from .application import Logger, SinkPort
from .domain import LogLevel, LogRecord, Resolver, qualified_name
from .errors import BindingCallbackError, LogContextError, UnknownLevelError
from .runtime import (
    InterpreterFlags,
    LogSettings,
    Loggable,
    announce,
    current,
    default_logger,
    inspect_runtime,
    instance,
    logger_for,
    resolver,
    set_current,
    set_logger_for,
    summary_info,
    use,
)

__all__ = [
    "BindingCallbackError",
    "InterpreterFlags",
    "LogContextError",
    "LogLevel",
    "LogRecord",
    "LogSettings",
    "Loggable",
    "Logger",
    "Resolver",
    "SinkPort",
    "UnknownLevelError",
    "announce",
    "current",
    "default_logger",
    "inspect_runtime",
    "instance",
    "logger_for",
    "qualified_name",
    "resolver",
    "set_current",
    "set_logger_for",
    "summary_info",
    "use",
]
