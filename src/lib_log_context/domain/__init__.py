"""Domain entities and value objects used by the context-aware logger."""

from __future__ import annotations

from .levels import LogLevel
from .overrides import LevelOverrideStore
from .records import LogRecord, subject_entity, subject_label
from .resolver import Binding, Resolver, locate_loaded, qualified_name

__all__ = [
    "Binding",
    "LevelOverrideStore",
    "LogLevel",
    "LogRecord",
    "Resolver",
    "locate_loaded",
    "qualified_name",
    "subject_entity",
    "subject_label",
]
