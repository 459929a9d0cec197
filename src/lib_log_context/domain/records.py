"""Record handed from the logger to its sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from .levels import LogLevel
from .resolver import qualified_name


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Already-leveled, already-labeled log record.

    Attributes
    ----------
    level:
        Severity the caller logged at.
    subject:
        Object the message is about (instance, class, module or ``None``).
    label:
        Human-readable name derived from ``subject`` via :func:`subject_label`.
    message:
        Caller-supplied message text.
    fields:
        Shallow copy of caller-supplied key/value pairs.
    """

    level: LogLevel
    subject: Any
    label: str
    message: str
    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))


def subject_entity(subject: Any) -> Any:
    """Return the entity whose level override governs ``subject``.

    Classes, modules and plain string labels govern themselves; any other
    object is governed by its class.

    Examples
    --------
    >>> subject_entity(3) is int
    True
    >>> subject_entity(int) is int
    True
    >>> subject_entity("worker")
    'worker'
    """

    if subject is None or isinstance(subject, (str, type, ModuleType)):
        return subject
    return type(subject)


def subject_label(subject: Any) -> str:
    """Return the label printed for ``subject``.

    Examples
    --------
    >>> subject_label("worker")
    'worker'
    >>> subject_label(None)
    ''
    """

    if subject is None:
        return ""
    if isinstance(subject, str):
        return subject
    return qualified_name(subject_entity(subject))


__all__ = ["LogRecord", "subject_entity", "subject_label"]
