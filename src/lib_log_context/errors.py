"""Exception hierarchy shared by every layer of the package."""

from __future__ import annotations

from typing import Any, Sequence


class LogContextError(Exception):
    """Base class for errors raised by :mod:`lib_log_context`."""


class UnknownLevelError(LogContextError, ValueError):
    """Raised when a level name does not match any :class:`LogLevel`."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown log level: {name!r}")
        self.name = name


class BindingCallbackError(LogContextError):
    """Aggregate of binding callbacks that raised while resolving an entity.

    Attributes
    ----------
    failures:
        Tuple of ``(binding, entity, exception)`` triples in the order the
        callbacks were attempted. Every matching callback has run by the time
        this error is raised.
    """

    def __init__(self, failures: Sequence[tuple[Any, Any, BaseException]]) -> None:
        self.failures = tuple(failures)
        names = ", ".join(sorted({_describe(entity) for _, entity, _ in self.failures}))
        super().__init__(f"{len(self.failures)} binding callback(s) failed for: {names}")

    @property
    def exceptions(self) -> tuple[BaseException, ...]:
        """Return only the raised exceptions."""

        return tuple(exc for _, _, exc in self.failures)


def _describe(entity: Any) -> str:
    from .domain.resolver import qualified_name

    try:
        return qualified_name(entity)
    except TypeError:
        return repr(entity)


__all__ = ["BindingCallbackError", "LogContextError", "UnknownLevelError"]
