"""Per-entity level overrides consulted on every log call."""

from __future__ import annotations

from threading import Lock
from typing import Any, Iterator

from .levels import LogLevel


class LevelOverrideStore:
    """Mapping of entity to :class:`LogLevel`; last write wins.

    Reads are a single dict lookup so :meth:`effective_level` stays O(1) on
    the logging hot path. Writes are serialised by a lock.
    """

    def __init__(self) -> None:
        self._levels: dict[Any, LogLevel] = {}
        self._lock = Lock()

    def set(self, entity: Any, level: LogLevel) -> None:
        with self._lock:
            self._levels[entity] = level

    def get(self, entity: Any) -> LogLevel | None:
        return self._levels.get(entity)

    def remove(self, entity: Any) -> None:
        with self._lock:
            self._levels.pop(entity, None)

    def clear(self) -> None:
        with self._lock:
            self._levels.clear()

    def effective_level(self, entity: Any, ambient: LogLevel) -> LogLevel:
        """Return the override for ``entity`` or ``ambient`` when unset.

        Examples
        --------
        >>> store = LevelOverrideStore()
        >>> store.effective_level(int, LogLevel.INFO)
        <LogLevel.INFO: 20>
        >>> store.set(int, LogLevel.ERROR)
        >>> store.effective_level(int, LogLevel.INFO)
        <LogLevel.ERROR: 40>
        """

        return self._levels.get(entity, ambient)

    def items(self) -> list[tuple[Any, LogLevel]]:
        with self._lock:
            return list(self._levels.items())

    def __contains__(self, entity: object) -> bool:
        return entity in self._levels

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            return iter(list(self._levels))


__all__ = ["LevelOverrideStore"]
