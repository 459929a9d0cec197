"""Deferred binding of configuration to classes and modules by name.

Purpose
-------
Let configuration refer to entities (classes, modules, functions) by their
dotted name before those entities exist. A :class:`Binding` stays pending
until the host announces a matching entity, then its callback runs exactly
once for that entity.

Contents
--------
* :func:`qualified_name` – canonical dotted identity of an entity.
* :func:`locate_loaded` – side-effect free lookup of already-imported entities.
* :class:`Binding` – names plus callback, tracking which entities it fired for.
* :class:`Resolver` – thread-safe registry of bindings and known entities.

System Role
-----------
The runtime binds one callback per ``LOG_<LEVEL>`` group of the environment
and announces classes as they are defined (see
:class:`lib_log_context.runtime.Loggable`), so level overrides apply to classes
that are imported long after the logger was configured.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from threading import RLock
from types import ModuleType
from typing import Any, Callable, Iterable

from lib_log_context.errors import BindingCallbackError

logger = logging.getLogger(__name__)

_TOP_LEVEL_MODULES = ("__main__", "builtins")
_MISSING = object()

Locator = Callable[[str], Any]


def qualified_name(entity: Any) -> str:
    """Return the dotted name an entity is matched under.

    Modules use ``__name__``; classes and functions use
    ``module.qualname``, with the module dropped for ``builtins`` and
    ``__main__``. Strings are treated as names already.

    Examples
    --------
    >>> import json
    >>> qualified_name(json)
    'json'
    >>> qualified_name(int)
    'int'
    >>> qualified_name(json.JSONDecoder)
    'json.decoder.JSONDecoder'
    """

    if isinstance(entity, str):
        return entity
    if isinstance(entity, ModuleType):
        return entity.__name__
    qualname = getattr(entity, "__qualname__", None)
    module = getattr(entity, "__module__", None)
    if not isinstance(qualname, str):
        raise TypeError(f"{entity!r} has no qualified name")
    if not module or module in _TOP_LEVEL_MODULES:
        return qualname
    return f"{module}.{qualname}"


def locate_loaded(name: str) -> Any:
    """Return the already-loaded entity called ``name`` or ``None``.

    Only modules present in :data:`sys.modules` are searched; nothing is
    imported. The candidate must report ``name`` as its own
    :func:`qualified_name`, so re-exports under a different path do not match.
    """

    candidate = _walk_modules(name)
    if candidate is _MISSING:
        return None
    try:
        if qualified_name(candidate) != name:
            return None
    except TypeError:
        return None
    return candidate


def _walk_modules(name: str) -> Any:
    parts = name.split(".")
    for index in range(len(parts), 0, -1):
        module = sys.modules.get(".".join(parts[:index]))
        if module is not None:
            return _walk_attributes(module, parts[index:])
    for module_name in _TOP_LEVEL_MODULES:
        module = sys.modules.get(module_name)
        if module is None:
            continue
        found = _walk_attributes(module, parts)
        if found is not _MISSING:
            return found
    return _MISSING


def _walk_attributes(target: Any, attributes: list[str]) -> Any:
    for attribute in attributes:
        try:
            target = getattr(target, attribute)
        except AttributeError:
            return _MISSING
    return target


@dataclass(eq=False)
class Binding:
    """Set of names plus the callback to run for each matching entity.

    Bindings compare by identity. ``fired`` holds every entity the callback
    has been invoked for; a binding never runs twice for the same object.
    """

    names: frozenset[str]
    callback: Callable[[Any], Any]
    _fired: dict[int, Any] = field(default_factory=dict, repr=False)

    @property
    def fired(self) -> tuple[Any, ...]:
        return tuple(self._fired.values())

    def has_fired(self, entity: Any) -> bool:
        return id(entity) in self._fired

    def _claim(self, entity: Any) -> bool:
        """Mark ``entity`` as handled; return ``False`` if it already was."""

        key = id(entity)
        if key in self._fired:
            return False
        # The entity is kept alive so its id cannot be reused by another object.
        self._fired[key] = entity
        return True


class Resolver:
    """Registry matching announced entities against pending bindings.

    All mutation happens under one re-entrant lock; callbacks run after the
    lock is released, on the thread that called :meth:`bind` or
    :meth:`announce`, in registration order.
    """

    def __init__(self, *, locate: Locator | None = locate_loaded) -> None:
        self._lock = RLock()
        self._bindings: list[Binding] = []
        self._by_name: dict[str, list[Binding]] = {}
        self._known: dict[str, Any] = {}
        self._locate = locate

    def bind(self, names: Iterable[str] | str, callback: Callable[[Any], Any]) -> Binding:
        """Register ``callback`` for every entity named in ``names``.

        Entities that already exist (previously announced, or importable
        from :data:`sys.modules` via the locator) are resolved before this
        method returns.

        Raises
        ------
        BindingCallbackError
            When the callback raised for one or more existing entities.
        """

        if isinstance(names, str):
            names = (names,)
        binding = Binding(frozenset(name.strip() for name in names if name.strip()), callback)
        if not binding.names:
            return binding

        with self._lock:
            self._bindings.append(binding)
            for name in binding.names:
                self._by_name.setdefault(name, []).append(binding)
            known = {name: self._known.get(name, _MISSING) for name in binding.names}
        logger.debug("Registered binding for %s", ", ".join(sorted(binding.names)))

        existing: list[Any] = []
        for name in sorted(binding.names):
            entity = known[name]
            if entity is _MISSING and self._locate is not None:
                located = self._locate(name)
                entity = _MISSING if located is None else located
            if entity is not _MISSING:
                existing.append(entity)

        with self._lock:
            claimed = [(binding, entity) for entity in existing if binding._claim(entity)]
        self._fire(claimed)
        return binding

    def announce(self, entity: Any, name: str | None = None) -> Any:
        """Report that ``entity`` is now available and resolve its bindings.

        ``name`` overrides :func:`qualified_name`. The entity is returned so
        the method doubles as a class decorator.

        Raises
        ------
        BindingCallbackError
            After every matching callback was attempted, if any of them raised.
        """

        key = name if name is not None else qualified_name(entity)
        with self._lock:
            self._known[key] = entity
            claimed = [(binding, entity) for binding in self._by_name.get(key, ()) if binding._claim(entity)]
        self._fire(claimed)
        return entity

    def unbind(self, binding: Binding) -> None:
        """Drop ``binding`` so later announcements no longer reach it."""

        with self._lock:
            if binding not in self._bindings:
                return
            self._bindings.remove(binding)
            for name in binding.names:
                entries = self._by_name.get(name, [])
                if binding in entries:
                    entries.remove(binding)
                if not entries:
                    self._by_name.pop(name, None)

    def known(self, name: str) -> Any:
        """Return the entity announced under ``name`` or ``None``."""

        with self._lock:
            return self._known.get(name)

    def pending(self) -> frozenset[str]:
        """Return names of bindings that have not resolved any entity yet."""

        with self._lock:
            return frozenset(name for binding in self._bindings if not binding._fired for name in binding.names)

    @property
    def bindings(self) -> tuple[Binding, ...]:
        with self._lock:
            return tuple(self._bindings)

    def _fire(self, claimed: list[tuple[Binding, Any]]) -> None:
        failures: list[tuple[Binding, Any, BaseException]] = []
        for binding, entity in claimed:
            try:
                binding.callback(entity)
            except Exception as exc:
                logger.debug("Binding callback failed for %r", entity, exc_info=True)
                failures.append((binding, entity, exc))
        if failures:
            raise BindingCallbackError(failures) from failures[0][2]


__all__ = ["Binding", "Locator", "Resolver", "locate_loaded", "qualified_name"]
