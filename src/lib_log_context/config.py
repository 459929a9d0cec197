"""Optional ``.env`` loading for environment-driven configuration.

Purpose
-------
``LOG_LEVEL``, ``LOG_<LEVEL>`` and ``LOG_VERBOSE`` are read from
:data:`os.environ`. Hosts and the CLI may opt into populating the environment
from the nearest ``.env`` file first; real environment variables always win.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle consulted when no CLI flag is given.
* :func:`should_use_dotenv` – decide from explicit flag and toggle value.
* :func:`enable_dotenv` – load the nearest ``.env`` once per process.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None
_DOTENV_ATTEMPTED = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` should be loaded.

    An explicit CLI choice wins; otherwise the toggle variable decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the resolved path of the loaded file, or ``None`` when no file
    was found. Subsequent calls return the first result without re-reading.
    """

    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        if _DOTENV_ATTEMPTED:
            return _DOTENV_LOADED
        _DOTENV_ATTEMPTED = True
        candidate = _find_nearest(search_from)
        if candidate is None:
            logger.debug("No .env file found")
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate.resolve()
        logger.debug("Loaded environment from %s", _DOTENV_LOADED)
        return _DOTENV_LOADED


def _find_nearest(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found) if found else None
    for directory in (search_from, *search_from.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_ATTEMPTED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None
        _DOTENV_ATTEMPTED = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
