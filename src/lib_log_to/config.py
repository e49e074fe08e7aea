"""Environment and ``.env`` configuration for formatter settings.

Purpose
-------
Let deployments pick display options and the minimum level without code
changes. Values come from the process environment, optionally seeded from the
nearest ``.env`` file via :mod:`python-dotenv`.

Contents
--------
* :func:`enable_dotenv` - load the nearest ``.env`` once per process.
* :func:`options_from_env` / :func:`level_from_env` - typed accessors.
* ``DOTENV_ENV_VAR``, ``OPTIONS_ENV_VAR``, ``LEVEL_ENV_VAR`` - variable names.

System Role
-----------
Consumed by the CLI and by callers assembling a formatter through
:func:`lib_log_to.log_to`. The formatting core never reads the environment.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from threading import RLock

from dotenv import find_dotenv, load_dotenv

from lib_log_to.domain import FormatOptions, LogLevel

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_TO_USE_DOTENV"
OPTIONS_ENV_VAR = "LOG_TO_OPTIONS"
LEVEL_ENV_VAR = "LOG_TO_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOCK = RLock()
_DOTENV_LOADED = False
_DOTENV_PATH: Path | None = None


def env_bool(name: str, default: bool = False) -> bool:
    """Return the boolean value of environment variable ``name``.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_TO_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_TO_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_TO_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_TO_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_TO_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _find_dotenv(start: Path | None) -> Path | None:
    if start is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    # find_dotenv only searches from the cwd or the calling file.
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate.resolve()
    return None


def enable_dotenv(search_from: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. The search runs once per
    process; later calls return the previously loaded path.
    """
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        if _DOTENV_LOADED:
            return _DOTENV_PATH
        start = Path(search_from).resolve() if search_from is not None else None
        path = _find_dotenv(start)
        if path is not None:
            load_dotenv(path, override=False)
            logger.debug("Loaded environment defaults from %s", path)
        else:
            logger.debug("No .env file found above %s", start if start is not None else Path.cwd())
        _DOTENV_LOADED = True
        _DOTENV_PATH = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED, _DOTENV_PATH
    with _DOTENV_LOCK:
        _DOTENV_LOADED = False
        _DOTENV_PATH = None


def options_from_env(default: FormatOptions = FormatOptions.DEFAULT) -> FormatOptions:
    """Return :class:`FormatOptions` parsed from ``LOG_TO_OPTIONS``.

    Raises
    ------
    ValueError
        When the variable names an unknown option.
    """
    raw = os.getenv(OPTIONS_ENV_VAR)
    if raw is None or not raw.strip():
        return default
    return FormatOptions.parse(raw)


def level_from_env(default: LogLevel = LogLevel.DEBUG) -> LogLevel:
    """Return the minimum :class:`LogLevel` named by ``LOG_TO_LEVEL``."""
    raw = os.getenv(LEVEL_ENV_VAR)
    if raw is None or not raw.strip():
        return default
    return LogLevel.from_name(raw)


__all__ = [
    "DOTENV_ENV_VAR",
    "LEVEL_ENV_VAR",
    "OPTIONS_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "level_from_env",
    "options_from_env",
]
