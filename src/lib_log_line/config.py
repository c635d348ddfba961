"""Settings resolution: arguments, ``LOG_*`` environment overrides, ``.env``.

Purpose
-------
Turn keyword arguments into a frozen :class:`LoggerSettings`, letting the
environment override what the host passed, and optionally load a ``.env``
file first.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle read by :func:`should_use_dotenv`.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - opt-in ``.env`` support.
* :class:`LoggerSettings` and :func:`load_settings`.

System Role
-----------
Used by :func:`lib_log_line.runtime.init` and the CLI. Invalid environment
values are ignored and the argument value is kept.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_line.application.use_cases.transport_line import DEFAULT_TAB_SIZE
from lib_log_line.domain.levels import LogLevel, to_rank
from lib_log_line.domain.options import TimePrefix, is_valid_time_prefix

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", "none", ""}

_DOTENV_LOADED: Path | None = None


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    The search walks upward from the working directory. Returns the resolved
    path of the loaded file, or ``None``.
    """

    global _DOTENV_LOADED
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    return path


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise ``LOG_USE_DOTENV`` decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv(env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        env_value = os.getenv(DOTENV_ENV_VAR)
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def dotenv_loaded() -> Path | None:
    """Return the ``.env`` path loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


@dataclass(slots=True, frozen=True)
class LoggerSettings:
    """Resolved construction options for a :class:`~lib_log_line.LogManager`."""

    level: LogLevel = LogLevel.INFO
    level_prefix: bool = False
    time_prefix: TimePrefix = False
    tab_size: int = DEFAULT_TAB_SIZE
    colorize: bool = False
    keep_lines: bool = False
    log_file: Path | None = None
    styles: Mapping[str, Any] | None = None


def load_settings(
    *,
    level: Any = LogLevel.INFO,
    level_prefix: bool = False,
    time_prefix: TimePrefix = False,
    tab_size: int = DEFAULT_TAB_SIZE,
    colorize: bool = False,
    keep_lines: bool = False,
    log_file: str | Path | None = None,
    styles: Mapping[str, Any] | None = None,
) -> LoggerSettings:
    """Merge arguments with ``LOG_*`` environment overrides.

    Examples
    --------
    >>> import os
    >>> os.environ["LOG_LEVEL"] = "debug"
    >>> load_settings(level="warn").level
    <LogLevel.DEBUG: 3>
    >>> os.environ["LOG_LEVEL"] = "bogus"
    >>> load_settings(level="warn").level
    <LogLevel.WARN: 8>
    >>> del os.environ["LOG_LEVEL"]
    """

    resolved_level = to_rank(level)
    if resolved_level is None:
        resolved_level = LogLevel.INFO
    env_level = to_rank(os.getenv("LOG_LEVEL", ""))
    if env_level is not None:
        resolved_level = env_level

    time_prefix = _env_time_prefix("LOG_TIME_PREFIX", time_prefix)
    if not is_valid_time_prefix(time_prefix):
        time_prefix = False

    tab_size = _env_int("LOG_TAB_SIZE", tab_size)
    if tab_size < 1:
        tab_size = DEFAULT_TAB_SIZE

    colorize = _env_bool("LOG_COLORIZE", colorize)
    if _env_bool("LOG_NO_COLOR", False):
        colorize = False

    log_file = os.getenv("LOG_FILE") or log_file
    return LoggerSettings(
        level=resolved_level,
        level_prefix=_env_bool("LOG_LEVEL_PREFIX", level_prefix),
        time_prefix=time_prefix,
        tab_size=tab_size,
        colorize=colorize,
        keep_lines=_env_bool("LOG_KEEP_LINES", keep_lines),
        log_file=Path(log_file) if log_file else None,
        styles=dict(styles) if styles else None,
    )


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Unrecognised values keep ``default``.

    Examples
    --------
    >>> import os
    >>> os.environ["LOG_DEMO_FLAG"] = "on"
    >>> _env_bool("LOG_DEMO_FLAG", False)
    True
    >>> os.environ["LOG_DEMO_FLAG"] = "maybe"
    >>> _env_bool("LOG_DEMO_FLAG", True)
    True
    >>> del os.environ["LOG_DEMO_FLAG"]
    """

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _env_time_prefix(name: str, default: TimePrefix) -> TimePrefix:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _FALSY:
        return False
    if is_valid_time_prefix(normalized):
        return normalized  # type: ignore[return-value]
    return default


__all__ = [
    "DOTENV_ENV_VAR",
    "LoggerSettings",
    "dotenv_loaded",
    "enable_dotenv",
    "load_settings",
    "should_use_dotenv",
]
