"""Configuration helpers: environment overrides and ``.env`` loading.

Purpose
-------
Resolve the terminal logger settings from keyword arguments and environment
variables, and optionally load a ``.env`` file through :mod:`dotenv` so the
same variables can live next to a project.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle read by the CLI to decide on ``.env`` loading.
* :func:`env_bool` / :func:`env_int` - typed environment lookups.
* :class:`TerminalSettings` / :func:`resolve_settings` - resolved options.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - ``.env`` support.

System Role
-----------
Edge-of-system configuration consumed by :func:`lib_log_terminal.init` and the
CLI. Environment variables take precedence over keyword arguments; ``.env``
values never override variables that are already set.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .domain.levels import LogLevel

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_LOG_TERMINAL_USE_DOTENV"

ENV_MIN_LEVEL = "LOG_TERMINAL_MIN_LEVEL"
ENV_RIGHT_JUSTIFY = "LOG_TERMINAL_RIGHT_JUSTIFY"
ENV_SHOW_LIMITED = "LOG_TERMINAL_SHOW_LIMITED"
ENV_FORCE_COLOR = "LOG_TERMINAL_FORCE_COLOR"
ENV_NO_COLOR = "LOG_TERMINAL_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED: Path | None = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop("LOG_TERMINAL_EXAMPLE_BOOL", None)
    >>> env_bool("LOG_TERMINAL_EXAMPLE_BOOL", default=True)
    True
    >>> os.environ["LOG_TERMINAL_EXAMPLE_BOOL"] = "off"
    >>> env_bool("LOG_TERMINAL_EXAMPLE_BOOL", default=True)
    False
    >>> del os.environ["LOG_TERMINAL_EXAMPLE_BOOL"]
    """

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def env_int(name: str, default: int) -> int:
    """Return an integer environment variable, raising on malformed input."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True, slots=True)
class TerminalSettings:
    """Options for one :class:`~lib_log_terminal.TerminalLogger`."""

    min_level: LogLevel = LogLevel.PROGRESS
    right_justify: int = 0
    show_limited: bool = True
    force_color: bool = False
    no_color: bool = False

    def __post_init__(self) -> None:
        if self.right_justify < 0:
            raise ValueError(f"right_justify must be >= 0, got {self.right_justify}")


def resolve_settings(
    *,
    min_level: str | int | LogLevel = LogLevel.PROGRESS,
    right_justify: int = 0,
    show_limited: bool = True,
    force_color: bool = False,
    no_color: bool = False,
) -> TerminalSettings:
    """Merge keyword arguments with ``LOG_TERMINAL_*`` environment overrides.

    Examples
    --------
    >>> os.environ["LOG_TERMINAL_RIGHT_JUSTIFY"] = "72"
    >>> resolve_settings(right_justify=10).right_justify
    72
    >>> del os.environ["LOG_TERMINAL_RIGHT_JUSTIFY"]
    """

    level_name = os.getenv(ENV_MIN_LEVEL)
    if level_name and level_name.strip():
        level = LogLevel.from_name(level_name)
    elif isinstance(min_level, LogLevel):
        level = min_level
    elif isinstance(min_level, int):
        level = LogLevel.from_numeric(min_level)
    else:
        level = LogLevel.from_name(min_level)
    return TerminalSettings(
        min_level=level,
        right_justify=env_int(ENV_RIGHT_JUSTIFY, right_justify),
        show_limited=env_bool(ENV_SHOW_LIMITED, show_limited),
        force_color=env_bool(ENV_FORCE_COLOR, force_color),
        no_color=env_bool(ENV_NO_COLOR, no_color),
    )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise :data:`DOTENV_ENV_VAR` is consulted.

    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv(env_value="0")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        env_value = os.getenv(DOTENV_ENV_VAR)
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _FALSY:
        return False
    return normalized in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search walks upwards from ``search_from`` (the current working directory
    by default). Returns the resolved path of the loaded file, or ``None`` when
    none was found. Repeated calls reuse the first successful load.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    if search_from is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(search_from)
    if not found:
        logger.debug("no .env file found")
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    logger.debug("loaded environment from %s", path)
    _DOTENV_LOADED = path
    return path


def _find_upwards(start: Path) -> str:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_FORCE_COLOR",
    "ENV_MIN_LEVEL",
    "ENV_NO_COLOR",
    "ENV_RIGHT_JUSTIFY",
    "ENV_SHOW_LIMITED",
    "TerminalSettings",
    "enable_dotenv",
    "env_bool",
    "env_int",
    "resolve_settings",
    "should_use_dotenv",
]
