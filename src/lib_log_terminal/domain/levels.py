"""Log level abstraction with ordering and display labels.

Purpose
-------
Offer a domain-specific representation of log severities that adds a
``PROGRESS`` level below ``DEBUG`` and the human labels printed next to the box
decoration.

Contents
--------
* :class:`LogLevel` enum with ordering, conversion helpers and labels.
* ``_LABEL_TABLE`` constant mapping levels to prefix labels.

System Role
-----------
Used by the metadata formatter to pick colours and prefixes, by the logger to
enforce its minimum level and by the stdlib bridge to translate
:mod:`logging` records.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    PROGRESS = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        """Return the display name used in message prefixes.

        >>> LogLevel.WARNING.label
        'Warning'
        """

        return _LABEL_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number matching this level."""

        return self.value

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        if normalized == "WARN":
            normalized = "WARNING"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` corresponding exactly to ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging number into the nearest lower member.

        Custom stdlib levels (``logging.addLevelName(25, ...)``) map onto the
        closest member at or below them; anything below ``PROGRESS`` maps to
        ``PROGRESS``.

        >>> LogLevel.from_python_level(25) is LogLevel.INFO
        True
        >>> LogLevel.from_python_level(logging.NOTSET) is LogLevel.PROGRESS
        True
        """
        candidates = [member for member in cls if member.value <= level]
        if not candidates:
            return cls.PROGRESS
        return max(candidates)


_LABEL_TABLE = {
    LogLevel.PROGRESS: "Progress",
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARNING: "Warning",
    LogLevel.ERROR: "Error",
    LogLevel.CRITICAL: "Critical",
}
# Prefix labels printed beside the box decoration.

logging.addLevelName(LogLevel.PROGRESS.value, "PROGRESS")


__all__ = ["LogLevel"]
