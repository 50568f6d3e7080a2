"""Bridge from :mod:`logging` records to terminal log events.

Purpose
-------
Let applications that already log through the standard library render their
records with the terminal logger: attach :class:`TerminalLogHandler` to any
stdlib logger and records become :class:`LogEvent` instances.

Contents
--------
* :class:`TerminalLogHandler` - ``logging.Handler`` subclass.
* :func:`event_from_record` - the record-to-event translation.

System Role
-----------
Adapter at the edge of the system. Structured data travels through ``extra``:
``extra={"kv": {...}}`` supplies key/value pairs and the ``event_id``,
``progress``, ``sticky`` and ``maxlog`` extras map onto the event directives.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from lib_log_terminal.domain.events import LogEvent
from lib_log_terminal.domain.levels import LogLevel

_OWN_LOGGER_PREFIX = "lib_log_terminal"


def _is_own_record(record: logging.LogRecord) -> bool:
    name = record.name
    return name == _OWN_LOGGER_PREFIX or name.startswith(_OWN_LOGGER_PREFIX + ".")


def event_from_record(record: logging.LogRecord) -> LogEvent:
    """Translate ``record`` into a :class:`LogEvent`.

    Examples
    --------
    >>> record = logging.LogRecord("app.db", logging.WARNING, "/srv/app/db.py", 12,
    ...                            "slow query %s", ("q1",), None)
    >>> record.kv = {"ms": 850}
    >>> event = event_from_record(record)
    >>> event.level.name, event.message, event.group, event.pairs
    ('WARNING', 'slow query q1', 'db', (('ms', 850),))
    >>> event.event_id
    'app.db:/srv/app/db.py:12'
    """

    pairs: list[tuple[str, Any]] = []
    kv = getattr(record, "kv", None)
    if isinstance(kv, Mapping):
        pairs.extend((str(key), value) for key, value in kv.items())
    if record.exc_info and record.exc_info[1] is not None:
        pairs.append(("exception", (record.exc_info[1], record.exc_info[2])))
    event_id = getattr(record, "event_id", None) or f"{record.name}:{record.pathname}:{record.lineno}"
    return LogEvent(
        level=LogLevel.from_python_level(record.levelno),
        message=record.getMessage(),
        event_id=str(event_id),
        scope=record.name,
        group=Path(record.pathname).stem if record.pathname else None,
        file=record.pathname or None,
        line=record.lineno or None,
        pairs=tuple(pairs),
        maxlog=getattr(record, "maxlog", None),
        progress=getattr(record, "progress", None),
        sticky=getattr(record, "sticky", None),
    )


class TerminalLogHandler(logging.Handler):
    """Forward stdlib records to a terminal logger's ``handle`` callable.

    ``target`` is anything exposing ``handle(event)``, usually a
    :class:`~lib_log_terminal.TerminalLogger`. Records emitted by this
    package's own loggers are dropped so internal diagnostics never loop back
    into the renderer.
    """

    def __init__(self, target: Any, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._handle: Callable[[LogEvent], Mapping[str, Any]] = target.handle

    def emit(self, record: logging.LogRecord) -> None:
        if _is_own_record(record):
            return
        try:
            self._handle(event_from_record(record))
        except Exception:
            self.handleError(record)


__all__ = ["TerminalLogHandler", "event_from_record"]
