"""Recent log records for the Troubleshooting > Show Debug Console view.

``LoggingService`` is itself a ``logging.Handler``: attach it to a logger
(root by default) and it keeps the newest records, already formatted with
``settings.LOG_FORMAT``, in a bounded deque. ``text()`` is what the debug
console displays; ``entries()`` lets tests and tools filter by level or
logger name. No Qt dependency here.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional

from config import settings

__all__ = [
    "LogEntry",
    "LoggingService",
]


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    line: str
    created: float


class LoggingService(logging.Handler):
    def __init__(self, capacity: int = 500, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._logger: Optional[logging.Logger] = None
        self._previous_level = logging.NOTSET

    @property
    def attached(self) -> bool:
        return self._logger is not None

    def attach(self, logger: Optional[logging.Logger] = None) -> None:
        """Start capturing records from *logger* (default: root)."""
        if self._logger is not None:
            return
        target = logger if logger is not None else logging.getLogger()
        target.addHandler(self)
        self._previous_level = target.level
        # Records below the logger level never reach handlers
        if target.level == logging.NOTSET or target.level > self.level:
            target.setLevel(self.level)
        self._logger = target

    def detach(self) -> None:
        if self._logger is None:
            return
        self._logger.removeHandler(self)
        self._logger.setLevel(self._previous_level)
        self._logger = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:  # noqa: BLE001 - logging.Handler convention
            self.handleError(record)
            return
        self._entries.append(
            LogEntry(
                level=record.levelname,
                name=record.name,
                message=record.getMessage(),
                line=line,
                created=record.created,
            )
        )

    def entries(
        self,
        *,
        level: str | None = None,
        name_contains: str | None = None,
        limit: int | None = None,
    ) -> List[LogEntry]:
        with self.lock:  # type: ignore[union-attr]
            data = list(self._entries)
        out = [
            e
            for e in data
            if (not level or e.level == level)
            and (not name_contains or name_contains in e.name)
        ]
        return out[-limit:] if limit is not None else out

    def text(self, limit: int | None = None) -> str:
        """Formatted lines, oldest first, as shown in the debug console."""
        return "\n".join(e.line for e in self.entries(limit=limit))

    def clear(self) -> None:
        with self.lock:  # type: ignore[union-attr]
            self._entries.clear()
