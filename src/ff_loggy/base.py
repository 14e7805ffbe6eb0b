"""
Logger front end issuing records to a backend.
"""

import sys
from datetime import datetime
from typing import Any

from .backend import Backend
from .levels import Level, parse_level
from .record import Record, Source


class Logger:
    """
    Entry point for application log calls.

    Checks whether the backend wants a level before building a record, then
    hands the record to the backend. Errors raised by the backend propagate
    to the caller.
    """

    def __init__(self, handler: Backend, name: str | None = None):
        """
        Initialize a logger.

        Args:
            handler: Backend receiving records (a single handler or a CombinedHandler)
            name: Optional logger name, bound as the ``logger`` attribute
        """
        self.name = name
        if name:
            handler = handler.with_attributes({"logger": name})
        self._handler = handler

    @property
    def handler(self) -> Backend:
        """The backend this logger emits to."""
        return self._handler

    def bind(self, **kwargs: Any) -> "Logger":
        """
        Bind attributes to every record logged through the returned logger.

        Args:
            **kwargs: Key-value pairs to bind

        Returns:
            New Logger, or this logger if nothing was given
        """
        if not kwargs:
            return self
        return self._derive(self._handler.with_attributes(kwargs))

    def group(self, name: str) -> "Logger":
        """
        Nest attributes of subsequent records under ``name``.

        Args:
            name: Group name

        Returns:
            New Logger, or this logger if ``name`` is empty
        """
        if not name:
            return self
        return self._derive(self._handler.with_group(name))

    def _derive(self, handler: Backend) -> "Logger":
        logger = self.__class__.__new__(self.__class__)
        logger.name = self.name
        logger._handler = handler
        return logger

    def enabled(self, level: int | str) -> bool:
        """Report whether a record at ``level`` would reach any sink."""
        return self._handler.is_enabled(parse_level(level))

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(Level.DEBUG, event, kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(Level.INFO, event, kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(Level.WARN, event, kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(Level.ERROR, event, kwargs)

    def log(self, level: int | str, event: str, **kwargs: Any) -> None:
        """
        Log at a specific level.

        Args:
            level: Level value or name (debug, info, warn, warning, error)
            event: Event/message to log
            **kwargs: Additional attributes
        """
        self._log(parse_level(level), event, kwargs)

    def _log(self, level: int, event: str, attributes: dict[str, Any]) -> None:
        if not self._handler.is_enabled(level):
            return

        record = Record(
            time=datetime.now().astimezone(),
            level=level,
            message=event,
            attributes=attributes,
            source=_caller(depth=3),
        )
        self._handler.emit(record)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, handler={self._handler!r})"


def _caller(depth: int) -> Source | None:
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return None
    return Source(function=frame.f_code.co_name, file=frame.f_code.co_filename, line=frame.f_lineno)
