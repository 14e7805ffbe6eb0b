"""
Null and capturing handlers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .levels import Level
from .record import Record
from .utils import merge_attributes


class NullHandler:
    """
    A handler that discards everything.

    Never enabled, so loggers skip building records for it entirely.
    """

    def is_enabled(self, level: int) -> bool:
        return False

    def emit(self, record: Record) -> None:
        pass

    def with_attributes(self, attributes: Mapping[str, Any]) -> "NullHandler":
        return self

    def with_group(self, name: str) -> "NullHandler":
        return self

    def __repr__(self) -> str:
        return "NullHandler()"


@dataclass(frozen=True)
class CapturedRecord:
    """A record as seen by a CaptureHandler."""

    record: Record
    attributes: dict[str, Any] = field(default_factory=dict)
    groups: tuple[str, ...] = ()

    @property
    def level(self) -> int:
        return self.record.level

    @property
    def message(self) -> str:
        return self.record.message


class CaptureHandler:
    """
    A handler that keeps records in memory for testing.

    Handlers derived with ``with_attributes``/``with_group`` share the
    original's entries list, so a test can hold on to the root handler and
    inspect everything emitted through any derivation.
    """

    def __init__(self, level: int = Level.DEBUG, fail_with: BaseException | None = None):
        """
        Initialize a capture handler.

        Args:
            level: Minimum severity captured
            fail_with: Exception raised from every emit instead of capturing
        """
        self.level = level
        self.fail_with = fail_with
        self._entries: list[CapturedRecord] = []
        self._attributes: dict[str, Any] = {}
        self._groups: tuple[str, ...] = ()

    @property
    def entries(self) -> list[CapturedRecord]:
        """Get captured entries."""
        return self._entries

    def clear(self) -> None:
        """Clear captured entries."""
        self._entries.clear()

    def is_enabled(self, level: int) -> bool:
        return level >= self.level

    def emit(self, record: Record) -> None:
        if self.fail_with is not None:
            raise self.fail_with

        attributes = self._attributes
        if record.attributes:
            attributes = merge_attributes(attributes, self._groups, record.attributes)
        self._entries.append(CapturedRecord(record, attributes, self._groups))

    def with_attributes(self, attributes: Mapping[str, Any]) -> "CaptureHandler":
        if not attributes:
            return self
        return self._derive(merge_attributes(self._attributes, self._groups, attributes), self._groups)

    def with_group(self, name: str) -> "CaptureHandler":
        if not name:
            return self
        return self._derive(self._attributes, (*self._groups, name))

    def _derive(self, attributes: dict[str, Any], groups: tuple[str, ...]) -> "CaptureHandler":
        handler = CaptureHandler(self.level, self.fail_with)
        handler._entries = self._entries
        handler._attributes = attributes
        handler._groups = groups
        return handler

    def __repr__(self) -> str:
        return f"CaptureHandler(level={self.level!r}, entries={len(self._entries)})"
