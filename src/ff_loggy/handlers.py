"""
Formatter-backed handlers rendering records with structlog.

A handler turns a Record into an event dict, runs it through a structlog
processor chain ending in a renderer, and writes the rendered line through a
``structlog.WriteLogger``.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from .levels import Level, level_label
from .processors import BUILTIN_KEYS, ReplaceAttr, ReplaceAttributes, TextRenderer, flatten_groups
from .record import Record, Source
from .utils import merge_attributes


@dataclass(frozen=True)
class HandlerOptions:
    """
    Options for rendering handlers.

    Attributes:
        level: Minimum severity handled
        add_source: Whether to include the call site of the log statement
        replace_attr: Hook to rewrite or drop attributes, see ReplaceAttributes
    """

    level: int = Level.INFO
    add_source: bool = False
    replace_attr: ReplaceAttr | None = None


class StructlogHandler:
    """
    A backend that renders records as key=value text or JSON lines.

    Bound attributes and open groups are carried by value: ``with_attributes``
    and ``with_group`` return new handlers sharing the same output.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        json: bool = False,
        options: HandlerOptions | None = None,
    ):
        """
        Initialize a handler.

        Args:
            stream: Text stream (or writer) receiving one write per record
            json: Render JSON instead of key=value text
            options: Level, source and attribute rewrite options
        """
        self.stream = stream
        self.json = json
        self.options = options or HandlerOptions()

        self._sink = structlog.WriteLogger(stream)
        self._processors = self._get_default_processors()
        self._context: dict[str, Any] = {}
        self._groups: tuple[str, ...] = ()

    def _get_default_processors(self) -> list[Processor]:
        """Build the processor chain for this handler's format."""
        processors: list[Processor] = []

        if self.options.replace_attr is not None:
            processors.append(ReplaceAttributes(self.options.replace_attr))

        if self.json:
            processors.append(structlog.processors.JSONRenderer(separators=(",", ":")))
        else:
            processors.extend([flatten_groups, TextRenderer()])

        return processors

    def is_enabled(self, level: int) -> bool:
        return level >= self.options.level

    def emit(self, record: Record) -> None:
        """
        Render ``record`` and write it as a single line.

        Errors raised by the stream propagate unchanged. The only retry is
        the one structlog.WriteLogger makes for a write interrupted by a
        signal (InterruptedError); nothing else is attempted twice.
        """
        method_name = level_label(record.level).lower()
        event_dict: Any = self._build_event(record)
        for processor in self._processors:
            event_dict = processor(self._sink, method_name, event_dict)
        self._sink.msg(event_dict)

    def with_attributes(self, attributes: Mapping[str, Any]) -> "StructlogHandler":
        if not attributes:
            return self
        return self._derive(merge_attributes(self._context, self._groups, attributes), self._groups)

    def with_group(self, name: str) -> "StructlogHandler":
        if not name:
            return self
        return self._derive(self._context, (*self._groups, name))

    def _derive(self, context: dict[str, Any], groups: tuple[str, ...]) -> "StructlogHandler":
        handler = copy.copy(self)
        handler._context = context
        handler._groups = groups
        return handler

    def _build_event(self, record: Record) -> dict[str, Any]:
        event: dict[str, Any] = {}
        if record.time is not None:
            event["time"] = record.time.isoformat(timespec="milliseconds")
        event["level"] = level_label(record.level)
        if self.options.add_source and record.source is not None:
            event["source"] = self._format_source(record.source)
        event["msg"] = record.message

        attributes = self._context
        if record.attributes:
            attributes = merge_attributes(attributes, self._groups, record.attributes)
        for key, value in attributes.items():
            event[_unclashed_key(key, event)] = value
        return event

    def _format_source(self, source: Source) -> Any:
        if self.json:
            return {"function": source.function, "file": source.file, "line": source.line}
        return f"{source.file}:{source.line}"

    def __repr__(self) -> str:
        fmt = "json" if self.json else "text"
        return (
            f"{self.__class__.__name__}(format={fmt!r}, level={level_label(self.options.level)!r}, "
            f"groups={self._groups!r})"
        )


def _unclashed_key(key: str, event: dict[str, Any]) -> str:
    # Built-in keys win; a user key with the same name moves to "fields.<key>".
    while key in BUILTIN_KEYS or key in event:
        key = f"fields.{key}"
    return key


def new_text_handler(stream: TextIO, options: HandlerOptions | None = None) -> StructlogHandler:
    """Create a handler rendering ``level=INFO msg="..."`` lines."""
    return StructlogHandler(stream, json=False, options=options)


def new_json_handler(stream: TextIO, options: HandlerOptions | None = None) -> StructlogHandler:
    """Create a handler rendering ``{"level":"INFO","msg":"..."}`` lines."""
    return StructlogHandler(stream, json=True, options=options)
