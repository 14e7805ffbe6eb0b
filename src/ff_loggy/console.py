"""
Console handler with level-based colored output.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from rich.color import ColorSystem
from rich.style import Style

from .backend import Backend
from .handlers import HandlerOptions, StructlogHandler
from .levels import Level
from .utils import check_level

# Checked in this order; the first level whose marker is found wins.
LEVEL_STYLES: tuple[tuple[Level, Style], ...] = (
    (Level.ERROR, Style(color="red")),
    (Level.WARN, Style(color="yellow")),
    (Level.INFO, Style(color="blue")),
)


class ConsoleLogWriter:
    """
    A writer that colors each rendered log line by the level it carries.

    Sits downstream of the renderer: it only sees the finished line and
    classifies it by looking for the level marker in the text. Lines at
    DEBUG or any unrecognised level are written as-is.

    The stream is borrowed and never closed.
    """

    def __init__(self, stream: TextIO, colors: bool = True):
        """
        Initialize a console writer.

        Args:
            stream: Output stream
            colors: Whether to wrap lines in ANSI color codes
        """
        self._stream = stream
        self.colors = colors

    @property
    def stream(self) -> TextIO:
        """The stream lines are written to."""
        return self._stream

    def write(self, data: str | bytes) -> int:
        """
        Write one rendered line, colored by its level.

        Args:
            data: Rendered line, including any trailing newline

        Returns:
            The count reported by the stream's write
        """
        line = data.decode("utf-8") if isinstance(data, bytes) else data

        if self.colors:
            for level, style in LEVEL_STYLES:
                if check_level(line, level):
                    return self.stream.write(style.render(line, color_system=ColorSystem.STANDARD))

        return self.stream.write(line)

    def flush(self) -> None:
        self.stream.flush()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(stream={self.stream!r}, colors={self.colors!r})"


@dataclass(frozen=True)
class ConsoleOptions:
    """
    Options for the console handler.

    Attributes:
        json: Render JSON lines instead of key=value text
        to_stdout: Write to standard output instead of standard error
        colors: Whether to color lines by level
        handler_options: Passed unchanged to the rendering handler
    """

    json: bool = False
    to_stdout: bool = False
    colors: bool = True
    handler_options: HandlerOptions = field(default_factory=HandlerOptions)


def new_console_handler(options: ConsoleOptions | None = None) -> Backend:
    """
    Create a handler that writes colored lines to the console.

    Args:
        options: Console options (default: text to standard error)

    Returns:
        A backend rendering through a ConsoleLogWriter
    """
    options = options or ConsoleOptions()

    stream = sys.stdout if options.to_stdout else sys.stderr
    writer = ConsoleLogWriter(stream, colors=options.colors)

    return StructlogHandler(writer, json=options.json, options=options.handler_options)
