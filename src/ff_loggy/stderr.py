"""
Console handler bound to whatever standard error is at write time.
"""

import sys
from typing import TextIO

from .backend import Backend
from .console import ConsoleLogWriter
from .handlers import HandlerOptions, StructlogHandler


class StderrLogWriter(ConsoleLogWriter):
    """
    A ConsoleLogWriter that looks up ``sys.stderr`` on every write.

    Follows redirections of ``sys.stderr`` made after the handler was built.
    """

    def __init__(self, colors: bool = True):
        super().__init__(sys.stderr, colors=colors)

    @property
    def stream(self) -> TextIO:
        return sys.stderr


def new_stderr_handler(
    json: bool = False,
    handler_options: HandlerOptions | None = None,
    colors: bool = True,
) -> Backend:
    """
    Create a colored console handler writing to the current standard error.

    Args:
        json: Render JSON lines instead of key=value text
        handler_options: Passed unchanged to the rendering handler
        colors: Whether to color lines by level

    Returns:
        A backend rendering through a StderrLogWriter
    """
    writer = StderrLogWriter(colors=colors)
    return StructlogHandler(writer, json=json, options=handler_options)
