"""
ff-loggy: Structured log fan-out and colored console output.

Combines several logging backends behind one handler and provides a console
backend that colors lines by level.
"""

__version__ = "0.1.0"

from .backend import Backend
from .base import Logger
from .combined import CombinedHandler, DispatchPolicy, new_combined_handler
from .config import configure_logging, get_logger
from .console import ConsoleLogWriter, ConsoleOptions, new_console_handler
from .errors import FanOutError, LoggyError
from .handlers import HandlerOptions, StructlogHandler, new_json_handler, new_text_handler
from .levels import Level, level_label, parse_level
from .null import CaptureHandler, NullHandler
from .record import Record, Source
from .stderr import StderrLogWriter, new_stderr_handler
from .utils import check_level

__all__ = [
    "Backend",
    "CaptureHandler",
    "CombinedHandler",
    "ConsoleLogWriter",
    "ConsoleOptions",
    "DispatchPolicy",
    "FanOutError",
    "HandlerOptions",
    "Level",
    "Logger",
    "LoggyError",
    "NullHandler",
    "Record",
    "Source",
    "StderrLogWriter",
    "StructlogHandler",
    "check_level",
    "configure_logging",
    "get_logger",
    "level_label",
    "new_combined_handler",
    "new_console_handler",
    "new_json_handler",
    "new_stderr_handler",
    "new_text_handler",
    "parse_level",
]
