"""
Log record passed from the logger front end to backends.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class Source:
    """Call site of a log statement."""

    function: str
    file: str
    line: int


@dataclass(frozen=True, slots=True)
class Record:
    """
    One structured log event.

    Backends treat records as read-only; fan-out hands the same instance to
    every child.
    """

    time: datetime | None
    level: int
    message: str
    attributes: dict[str, Any] = field(default_factory=dict)
    source: Source | None = None
