"""
Severity levels and their textual labels.
"""

from enum import IntEnum


class Level(IntEnum):
    """Named severities. Any integer is a valid level; these are the anchors."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    WARNING = 30
    ERROR = 40


def level_label(level: int) -> str:
    """
    Return the label a rendered line carries for ``level``.

    Named levels render as their name. Values in between render relative to
    the nearest named level below them, e.g. ``INFO+2``; values under DEBUG
    render relative to DEBUG, e.g. ``DEBUG-1``.

    Args:
        level: Severity value

    Returns:
        Label such as ``DEBUG``, ``INFO``, ``WARN``, ``ERROR`` or ``INFO+2``
    """
    if level < Level.INFO:
        base = Level.DEBUG
    elif level < Level.WARN:
        base = Level.INFO
    elif level < Level.ERROR:
        base = Level.WARN
    else:
        base = Level.ERROR

    delta = int(level) - int(base)
    if delta == 0:
        return base.name
    return f"{base.name}{delta:+d}"


def parse_level(value: str | int) -> int:
    """
    Convert a level name or number into a severity value.

    Args:
        value: Level name (case-insensitive), numeric string, or integer

    Returns:
        Severity value

    Raises:
        ValueError: If the name is not a known level
    """
    if isinstance(value, int):
        return value

    normalized = value.strip().upper()
    if normalized.lstrip("-").isdigit():
        return int(normalized)
    try:
        return Level[normalized]
    except KeyError:
        raise ValueError(f"Unknown log level: {value!r}") from None
