"""
Helpers for rendered log lines and attribute dicts.
"""

from collections.abc import Mapping
from typing import Any

from .levels import level_label


def check_level(line: str, level: int) -> bool:
    """
    Check whether a rendered line carries the given level marker.

    Matches the text form ``level=INFO`` and the JSON form ``"level":"INFO"``.
    This is a substring search over already rendered output, not a parse.

    Args:
        line: Rendered log line
        level: Severity to look for

    Returns:
        True if either marker for ``level`` occurs in ``line``
    """
    label = level_label(level)
    return f"level={label}" in line or f'"level":"{label}"' in line


def merge_attributes(
    base: dict[str, Any], groups: tuple[str, ...], attributes: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Return a copy of ``base`` with ``attributes`` merged under a group path.

    Only the dicts along ``groups`` are copied; ``base`` itself is left as is.

    Args:
        base: Existing (possibly nested) attributes
        groups: Group path to merge under, outermost first
        attributes: Attributes to add

    Returns:
        New attribute dict
    """
    merged = dict(base)
    if not groups:
        merged.update(attributes)
        return merged

    head, rest = groups[0], groups[1:]
    child = merged.get(head)
    merged[head] = merge_attributes(child if isinstance(child, dict) else {}, rest, attributes)
    return merged
