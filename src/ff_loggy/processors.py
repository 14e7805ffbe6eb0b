"""
structlog processors used by the handlers to shape an event dict before rendering.

Each processor follows the structlog signature ``(logger, method_name, event_dict)``.
"""

import json
from collections.abc import Callable
from typing import Any

from structlog.processors import LogfmtRenderer

# Keys the handler writes itself; always top level, never treated as groups.
BUILTIN_KEYS = frozenset({"time", "level", "source", "msg"})

ReplaceAttr = Callable[[tuple[str, ...], str, Any], tuple[str, Any] | None]


class ReplaceAttributes:
    """
    Rewrite or drop attributes through a user hook.

    The hook is called once per leaf attribute with the group path it lives
    under, its key and its value. It returns a ``(key, value)`` pair to keep
    (possibly changed) or None to drop the attribute. Groups left empty
    are removed.
    """

    def __init__(self, replace_attr: ReplaceAttr):
        """
        Initialize the processor.

        Args:
            replace_attr: Hook receiving (groups, key, value)
        """
        self.replace_attr = replace_attr

    def __call__(self, logger: Any, name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        return self._replace(event_dict, ())

    def _replace(self, attrs: dict[str, Any], groups: tuple[str, ...]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in attrs.items():
            is_builtin = not groups and key in BUILTIN_KEYS
            if isinstance(value, dict) and not is_builtin:
                nested = self._replace(value, (*groups, key))
                if nested:
                    result[key] = nested
                continue

            replaced = self.replace_attr(groups, key, value)
            if replaced is None:
                continue
            new_key, new_value = replaced
            result[new_key] = new_value
        return result


def flatten_groups(logger: Any, name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten nested groups into dotted keys for key=value rendering.

    ``{"req": {"id": 1}}`` becomes ``{"req.id": 1}``.
    """
    flat: dict[str, Any] = {}
    _flatten_into(flat, event_dict, "")
    return flat


def _flatten_into(target: dict[str, Any], attrs: dict[str, Any], prefix: str) -> None:
    for key, value in attrs.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            _flatten_into(target, value, f"{full_key}.")
        else:
            target[full_key] = value


class TextRenderer(LogfmtRenderer):
    """
    Render an event dict as ``key=value`` pairs.

    Values are rendered by LogfmtRenderer except for two cases it leaves
    bare: an empty string renders as ``""`` and None as ``<nil>``. Keys that
    are empty or contain whitespace, control characters, ``=`` or ``"`` are
    written as quoted strings (``"user id"=1``) instead of being rejected.
    """

    def __init__(self) -> None:
        super().__init__(bool_as_flag=False)

    def __call__(self, logger: Any, name: str, event_dict: dict[str, Any]) -> str:
        return " ".join(
            f"{_render_key(key)}={self._render_value(logger, name, value)}"
            for key, value in event_dict.items()
        )

    def _render_value(self, logger: Any, name: str, value: Any) -> str:
        if value is None:
            return "<nil>"
        if isinstance(value, str) and not value:
            return '""'
        # LogfmtRenderer returns "v=<value>"
        return super().__call__(logger, name, {"v": value})[2:]


def _render_key(key: str) -> str:
    if not key or any(c <= " " or c in '="' for c in key):
        return json.dumps(key, ensure_ascii=False)
    return key
