"""
The backend capability every handler implements.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .record import Record


@runtime_checkable
class Backend(Protocol):
    """
    A sink for log records, gated by its own minimum level.

    Derivation methods return a new backend and leave the receiver untouched.
    """

    def is_enabled(self, level: int) -> bool:
        """Report whether records at ``level`` would be handled."""
        ...

    def emit(self, record: Record) -> None:
        """Handle ``record``. Raises whatever the underlying sink raises."""
        ...

    def with_attributes(self, attributes: Mapping[str, Any]) -> "Backend":
        """Return a backend that adds ``attributes`` to every record."""
        ...

    def with_group(self, name: str) -> "Backend":
        """Return a backend that nests subsequent attributes under ``name``."""
        ...
