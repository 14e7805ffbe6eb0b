"""
Handler that fans records out to several backends.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from .backend import Backend
from .errors import FanOutError
from .record import Record

logger = logging.getLogger(__name__)


class DispatchPolicy(str, Enum):
    """How CombinedHandler reacts to a failing child."""

    # Stop at the first failing child and raise its error.
    FAIL_FAST = "fail_fast"
    # Try every child, then raise FanOutError if any failed.
    BEST_EFFORT = "best_effort"


class CombinedHandler:
    """
    A backend that delegates to multiple other backends.

    Children are kept in construction order, which is also the order records
    are emitted in. The child list never changes; ``with_attributes`` and
    ``with_group`` build a new CombinedHandler over derived children.
    """

    __slots__ = ("_handlers", "_policy")

    def __init__(
        self,
        handlers: Iterable[Backend],
        policy: DispatchPolicy = DispatchPolicy.FAIL_FAST,
    ):
        """
        Initialize a combined handler.

        Args:
            handlers: Child backends, in emission order
            policy: Failure policy for emit (default: fail fast)
        """
        self._handlers: tuple[Backend, ...] = tuple(handlers)
        self._policy = DispatchPolicy(policy)

    @property
    def handlers(self) -> tuple[Backend, ...]:
        """The child backends, in emission order."""
        return self._handlers

    @property
    def policy(self) -> DispatchPolicy:
        return self._policy

    def is_enabled(self, level: int) -> bool:
        """
        Report whether any child handles records at ``level``.

        Children still filter on their own level when a record is emitted.
        """
        return any(handler.is_enabled(level) for handler in self._handlers)

    def emit(self, record: Record) -> None:
        """
        Emit ``record`` to every child enabled for its level, in order.

        With FAIL_FAST the first child error propagates unchanged and later
        children do not see the record. With BEST_EFFORT every enabled child
        is tried and a FanOutError collecting all failures is raised at the end.

        Args:
            record: The record to dispatch

        Raises:
            Exception: The first child error (FAIL_FAST)
            FanOutError: One or more children failed (BEST_EFFORT)
        """
        if self._policy is DispatchPolicy.FAIL_FAST:
            for handler in self._enabled_for(record.level):
                handler.emit(record)
            return

        errors: list[Exception] = []
        for handler in self._enabled_for(record.level):
            try:
                handler.emit(record)
            except Exception as e:
                logger.debug("Handler %r failed to emit record: %s", handler, e)
                errors.append(e)

        if errors:
            raise FanOutError(errors) from errors[0]

    def _enabled_for(self, level: int) -> Iterator[Backend]:
        # Checked lazily so each child is asked right before its own emit.
        for handler in self._handlers:
            if handler.is_enabled(level):
                yield handler

    def with_attributes(self, attributes: Mapping[str, Any]) -> "CombinedHandler":
        """
        Return a combined handler whose children all carry ``attributes``.

        Returns this handler itself when ``attributes`` is empty.
        """
        if not attributes:
            return self
        return CombinedHandler(
            (handler.with_attributes(attributes) for handler in self._handlers),
            policy=self._policy,
        )

    def with_group(self, name: str) -> "CombinedHandler":
        """
        Return a combined handler whose children all open group ``name``.

        Returns this handler itself when ``name`` is empty.
        """
        if not name:
            return self
        return CombinedHandler(
            (handler.with_group(name) for handler in self._handlers),
            policy=self._policy,
        )

    def __repr__(self) -> str:
        return f"CombinedHandler(handlers={list(self._handlers)!r}, policy={self._policy.value!r})"


def new_combined_handler(
    *handlers: Backend,
    policy: DispatchPolicy = DispatchPolicy.FAIL_FAST,
) -> CombinedHandler:
    """
    Combine several backends into one.

    Example:
        handler = new_combined_handler(
            new_console_handler(),
            new_json_handler(audit_stream, HandlerOptions(level=Level.WARN)),
        )
        logger = Logger(handler)

    Args:
        *handlers: Child backends, in emission order
        policy: Failure policy for emit

    Returns:
        CombinedHandler over ``handlers``
    """
    return CombinedHandler(handlers, policy=policy)
