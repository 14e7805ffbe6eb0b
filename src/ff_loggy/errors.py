"""
Exceptions raised by ff-loggy.

Stream failures are not wrapped: the OSError (or ValueError for a closed
file) raised by the underlying stream reaches the caller as-is.
"""


class LoggyError(Exception):
    """Base exception for ff-loggy."""

    pass


class FanOutError(LoggyError):
    """Raised after best-effort dispatch when one or more handlers failed."""

    def __init__(self, errors: list[BaseException]):
        self.errors = list(errors)

        details = "; ".join(f"{type(e).__name__}: {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} handler(s) failed: {details}")
