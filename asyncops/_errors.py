from __future__ import annotations

import builtins


class AsyncOpsError(Exception):
    """Base class for errors synthesized by asyncops itself."""


class TimeoutError(AsyncOpsError, builtins.TimeoutError):
    """Deadline passed before the raced operation settled."""

    seconds: float

    def __init__(self, message: str = "Operation timed out", *, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(message)


class PollTimeoutError(TimeoutError):
    """poll_until ran out of time without satisfying its condition."""

    timeout: float
    attempts: int

    def __init__(self, timeout: float, attempts: int) -> None:
        self.timeout = timeout
        self.attempts = attempts
        super().__init__(f"Polling timed out after {timeout}s", seconds=timeout)


class DebounceCancelledError(AsyncOpsError):
    """A newer debounced call superseded this one."""

    def __init__(self) -> None:
        super().__init__("Debounced call cancelled")


__all__ = ("AsyncOpsError", "DebounceCancelledError", "PollTimeoutError", "TimeoutError")
