"""
Throttle combinators
====================

Rate-limit an async function to one execution per window.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Throttled[**P, T]:
    """
    Throttled wrapper around an async function.

    The first call executes immediately. Any call made while an execution is
    in flight, or less than `delay` seconds after the last execution started,
    is dropped: it returns None without calling the function. Dropped calls are
    never queued or coalesced.
    """

    __slots__ = ("_fn", "_delay", "_last_executed_at", "_executing")

    def __init__(self, fn: Callable[P, Awaitable[T]], delay: float) -> None:
        if delay < 0.0:
            raise ValueError("throttle delay must be >= 0")
        self._fn = fn
        self._delay = delay
        self._last_executed_at: float | None = None
        self._executing = False

    @property
    def is_executing(self) -> bool:
        return self._executing

    @property
    def last_executed_at(self) -> float | None:
        """Monotonic timestamp of the last execution start."""
        return self._last_executed_at

    def _in_window(self, now: float) -> bool:
        if self._last_executed_at is None:
            return False
        return now - self._last_executed_at < self._delay

    async def __call__(self, *args: P.args, **kwargs: P.kwargs) -> T | None:
        now = time.monotonic()
        if self._executing or self._in_window(now):
            logger.debug("Throttled call to %r dropped", self._fn)
            return None

        self._executing = True
        self._last_executed_at = now
        try:
            return await self._fn(*args, **kwargs)
        finally:
            self._executing = False


def throttle_async[**P, T](fn: Callable[P, Awaitable[T]], delay: float) -> Throttled[P, T]:
    """Allow `fn` to start at most once per `delay` seconds; other calls return None."""
    return Throttled(fn, delay)


__all__ = ("Throttled", "throttle_async")
