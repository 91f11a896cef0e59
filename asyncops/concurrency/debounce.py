"""
Debounce combinators
====================

Collapse a burst of calls into one execution with the latest arguments.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Awaitable, Callable

from .._errors import DebounceCancelledError

logger = logging.getLogger(__name__)


class Debounced[**P, T]:
    """
    Debounced wrapper around an async function.

    Calling it registers the call synchronously and returns a future. The
    wrapped function runs once `delay` seconds pass with no further call,
    using the arguments of the most recent call. Every superseded call's
    future is rejected with DebounceCancelledError, both while its timer is
    still pending and while its execution is still in flight (the execution
    itself is not interrupted; its outcome is dropped).

    At most one call is pending at any moment.
    """

    __slots__ = ("_fn", "_delay", "_timer", "_pending", "_running")

    def __init__(self, fn: Callable[P, Awaitable[T]], delay: float) -> None:
        if delay < 0.0:
            raise ValueError("debounce delay must be >= 0")
        self._fn = fn
        self._delay = delay
        self._timer: asyncio.TimerHandle | None = None
        self._pending: asyncio.Future[T] | None = None
        self._running: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        """Whether a call is waiting for its timer or for its result."""
        return self._pending is not None and not self._pending.done()

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> asyncio.Future[T]:
        loop = asyncio.get_running_loop()
        self._supersede()

        future: asyncio.Future[T] = loop.create_future()
        self._pending = future
        self._timer = loop.call_later(self._delay, self._fire, future, args, kwargs)
        return future

    def cancel(self) -> None:
        """Reject the pending call, if any, and drop its timer."""
        self._supersede()

    def _supersede(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._pending is not None and not self._pending.done():
            logger.debug("Debounced call to %r superseded", self._fn)
            self._pending.set_exception(DebounceCancelledError())
        self._pending = None

    def _fire(
        self,
        future: asyncio.Future[T],
        args: tuple[typing.Any, ...],
        kwargs: dict[str, typing.Any],
    ) -> None:
        self._timer = None
        if future.done():
            return
        task = asyncio.ensure_future(self._execute(future, args, kwargs))
        self._running.add(task)
        task.add_done_callback(self._running.discard)

    async def _execute(
        self,
        future: asyncio.Future[T],
        args: tuple[typing.Any, ...],
        kwargs: dict[str, typing.Any],
    ) -> None:
        try:
            value = await self._fn(*args, **kwargs)
        except asyncio.CancelledError:
            if not future.done():
                future.cancel()
            raise
        except Exception as exc:
            if not future.done():
                future.set_exception(exc)
        else:
            if not future.done():
                future.set_result(value)


def debounce_async[**P, T](fn: Callable[P, Awaitable[T]], delay: float) -> Debounced[P, T]:
    """
    Debounce `fn` by `delay` seconds.

    Example:
        search = debounce_async(search_listings, 0.3)

        first = search("fur")
        last = search("furniture")
        await last            # runs search_listings("furniture") once
        await first           # raises DebounceCancelledError

    NOTE: must be called from inside a running event loop.
    """
    return Debounced(fn, delay)


__all__ = ("Debounced", "debounce_async")
