"""
Retry combinators
=================

Repeat a failing work function with deterministic exponential backoff.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable, Coroutine, Iterator
from dataclasses import dataclass
from functools import wraps

from .._types import Predicate, WorkFn
from ..time import sleep

logger = logging.getLogger(__name__)


# RetryHook = (error, attempt_number) -> None, attempt_number starts at 1
type RetryHook = Callable[[Exception, int], None]


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """
    Retry configuration.

    Delays grow as initial_delay * backoff_multiplier^n (n = 0 for the first
    retry) and are capped at max_delay. No jitter is applied, so the schedule
    is fully deterministic.
    """

    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 30.0
    backoff_multiplier: float = 2.0
    retry_on: Predicate[Exception] | None = None
    on_retry: RetryHook | None = None

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("RetryPolicy.max_retries must be >= 0")
        if self.initial_delay < 0.0:
            raise ValueError("RetryPolicy.initial_delay must be >= 0")
        if self.max_delay < 0.0:
            raise ValueError("RetryPolicy.max_delay must be >= 0")
        if self.backoff_multiplier < 1.0:
            raise ValueError("RetryPolicy.backoff_multiplier must be >= 1.0")

    def delay_for(self, retry: int) -> float:
        """Delay before the retry with 0-based index `retry`."""
        try:
            delay = self.initial_delay * (self.backoff_multiplier ** retry)
        except OverflowError:
            return self.max_delay
        return min(delay, self.max_delay)

    def delays(self) -> Iterator[float]:
        """The whole delay schedule, one entry per allowed retry."""
        for retry in range(self.max_retries):
            yield self.delay_for(retry)


def _should_retry(*, policy: RetryPolicy, attempt: int, error: Exception) -> bool:
    if attempt >= policy.max_retries:
        return False
    if policy.retry_on is not None and not policy.retry_on(error):
        return False
    return True


async def retry_with_backoff[T](fn: WorkFn[T], policy: RetryPolicy | None = None) -> T:
    """
    Call fn until it succeeds or retries run out.

    Makes 1 + max_retries attempts at most. After the last failed attempt the
    error from that attempt is raised (the most recent failure, not the first).
    An error rejected by policy.retry_on is raised right away.

    policy.on_retry(error, attempt) fires before each backoff sleep and never
    affects control flow.
    """
    policy = policy if policy is not None else RetryPolicy()
    attempt = 0

    while True:
        try:
            return await fn()
        except Exception as exc:
            if not _should_retry(policy=policy, attempt=attempt, error=exc):
                raise
            delay = policy.delay_for(attempt)
            attempt += 1
            if policy.on_retry is not None:
                policy.on_retry(exc, attempt)
            logger.debug(
                "Retry attempt %d/%d after %.3fs: %r",
                attempt,
                policy.max_retries,
                delay,
                exc,
            )
        await sleep(delay)


@typing.overload
def with_retry[**P, T](
    fn: Callable[P, Awaitable[T]],
    *,
    policy: RetryPolicy | None = None,
) -> Callable[P, Coroutine[typing.Any, typing.Any, T]]: ...


@typing.overload
def with_retry[**P, T](
    fn: None = None,
    *,
    policy: RetryPolicy | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Coroutine[typing.Any, typing.Any, T]]]: ...


def with_retry(
    fn: Callable[..., Awaitable[typing.Any]] | None = None,
    *,
    policy: RetryPolicy | None = None,
) -> typing.Any:
    """
    Wrap a function so every call runs under retry_with_backoff.

    Works bare or with a policy:

        @with_retry
        async def fetch_item(item_id: str) -> Item: ...

        @with_retry(policy=RetryPolicy(max_retries=5, initial_delay=0.5))
        async def save(item: Item) -> None: ...
    """
    def decorate(
        func: Callable[..., Awaitable[typing.Any]],
    ) -> Callable[..., Coroutine[typing.Any, typing.Any, typing.Any]]:
        @wraps(func)
        async def wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
            return await retry_with_backoff(lambda: func(*args, **kwargs), policy)

        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)


__all__ = (
    "RetryHook",
    "RetryPolicy",
    "retry_with_backoff",
    "with_retry",
)
