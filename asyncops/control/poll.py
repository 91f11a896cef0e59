"""Polling combinators

Repeat a check until its value satisfies a condition or time runs out."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import PollTimeoutError
from .._types import Predicate, WorkFn
from ..time import sleep

logger = logging.getLogger(__name__)


# PollHook = (value, attempt_number) -> None, attempt_number starts at 1
type PollHook[T] = Callable[[T, int], None]


@dataclass(frozen=True, slots=True)
class PollPolicy[T]:
    """Configuration for poll_until."""

    interval: float = 1.0
    timeout: float = 30.0
    on_poll: PollHook[T] | None = None

    def __post_init__(self) -> None:
        if self.interval < 0.0:
            raise ValueError("PollPolicy.interval must be >= 0")
        if self.timeout < 0.0:
            raise ValueError("PollPolicy.timeout must be >= 0")


async def poll_until[T](
    fn: WorkFn[T],
    condition: Predicate[T],
    policy: PollPolicy[T] | None = None,
) -> T:
    """
    Call fn every `interval` seconds until condition(value) holds.

    Returns the first value that satisfies the condition. Raises
    PollTimeoutError once `timeout` seconds have elapsed since the first call.

    The deadline is only checked after an attempt completes, so one slow call
    to fn can push the total elapsed time past `timeout`.
    """
    policy = policy if policy is not None else PollPolicy()
    started_at = time.monotonic()
    attempt = 0

    while True:
        value = await fn()
        attempt += 1

        if policy.on_poll is not None:
            policy.on_poll(value, attempt)

        if condition(value):
            return value

        if time.monotonic() - started_at >= policy.timeout:
            logger.debug("Polling gave up after %d attempts", attempt)
            raise PollTimeoutError(policy.timeout, attempt)

        await sleep(policy.interval)


__all__ = ("PollHook", "PollPolicy", "poll_until")
