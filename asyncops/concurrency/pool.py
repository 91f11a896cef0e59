"""
Pool combinators
================

Run many work items with a cap on how many are in flight at once.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Sequence

from .._helpers import cancel_pending, first_failure
from .._types import ItemFn


async def async_pool[A, R](
    items: Sequence[A],
    fn: ItemFn[A, R],
    concurrency: int = 5,
) -> list[R]:
    """
    Map fn(item, index) over items with at most `concurrency` calls in flight.

    When the window is full, waits for ANY one call to settle before admitting
    the next item (not for the whole window). results[i] always belongs to
    items[i], whatever the completion order.

    Fail-fast: the first failure is raised and the calls still in flight are
    cancelled. Wrap fn with safe_async for per-item isolation.
    """
    if concurrency < 1:
        raise ValueError("async_pool() concurrency must be >= 1")

    results: list[R | None] = [None] * len(items)
    executing: set[asyncio.Task[None]] = set()

    async def run_slot(index: int, item: A) -> None:
        results[index] = await fn(item, index)

    try:
        for index, item in enumerate(items):
            executing.add(asyncio.create_task(run_slot(index, item)))
            if len(executing) >= concurrency:
                done, executing = await asyncio.wait(executing, return_when=asyncio.FIRST_COMPLETED)
                failure = first_failure(done)
                if failure is not None:
                    raise failure

        while executing:
            done, executing = await asyncio.wait(executing, return_when=asyncio.FIRST_COMPLETED)
            failure = first_failure(done)
            if failure is not None:
                raise failure
    finally:
        cancel_pending(executing)

    return typing.cast(list[R], results)


__all__ = ("async_pool",)
