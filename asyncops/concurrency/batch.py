"""
Batch combinators
=================

Chunk the input and run each chunk fully in parallel, one chunk at a time.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from .._helpers import cancel_pending
from .._types import ItemFn
from ..time import sleep


async def async_batch[A, R](
    items: Sequence[A],
    fn: ItemFn[A, R],
    batch_size: int,
    delay_between_batches: float = 0.0,
) -> list[R]:
    """
    Process items in consecutive chunks of `batch_size`.

    Inside a chunk every call runs at once; the chunk size IS the concurrency
    cap. fn receives the item's index in the full input. Between chunks (never
    after the last one) waits `delay_between_batches` seconds.

    Fail-fast: a failure cancels the rest of its chunk and no later chunk
    starts.
    """
    if batch_size < 1:
        raise ValueError("async_batch() batch_size must be >= 1")

    results: list[R] = []

    for start in range(0, len(items), batch_size):
        chunk = items[start : start + batch_size]
        tasks: list[asyncio.Future[R]] = []
        try:
            for offset, item in enumerate(chunk):
                tasks.append(asyncio.ensure_future(fn(item, start + offset)))
            results.extend(await asyncio.gather(*tasks))
        finally:
            cancel_pending(tasks)

        if delay_between_batches > 0.0 and start + batch_size < len(items):
            await sleep(delay_between_batches)

    return results


__all__ = ("async_batch",)
