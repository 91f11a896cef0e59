"""
Settle combinators
==================

Run independent operations and keep every outcome.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence

from kungfu import Error, Ok, Result

from .._types import Source
from ..lift import safe_async


async def async_all_settled[T](sources: Iterable[Source[T]]) -> list[Result[T, Exception]]:
    """
    Run all sources fully in parallel and wait for every one of them.

    Never short-circuits: a failure in one source does not discard the
    successes of the others. The output has one Result per input, in input
    order.
    """
    return list(await asyncio.gather(*(safe_async(source)() for source in sources)))


def partition_settled[T, E](results: Sequence[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Separate settled results into (values, errors), each keeping input order."""
    values: list[T] = []
    errors: list[E] = []

    for r in results:
        match r:
            case Ok(value):
                values.append(value)
            case Error(err):
                errors.append(err)

    return values, errors


__all__ = ("async_all_settled", "partition_settled")
