"""Sequential runner

One item at a time. The baseline when operations must not overlap."""

from __future__ import annotations

from collections.abc import Sequence

from .._types import ItemFn


async def async_sequential[A, R](items: Sequence[A], fn: ItemFn[A, R]) -> list[R]:
    """Await fn(item, index) for each item in order. The first failure stops the run."""
    results: list[R] = []
    for index, item in enumerate(items):
        results.append(await fn(item, index))
    return results


__all__ = ("async_sequential",)
