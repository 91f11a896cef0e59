"""Internal helpers for asyncops.

Common functions used across multiple combinator modules.
These are not part of the public API."""

from __future__ import annotations

import asyncio
import json
import typing
from collections.abc import Awaitable, Iterable, Mapping

from ._types import Source


def resolve[T](source: Source[T]) -> Awaitable[T]:
    """
    Turn a Source into an awaitable.

    Work functions are called (starting the work); awaitables pass through.
    """
    if callable(source):
        return source()
    return source


def first_failure(tasks: Iterable[asyncio.Future[typing.Any]]) -> BaseException | None:
    """
    Return the first exception among finished tasks.

    A task that ended cancelled counts as a CancelledError failure. Every
    task's exception is retrieved, so none of them is reported as "never
    retrieved" later.
    """
    failure: BaseException | None = None
    for task in tasks:
        if task.cancelled():
            exc: BaseException | None = asyncio.CancelledError()
        else:
            exc = task.exception()
        if exc is not None and failure is None:
            failure = exc
    return failure


def cancel_pending(tasks: Iterable[asyncio.Future[typing.Any]]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()


def discard_outcome(task: asyncio.Future[typing.Any]) -> None:
    """Done-callback for work nobody waits on anymore."""
    if not task.cancelled():
        task.exception()


def make_key(args: tuple[typing.Any, ...], kwargs: Mapping[str, typing.Any]) -> str:
    """
    Serialize call arguments into a cache key.

    Naive on purpose: dicts serialize in insertion order, so {"a": 1, "b": 2}
    and {"b": 2, "a": 1} produce different keys. Values JSON cannot encode
    fall back to repr(), so the set {1, 2} and the string "{1, 2}" share a key.
    """
    try:
        return json.dumps([list(args), dict(kwargs)], default=repr)
    except (TypeError, ValueError):
        # unserializable keys or circular structures
        return repr((args, tuple(kwargs.items())))


__all__ = (
    "resolve",
    "first_failure",
    "cancel_pending",
    "discard_outcome",
    "make_key",
)
