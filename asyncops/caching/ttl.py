"""TTL memoization

Cache async results per argument combination for a fixed duration."""

from __future__ import annotations

import logging
import time
import typing
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .._helpers import make_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheEntry[T]:
    value: T
    expires_at: float


class TTLCached[**P, T]:
    """
    Async function with a per-arguments result cache.

    Keys come from a naive serialization of the call arguments: keyword order
    and dict insertion order matter. A hit on an unexpired entry returns the
    stored value without calling the function; a miss or an expired entry
    calls it and stores the fresh value for `ttl` seconds.

    Known limitations: no size cap or eviction besides expiry (the cache grows
    with every distinct argument combination), failures are not cached, and
    concurrent misses for the same key each call the function.
    """

    __slots__ = ("_fn", "_ttl", "_entries")

    def __init__(self, fn: Callable[P, Awaitable[T]], ttl: float) -> None:
        if ttl < 0.0:
            raise ValueError("cache ttl must be >= 0")
        self._fn = fn
        self._ttl = ttl
        self._entries: dict[str, CacheEntry[T]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def __call__(self, *args: P.args, **kwargs: P.kwargs) -> T:
        key = make_key(args, kwargs)
        entry = self._entries.get(key)
        if entry is not None:
            if time.monotonic() < entry.expires_at:
                return entry.value
            logger.debug("Cache entry expired for key %s", key)

        value = await self._fn(*args, **kwargs)
        self._entries[key] = CacheEntry(value, time.monotonic() + self._ttl)
        return value

    def invalidate(self, *args: typing.Any, **kwargs: typing.Any) -> bool:
        """Drop the entry for these arguments. Returns whether one existed."""
        return self._entries.pop(make_key(args, kwargs), None) is not None

    def clear(self) -> None:
        self._entries.clear()


def async_cache[**P, T](fn: Callable[P, Awaitable[T]], ttl: float) -> TTLCached[P, T]:
    """
    Memoize `fn` for `ttl` seconds per argument combination.

    Example:
        get_weather = async_cache(fetch_weather, 5 * 60)

        await get_weather("yellowknife")   # calls fetch_weather
        await get_weather("yellowknife")   # served from cache
    """
    return TTLCached(fn, ttl)


__all__ = ("CacheEntry", "TTLCached", "async_cache")
