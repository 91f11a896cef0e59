"""
asyncops: concurrency-control primitives for unreliable async work.

Composable building blocks for calling slow, flaky or rate-limited
operations without blocking the caller or overwhelming the callee:
bounded pools, retry with backoff, debounce/throttle, TTL memoization,
polling, settle-all and batching.

Architecture:
- Work functions are zero-arg callables returning awaitables, or
  (item, index) mappers for collection combinators
- Failures propagate by default; safe_async / async_all_settled turn them
  into kungfu Result values
- Each wrapper owns its private state; there is no module-level state
"""

import logging

# Core types
from ._types import LCR, AsyncResult, ItemFn, Predicate, Source, WorkFn

# Lift helpers
from . import lift
from .lift import or_else, safe_async, to_result, unsafe

# Time
from .time import sleep, with_timeout

# Control flow
from .control import (
    PollHook,
    PollPolicy,
    RetryHook,
    RetryPolicy,
    poll_until,
    retry_with_backoff,
    with_retry,
)

# Concurrency
from .concurrency import (
    Debounced,
    Throttled,
    async_all_settled,
    async_batch,
    async_pool,
    async_sequential,
    debounce_async,
    partition_settled,
    throttle_async,
)

# Caching
from .caching import CacheEntry, TTLCached, async_cache

# Errors
from ._errors import AsyncOpsError, DebounceCancelledError, PollTimeoutError, TimeoutError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "AsyncResult",
    "ItemFn",
    "LCR",
    "Predicate",
    "Source",
    "WorkFn",
    # Lift module (namespace import)
    "lift",
    # Lift functions
    "safe_async",
    "to_result",
    "unsafe",
    "or_else",
    # Time
    "sleep",
    "with_timeout",
    # Control
    "PollHook",
    "PollPolicy",
    "RetryHook",
    "RetryPolicy",
    "poll_until",
    "retry_with_backoff",
    "with_retry",
    # Concurrency
    "Debounced",
    "Throttled",
    "async_all_settled",
    "async_batch",
    "async_pool",
    "async_sequential",
    "debounce_async",
    "partition_settled",
    "throttle_async",
    # Caching
    "CacheEntry",
    "TTLCached",
    "async_cache",
    # Errors
    "AsyncOpsError",
    "DebounceCancelledError",
    "PollTimeoutError",
    "TimeoutError",
)
