"""
Core type definitions for asyncops.

Aliases shared by every combinator module.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult, Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# WorkFn = zero-arg callable producing a deferred value
type WorkFn[T] = Callable[[], Awaitable[T]]

# Source = either an awaitable already in flight, or a work function to start it
type Source[T] = Awaitable[T] | WorkFn[T]

# ItemFn = per-item work function, receives the item and its input index
type ItemFn[A, R] = Callable[[A, int], Awaitable[R]]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# AsyncResult = failure as an inspectable value: Ok(value) | Error(error)
type AsyncResult[T, E] = Result[T, E]

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Type aliases
    "Predicate",
    "WorkFn",
    "Source",
    "ItemFn",
    # Concrete shortcuts
    "AsyncResult",
    "LCR",
)
