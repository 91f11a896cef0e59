"""
Lifting exception-based work into Result.

The bridge from code that raises into code that inspects failure as a value.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import resolve
from .._types import LCR, Source


def safe_async[T](source: Source[T]) -> LCR[T, Exception]:
    """
    Run work and capture its outcome as a Result.

    **When to use:** When a failure should be data instead of control flow,
    e.g. before combining independent operations.

    Accepts an awaitable or a zero-arg callable returning one. Success becomes
    Ok(value); any Exception becomes Error(exc), forwarded as the very same
    object (never wrapped). No retries, no side effects.

    Example:
        from asyncops import safe_async

        result = await safe_async(lambda: fetch_user(user_id))
        match result:
            case Ok(user):
                ...
            case Error(exc):
                ...

    NOTE: Cancellation and other BaseExceptions are not captured.
          An awaitable (not a callable) can only be awaited once, so the
          returned LazyCoroResult is single-use in that case.
    """
    async def run() -> Result[T, Exception]:
        try:
            return Ok(await resolve(source))
        except Exception as exc:
            return Error(exc)

    return LazyCoroResult(run)


__all__ = ("safe_async",)
