"""
Running a LazyCoroResult back down to a plain value.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._types import LCR


async def to_result[T, E](interp: LCR[T, E]) -> Result[T, E]:
    """Run interp and return its Result."""
    return await interp()


async def unsafe[T, E: BaseException](interp: LCR[T, E]) -> T:
    """
    Run and return the value, re-raising the captured error.

    **When to use:** Undo safe_async at the point where propagation is wanted
    again. The original exception object is raised, not a wrapper.
    """
    result = await interp()
    match result:
        case Ok(value):
            return value
        case Error(error):
            raise error


async def or_else[T, E](interp: LCR[T, E], default: T) -> T:
    """Run and return the value, or `default` on Error."""
    result = await interp()
    match result:
        case Ok(value):
            return value
        case Error(_):
            return default


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
)
