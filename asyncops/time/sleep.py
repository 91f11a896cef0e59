"""Sleep primitive

Timer as an awaitable. Every other combinator that waits goes through here."""

from __future__ import annotations

import asyncio


async def sleep(seconds: float) -> None:
    """Suspend for `seconds`. Negative durations are treated as zero."""
    await asyncio.sleep(seconds if seconds > 0.0 else 0.0)


__all__ = ("sleep",)
