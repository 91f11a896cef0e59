"""Timeout race

Race an operation against a deadline timer."""

from __future__ import annotations

import asyncio
import logging

from .._errors import TimeoutError
from .._helpers import discard_outcome, resolve
from .._types import Source

logger = logging.getLogger(__name__)


async def with_timeout[T](
    source: Source[T],
    seconds: float,
    message: str = "Operation timed out",
) -> T:
    """
    Return the operation's outcome, or raise TimeoutError(message) once
    `seconds` pass, whichever comes first.

    The losing operation is NOT cancelled. It keeps running in the background
    and whatever it eventually produces is discarded, so downstream effects
    must tolerate work that finishes after its caller gave up.
    """
    task = asyncio.ensure_future(resolve(source))
    done, _ = await asyncio.wait({task}, timeout=seconds)
    if task in done:
        return task.result()

    logger.debug("Deadline of %ss passed, leaving operation running: %s", seconds, message)
    task.add_done_callback(discard_outcome)
    raise TimeoutError(message, seconds=seconds)


__all__ = ("with_timeout",)
