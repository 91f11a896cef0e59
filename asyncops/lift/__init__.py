"""
Lift helpers: moving between raised exceptions and Result values.

    from asyncops import lift as L

    result = await L.safe_async(lambda: upload(blob))   # up: exception -> Result
    blob_id = await L.unsafe(L.safe_async(...))         # down: Result -> value/raise
"""

from __future__ import annotations

from .down import or_else, to_result, unsafe
from .up import safe_async

__all__ = (
    # Up
    "safe_async",
    # Down
    "to_result",
    "unsafe",
    "or_else",
)
