from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Unavailable(Exception):
    pass


@dataclass(frozen=True, slots=True)
class GarageSale:
    id: int
    title: str


@dataclass(slots=True)
class FakeListingsApi:
    name: str
    delay_seconds: float = 0.0
    failures_before_ok: int = 0
    calls: list[str] = field(default_factory=list)

    async def fetch_sale(self, sale_id: int) -> GarageSale:
        self.calls.append(f"fetch:{sale_id}")
        await asyncio.sleep(self.delay_seconds)
        if self.failures_before_ok > 0:
            self.failures_before_ok -= 1
            raise Unavailable(f"{self.name}: unavailable")
        return GarageSale(id=sale_id, title=f"sale #{sale_id}")

    async def search(self, query: str) -> list[str]:
        self.calls.append(f"search:{query}")
        await asyncio.sleep(self.delay_seconds)
        return [f"{query} (result {n})" for n in range(2)]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
