from __future__ import annotations

import asyncio

from _infra import FakeListingsApi, banner, run

from asyncops import DebounceCancelledError, async_cache, debounce_async, throttle_async


async def main() -> None:
    banner("02_search_box: debounce keystrokes, cache queries, throttle saves")

    api = FakeListingsApi(name="search", delay_seconds=0.01)
    cached_search = async_cache(api.search, ttl=60.0)
    debounced = debounce_async(cached_search, 0.05)

    keystrokes = [debounced(q) for q in ("f", "fu", "fur", "furniture")]
    for query, pending in zip(("f", "fu", "fur", "furniture"), keystrokes):
        try:
            print(f"{query!r}: {await pending}")
        except DebounceCancelledError:
            print(f"{query!r}: superseded")

    await debounced("furniture")
    print(f"backend calls: {api.calls}")

    async def save_draft(text: str) -> str:
        await asyncio.sleep(0.01)
        return f"saved {text!r}"

    autosave = throttle_async(save_draft, 0.5)
    print(await autosave("draft 1"))
    print(await autosave("draft 2"))


if __name__ == "__main__":
    run(main)
