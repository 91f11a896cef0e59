import asyncio

import pytest

from asyncops import async_pool, safe_async


class Boom(Exception):
    pass


@pytest.mark.asyncio
async def test_processes_all_items_in_order():
    calls = []

    async def double(n, _index):
        calls.append(n)
        return n * 2

    results = await async_pool([1, 2, 3, 4, 5], double, 2)

    assert results == [2, 4, 6, 8, 10]
    assert sorted(calls) == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_preserves_order_when_completion_order_differs():
    async def reversed_delay(n, _index):
        await asyncio.sleep((6 - n) * 0.01)
        return n * 2

    results = await async_pool([1, 2, 3, 4, 5], reversed_delay, 3)

    assert results == [2, 4, 6, 8, 10]


@pytest.mark.asyncio
async def test_passes_index_to_function():
    async def label(item, index):
        return f"{item}-{index}"

    assert await async_pool(["a", "b", "c"], label, 2) == ["a-0", "b-1", "c-2"]


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [1, 2, 3, 7])
async def test_never_exceeds_concurrency_limit(limit):
    in_flight = 0
    peak = 0

    async def tracked(n, _index):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.005 * (n % 3 + 1))
        in_flight -= 1
        return n

    results = await async_pool(list(range(12)), tracked, limit)

    assert results == list(range(12))
    assert peak <= limit


@pytest.mark.asyncio
async def test_admits_next_item_as_soon_as_any_slot_frees():
    events = []

    async def work(delay, index):
        events.append(f"start-{index}")
        await asyncio.sleep(delay)
        events.append(f"end-{index}")
        return index

    await async_pool([0.2, 0.01, 0.01, 0.01], work, 2)

    assert events.index("start-3") < events.index("end-0")


@pytest.mark.asyncio
async def test_empty_input_returns_empty_list():
    async def never(_item, _index):
        raise AssertionError("not called")

    assert await async_pool([], never) == []


@pytest.mark.asyncio
async def test_failure_propagates_and_cancels_in_flight_items():
    cancelled = []

    async def work(n, _index):
        if n == 0:
            await asyncio.sleep(0.01)
            raise Boom("item 0")
        try:
            await asyncio.sleep(1.0)
        except asyncio.CancelledError:
            cancelled.append(n)
            raise
        return n

    with pytest.raises(Boom, match="item 0"):
        await async_pool([0, 1, 2], work, 3)

    await asyncio.sleep(0)
    assert sorted(cancelled) == [1, 2]


@pytest.mark.asyncio
async def test_failure_in_queued_item_stops_admission():
    started = []

    async def work(n, _index):
        started.append(n)
        if n == 1:
            raise Boom("item 1")
        await asyncio.sleep(0.05)
        return n

    with pytest.raises(Boom):
        await async_pool([0, 1, 2, 3, 4], work, 2)

    assert 4 not in started


@pytest.mark.asyncio
async def test_item_ending_cancelled_is_raised_not_returned_as_none():
    started = []

    async def work(n, _index):
        started.append(n)
        if n == 1:
            raise asyncio.CancelledError()
        await asyncio.sleep(0.05)
        return n

    with pytest.raises(asyncio.CancelledError):
        await async_pool([0, 1, 2, 3], work, 2)

    assert started == [0, 1]


@pytest.mark.asyncio
async def test_combined_with_safe_async_isolates_failures():
    async def work(n, _index):
        if n % 2:
            raise Boom(str(n))
        return n

    async def isolated(n, index):
        return await safe_async(lambda: work(n, index))

    results = await async_pool([0, 1, 2, 3], isolated, 2)

    assert len(results) == 4


@pytest.mark.asyncio
async def test_rejects_non_positive_concurrency():
    async def work(n, _index):
        return n

    with pytest.raises(ValueError):
        await async_pool([1], work, 0)
