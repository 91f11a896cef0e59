import asyncio

import pytest

from asyncops import async_sequential


@pytest.mark.asyncio
async def test_executes_in_order():
    order = []

    async def double(n, _index):
        order.append(n)
        return n * 2

    results = await async_sequential([1, 2, 3], double)

    assert results == [2, 4, 6]
    assert order == [1, 2, 3]


@pytest.mark.asyncio
async def test_waits_for_each_item_before_starting_next():
    current = 0

    async def work(n, index):
        nonlocal current
        assert current == n - 1
        assert index == n - 1
        await asyncio.sleep(0.01)
        current = n
        return n

    assert await async_sequential([1, 2, 3], work) == [1, 2, 3]


@pytest.mark.asyncio
async def test_failure_stops_remaining_items():
    started = []

    async def work(n, _index):
        started.append(n)
        if n == 2:
            raise RuntimeError("write rejected")
        return n

    with pytest.raises(RuntimeError, match="write rejected"):
        await async_sequential([1, 2, 3], work)

    assert started == [1, 2]
