import asyncio
import time

import pytest
from kungfu import Error, Ok

from asyncops import async_all_settled, partition_settled


def describe(result):
    match result:
        case Ok(value):
            return ("ok", value)
        case Error(error):
            return ("error", error)


@pytest.mark.asyncio
async def test_never_short_circuits_and_keeps_order():
    e1 = LookupError("e1")

    async def succeed(value):
        return value

    async def fail(error):
        raise error

    results = await async_all_settled([succeed("s1"), fail(e1), succeed("s2")])

    assert [describe(r) for r in results] == [("ok", "s1"), ("error", e1), ("ok", "s2")]


@pytest.mark.asyncio
async def test_accepts_work_functions():
    async def fetch_user():
        return "user"

    async def fetch_preferences():
        raise ConnectionError("prefs down")

    results = await async_all_settled([fetch_user, fetch_preferences])

    kinds = [describe(r)[0] for r in results]
    assert kinds == ["ok", "error"]


@pytest.mark.asyncio
async def test_runs_everything_in_parallel():
    async def slow(n):
        await asyncio.sleep(0.1)
        return n

    started = time.monotonic()
    results = await async_all_settled([slow(i) for i in range(5)])

    assert time.monotonic() - started < 0.3
    assert [describe(r) for r in results] == [("ok", i) for i in range(5)]


@pytest.mark.asyncio
async def test_slow_failure_does_not_discard_fast_success():
    async def fast():
        return "fast"

    async def slow_failure():
        await asyncio.sleep(0.02)
        raise TimeoutError("late")

    results = await async_all_settled([slow_failure(), fast()])

    assert describe(results[0])[0] == "error"
    assert describe(results[1]) == ("ok", "fast")


@pytest.mark.asyncio
async def test_empty_input():
    assert await async_all_settled([]) == []


@pytest.mark.asyncio
async def test_partition_settled_splits_values_and_errors():
    boom = ValueError("boom")

    async def ok(v):
        return v

    async def bad():
        raise boom

    results = await async_all_settled([ok(1), bad(), ok(3)])
    values, errors = partition_settled(results)

    assert values == [1, 3]
    assert errors == [boom]
