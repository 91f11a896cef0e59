from __future__ import annotations

from _infra import FakeListingsApi, Unavailable, banner, run

from asyncops import RetryPolicy, async_all_settled, async_pool, retry_with_backoff, with_timeout
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: retry + timeout + bounded pool + settle-all")

    api = FakeListingsApi(name="listings", delay_seconds=0.01, failures_before_ok=2)

    sale = await with_timeout(
        retry_with_backoff(
            lambda: api.fetch_sale(42),
            RetryPolicy(
                max_retries=3,
                initial_delay=0.01,
                retry_on=lambda e: isinstance(e, Unavailable),
                on_retry=lambda e, n: print(f"retry {n}: {e}"),
            ),
        ),
        seconds=1.0,
        message="listing fetch took too long",
    )
    print(f"fetched: {sale.title}")

    sales = await async_pool([1, 2, 3, 4, 5], lambda sale_id, _: api.fetch_sale(sale_id), 2)
    print(f"pooled: {[s.title for s in sales]}")

    flaky = FakeListingsApi(name="replica", failures_before_ok=1)
    results = await async_all_settled([flaky.fetch_sale(7), api.fetch_sale(8)])
    for result in results:
        match result:
            case Ok(s):
                print(f"ok: {s.title}")
            case Error(err):
                print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
