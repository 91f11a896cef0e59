from .batch import async_batch
from .debounce import Debounced, debounce_async
from .pool import async_pool
from .sequential import async_sequential
from .settle import async_all_settled, partition_settled
from .throttle import Throttled, throttle_async

__all__ = (
    # Wrappers
    "Debounced",
    "Throttled",
    # Batch
    "async_batch",
    # Debounce
    "debounce_async",
    # Pool
    "async_pool",
    # Sequential
    "async_sequential",
    # Settle
    "async_all_settled",
    "partition_settled",
    # Throttle
    "throttle_async",
)
