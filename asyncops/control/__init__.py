from .poll import PollHook, PollPolicy, poll_until
from .retry import RetryHook, RetryPolicy, retry_with_backoff, with_retry

__all__ = (
    # Policies
    "PollPolicy",
    "RetryPolicy",
    # Hooks
    "PollHook",
    "RetryHook",
    # Poll
    "poll_until",
    # Retry
    "retry_with_backoff",
    "with_retry",
)
