from .sleep import sleep
from .timeout import with_timeout

__all__ = (
    # Sleep
    "sleep",
    # Timeout
    "with_timeout",
)
