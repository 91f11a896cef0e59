import pytest

pytest_plugins = ["pytest_asyncio"]


class SleepRecorder:
    """Stand-in for asyncops' sleep that records durations instead of waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()
