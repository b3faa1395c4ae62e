"""Fake Time implementation for testing.

FakeTime tracks sleep() calls without actually sleeping, enabling fast tests.
"""

from datetime import UTC, datetime, timedelta

from ghcs.gateway.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation that tracks calls without sleeping.

    Sleeping advances the fake clock so now() stays consistent with it.
    """

    def __init__(self, current: datetime | None = None) -> None:
        self._current = current or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
        self._sleep_calls: list[float] = []

    @property
    def sleep_calls(self) -> list[float]:
        """Seconds passed to each sleep() call, for test assertions only."""
        return self._sleep_calls

    def sleep(self, seconds: float) -> None:
        self._sleep_calls.append(seconds)
        self._current += timedelta(seconds=seconds)

    def now(self) -> datetime:
        return self._current
