"""Real time implementation using the system clock."""

import time
from datetime import UTC, datetime

from ghcs.gateway.time.abc import Time


class RealTime(Time):
    """Production implementation using actual time.sleep()."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def now(self) -> datetime:
        return datetime.now(UTC)
