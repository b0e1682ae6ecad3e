"""Fake Time implementation for testing.

FakeTime returns a fixed instant so timestamped defaults are deterministic.
"""

from datetime import datetime

from gitauto.core.time import Time

DEFAULT_FAKE_NOW = datetime(2025, 4, 21, 14, 30, 5)


class FakeTime(Time):
    """Fake implementation that always reports the same time.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, now: datetime = DEFAULT_FAKE_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
