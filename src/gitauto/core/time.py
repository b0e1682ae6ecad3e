"""Clock abstraction for testing."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract interface for reading the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...


class RealTime(Time):
    """Production implementation using the system clock."""

    def now(self) -> datetime:
        return datetime.now()
