"""Interface Clock - port for system time."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """
    Port for the system clock.

    Allows injecting fixed time in tests.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Returns the current instant.

        Returns:
            timezone-aware datetime in UTC.
        """
        raise NotImplementedError


class SystemClock(Clock):
    """Real implementation backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FakeClock(Clock):
    """
    Fake implementation for tests.

    Always returns the instant it was built with.
    """

    def __init__(self, fixed_time: datetime | None = None):
        self._fixed_time = fixed_time or datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._fixed_time
