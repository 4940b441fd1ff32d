"""Clock protocol and wall-clock implementation.

Isolates the pipeline from the system time so runs can be reproduced.
"""

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Interface for reading the current time."""

    def now(self) -> datetime:
        """Return the current moment as a timezone-aware datetime."""
        ...

    def days_ago(self, days: int) -> datetime:
        """Return the moment ``days`` days before now.

        Args:
            days: Non-negative number of days

        Returns:
            Timezone-aware datetime
        """
        ...


class SystemClock:
    """Clock backed by the system time in the local time zone."""

    def now(self) -> datetime:
        """Return the current local time."""
        return datetime.now().astimezone()

    def days_ago(self, days: int) -> datetime:
        """Return the local time ``days`` days ago, read fresh on every call."""
        return self.now() - timedelta(days=days)


__all__ = ["Clock", "SystemClock"]
