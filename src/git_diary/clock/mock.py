"""Fixed clock for testing.

Provides a deterministic clock so pipeline tests are reproducible.
"""

from datetime import datetime, timedelta


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, now: datetime) -> None:
        """Initialize fixed clock.

        Args:
            now: Instant to report as the current time
        """
        self._now = now
        self._days_requested: list[int] = []

    def now(self) -> datetime:
        """Return the fixed instant."""
        return self._now

    def days_ago(self, days: int) -> datetime:
        """Return the fixed instant minus ``days`` days."""
        self._days_requested.append(days)
        return self._now - timedelta(days=days)

    def set_now(self, now: datetime) -> None:
        """Move the clock to a new instant.

        Args:
            now: New current time
        """
        self._now = now

    @property
    def days_requested(self) -> list[int]:
        """Get the day counts passed to days_ago."""
        return self._days_requested.copy()


__all__ = ["FixedClock"]
