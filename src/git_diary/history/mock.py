"""Mock history source for testing."""

from ..errors import HistorySourceError
from ..models import HistoryEntry


class MockHistorySource:
    """In-memory history source with controllable failures."""

    def __init__(self, entries: list[HistoryEntry] | None = None) -> None:
        """Initialize mock history source.

        Args:
            entries: Entries to serve, newest first
        """
        self._entries: list[HistoryEntry] = list(entries or [])
        self._error_message: str | None = None
        self._bounds: list[int] = []

    def set_entries(self, entries: list[HistoryEntry]) -> None:
        """Replace the served entries.

        Args:
            entries: Entries to serve, newest first
        """
        self._entries = list(entries)
        self._error_message = None

    def set_error(self, message: str) -> None:
        """Make the next reads fail.

        Args:
            message: Error message
        """
        self._error_message = message

    def entries_since(self, lower_bound: int) -> list[HistoryEntry]:
        """Return served entries at or after ``lower_bound``."""
        self._bounds.append(lower_bound)

        if self._error_message:
            raise HistorySourceError(self._error_message)

        return [e for e in self._entries if e.timestamp >= lower_bound]

    @property
    def call_count(self) -> int:
        """Get number of entries_since calls."""
        return len(self._bounds)

    @property
    def bounds(self) -> list[int]:
        """Get the lower bounds requested so far."""
        return self._bounds.copy()


__all__ = ["MockHistorySource"]
