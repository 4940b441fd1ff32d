"""History source protocol.

Defines the interface for reading timestamped repository activity.
"""

from typing import Protocol

from ..models import HistoryEntry


class HistorySource(Protocol):
    """Interface for reading repository activity since a point in time."""

    def entries_since(self, lower_bound: int) -> list[HistoryEntry]:
        """Return entries recorded at or after ``lower_bound``.

        Args:
            lower_bound: Epoch seconds; older entries are excluded

        Returns:
            Entries newest first; empty when nothing qualifies

        Raises:
            HistorySourceError: If the repository cannot be opened or read
        """
        ...


__all__ = ["HistorySource"]
