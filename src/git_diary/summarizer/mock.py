"""Mock summarizer for testing.

Provides a controllable summarizer for unit and integration tests.
"""

from collections.abc import Sequence

from ..errors import SummarizerError
from ..models import HistoryEntry
from .summarizer import build_user_message


class MockSummarizer:
    """Mock summarizer returning a preset summary."""

    def __init__(self, response: str = "This is a mock summary.") -> None:
        """Initialize mock summarizer.

        Args:
            response: Summary to return
        """
        self._response = response
        self._error_message: str | None = None
        self._calls: list[list[HistoryEntry]] = []

    def set_response(self, text: str) -> None:
        """Set the summary to return.

        Args:
            text: Text to return
        """
        self._response = text
        self._error_message = None

    def set_error(self, message: str) -> None:
        """Set an error to raise on the next summarization.

        Args:
            message: Error message
        """
        self._error_message = message

    def summarize(self, entries: Sequence[HistoryEntry]) -> str:
        """Return the preset summary."""
        self._calls.append(list(entries))

        if self._error_message:
            raise SummarizerError(self._error_message)

        return self._response

    @property
    def call_count(self) -> int:
        """Get number of summarize calls."""
        return len(self._calls)

    @property
    def calls(self) -> list[list[HistoryEntry]]:
        """Get the entries passed to each call."""
        return [list(c) for c in self._calls]

    @property
    def last_message(self) -> str | None:
        """Get the user message the last call would have sent."""
        if not self._calls:
            return None
        return build_user_message(self._calls[-1])


__all__ = ["MockSummarizer"]
