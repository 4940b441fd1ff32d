"""Core data classes shared by the pipeline stages."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

INVALID_DATE = "Invalid Date"
NO_MESSAGE = "No message"
NO_CONTENT = "No content"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class HistoryEntry:
    """One timestamped record of repository activity.

    Attributes:
        text: Free-text message, kept verbatim
        timestamp: Epoch seconds of the record
    """

    text: str
    timestamp: int

    @property
    def formatted_time(self) -> str | None:
        """Timestamp as ``YYYY-MM-DD HH:MM:SS`` in UTC, or None if out of range."""
        try:
            moment = datetime.fromtimestamp(self.timestamp, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
        return moment.strftime(TIMESTAMP_FORMAT)

    def __str__(self) -> str:
        return f"{self.formatted_time or INVALID_DATE}: {self.text}"


@dataclass(frozen=True)
class DiaryContent:
    """Everything needed to render one diary document.

    Attributes:
        entries: History entries in source order (newest first)
        summary: Model-produced summary text
        start_date: First day of the window, pre-formatted
        end_date: Last day of the window, pre-formatted
    """

    entries: list[HistoryEntry] = field(default_factory=list)
    summary: str = ""
    start_date: str = ""
    end_date: str = ""


__all__ = [
    "DATE_FORMAT",
    "INVALID_DATE",
    "NO_CONTENT",
    "NO_MESSAGE",
    "TIMESTAMP_FORMAT",
    "DiaryContent",
    "HistoryEntry",
]
