"""Diary generation pipeline.

Composes a history source, summarizer, document store and clock into
one run: window, fetch, preview, summarize, persist. A failure at any
stage propagates unchanged and nothing is written.
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .clock import Clock, SystemClock
from .history import HistorySource, create_history_source
from .models import DATE_FORMAT, DiaryContent, HistoryEntry
from .storage import DocumentStore, create_document_store
from .summarizer import Summarizer, create_summarizer

if TYPE_CHECKING:
    from .config import DiaryConfig

logger = logging.getLogger(__name__)


class DiaryGenerator:
    """Generates a diary for the last ``days_to_include`` days."""

    def __init__(
        self,
        history_source: HistorySource,
        summarizer: Summarizer,
        document_store: DocumentStore,
        clock: Clock,
        days_to_include: int,
    ) -> None:
        """Initialize the generator.

        Args:
            history_source: Where repository activity is read from
            summarizer: Produces the narrative summary
            document_store: Persists the finished diary
            clock: Supplies the current time
            days_to_include: Size of the window in days

        Raises:
            ValueError: If days_to_include is not a positive integer
        """
        if not isinstance(days_to_include, int) or isinstance(days_to_include, bool):
            raise ValueError(f"days_to_include must be an int, got {days_to_include!r}")
        if days_to_include < 1:
            raise ValueError(f"days_to_include must be positive, got {days_to_include}")

        self._history_source = history_source
        self._summarizer = summarizer
        self._document_store = document_store
        self._clock = clock
        self._days_to_include = days_to_include

    @classmethod
    def from_config(
        cls,
        config: "DiaryConfig",
        days_to_include: int | None = None,
        use_mocks: bool = False,
    ) -> "DiaryGenerator":
        """Build a generator wired with the configured collaborators.

        Args:
            config: Loaded configuration
            days_to_include: Window size; defaults to config.days
            use_mocks: If True, use mock history, summarizer and storage

        Returns:
            Ready-to-run DiaryGenerator
        """
        return cls(
            history_source=create_history_source(config.history.repo_path, use_mock=use_mocks),
            summarizer=create_summarizer(config.summarizer, use_mock=use_mocks),
            document_store=create_document_store(config.storage.base_dir, use_mock=use_mocks),
            clock=SystemClock(),
            days_to_include=days_to_include if days_to_include is not None else config.days,
        )

    @property
    def days_to_include(self) -> int:
        """Get the window size in days."""
        return self._days_to_include

    def format_preview(self, entries: Sequence[HistoryEntry]) -> str:
        """Format entries as a plain listing, oldest first.

        Args:
            entries: Entries newest first, as returned by the history source

        Returns:
            Listing headed with the window size
        """
        lines = [f"Last {self._days_to_include} days commits:\n"]
        lines.extend(f"{entry}\n" for entry in reversed(entries))
        return "".join(lines)

    def generate(self) -> str:
        """Run the pipeline once.

        Returns:
            Path of the saved diary

        Raises:
            HistorySourceError: If the history cannot be read
            SummarizerError: If summarization fails
            StorageError: If the diary cannot be written
        """
        end = self._clock.now()
        start = self._clock.days_ago(self._days_to_include)
        start_date = start.strftime(DATE_FORMAT)
        end_date = end.strftime(DATE_FORMAT)

        entries = self._history_source.entries_since(int(start.timestamp()))
        logger.info(f"Found {len(entries)} entries between {start_date} and {end_date}")

        logger.info(self.format_preview(entries))

        summary = self._summarizer.summarize(entries)
        logger.info(f"Summary:\n{summary}")

        content = DiaryContent(
            entries=list(entries),
            summary=summary,
            start_date=start_date,
            end_date=end_date,
        )
        return self._document_store.save(content)


__all__ = ["DiaryGenerator"]
