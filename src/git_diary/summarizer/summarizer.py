"""Summarizer protocol and prompt construction.

Defines the interface for turning history entries into a narrative
summary, plus the fixed prompt shared by every implementation.
"""

from collections.abc import Sequence
from typing import Protocol

from ..models import HistoryEntry

# Fixed instruction sent ahead of the commit log
SYSTEM_PROMPT = (
    "You are a software developer who has been working on a project and "
    "making commits to a git repository. You want to summarize the commits "
    "you have made during the period covered by the log you are given. "
    "Describe what was worked on, in the first person, as a short diary entry."
)


# Heads the user message; the entries follow on the next line
COMMIT_LOG_LABEL = "Commit log:"

class Summarizer(Protocol):
    """Interface for summarizing repository activity."""

    def summarize(self, entries: Sequence[HistoryEntry]) -> str:
        """Summarize the given entries.

        Args:
            entries: History entries, possibly empty

        Returns:
            Natural-language summary

        Raises:
            SummarizerError: If the summarization service fails
        """
        ...


def build_entry_message(entries: Sequence[HistoryEntry]) -> str:
    """Join the display form of every entry, one per line, in supplied order.

    Args:
        entries: History entries to include

    Returns:
        Newline-joined entry text (empty string for no entries)
    """
    return "\n".join(str(entry) for entry in entries)


def build_user_message(entries: Sequence[HistoryEntry]) -> str:
    """Build the user turn: a fixed label followed by the joined entries.

    The label keeps the message non-empty when there are no entries.
    """
    return f"{COMMIT_LOG_LABEL}\n{build_entry_message(entries)}"


__all__ = [
    "COMMIT_LOG_LABEL",
    "SYSTEM_PROMPT",
    "Summarizer",
    "build_entry_message",
    "build_user_message",
]
