"""History module for git-diary.

Provides repository activity from the git reflog or a mock implementation.
"""

from pathlib import Path

from .mock import MockHistorySource
from .reflog import GitReflogHistorySource, parse_reflog_line
from .source import HistorySource


def create_history_source(
    repo_path: str | Path = ".",
    use_mock: bool = False,
) -> HistorySource:
    """Create a history source instance.

    Args:
        repo_path: Repository to read
        use_mock: If True, return an empty mock source for testing

    Returns:
        HistorySource implementation
    """
    if use_mock:
        return MockHistorySource()
    return GitReflogHistorySource(repo_path)


__all__ = [
    "GitReflogHistorySource",
    "HistorySource",
    "MockHistorySource",
    "create_history_source",
    "parse_reflog_line",
]
