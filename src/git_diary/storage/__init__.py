"""Storage module for git-diary.

Provides Markdown persistence of diaries and an in-memory mock.
"""

from pathlib import Path

from .markdown import MarkdownDocumentStore, diary_file_name, render_markdown
from .mock import MockDocumentStore
from .store import DocumentStore


def create_document_store(
    base_dir: str | Path = "diaries",
    use_mock: bool = False,
) -> DocumentStore:
    """Create a document store instance.

    Args:
        base_dir: Directory diaries are written to
        use_mock: If True, return in-memory implementation for testing

    Returns:
        DocumentStore implementation
    """
    if use_mock:
        return MockDocumentStore(base_dir=str(base_dir))
    return MarkdownDocumentStore(base_dir)


__all__ = [
    "DocumentStore",
    "MarkdownDocumentStore",
    "MockDocumentStore",
    "create_document_store",
    "diary_file_name",
    "render_markdown",
]
