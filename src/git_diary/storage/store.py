"""Document store protocol.

Defines the interface for naming, rendering and persisting diaries.
"""

from typing import Protocol

from ..models import DiaryContent


class DocumentStore(Protocol):
    """Interface for persisting diary documents."""

    def save(self, content: DiaryContent) -> str:
        """Persist the diary and return where it was written.

        Raises:
            StorageError: If the directory or file cannot be written
        """
        ...

    def file_name(self, content: DiaryContent) -> str:
        """Return the path the diary for ``content`` is written to."""
        ...

    def render(self, content: DiaryContent) -> str:
        """Return the full document text for ``content``."""
        ...


__all__ = ["DocumentStore"]
