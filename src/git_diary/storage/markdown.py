"""Markdown document store.

Writes one Markdown file per diary window under a base directory.
"""

import logging
from pathlib import Path

from ..errors import StorageError
from ..models import DiaryContent

logger = logging.getLogger(__name__)

FILE_PREFIX = "git-diary-"
FILE_SUFFIX = ".md"


def diary_file_name(base_dir: str, start_date: str, end_date: str) -> str:
    """Build the diary path for a date window.

    Only literal ``-`` characters are removed from the dates; any other
    separator is kept as-is.

    Args:
        base_dir: Directory the diary lives in
        start_date: First day of the window
        end_date: Last day of the window

    Returns:
        Path string such as ``diaries/git-diary-20240101-to-20240107.md``
    """
    start = start_date.replace("-", "")
    end = end_date.replace("-", "")
    return f"{base_dir}/{FILE_PREFIX}{start}-to-{end}{FILE_SUFFIX}"


def render_markdown(content: DiaryContent) -> str:
    """Render diary content as Markdown.

    Entries arrive newest first and are listed oldest first.

    Args:
        content: Diary content to render

    Returns:
        Markdown document text
    """
    commit_logs = "".join(f"- {entry}\n" for entry in reversed(content.entries))

    return (
        f"# Git Diary ({content.start_date} – {content.end_date})\n\n"
        f"## Commit Logs\n\n{commit_logs}\n\n"
        f"## AI-generated Summary\n\n{content.summary}\n"
    )


class MarkdownDocumentStore:
    """Document store writing Markdown files to a directory."""

    def __init__(self, base_dir: str | Path) -> None:
        """Initialize the store.

        Args:
            base_dir: Directory diaries are written to; created on save
        """
        self._base_dir = str(base_dir)

    @property
    def base_dir(self) -> str:
        """Get the base directory."""
        return self._base_dir

    def file_name(self, content: DiaryContent) -> str:
        """Return the diary path for the content's date window."""
        return diary_file_name(self._base_dir, content.start_date, content.end_date)

    def render(self, content: DiaryContent) -> str:
        """Return the Markdown document for the content."""
        return render_markdown(content)

    def save(self, content: DiaryContent) -> str:
        """Write the diary, replacing any existing file at the same path.

        Args:
            content: Diary content to persist

        Returns:
            Path the diary was written to

        Raises:
            StorageError: If the directory or file cannot be written
        """
        try:
            Path(self._base_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to create diary directory {self._base_dir}: {e}"
            ) from e

        file_name = self.file_name(content)

        try:
            Path(file_name).write_text(self.render(content), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write diary file {file_name}: {e}") from e

        logger.info(f"Diary saved to: {file_name}")
        return file_name


__all__ = ["MarkdownDocumentStore", "diary_file_name", "render_markdown"]
