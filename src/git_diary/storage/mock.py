"""Mock document store for testing."""

from ..errors import StorageError
from ..models import DiaryContent
from .markdown import diary_file_name, render_markdown


class MockDocumentStore:
    """Document store that keeps saved diaries in memory."""

    def __init__(self, base_dir: str = "diaries", path: str | None = None) -> None:
        """Initialize mock store.

        Args:
            base_dir: Directory used when naming diaries
            path: Fixed path to return from save instead of the computed name
        """
        self._base_dir = base_dir
        self._path = path
        self._error_message: str | None = None
        self._saved: list[DiaryContent] = []
        self._documents: dict[str, str] = {}

    def set_error(self, message: str) -> None:
        """Make the next saves fail.

        Args:
            message: Error message
        """
        self._error_message = message

    def file_name(self, content: DiaryContent) -> str:
        """Return the computed diary path, or the fixed one if configured."""
        if self._path is not None:
            return self._path
        return diary_file_name(self._base_dir, content.start_date, content.end_date)

    def render(self, content: DiaryContent) -> str:
        """Render the content with the Markdown rules."""
        return render_markdown(content)

    def save(self, content: DiaryContent) -> str:
        """Record the content and return its path."""
        self._saved.append(content)

        if self._error_message:
            raise StorageError(self._error_message)

        path = self.file_name(content)
        self._documents[path] = self.render(content)
        return path

    @property
    def saved(self) -> list[DiaryContent]:
        """Get every content passed to save."""
        return self._saved.copy()

    @property
    def documents(self) -> dict[str, str]:
        """Get rendered documents keyed by path."""
        return dict(self._documents)

    @property
    def call_count(self) -> int:
        """Get number of save calls."""
        return len(self._saved)


__all__ = ["MockDocumentStore"]
