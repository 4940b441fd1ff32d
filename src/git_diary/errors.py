"""Error types for the diary pipeline.

Each pipeline stage raises its own error family. The orchestrator lets
them propagate unchanged; presentation is left to the entry point.
"""


class DiaryError(Exception):
    """Base exception for diary generation errors."""

    pass


class HistorySourceError(DiaryError):
    """Raised when the repository history cannot be located or read."""

    pass


class SummarizerError(DiaryError):
    """Raised when the summarization service fails or answers badly."""

    pass


class SummarizerTimeoutError(SummarizerError):
    """Raised when the summarization request times out."""

    pass


class SummarizerAuthError(SummarizerError):
    """Raised when the summarization service rejects the credentials."""

    pass


class SummarizerConnectivityError(SummarizerError):
    """Raised when the summarization service cannot be reached."""

    pass


class SummarizerAPIError(SummarizerError):
    """Raised when the summarization service returns an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message from the provider.
            status_code: HTTP status code if available.
        """
        super().__init__(message)
        self.status_code = status_code


class StorageError(DiaryError):
    """Raised when the diary document cannot be written."""

    pass


__all__ = [
    "DiaryError",
    "HistorySourceError",
    "StorageError",
    "SummarizerAPIError",
    "SummarizerAuthError",
    "SummarizerConnectivityError",
    "SummarizerError",
    "SummarizerTimeoutError",
]
