"""Git reflog history source.

Reads the ``HEAD`` reflog of a local repository. The git directory is
resolved with ``git rev-parse`` so worktrees and ``.git`` files behave
the same as plain checkouts; the reflog itself is parsed directly.
"""

import logging
import subprocess
from collections.abc import Iterator
from pathlib import Path

from ..errors import HistorySourceError
from ..models import NO_MESSAGE, HistoryEntry

logger = logging.getLogger(__name__)

GIT_TIMEOUT_SECONDS = 10


def parse_reflog_line(line: str) -> HistoryEntry:
    """Parse a single reflog line.

    A reflog line looks like::

        <old-sha> <new-sha> Name <email> 1704067200 +0100\\tcommit: message

    Args:
        line: Raw line from ``logs/HEAD``

    Returns:
        HistoryEntry with the committer time and the message verbatim

    Raises:
        HistorySourceError: If the line has no parseable timestamp
    """
    line = line.rstrip("\n")
    header, _, message = line.partition("\t")

    parts = header.rsplit(" ", 2)
    if len(parts) != 3 or ">" not in parts[0]:
        raise HistorySourceError(f"Malformed reflog entry: {line!r}")

    try:
        timestamp = int(parts[1])
    except ValueError as e:
        raise HistorySourceError(f"Malformed reflog timestamp: {line!r}") from e

    return HistoryEntry(text=message or NO_MESSAGE, timestamp=timestamp)


def _decode_reflog_line(raw: bytes) -> str:
    """Decode a raw reflog line.

    A message that is not valid UTF-8 is dropped and parses as the
    no-message placeholder.
    """
    header, tab, message = raw.rstrip(b"\n").partition(b"\t")
    try:
        text = message.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug(f"Undecodable reflog message: {message!r}")
        text = ""
    return header.decode("utf-8", errors="replace") + tab.decode() + text


class GitReflogHistorySource:
    """History source backed by a repository's HEAD reflog."""

    def __init__(self, repo_path: str | Path) -> None:
        """Initialize reflog reader.

        Args:
            repo_path: Path to the repository working tree or git directory
        """
        self._repo_path = Path(repo_path)

    @property
    def repo_path(self) -> Path:
        """Get the configured repository path."""
        return self._repo_path

    def entries_since(self, lower_bound: int) -> list[HistoryEntry]:
        """Return reflog entries at or after ``lower_bound``, newest first.

        Scanning stops at the first entry older than the bound.
        """
        reflog_path = self._git_dir() / "logs" / "HEAD"
        if not reflog_path.exists():
            logger.debug(f"No reflog at {reflog_path}")
            return []

        entries = []
        for entry in self._iter_newest_first(reflog_path):
            if entry.timestamp < lower_bound:
                break
            entries.append(entry)

        logger.debug(f"Read {len(entries)} reflog entries since {lower_bound}")
        return entries

    def _git_dir(self) -> Path:
        """Resolve the absolute git directory of the repository."""
        try:
            result = subprocess.run(
                ["git", "-C", str(self._repo_path), "rev-parse", "--absolute-git-dir"],
                capture_output=True,
                text=True,
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except FileNotFoundError as e:
            raise HistorySourceError("git executable not found on PATH") from e
        except subprocess.SubprocessError as e:
            raise HistorySourceError(f"Failed to run git: {e}") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise HistorySourceError(
                f"Cannot open repository at {self._repo_path}: {detail}"
            )

        return Path(result.stdout.strip())

    def _iter_newest_first(self, reflog_path: Path) -> Iterator[HistoryEntry]:
        """Yield parsed reflog entries from newest to oldest."""
        try:
            with open(reflog_path, "rb") as f:
                lines = [_decode_reflog_line(raw) for raw in f if raw.strip()]
        except OSError as e:
            raise HistorySourceError(f"Cannot read reflog {reflog_path}: {e}") from e

        for line in reversed(lines):
            yield parse_reflog_line(line)


__all__ = ["GitReflogHistorySource", "parse_reflog_line"]
