"""Unit tests for the git reflog history source."""

import os
import shutil
import subprocess
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from git_diary.errors import HistorySourceError
from git_diary.history import (
    GitReflogHistorySource,
    MockHistorySource,
    create_history_source,
    parse_reflog_line,
)
from git_diary.models import NO_MESSAGE, HistoryEntry

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")

OLD_SHA = "0" * 40
NEW_SHA = "1" * 40


def _git(repo: Path, *args: str, date: str | None = None) -> None:
    """Run git in ``repo`` with a fixed identity."""
    env = {
        **os.environ,
        "GIT_AUTHOR_NAME": "Test User",
        "GIT_AUTHOR_EMAIL": "test@example.com",
        "GIT_COMMITTER_NAME": "Test User",
        "GIT_COMMITTER_EMAIL": "test@example.com",
    }
    if date is not None:
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
    subprocess.run(["git", *args], cwd=repo, env=env, check=True, capture_output=True)


def _commit(repo: Path, message: str, date: str | None = None) -> None:
    _git(repo, "commit", "--allow-empty", "-m", message, date=date)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Create an empty git repository."""
    path = tmp_path / "repo"
    path.mkdir()
    _git(path, "init")
    return path


class TestParseReflogLine:
    """Tests for reflog line parsing."""

    def test_parse_commit_line(self) -> None:
        """Test parsing a regular commit line."""
        line = (
            f"{OLD_SHA} {NEW_SHA} Test User <test@example.com> 1704067200 +0000"
            "\tcommit (initial): Test commit\n"
        )
        entry = parse_reflog_line(line)
        assert entry == HistoryEntry(text="commit (initial): Test commit", timestamp=1704067200)

    def test_timezone_does_not_shift_timestamp(self) -> None:
        """Test the epoch value is taken as-is regardless of offset."""
        line = f"{OLD_SHA} {NEW_SHA} A <a@b.c> 1704067200 +0530\tcheckout: moving from a to b"
        assert parse_reflog_line(line).timestamp == 1704067200

    def test_message_kept_verbatim(self) -> None:
        """Test tabs and unicode inside the message survive."""
        line = f"{OLD_SHA} {NEW_SHA} A <a@b.c> 1704067200 +0000\tcommit: Fix ünïcode\tbug  "
        assert parse_reflog_line(line).text == "commit: Fix ünïcode\tbug  "

    def test_missing_message_uses_placeholder(self) -> None:
        """Test a line without a message gets the placeholder."""
        line = f"{OLD_SHA} {NEW_SHA} A <a@b.c> 1704067200 +0000"
        assert parse_reflog_line(line).text == NO_MESSAGE

    def test_empty_message_uses_placeholder(self) -> None:
        """Test an empty message gets the placeholder."""
        line = f"{OLD_SHA} {NEW_SHA} A <a@b.c> 1704067200 +0000\t"
        assert parse_reflog_line(line).text == NO_MESSAGE

    def test_malformed_line_raises(self) -> None:
        """Test garbage lines are reported as history errors."""
        with pytest.raises(HistorySourceError, match="Malformed"):
            parse_reflog_line("garbage")

    def test_malformed_timestamp_raises(self) -> None:
        """Test a non-numeric timestamp is reported."""
        line = f"{OLD_SHA} {NEW_SHA} A <a@b.c> yesterday +0000\tcommit: x"
        with pytest.raises(HistorySourceError, match="timestamp"):
            parse_reflog_line(line)


@requires_git
class TestGitReflogHistorySource:
    """Tests for reading real repositories."""

    def test_entries_since_returns_recent_commit(self, repo: Path) -> None:
        """Test a fresh commit is returned for a bound in the past."""
        _commit(repo, "Test commit")
        source = GitReflogHistorySource(repo)

        entries = source.entries_since(int(time.time()) - 3600)

        assert len(entries) == 1
        assert "Test commit" in entries[0].text

    def test_future_bound_returns_empty(self, repo: Path) -> None:
        """Test a bound after every entry yields nothing."""
        _commit(repo, "Test commit")
        source = GitReflogHistorySource(repo)

        assert source.entries_since(int(time.time()) + 3600) == []

    def test_newest_first_and_bounded(self, repo: Path) -> None:
        """Test ordering and that no older entry slips through."""
        _commit(repo, "Old commit", date="1577836800 +0000")  # 2020-01-01
        _commit(repo, "Middle commit", date="1704067200 +0000")  # 2024-01-01
        _commit(repo, "New commit", date="1704153600 +0000")  # 2024-01-02
        source = GitReflogHistorySource(repo)

        everything = source.entries_since(0)
        assert [e.timestamp for e in everything] == [1704153600, 1704067200, 1577836800]

        recent = source.entries_since(1704067200)
        assert [e.timestamp for e in recent] == [1704153600, 1704067200]
        assert "New commit" in recent[0].text
        assert all(e.timestamp >= 1704067200 for e in recent)

    def test_repository_without_reflog_returns_empty(self, repo: Path) -> None:
        """Test a repository with no commits yields nothing."""
        assert GitReflogHistorySource(repo).entries_since(0) == []

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        """Test a path that does not exist is an error."""
        source = GitReflogHistorySource(tmp_path / "does" / "not" / "exist")
        with pytest.raises(HistorySourceError):
            source.entries_since(0)

    def test_plain_directory_raises(self, tmp_path: Path) -> None:
        """Test a directory that is not a repository is an error."""
        plain = tmp_path / "plain"
        plain.mkdir()
        with pytest.raises(HistorySourceError, match="Cannot open repository"):
            GitReflogHistorySource(plain).entries_since(0)

    def test_corrupted_reflog_raises(self, repo: Path) -> None:
        """Test corrupted reflog metadata is reported."""
        _commit(repo, "Test commit")
        reflog = repo / ".git" / "logs" / "HEAD"
        with open(reflog, "a", encoding="utf-8") as f:
            f.write("not a reflog line\n")

        with pytest.raises(HistorySourceError, match="Malformed"):
            GitReflogHistorySource(repo).entries_since(0)

    def test_undecodable_message_uses_placeholder(self, repo: Path) -> None:
        """Test a non-UTF-8 message becomes the placeholder, not replacement text."""
        _commit(repo, "Test commit")
        reflog = repo / ".git" / "logs" / "HEAD"
        with open(reflog, "ab") as f:
            f.write(
                f"{OLD_SHA} {NEW_SHA} Test User <test@example.com> 1704067200 +0000\t".encode()
                + b"commit: caf\xe9\n"
            )

        entries = GitReflogHistorySource(repo).entries_since(0)

        assert entries[0] == HistoryEntry(text=NO_MESSAGE, timestamp=1704067200)
        assert entries[1].text == "commit (initial): Test commit"


class TestGitNotInstalled:
    """Tests for environments without git."""

    def test_missing_git_raises(self, tmp_path: Path) -> None:
        """Test a missing git executable becomes a history error."""
        with patch("git_diary.history.reflog.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(HistorySourceError, match="git executable"):
                GitReflogHistorySource(tmp_path).entries_since(0)

    def test_git_timeout_raises(self, tmp_path: Path) -> None:
        """Test a hung git process becomes a history error."""
        with patch(
            "git_diary.history.reflog.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="git", timeout=10),
        ):
            with pytest.raises(HistorySourceError, match="Failed to run git"):
                GitReflogHistorySource(tmp_path).entries_since(0)


class TestMockHistorySource:
    """Tests for the mock history source."""

    def test_filters_by_bound(self) -> None:
        """Test the mock honours the lower bound."""
        source = MockHistorySource(
            [
                HistoryEntry(text="Second commit", timestamp=1704153600),
                HistoryEntry(text="First commit", timestamp=1704067200),
            ]
        )
        entries = source.entries_since(1704100000)
        assert [e.text for e in entries] == ["Second commit"]
        assert source.bounds == [1704100000]

    def test_set_error(self) -> None:
        """Test the mock can be made to fail."""
        source = MockHistorySource()
        source.set_error("Git repository error")
        with pytest.raises(HistorySourceError, match="Git repository error"):
            source.entries_since(0)
        assert source.call_count == 1


class TestCreateHistorySource:
    """Tests for the history source factory."""

    def test_default_is_reflog(self) -> None:
        """Test the factory returns the reflog reader."""
        source = create_history_source("/some/repo")
        assert isinstance(source, GitReflogHistorySource)
        assert source.repo_path == Path("/some/repo")

    def test_mock(self) -> None:
        """Test the factory returns a mock when asked."""
        assert isinstance(create_history_source(use_mock=True), MockHistorySource)
