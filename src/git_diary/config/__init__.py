"""Configuration module for git-diary.

This module provides the configuration dataclasses and their loader.
"""

from dataclasses import dataclass, field


@dataclass
class HistoryConfig:
    """Repository history configuration."""

    repo_path: str = "."


@dataclass
class SummarizerConfig:
    """Summarization service configuration."""

    provider: str = "claude"
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1000
    timeout_seconds: float = 60.0


@dataclass
class StorageConfig:
    """Diary output configuration."""

    base_dir: str = "diaries"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class DiaryConfig:
    """Main git-diary configuration."""

    days: int = 7
    history: HistoryConfig = field(default_factory=HistoryConfig)
    summarizer: SummarizerConfig = field(default_factory=SummarizerConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Public API
__all__ = [
    "DiaryConfig",
    "HistoryConfig",
    "LoggingConfig",
    "StorageConfig",
    "SummarizerConfig",
]
