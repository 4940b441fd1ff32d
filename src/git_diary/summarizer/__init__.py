"""Summarizer module for git-diary.

Provides commit-log summarization using Claude or a mock implementation.
"""

from dataclasses import replace
from typing import TYPE_CHECKING

from .claude import ClaudeSummarizer, ClaudeSummarizerConfig
from .mock import MockSummarizer
from .summarizer import (
    COMMIT_LOG_LABEL,
    SYSTEM_PROMPT,
    Summarizer,
    build_entry_message,
    build_user_message,
)

if TYPE_CHECKING:
    from ..config import SummarizerConfig


def create_summarizer(
    config: "SummarizerConfig | None" = None,
    use_mock: bool = False,
) -> Summarizer:
    """Create a summarizer instance.

    Args:
        config: Summarizer configuration
        use_mock: If True, return mock implementation for testing

    Returns:
        Summarizer implementation

    Raises:
        ValueError: If the provider is unknown or credentials are missing
    """
    if use_mock:
        return MockSummarizer()

    if config is None:
        return ClaudeSummarizer(ClaudeSummarizerConfig.from_env())

    if config.provider != "claude":
        raise ValueError(f"Unknown summarizer provider: {config.provider}")

    claude_config = replace(
        ClaudeSummarizerConfig.from_env(),
        model=config.model,
        max_tokens=config.max_tokens,
        timeout_seconds=config.timeout_seconds,
    )
    return ClaudeSummarizer(claude_config)


__all__ = [
    "COMMIT_LOG_LABEL",
    "SYSTEM_PROMPT",
    "ClaudeSummarizer",
    "ClaudeSummarizerConfig",
    "MockSummarizer",
    "Summarizer",
    "build_entry_message",
    "build_user_message",
    "create_summarizer",
]
