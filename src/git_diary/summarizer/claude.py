"""Claude-backed summarizer.

Sends the commit log to the Anthropic Messages API and joins the
returned content blocks into a single summary.
"""

import logging
import os
import time
from collections.abc import Sequence
from dataclasses import dataclass

import anthropic

from ..errors import (
    SummarizerAPIError,
    SummarizerAuthError,
    SummarizerConnectivityError,
    SummarizerError,
    SummarizerTimeoutError,
)
from ..models import NO_CONTENT, HistoryEntry
from .summarizer import SYSTEM_PROMPT, build_user_message

logger = logging.getLogger(__name__)


@dataclass
class ClaudeSummarizerConfig:
    """Configuration for the Claude summarizer."""

    api_key: str
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1000
    timeout_seconds: float = 60.0
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "ClaudeSummarizerConfig":
        """Create config from environment variables.

        Returns:
            ClaudeSummarizerConfig with API key from environment.

        Raises:
            ValueError: If ANTHROPIC_API_KEY is not set.
        """
        api_key = os.environ.get("ANTHROPIC_API_KEY", "").strip()
        if not api_key:
            raise ValueError(
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Set it to generate diary summaries."
            )
        base_url = os.environ.get("ANTHROPIC_BASE_URL", "").strip() or None
        return cls(api_key=api_key, base_url=base_url)


class ClaudeSummarizer:
    """Summarizer using the Anthropic Messages API."""

    def __init__(self, config: ClaudeSummarizerConfig) -> None:
        """Initialize Claude summarizer.

        Args:
            config: Configuration for the summarizer.
        """
        self._config = config
        self._client = anthropic.Anthropic(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._config.model

    def summarize(self, entries: Sequence[HistoryEntry]) -> str:
        """Summarize entries with Claude.

        Every returned content block contributes its text, in order; a
        block without text contributes a placeholder.

        Raises:
            SummarizerTimeoutError: If the request times out.
            SummarizerAuthError: If authentication fails.
            SummarizerConnectivityError: If the API cannot be reached.
            SummarizerAPIError: If the API returns an error status.
            SummarizerError: If the response is malformed.
        """
        start_time = time.time()

        try:
            response = self._client.messages.create(
                model=self._config.model,
                max_tokens=self._config.max_tokens,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": build_user_message(entries)}],
            )
        except anthropic.AuthenticationError as e:
            raise SummarizerAuthError(f"Authentication failed: {e}") from e
        except anthropic.APITimeoutError as e:
            # Timeout subclasses connection error, so it is caught first
            raise SummarizerTimeoutError(
                f"Request timed out after {self._config.timeout_seconds} seconds."
            ) from e
        except anthropic.APIConnectionError as e:
            raise SummarizerConnectivityError(f"Failed to connect to Claude API: {e}") from e
        except anthropic.APIStatusError as e:
            raise SummarizerAPIError(f"API error: {e.message}", status_code=e.status_code) from e
        except anthropic.APIError as e:
            raise SummarizerError(f"Claude API error: {e}") from e

        content = getattr(response, "content", None)
        if content is None:
            raise SummarizerError("Malformed response from Claude API: no content")

        parts = []
        for block in content:
            text = getattr(block, "text", None)
            parts.append(text if text is not None else NO_CONTENT)

        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Summarized {len(entries)} entries with {self._config.model} in {latency_ms}ms"
        )

        return "".join(parts)


__all__ = ["ClaudeSummarizer", "ClaudeSummarizerConfig"]
