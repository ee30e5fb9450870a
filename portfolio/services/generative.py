"""
Generative-text collaborator backed by the Anthropic Messages API.

The client returns the canonical result shape ``{"text": <reply>}``. When
the model produces no text blocks the ``text`` key is omitted and the
normalizer substitutes its fallback reply.
"""
from typing import Any, Optional

import anthropic
import structlog

from portfolio.core.exceptions import UpstreamError

logger = structlog.get_logger(__name__)


class AnthropicTextGenerator:
    """Single-call, non-streaming text generation."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        max_tokens: int,
        client: Optional[anthropic.AsyncAnthropic] = None,
    ):
        self._api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        """Lazy-loaded Anthropic client."""
        if self._client is None:
            if not self._api_key:
                raise UpstreamError("Anthropic API key not configured")
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key)
        return self._client

    def is_configured(self) -> bool:
        return bool(self._api_key) or self._client is not None

    async def generate(self, prompt: str) -> dict[str, Any]:
        """
        Generate a reply for one prompt.

        Raises:
            UpstreamError: If the client is unavailable or the API call fails.
        """
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except UpstreamError:
            raise
        except anthropic.APIError as e:
            logger.error("generation_failed", model=self.model, error=str(e))
            raise UpstreamError(f"Anthropic API error: {type(e).__name__}") from e

        text = "".join(
            block.text for block in (response.content or []) if getattr(block, "type", None) == "text"
        )
        logger.info(
            "generation_completed",
            model=self.model,
            prompt_chars=len(prompt),
            reply_chars=len(text),
        )
        return {"text": text} if text else {}
