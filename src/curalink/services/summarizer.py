"""Symptom summarization through the Anthropic Messages API."""

import logging

from anthropic import APIError, AsyncAnthropic

from curalink.constants import (
    SUMMARY_MAX_TOKENS,
    SUMMARY_PROMPT_TEMPLATE,
    SUMMARY_SYSTEM_PROMPT,
)
from curalink.exceptions import ConfigurationError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


class Summarizer:
    """Single-shot completion gateway. No streaming, no history, no retries."""

    def __init__(
        self,
        api_key: str,
        model: str,
        client: AsyncAnthropic | None = None,
    ) -> None:
        self.model = model
        if client is None and api_key:
            client = AsyncAnthropic(api_key=api_key, max_retries=0)
        self.client = client

    async def summarize(self, symptoms: str | None) -> str:
        if not symptoms or not symptoms.strip():
            raise ValidationError("Symptoms required")
        if self.client is None:
            logger.error("Summarization requested but ANTHROPIC_API_KEY is not set")
            raise ConfigurationError("AI summary API key not set")

        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=SUMMARY_MAX_TOKENS,
                system=SUMMARY_SYSTEM_PROMPT,
                messages=[
                    {
                        "role": "user",
                        "content": SUMMARY_PROMPT_TEMPLATE.format(symptoms=symptoms),
                    }
                ],
            )
        except APIError as e:
            logger.error("Summarization call failed: %s", e)
            raise UpstreamError("AI summary failed") from e

        summary = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        ).strip()
        if not summary:
            logger.error("Summarization returned no text (stop_reason=%s)", response.stop_reason)
            raise UpstreamError("AI did not return a summary")
        return summary

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
