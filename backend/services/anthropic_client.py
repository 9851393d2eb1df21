"""
Anthropic streaming client.

Connects to Anthropic Messages API, streams text chunks.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import anthropic

logger = logging.getLogger(__name__)


class AnthropicClient:
    """Streams responses from Anthropic Messages API."""

    def __init__(self, api_key: str):
        """
        Initialize Anthropic client.

        Args:
            api_key: Anthropic API key
        """
        self.client = anthropic.AsyncAnthropic(api_key=api_key)

    async def stream(
        self,
        messages: list[dict[str, Any]],
        system: str,
        model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4096,
    ) -> AsyncIterator[str]:
        """
        Stream response from Anthropic API.

        Args:
            messages: Messages array for the conversation
            system: System prompt
            model: Model identifier
            max_tokens: Maximum tokens to generate

        Yields:
            Text chunks as they arrive
        """
        async with self.client.messages.stream(
            model=model,
            max_tokens=max_tokens,
            system=system,
            messages=messages,
        ) as stream:
            async for text in stream.text_stream:
                yield text

            # After stream completes, log usage stats
            final_message = await stream.get_final_message()
            if final_message and hasattr(final_message, "usage"):
                logger.info(
                    "anthropic: model=%s input_tokens=%d output_tokens=%d",
                    model,
                    final_message.usage.input_tokens,
                    final_message.usage.output_tokens,
                )
