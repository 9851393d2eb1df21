"""Synthesizer — one conversational turn in, one validated reply out."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import Sequence
from typing import Any, Protocol

import anthropic
from pydantic import ValidationError

from backend.config import settings
from backend.models.portfolio import SynthesizerResponse
from backend.services.prompt_builder import build_messages, build_system_prompt
from engine.kernel.merge import SynthesizerReply
from engine.kernel.types import Message, PortfolioData

logger = logging.getLogger(__name__)

# Transient error types that warrant a retry
_RETRYABLE_ANTHROPIC = (
    anthropic.RateLimitError,
    anthropic.APIConnectionError,
    anthropic.InternalServerError,
)


class StreamingLLM(Protocol):
    def stream(
        self,
        messages: list[dict[str, Any]],
        system: str,
        model: str = ...,
        max_tokens: int = ...,
    ) -> Any: ...


class SynthesizerError(Exception):
    """The synthesizer could not produce a valid reply."""


def strip_code_fences(content: str) -> str:
    """Remove a markdown code fence wrapped around the payload, if any."""
    content = content.strip()
    if not content.startswith("```"):
        return content
    lines = content.split("\n")[1:]
    if lines and lines[-1].strip().startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def parse_reply(content: str) -> SynthesizerReply:
    """
    Parse raw model output into a reply.

    Raises:
        SynthesizerError: If the output is not JSON or violates the schema
    """
    payload = strip_code_fences(content)
    try:
        raw = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.warning("synthesizer: malformed JSON (%s): %.200s", e, payload)
        raise SynthesizerError(f"Malformed JSON from synthesizer: {e}") from e

    try:
        response = SynthesizerResponse.model_validate(raw)
    except ValidationError as e:
        logger.warning("synthesizer: schema violation: %s", e)
        raise SynthesizerError(f"Synthesizer reply violates schema: {e.error_count()} error(s)") from e

    portfolio = response.portfolio.to_portfolio() if response.portfolio is not None else None
    return SynthesizerReply(chat_response=response.chat_response, portfolio=portfolio)


class Synthesizer:
    """Sends the conversation to the LLM and validates what comes back."""

    def __init__(
        self,
        model: str | None = None,
        max_tokens: int | None = None,
        max_retries: int | None = None,
        history_window: int | None = None,
    ) -> None:
        self.model = model or settings.PORTFOLIO_MODEL
        self.max_tokens = max_tokens or settings.PORTFOLIO_MAX_TOKENS
        self.max_retries = settings.SYNTHESIZER_MAX_RETRIES if max_retries is None else max_retries
        self.history_window = settings.HISTORY_WINDOW if history_window is None else history_window

    async def synthesize(
        self,
        llm: StreamingLLM,
        history: Sequence[Message],
        portfolio: PortfolioData | None,
        text: str,
    ) -> SynthesizerReply:
        """
        Run one synthesizer round.

        Args:
            llm: Streaming LLM (AnthropicClient or MockLLM)
            history: Conversation before the new user text
            portfolio: Portfolio currently held
            text: The new user text

        Returns:
            The validated reply

        Raises:
            SynthesizerError: On API failure, malformed output or schema violation
        """
        system = build_system_prompt()
        messages = build_messages(history, portfolio, text, window=self.history_window)

        content = await self._collect(llm, messages, system)
        reply = parse_reply(content)
        logger.info(
            "synthesizer: reply chat_chars=%d portfolio=%s",
            len(reply.chat_response),
            "replaced" if reply.portfolio is not None else "unchanged",
        )
        return reply

    async def _collect(self, llm: StreamingLLM, messages: list[dict[str, Any]], system: str) -> str:
        """Stream the full response text, retrying transient API failures."""
        last_error: Exception | None = None

        for attempt in range(self.max_retries + 1):
            started = time.perf_counter()
            try:
                chunks: list[str] = []
                async for chunk in llm.stream(
                    messages=messages,
                    system=system,
                    model=self.model,
                    max_tokens=self.max_tokens,
                ):
                    chunks.append(chunk)
                total_ms = int((time.perf_counter() - started) * 1000)
                logger.debug("synthesizer: streamed %d chunks in %dms", len(chunks), total_ms)
                return "".join(chunks)
            except _RETRYABLE_ANTHROPIC as e:
                last_error = e
                if attempt < self.max_retries:
                    wait_time = 2**attempt  # Exponential backoff: 1s, 2s, 4s...
                    logger.warning(
                        "synthesizer: API error (attempt %d), retrying in %ds: %s", attempt + 1, wait_time, e
                    )
                    await asyncio.sleep(wait_time)
                else:
                    logger.error("synthesizer: API error, retries exhausted: %s", e)
            except anthropic.APIError as e:
                logger.error("synthesizer: API error: %s", e)
                raise SynthesizerError(f"Synthesizer API error: {e}") from e
            except OSError as e:
                logger.error("synthesizer: transport failure: %s", e)
                raise SynthesizerError(f"Synthesizer unavailable: {e}") from e

        raise SynthesizerError(f"Synthesizer API error: {last_error}") from last_error


# Singleton
synthesizer = Synthesizer()
