"""
Prompt builder for the portfolio synthesizer.

Assembles the system prompt (architect instruction + response schema) and the
messages array: a trailing window of the conversation plus the new user turn
with the current portfolio attached as context.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from backend.models.portfolio import SynthesizerResponse
from engine.kernel.types import Message, PortfolioData

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"

# Cache loaded prompts in memory (they don't change at runtime)
_cache: dict[str, str] = {}

# Conversation roles → Anthropic roles
_ROLE_MAP = {"user": "user", "model": "assistant"}


def _load(name: str) -> str:
    """Load and cache a prompt file."""
    if name not in _cache:
        path = PROMPTS_DIR / f"{name}.md"
        _cache[name] = path.read_text()
    return _cache[name]


def response_schema() -> dict[str, Any]:
    """JSON schema every synthesizer reply must satisfy."""
    return SynthesizerResponse.model_json_schema(by_alias=True)


def build_system_prompt() -> str:
    """Architect instruction followed by the response schema."""
    schema = json.dumps(response_schema(), indent=2)
    return f"{_load('portfolio_architect')}\n\n## Response schema\n\n```json\n{schema}\n```\n"


def build_context_suffix(portfolio: PortfolioData | None) -> str:
    state = json.dumps(portfolio.to_dict()) if portfolio is not None else "null"
    return f"\n\n[SYSTEM: Current Portfolio State: {state}]"


def build_messages(
    history: Sequence[Message],
    portfolio: PortfolioData | None,
    text: str,
    window: int = 8,
) -> list[dict[str, Any]]:
    """
    Build the messages array for one synthesizer round.

    Args:
        history: Conversation so far, NOT including the new user text
        portfolio: Portfolio currently held (None before the first one)
        text: The new user text
        window: How many trailing history messages to include

    Returns:
        Anthropic messages: alternating roles, starting and ending with "user"
    """
    recent = list(history[-window:]) if window > 0 else []

    # The API requires the first message to come from the user
    while recent and recent[0].role != "user":
        recent.pop(0)

    turns = [(_ROLE_MAP[m.role], m.text) for m in recent]
    turns.append(("user", text + build_context_suffix(portfolio)))

    messages: list[dict[str, Any]] = []
    for role, content in turns:
        if messages and messages[-1]["role"] == role:
            # A failed turn leaves a user message with no reply; fold it in
            messages[-1]["content"] = f"{messages[-1]['content']}\n\n{content}"
        else:
            messages.append({"role": role, "content": content})
    return messages
