"""
LLM provider factory.

Returns MockLLM when USE_MOCK_LLM=true (tests / UX simulation)
or the Anthropic streaming client when ANTHROPIC_API_KEY is available.
"""

from __future__ import annotations

from backend.config import settings
from backend.services.anthropic_client import AnthropicClient
from engine.kernel.mock_llm import MockLLM


class MissingCredentialError(Exception):
    """No API key is configured and mock mode is off."""


MISSING_CREDENTIAL_MESSAGE = (
    "No API key configured. Set ANTHROPIC_API_KEY (or USE_MOCK_LLM=true) and restart the server."
)


def get_llm() -> MockLLM | AnthropicClient:
    """
    Return the configured LLM implementation.

    - USE_MOCK_LLM=true              → MockLLM (deterministic, no API calls)
    - ANTHROPIC_API_KEY available    → AnthropicClient (real streaming)
    - otherwise                      → MissingCredentialError

    Raises:
        MissingCredentialError: If neither mode is available
    """
    if settings.USE_MOCK_LLM:
        return MockLLM(scenario=settings.MOCK_SCENARIO, profile=settings.MOCK_PROFILE)

    if settings.ANTHROPIC_API_KEY:
        return AnthropicClient(api_key=settings.ANTHROPIC_API_KEY)

    raise MissingCredentialError(MISSING_CREDENTIAL_MESSAGE)


def describe_mode() -> str:
    """Short label for the startup log."""
    if settings.USE_MOCK_LLM:
        return f"mock (scenario={settings.MOCK_SCENARIO}, profile={settings.MOCK_PROFILE})"
    if settings.ANTHROPIC_API_KEY:
        return f"anthropic (model={settings.PORTFOLIO_MODEL})"
    return "unconfigured (no ANTHROPIC_API_KEY)"
