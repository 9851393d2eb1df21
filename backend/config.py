"""
Folio configuration — all environment variables in one place.

Read from environment at runtime. Never hardcode secrets.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Synthesizer (hosted LLM). A missing key is not a startup error:
    # the chat surfaces it as a blocking message instead.
    ANTHROPIC_API_KEY: str = os.environ.get("ANTHROPIC_API_KEY", "")
    PORTFOLIO_MODEL: str = os.environ.get("PORTFOLIO_MODEL", "claude-sonnet-4-20250514")
    PORTFOLIO_MAX_TOKENS: int = int(os.environ.get("PORTFOLIO_MAX_TOKENS", "8192"))
    SYNTHESIZER_MAX_RETRIES: int = int(os.environ.get("SYNTHESIZER_MAX_RETRIES", "1"))

    # Trailing conversation window sent with each request
    HISTORY_WINDOW: int = int(os.environ.get("HISTORY_WINDOW", "8"))

    # Mock LLM (tests / UX simulation)
    USE_MOCK_LLM: bool = os.environ.get("USE_MOCK_LLM", "").lower() == "true"
    MOCK_SCENARIO: str = os.environ.get("MOCK_SCENARIO", "create_portfolio")
    MOCK_PROFILE: str = os.environ.get("MOCK_PROFILE", "instant")


# Singleton instance
settings = Settings()
