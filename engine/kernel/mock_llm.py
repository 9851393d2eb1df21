"""
Mock LLM for deterministic testing and UX timing simulation.

Streams golden synthesizer responses line-by-line with configurable delays.
Exposes the same stream() signature as the Anthropic client, so the
synthesizer cannot tell the two apart.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

GOLDEN_DIR = Path(__file__).parent / "golden"

DELAY_PROFILES: dict[str, dict[str, int]] = {
    "instant": {"think_ms": 0, "per_line_ms": 0},
    "realistic": {"think_ms": 1500, "per_line_ms": 40},
    "slow": {"think_ms": 3000, "per_line_ms": 200},
}


class MockLLM:
    """Streams a golden file line by line, ignoring the prompt."""

    def __init__(
        self,
        scenario: str = "create_portfolio",
        profile: str = "instant",
        golden_dir: Path = GOLDEN_DIR,
    ):
        if profile not in DELAY_PROFILES:
            raise ValueError(f"Unknown delay profile: {profile!r}. Valid profiles: {list(DELAY_PROFILES)}")
        self.scenario = scenario
        self.profile = profile
        self.golden_dir = golden_dir

    async def stream(
        self,
        messages: list[dict[str, Any]],
        system: str,
        model: str = "mock",
        max_tokens: int = 4096,
    ) -> AsyncIterator[str]:
        """
        Stream the configured golden file.

        Yields:
            Each line of the golden file, newline included

        Raises:
            FileNotFoundError: If the golden file does not exist
        """
        delays = DELAY_PROFILES[self.profile]

        path = self.golden_dir / f"{self.scenario}.json"
        if not path.exists():
            raise FileNotFoundError(f"Golden file not found: {path}")

        lines = path.read_text().splitlines(keepends=True)

        # Think time before first line
        if delays["think_ms"] > 0:
            await asyncio.sleep(delays["think_ms"] / 1000)

        for i, line in enumerate(lines):
            yield line

            if i < len(lines) - 1 and delays["per_line_ms"] > 0:
                await asyncio.sleep(delays["per_line_ms"] / 1000)

    def list_scenarios(self) -> list[str]:
        """Return names of all available golden scenarios."""
        return sorted(p.stem for p in self.golden_dir.glob("*.json"))
