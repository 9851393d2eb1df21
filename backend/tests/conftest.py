"""
Pytest configuration and fixtures for Folio backend tests.

Every test gets its own Orchestrator wired to a golden-file MockLLM, and the
app's controller dependency is overridden to point at it. Nothing here talks
to the network.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from backend.main import app
from backend.services.orchestrator import Orchestrator, get_orchestrator
from backend.services.synthesizer import Synthesizer
from engine.kernel.mock_llm import MockLLM


class FakeLLM:
    """
    Scripted LLM double.

    Each stream() call consumes the next item of `script`: a string is
    streamed as one chunk, an exception is raised.
    """

    def __init__(self, *script: str | Exception):
        self.script = list(script)
        self.calls: list[dict[str, Any]] = []

    async def stream(self, messages, system, model="fake", max_tokens=4096):
        self.calls.append({"messages": messages, "system": system, "model": model, "max_tokens": max_tokens})
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        yield item


def make_synthesizer(**overrides: Any) -> Synthesizer:
    kwargs: dict[str, Any] = {"model": "test-model", "max_tokens": 1024, "max_retries": 0, "history_window": 8}
    kwargs.update(overrides)
    return Synthesizer(**kwargs)


def make_orchestrator(llm: Any = None, scenario: str = "create_portfolio") -> Orchestrator:
    llm = llm if llm is not None else MockLLM(scenario=scenario)
    return Orchestrator(synth=make_synthesizer(), llm_factory=lambda: llm)


@pytest.fixture
def fake_llm() -> type[FakeLLM]:
    return FakeLLM


@pytest.fixture
def synthesizer_factory() -> Callable[..., Synthesizer]:
    return make_synthesizer


@pytest.fixture
def orchestrator_factory() -> Callable[..., Orchestrator]:
    return make_orchestrator


@pytest.fixture
def orch() -> Orchestrator:
    """Fresh controller streaming the create_portfolio golden file."""
    return make_orchestrator()


@pytest_asyncio.fixture
async def client(orch: Orchestrator):
    """Test client bound to the `orch` fixture."""
    app.dependency_overrides[get_orchestrator] = lambda: orch
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()
