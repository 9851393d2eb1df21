"""Main orchestrator — owns the workspace and coordinates synthesizer, merge and preview."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from backend.services.llm_provider import MissingCredentialError, get_llm
from backend.services.synthesizer import Synthesizer, SynthesizerError, synthesizer
from engine.kernel.compiler import compile_document, export_filename
from engine.kernel.merge import (
    Workspace,
    apply_reply,
    begin_turn,
    dismiss_error,
    fail_turn,
    initial_workspace,
)
from engine.kernel.preview import PreviewController
from engine.kernel.types import Message, PortfolioData

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to generate response. Please try again."


class BusyError(Exception):
    """A message was submitted while the previous one is still in flight."""


class Orchestrator:
    """
    Single controller for one workspace.

    Holds the conversation, the current portfolio and the preview's tag
    selection. Everything else is derived from these on demand.
    """

    def __init__(
        self,
        synth: Synthesizer | None = None,
        llm_factory: Callable[[], Any] = get_llm,
    ) -> None:
        self.synthesizer = synth or synthesizer
        self.llm_factory = llm_factory
        self.reset()

    def reset(self) -> None:
        """Start over with the greeting and no portfolio."""
        self.workspace: Workspace = initial_workspace()
        self.preview = PreviewController()
        self.turn_task: asyncio.Task[Workspace] | None = None

    async def send_message(self, text: str) -> Workspace:
        """
        Process one user message and wait for the reply.

        Args:
            text: User message text (already trimmed)

        Returns:
            The workspace after the turn. A synthesizer failure is not raised:
            it shows up as `workspace.error` with the previous data intact.

        Raises:
            BusyError: If a previous message is still being processed
            MissingCredentialError: If no LLM is configured
        """
        llm, history, portfolio = self._begin(text)
        return await self._complete(llm, history, portfolio, text)

    def submit_message(self, text: str) -> asyncio.Task[Workspace]:
        """
        Record one user message and synthesize the reply in the background.

        The workspace is pending as soon as this returns, so a page rendered
        right after shows the in-flight state. Must be called from a running
        event loop.

        Raises:
            BusyError: If a previous message is still being processed
            MissingCredentialError: If no LLM is configured
        """
        llm, history, portfolio = self._begin(text)
        task = asyncio.create_task(self._complete(llm, history, portfolio, text))
        task.add_done_callback(self._collect_turn)
        self.turn_task = task
        return task

    def _begin(self, text: str) -> tuple[Any, tuple[Message, ...], PortfolioData | None]:
        if self.workspace.pending:
            raise BusyError("A message is already being processed")

        # 1. Resolve the LLM before touching state
        try:
            llm = self.llm_factory()
        except MissingCredentialError as e:
            logger.warning("orchestrator: %s", e)
            self.workspace = fail_turn(self.workspace, str(e))
            raise

        # 2. Record the user turn
        history = self.workspace.messages
        portfolio = self.workspace.portfolio
        self.workspace = begin_turn(self.workspace, text)
        return llm, history, portfolio

    async def _complete(
        self,
        llm: Any,
        history: tuple[Message, ...],
        portfolio: PortfolioData | None,
        text: str,
    ) -> Workspace:
        # 3. Synthesize
        try:
            reply = await self.synthesizer.synthesize(llm, history, portfolio, text)
        except SynthesizerError:
            logger.exception("orchestrator: synthesizer failed")
            self.workspace = fail_turn(self.workspace, FAILURE_MESSAGE)
            return self.workspace
        except (Exception, asyncio.CancelledError):
            # Cancellation included: the turn is over either way
            self.workspace = fail_turn(self.workspace, FAILURE_MESSAGE)
            raise

        # 4. Merge and rebind the preview
        self.workspace = apply_reply(self.workspace, reply)
        self.preview.bind(self.workspace.portfolio)
        return self.workspace

    def _collect_turn(self, task: asyncio.Task[Workspace]) -> None:
        if task.cancelled():
            logger.warning("orchestrator: background turn cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error("orchestrator: background turn failed", exc_info=exc)

    def select_tag(self, tag: str) -> str:
        return self.preview.select(tag)

    def dismiss_error(self) -> Workspace:
        self.workspace = dismiss_error(self.workspace)
        return self.workspace

    def export(self, year: int | None = None) -> tuple[str, str] | None:
        """
        Compile the current portfolio.

        Returns:
            (html, filename), or None while there is no portfolio
        """
        data = self.workspace.portfolio
        if data is None:
            return None
        return compile_document(data, year=year), export_filename(data)


# Singleton
orchestrator = Orchestrator()


def get_orchestrator() -> Orchestrator:
    """FastAPI dependency returning the app's controller."""
    return orchestrator
