"""
Folio Kernel — Conversation-to-Model Merge Policy

(workspace, event) → workspace. Pure, deterministic, never mutates input.

A synthesizer reply replaces the portfolio wholesale. There is no
field-level merge: the synthesizer must send the complete object,
unchanged fields included. A reply without a portfolio leaves the current
one in place, the same object, so the preview keeps its tag selection.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from engine.kernel.types import Message, PortfolioData

GREETING = (
    "Hi! I'm your AI Portfolio Architect. Tell me about yourself, your skills, and your projects, "
    "and I'll build a stunning website for you instantly."
)


@dataclass(frozen=True)
class SynthesizerReply:
    """What one successful synthesizer round produced."""

    chat_response: str
    portfolio: PortfolioData | None = None


@dataclass(frozen=True)
class Workspace:
    """Conversation transcript plus the portfolio it has produced so far."""

    messages: tuple[Message, ...] = ()
    portfolio: PortfolioData | None = None
    pending: bool = False
    error: str | None = None


def initial_workspace() -> Workspace:
    return Workspace(messages=(Message(role="model", text=GREETING),))


def begin_turn(ws: Workspace, text: str) -> Workspace:
    """Record the user's message and mark a request in flight."""
    return replace(
        ws,
        messages=(*ws.messages, Message(role="user", text=text)),
        pending=True,
        error=None,
    )


def apply_reply(ws: Workspace, reply: SynthesizerReply) -> Workspace:
    messages = ws.messages
    if reply.chat_response:
        messages = (*messages, Message(role="model", text=reply.chat_response))
    portfolio = reply.portfolio if reply.portfolio is not None else ws.portfolio
    return replace(ws, messages=messages, portfolio=portfolio, pending=False)


def fail_turn(ws: Workspace, error: str) -> Workspace:
    """Clear the in-flight flag and surface `error`. Transcript and portfolio stay."""
    return replace(ws, pending=False, error=error)


def dismiss_error(ws: Workspace) -> Workspace:
    if ws.error is None:
        return ws
    return replace(ws, error=None)
