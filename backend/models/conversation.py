"""Conversation models — chat requests and the workspace state the API returns."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from engine.kernel.merge import Workspace
from engine.kernel.preview import PreviewController


class Message(BaseModel):
    """A single message in the conversation."""

    role: Literal["user", "model"]
    text: str


class SendMessageRequest(BaseModel):
    """What the client sends to POST /api/message."""

    model_config = {"extra": "forbid"}

    message: str = Field(min_length=1, max_length=10000)

    @field_validator("message")
    @classmethod
    def strip_message(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be blank")
        return v


class SelectTagRequest(BaseModel):
    """What the client sends to POST /api/preview/select."""

    model_config = {"extra": "forbid"}

    tag: str = Field(min_length=1, max_length=200)


class WorkspaceResponse(BaseModel):
    """What the state, message and select endpoints return."""

    messages: list[Message]
    portfolio: dict[str, Any] | None
    pending: bool
    error: str | None
    selected: str
    tags: list[str]

    @classmethod
    def from_state(cls, ws: Workspace, preview: PreviewController) -> WorkspaceResponse:
        """Convert the controller's state to the public API response."""
        return cls(
            messages=[Message(role=m.role, text=m.text) for m in ws.messages],
            portfolio=ws.portfolio.to_dict() if ws.portfolio is not None else None,
            pending=ws.pending,
            error=ws.error,
            selected=preview.selected,
            tags=preview.tags(),
        )
