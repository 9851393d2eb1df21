"""Conversation routes — send messages, read workspace state, dismiss errors."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from backend.models.conversation import SendMessageRequest, WorkspaceResponse
from backend.services.llm_provider import MissingCredentialError
from backend.services.orchestrator import BusyError, Orchestrator, get_orchestrator

router = APIRouter(prefix="/api", tags=["conversations"])


@router.post("/message", status_code=200)
async def send_message(
    req: SendMessageRequest,
    orch: Orchestrator = Depends(get_orchestrator),
) -> WorkspaceResponse:
    """
    Send a message to the portfolio architect.

    Returns the workspace after the turn. A synthesizer failure is not an HTTP
    error: it comes back as `error` with the previous portfolio intact.
    """
    try:
        await orch.send_message(req.message)
    except BusyError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A message is already being processed.",
        ) from exc
    except MissingCredentialError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    return WorkspaceResponse.from_state(orch.workspace, orch.preview)


@router.get("/state")
async def get_state(orch: Orchestrator = Depends(get_orchestrator)) -> WorkspaceResponse:
    """Messages, portfolio, pending flag, error, selected tag and tag universe."""
    return WorkspaceResponse.from_state(orch.workspace, orch.preview)


@router.delete("/error")
async def dismiss_error(orch: Orchestrator = Depends(get_orchestrator)) -> WorkspaceResponse:
    orch.dismiss_error()
    return WorkspaceResponse.from_state(orch.workspace, orch.preview)
