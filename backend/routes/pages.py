"""Workspace page — GET / plus the form posts that drive it."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from backend.services.llm_provider import MissingCredentialError
from backend.services.orchestrator import BusyError, Orchestrator, get_orchestrator
from backend.services.renderer import render_workspace_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])


def _back_to_workspace() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def workspace_page(orch: Orchestrator = Depends(get_orchestrator)) -> HTMLResponse:
    """Chat panel on the left, live preview on the right."""
    return HTMLResponse(content=render_workspace_page(orch.workspace, orch.preview))


@router.post("/chat")
async def submit_message(
    message: str = Form(""),
    orch: Orchestrator = Depends(get_orchestrator),
) -> RedirectResponse:
    """
    Submit a chat message from the page form.

    The reply is synthesized in the background and the browser is sent
    straight back to the workspace, which shows the pending state and
    refreshes until the reply lands. Blank input is ignored. Busy and
    missing-credential states are reflected on the page itself.
    """
    text = message.strip()
    if not text:
        return _back_to_workspace()

    try:
        orch.submit_message(text[:10000])
    except BusyError:
        logger.info("pages: message ignored, previous reply still pending")
    except MissingCredentialError:
        logger.info("pages: message dropped, no LLM configured")
    return _back_to_workspace()


@router.post("/chat/dismiss")
async def dismiss_error(orch: Orchestrator = Depends(get_orchestrator)) -> RedirectResponse:
    orch.dismiss_error()
    return _back_to_workspace()


@router.post("/preview/select")
async def select_tag(
    tag: str = Form(...),
    orch: Orchestrator = Depends(get_orchestrator),
) -> RedirectResponse:
    orch.select_tag(tag)
    return _back_to_workspace()
