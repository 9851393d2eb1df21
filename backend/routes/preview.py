"""Preview routes — tag selection and the interactive preview fragment."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from backend.models.conversation import SelectTagRequest, WorkspaceResponse
from backend.services.orchestrator import Orchestrator, get_orchestrator

router = APIRouter(prefix="/api/preview", tags=["preview"])


@router.post("/select")
async def select_tag(
    req: SelectTagRequest,
    orch: Orchestrator = Depends(get_orchestrator),
) -> WorkspaceResponse:
    """
    Select a filter tag.

    Any string is accepted. A tag no project carries yields the empty state,
    not an error.
    """
    orch.select_tag(req.tag)
    return WorkspaceResponse.from_state(orch.workspace, orch.preview)


@router.get("", response_class=HTMLResponse)
async def get_preview(orch: Orchestrator = Depends(get_orchestrator)) -> HTMLResponse:
    """Interactive preview fragment for the current portfolio and selection."""
    return HTMLResponse(content=orch.preview.render())
