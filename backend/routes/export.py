"""Export routes — the compiled standalone document, inline or as a download."""

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from backend.services.orchestrator import Orchestrator, get_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


def _content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback plus the UTF-8 name."""
    fallback = filename.encode("ascii", "ignore").decode().replace('"', "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _compile_or_404(orch: Orchestrator) -> tuple[str, str]:
    compiled = orch.export()
    if compiled is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No portfolio to export yet.")
    return compiled


@router.get("/open")
async def open_document(orch: Orchestrator = Depends(get_orchestrator)) -> Response:
    """Serve the compiled document for viewing in a new tab."""
    html, _ = _compile_or_404(orch)
    return Response(
        content=html,
        media_type="text/html; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


@router.get("/download")
async def download_document(orch: Orchestrator = Depends(get_orchestrator)) -> Response:
    """Serve the compiled document as a file attachment."""
    html, filename = _compile_or_404(orch)
    logger.info("export: download %s (%d bytes)", filename, len(html))
    return Response(
        content=html,
        media_type="text/html; charset=utf-8",
        headers={
            "Content-Disposition": _content_disposition(filename),
            "X-Content-Type-Options": "nosniff",
        },
    )
