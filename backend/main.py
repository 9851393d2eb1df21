"""
Folio FastAPI application.

Entry point for the workspace server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.config import settings
from backend.routes import conversations as conversation_routes
from backend.routes import export as export_routes
from backend.routes import pages as pages_routes
from backend.routes import preview as preview_routes
from backend.services.llm_provider import describe_mode

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Nothing to open or close: the workspace lives in memory. Startup only
    reports which synthesizer the server will talk to.
    """
    # Startup
    logger.info("Folio starting (environment=%s, synthesizer=%s)", settings.ENVIRONMENT, describe_mode())

    yield

    # Shutdown
    logger.info("Folio stopped")


app = FastAPI(
    title="Folio",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(pages_routes.router)
app.include_router(conversation_routes.router)
app.include_router(preview_routes.router)
app.include_router(export_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
